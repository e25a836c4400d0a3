from __future__ import annotations

import logging

from ..lattice import (
    anomalies_prohibited_by,
    anomalies_to_impossible_models,
    boundary,
    canonical_model_name,
)
from .schema import Claims, ClaimsResult

logger = logging.getLogger(__name__)


def evaluate_claims(claims: Claims) -> ClaimsResult:
    """
    Check observed anomalies against the models a system claims.

    Args:
        claims: Claimed models and observed anomalies

    Returns:
        ClaimsResult with the anomalies the claims prohibit, the observed ones
        that violate them, the claimed models that cannot hold, and the
        boundary of the observed anomalies.
    """
    prohibited = anomalies_prohibited_by(claims.models)
    prohibited_set = set(prohibited)
    violations = tuple(sorted(a for a in set(claims.anomalies) if a in prohibited_set))

    impossible = set(anomalies_to_impossible_models(claims.anomalies))
    claimed = {canonical_model_name(m) for m in claims.models}
    violated_models = tuple(sorted(claimed & impossible))

    logger.debug(
        "claims %s: %d prohibited, %d violations",
        claims.claims_id,
        len(prohibited),
        len(violations),
    )

    return ClaimsResult(
        claims=claims,
        prohibited=tuple(prohibited),
        violations=violations,
        violated_models=violated_models,
        boundary=boundary(claims.anomalies),
    )
