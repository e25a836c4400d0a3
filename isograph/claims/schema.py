from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..lattice import Boundary, friendly_model_name


@dataclass(frozen=True)
class Claims:
    claims_id: str
    models: tuple[str, ...] = ()
    anomalies: tuple[str, ...] = ()
    description: str | None = None


@dataclass(frozen=True)
class ClaimsResult:
    """Outcome of checking observed anomalies against claimed models."""

    claims: Claims
    prohibited: tuple[str, ...]  # anomalies the claimed models rule out
    violations: tuple[str, ...]  # observed anomalies that are prohibited
    violated_models: tuple[str, ...]  # claimed models (canonical) that cannot hold
    boundary: Boundary

    @property
    def valid(self) -> bool:
        return not self.violations

    def to_dict(self) -> dict[str, Any]:
        friendly = self.boundary.friendly()
        return {
            "claims_id": self.claims.claims_id,
            "valid": self.valid,
            "models": list(self.claims.models),
            "anomalies": list(self.claims.anomalies),
            "prohibited": list(self.prohibited),
            "violations": list(self.violations),
            "violated_models": sorted(friendly_model_name(m) for m in self.violated_models),
            "not": sorted(friendly.not_),
            "also_not": sorted(friendly.also_not),
        }
