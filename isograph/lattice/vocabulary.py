"""Known anomaly and model names.

The lattice functions accept any tag; unknown ones are inert. Callers that
want to reject typos check here first.
"""

from __future__ import annotations

from typing import Iterable

from .anomalies import IMPLIED_ANOMALIES
from .models import MODELS
from .names import canonical_model_name
from .proscriptions import DIRECT_PROSCRIBED_ANOMALIES


def known_anomalies() -> tuple[str, ...]:
    """Every anomaly named by the implication or proscription tables."""
    proscribed = {
        vertex
        for vertex in DIRECT_PROSCRIBED_ANOMALIES.vertices()
        if DIRECT_PROSCRIBED_ANOMALIES.predecessors(vertex)
    }
    return tuple(sorted(IMPLIED_ANOMALIES.vertices() | proscribed))


def known_models() -> tuple[str, ...]:
    """Every canonical model named by the hierarchy or proscription tables."""
    proscribing = {
        vertex
        for vertex in DIRECT_PROSCRIBED_ANOMALIES.vertices()
        if DIRECT_PROSCRIBED_ANOMALIES.successors(vertex)
    }
    return tuple(sorted(MODELS.vertices() | proscribing))


def unknown_anomalies(anomalies: Iterable[str]) -> list[str]:
    known = set(known_anomalies())
    return sorted({a for a in anomalies if a not in known})


def unknown_models(models: Iterable[str]) -> list[str]:
    """Models not in any table, after canonicalization. Returned as given."""
    known = set(known_models())
    return sorted({m for m in models if canonical_model_name(m) not in known})
