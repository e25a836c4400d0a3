"""Which anomalies each model rules out, and the boundary query built on it."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from .anomalies import all_anomalies_implying, all_implied_anomalies
from .graph import DirectedGraph
from .models import all_implied_models, all_impossible_models, weakest_models
from .names import canonical_model_name, friendly_model_name

logger = logging.getLogger(__name__)

# Models -> anomalies they directly proscribe. Each entry lists only what the
# model adds over the weaker models it implies; combine with MODELS and
# IMPLIED_ANOMALIES for the full set.
DIRECT_PROSCRIBED_ANOMALIES: DirectedGraph[str] = DirectedGraph.from_mapping(
    {
        "causal-cerone": ["internal", "G1a"],  # Cerone (incomplete)
        "cursor-stability": ["G1", "G-cursor"],  # Adya
        "monotonic-view": ["G1", "G-monotonic"],  # Adya
        "monotonic-snapshot-read": ["G1", "G-MSR"],  # Adya
        "consistent-view": ["G1", "G-single"],  # Adya
        "forward-consistent-view": ["G1", "G-SIb"],  # Adya
        "read-atomic": ["internal", "G1a"],  # Cerone (incomplete)
        "repeatable-read": ["G1", "G2-item"],  # Adya
        "strict-serializable": ["G1-realtime", "G2-realtime"],  # Adya
        "update-serializable": ["G1", "G-update"],  # Adya
        "parallel-snapshot-isolation": ["internal", "G1a"],  # Cerone (incomplete)
        "PL-3": ["G1", "G2"],  # Adya
        "PL-2": ["G1"],  # Adya
        "PL-1": [
            "G0",  # Adya
            # No Adya history can contain these, so PL-1 is the weakest model
            # that rules them out. Version orders are total.
            "duplicate-elements",
            "cyclic-versions",
        ],
        "prefix": ["internal", "G1a"],  # Cerone (incomplete)
        "serializable": ["internal"],  # Cerone (incomplete)
        "snapshot-isolation": ["internal", "G1", "G-SI"],  # Cerone, Adya
    }
).map_vertices(canonical_model_name)


@dataclass(frozen=True)
class Boundary:
    """Models ruled out by a set of anomalies.

    ``not_`` holds the weakest models the anomalies invalidate; ``also_not``
    holds the stronger models ruled out as a consequence.
    """

    not_: frozenset[str]
    also_not: frozenset[str]

    @property
    def impossible(self) -> frozenset[str]:
        return self.not_ | self.also_not

    def friendly(self) -> "Boundary":
        """The same boundary with friendly model names."""
        return Boundary(
            not_=frozenset(friendly_model_name(m) for m in self.not_),
            also_not=frozenset(friendly_model_name(m) for m in self.also_not),
        )

    def to_dict(self) -> dict[str, list[str]]:
        return {"not": sorted(self.not_), "also-not": sorted(self.also_not)}


def anomalies_prohibited_by(models: Iterable[str]) -> list[str]:
    """Anomalies which can't be present if all of the given models hold.

    Model names are canonicalized. Returned sorted.
    """
    proscribed: set[str] = set()
    for model in all_implied_models(models):
        proscribed.update(DIRECT_PROSCRIBED_ANOMALIES.successors(model))

    # Anything that would imply a proscribed anomaly is proscribed too.
    result = sorted(all_anomalies_implying(proscribed))
    logger.debug("%d anomalies prohibited", len(result))
    return result


def anomalies_to_impossible_models(anomalies: Iterable[str]) -> list[str]:
    """Models which can't hold, given the anomalies are present. Returned sorted."""
    proscribing: set[str] = set()
    for anomaly in all_implied_anomalies(anomalies):
        proscribing.update(DIRECT_PROSCRIBED_ANOMALIES.predecessors(anomaly))

    result = sorted(all_impossible_models(proscribing))
    logger.debug("%d models impossible", len(result))
    return result


def boundary(anomalies: Iterable[str]) -> Boundary:
    """Split the models ruled out by ``anomalies`` into weakest and the rest.

    ``boundary(["G1a"]).not_`` contains ``"PL-2"`` (read committed), while
    serializable and strict serializable land in ``also_not``.
    """
    impossible = anomalies_to_impossible_models(anomalies)
    is_not = weakest_models(impossible)
    return Boundary(
        not_=is_not,
        also_not=frozenset(m for m in impossible if m not in is_not),
    )


def friendly_boundary(anomalies: Iterable[str]) -> Boundary:
    """Like :func:`boundary`, but with friendly model names."""
    return boundary(anomalies).friendly()
