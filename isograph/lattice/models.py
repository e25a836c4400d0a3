"""Hierarchy of consistency models.

If ``a -> b`` in ``MODELS``, a history which satisfies model ``a`` also
satisfies model ``b``. Sources: Adya, "Weak Consistency"; Adya, Liskov and
O'Neil, "Generalized Isolation Level Definitions"; Bailis et al., "Highly
Available Transactions"; Cerone, Bernardi and Gotsman, "A Framework for
Transactional Consistency Models with Atomic Visibility".
"""

from __future__ import annotations

import logging
from typing import Iterable

from .graph import DirectedGraph, Direction
from .names import canonical_model_name

logger = logging.getLogger(__name__)

MODELS: DirectedGraph[str] = DirectedGraph.from_mapping(
    {
        # Transactional models
        "causal-cerone": ["read-atomic"],  # Cerone
        "consistent-view": ["cursor-stability", "monotonic-view"],  # Adya
        "conflict-serializable": ["view-serializable"],
        "cursor-stability": ["read-committed", "PL-2"],  # Bailis, Adya
        "forward-consistent-view": ["consistent-view"],  # Adya
        "PL-2": ["PL-1"],  # Adya
        "PL-3": [
            "repeatable-read",  # Adya
            "update-serializable",  # Adya
            "conflict-serializable",  # Adya
        ],
        "update-serializable": ["forward-consistent-view"],  # Adya
        "monotonic-atomic-view": ["read-committed"],  # Bailis
        "monotonic-view": ["PL-2"],  # Adya
        "monotonic-snapshot-read": ["PL-2"],  # Adya
        "parallel-snapshot-isolation": ["causal-cerone"],  # Cerone
        "prefix": ["causal-cerone"],  # Cerone
        "read-atomic": ["causal-cerone"],  # Cerone
        "read-committed": ["read-uncommitted"],  # SQL
        "repeatable-read": [
            "cursor-stability",  # Adya
            "monotonic-atomic-view",  # Bailis
        ],
        "strict-serializable": [
            "PL-3",  # Adya
            "serializable",  # Bailis
            "linearizable",  # Bailis
            "snapshot-isolation",  # Adya
        ],
        "serializable": [
            "repeatable-read",  # SQL
            "snapshot-isolation",  # Bailis, Cerone
        ],
        "snapshot-isolation": [
            "forward-consistent-view",  # Adya
            "monotonic-atomic-view",  # Bailis
            "monotonic-snapshot-read",  # Adya
            "parallel-snapshot-isolation",  # Cerone
            "prefix",  # Cerone
        ],
        # Single-object (ish) models, all Bailis
        "linearizable": ["sequential"],
        "sequential": ["causal"],
        "causal": ["writes-follow-reads", "PRAM"],
        "PRAM": ["monotonic-reads", "monotonic-writes", "read-your-writes"],
    }
).map_vertices(canonical_model_name)


def _canonical(models: Iterable[str]) -> list[str]:
    return [canonical_model_name(m) for m in models]


def all_implied_models(models: Iterable[str]) -> frozenset[str]:
    """Expand models to every model implied by any of them (themselves included)."""
    return MODELS.reachable(_canonical(models), Direction.OUT)


def all_impossible_models(impossible: Iterable[str]) -> frozenset[str]:
    """Expand impossible models to every model which is therefore also impossible.

    If X implies Y and Y cannot hold, X cannot hold either.
    """
    return MODELS.reachable(_canonical(impossible), Direction.IN)


def possible_models(impossible: Iterable[str]) -> list[str]:
    """Every known model not in ``impossible``. No closure is taken."""
    ruled_out = set(_canonical(impossible))
    return sorted(m for m in MODELS.vertices() if m not in ruled_out)


def most_models(direction: Direction, models: Iterable[str]) -> frozenset[str]:
    """Reduce models to a subset which covers the rest along ``direction``.

    With ``Direction.IN`` the result implies every input model; with
    ``Direction.OUT`` every input model implies something in the result.
    A model is dropped when another model still in the working set lies in
    its closure. Models are canonicalized and visited in sorted order, so
    models on a cycle reduce to one representative deterministically.
    """
    ordered = sorted(set(_canonical(models)))
    remaining = set(ordered)

    for model in ordered:
        others = remaining - {model}
        if others & MODELS.reachable([model], direction):
            # Some other model covers this one.
            remaining = others

    logger.debug("most models (%s): %d -> %d", direction.value, len(ordered), len(remaining))
    return frozenset(remaining)


def strongest_models(models: Iterable[str]) -> frozenset[str]:
    """Smallest subset of models which implies all the rest.

    ``strongest_models({"strict-serializable", "serializable"})`` is
    ``{"PL-SS"}``.
    """
    return most_models(Direction.IN, models)


def weakest_models(models: Iterable[str]) -> frozenset[str]:
    """Smallest subset of models implied by all the rest.

    ``weakest_models({"strict-serializable", "serializable"})`` is
    ``{"PL-3"}``.
    """
    return most_models(Direction.OUT, models)
