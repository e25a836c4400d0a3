"""Implications between anomalies.

Some anomalies imply others. An ``incompatible-order`` is also a sign of G1a
(aborted reads), and G1a in turn is G1, since G1 is defined as the union of
G1a, G1b and G1c. An edge ``a -> b`` means any history exhibiting ``a`` also
exhibits ``b``.
"""

from __future__ import annotations

import logging
from typing import Iterable

from .graph import DirectedGraph, Direction

logger = logging.getLogger(__name__)

IMPLIED_ANOMALIES: DirectedGraph[str] = DirectedGraph.from_mapping(
    {
        # Formally, G0 is also G1.
        "G0": ["G1"],
        # Processes are single-threaded, so a process violation is also a
        # realtime one.
        "G0-process": ["G1-process", "G0-realtime"],
        "G0-realtime": ["G1-realtime"],
        # G1 is defined in terms of these three.
        "G1a": ["G1"],
        "G1b": ["G1"],
        "G1c": ["G1"],
        "G1c-process": ["G1-process", "G1c-realtime"],
        "G1c-realtime": ["G1-realtime"],
        # G-single is a special case of G2. Item and predicate G-single share
        # this one tag; telling them apart belongs in the history analyzer.
        "G-single": ["G2"],
        "G-single-process": ["G2-process", "G-single-realtime"],
        "G-single-realtime": ["G2-realtime"],
        # Every G2-item is also a G2.
        "G2-item": ["G2"],
        "G2-item-process": ["G2-process", "G2-item-realtime"],
        "G2-item-realtime": ["G2-realtime"],
        "G2-process": ["G2-realtime"],
        # Two committed read versions that could not come from one timeline.
        # That implies a dirty read.
        "incompatible-order": ["G1a"],
        # Like a dirty read, but affecting writes. Any model that prohibits
        # G1a should prohibit this as well.
        "dirty-update": ["G1a"],
    }
)


def all_anomalies_implying(anomalies: Iterable[str]) -> frozenset[str]:
    """Anomalies which, if present, would imply any of the given anomalies.

    Includes the given anomalies themselves. Empty input yields an empty set.
    """
    result = IMPLIED_ANOMALIES.reachable(anomalies, Direction.IN)
    logger.debug("anomalies implying: %d", len(result))
    return result


def all_implied_anomalies(anomalies: Iterable[str]) -> frozenset[str]:
    """Anomalies implied by the given ones, including themselves."""
    result = IMPLIED_ANOMALIES.reachable(anomalies, Direction.OUT)
    logger.debug("implied anomalies: %d", len(result))
    return result
