"""Anomaly implications, the model hierarchy, and what each rules out."""

from .anomalies import IMPLIED_ANOMALIES, all_anomalies_implying, all_implied_anomalies
from .graph import DirectedGraph, Direction
from .models import (
    MODELS,
    all_implied_models,
    all_impossible_models,
    most_models,
    possible_models,
    strongest_models,
    weakest_models,
)
from .names import canonical_model_name, friendly_model_name
from .proscriptions import (
    DIRECT_PROSCRIBED_ANOMALIES,
    Boundary,
    anomalies_prohibited_by,
    anomalies_to_impossible_models,
    boundary,
    friendly_boundary,
)
from .vocabulary import known_anomalies, known_models, unknown_anomalies, unknown_models

__all__ = [
    "DirectedGraph",
    "Direction",
    "IMPLIED_ANOMALIES",
    "MODELS",
    "DIRECT_PROSCRIBED_ANOMALIES",
    "Boundary",
    "all_anomalies_implying",
    "all_implied_anomalies",
    "all_implied_models",
    "all_impossible_models",
    "possible_models",
    "most_models",
    "strongest_models",
    "weakest_models",
    "canonical_model_name",
    "friendly_model_name",
    "anomalies_prohibited_by",
    "anomalies_to_impossible_models",
    "boundary",
    "friendly_boundary",
    "known_anomalies",
    "known_models",
    "unknown_anomalies",
    "unknown_models",
]
