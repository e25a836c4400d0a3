"""Canonical and friendly names for consistency models.

Many models go by several names in the literature. The hierarchy and the
proscription tables are keyed by one canonical name per model (Adya's
``PL-*`` notation where one exists); reports use the friendly name.
"""

from types import MappingProxyType
from typing import Mapping

# friendly name -> canonical name
CANONICAL_MODEL_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "consistent-view": "PL-2+",  # Adya
        "conflict-serializable": "PL-3",  # Adya
        "cursor-stability": "PL-CS",  # Adya
        "forward-consistent-view": "PL-FCV",  # Adya
        "monotonic-snapshot-read": "PL-MSR",  # Adya
        "monotonic-view": "PL-2L",  # Adya
        "read-committed": "PL-2",  # Adya, probably
        "read-uncommitted": "PL-1",  # Adya, probably
        "repeatable-read": "PL-2.99",  # Adya
        "serializable": "PL-3",  # "serializable" means conflict serializable
        "snapshot-isolation": "PL-SI",  # Adya
        "strict-serializable": "PL-SS",  # Adya
        "update-serializable": "PL-3U",  # Adya
    }
)

# canonical name -> friendly name. PL-3 has two friendly names; "serializable"
# is the simplest.
FRIENDLY_MODEL_NAMES: Mapping[str, str] = MappingProxyType(
    {
        **{canonical: friendly for friendly, canonical in CANONICAL_MODEL_NAMES.items()},
        "PL-3": "serializable",
    }
)


def canonical_model_name(model: str) -> str:
    """Return the canonical name of a consistency model."""
    return CANONICAL_MODEL_NAMES.get(model, model)


def friendly_model_name(model: str) -> str:
    """Return the friendly name of a consistency model."""
    return FRIENDLY_MODEL_NAMES.get(model, model)
