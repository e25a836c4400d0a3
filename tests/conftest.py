"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from isograph.lattice import MODELS, known_anomalies, known_models


@pytest.fixture
def all_anomalies() -> tuple[str, ...]:
    """Every anomaly the tables know about."""
    return known_anomalies()


@pytest.fixture
def all_models() -> tuple[str, ...]:
    """Every canonical model the tables know about."""
    return known_models()


@pytest.fixture
def hierarchy_edges() -> list[tuple[str, str]]:
    """(stronger, weaker) pairs from the model hierarchy."""
    return MODELS.edge_pairs()


@pytest.fixture
def write_claims(tmp_path: Path):
    """Write a claims TOML file and return its path."""

    def _write(text: str, name: str = "claims.toml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
