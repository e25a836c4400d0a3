from __future__ import annotations

from pathlib import Path
from typing import Any

from .schema import Claims


def _coerce_tags(data: dict[str, Any], key: str) -> tuple[str, ...]:
    raw = data.get(key, [])
    if not isinstance(raw, list):
        raise ValueError(f"{key} must be a list of strings")

    tags: list[str] = []
    for item in raw:
        if not isinstance(item, str):
            raise ValueError(f"{key} entries must be strings, got {item!r}")
        tag = item.strip()
        if tag and tag not in tags:
            tags.append(tag)
    return tuple(tags)


def load_claims_text(text: str, *, source: str = "<string>") -> Claims:
    """
    Parse a claims document from TOML text.

    The schema is small: which models the system claims, and which anomalies
    the history analyzer observed.
    """
    import tomllib

    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"{source}: invalid TOML: {e}") from e

    claims_id = str(data.get("claims_id", "")).strip()
    if not claims_id:
        raise ValueError(f"{source}: claims_id is required")

    description = data.get("description")

    return Claims(
        claims_id=claims_id,
        models=_coerce_tags(data, "models"),
        anomalies=_coerce_tags(data, "anomalies"),
        description=(str(description) if isinstance(description, str) else None),
    )


def load_claims(path: Path) -> Claims:
    """Load a claims document from a TOML file."""
    return load_claims_text(path.read_text(encoding="utf-8"), source=str(path))
