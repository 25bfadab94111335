"""Parsing of KEY=VALUE arguments for raw calls."""

from __future__ import annotations

import json
from typing import Any


def parse_value(raw: str) -> Any:
    """Parse CLI input value as JSON if possible; fallback to string."""
    text = raw.strip()
    if text == "":
        return ""
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        lowered = text.lower()
        if lowered in {"true", "false"}:
            return lowered == "true"
        return text


def parse_params(pairs: list[str]) -> dict[str, Any]:
    """Turn ``["hash=ab12", "height=10"]`` into a params mapping."""
    params: dict[str, Any] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ValueError(f"expected KEY=VALUE, got {pair!r}")
        params[key] = parse_value(value)
    return params
