"""Configuration loading helpers."""

from __future__ import annotations

from copy import deepcopy
from pathlib import Path
from typing import Any

import yaml

from .selectors import COMBINATORS


DEFAULT_CONFIG_PATH = Path("config/selectors.yaml")

SCALAR_FIELDS = ("element", "id", "attribute", "pseudo_element")
LIST_FIELDS = ("classes", "pseudo_classes")
FRAGMENT_FIELDS = set(SCALAR_FIELDS) | set(LIST_FIELDS)


def load_yaml(path: str | Path) -> dict[str, Any]:
    """Load a YAML document from disk."""
    with Path(path).open("r", encoding="utf-8") as file:
        data = yaml.safe_load(file)
    if not isinstance(data, dict):
        raise ValueError("YAML config must be a mapping at the top level")
    return data


def get_selectors(config: dict[str, Any]) -> dict[str, Any]:
    """Support both {selectors: {...}} and direct {name: {...}} shapes."""
    selectors = config.get("selectors", config)
    if not isinstance(selectors, dict):
        raise ValueError("Selectors config must be a mapping")
    return selectors


def _validate_combine(name: str, spec: dict[str, Any], names: set[str]) -> None:
    if set(spec) != {"combine"}:
        raise ValueError(f"Selector '{name}' combine cannot be mixed with fragment keys")

    triple = spec["combine"]
    if not isinstance(triple, list) or len(triple) != 3:
        raise ValueError(f"Selector '{name}' combine must be [left, combinator, right]")

    left, combinator, right = triple
    if combinator not in COMBINATORS:
        raise ValueError(f"Selector '{name}' has unsupported combinator {combinator!r}")
    for operand in (left, right):
        if not isinstance(operand, str) or operand not in names:
            raise ValueError(f"Selector '{name}' references unknown selector '{operand}'")


def _validate_fragments(name: str, spec: dict[str, Any]) -> None:
    unknown = set(spec) - FRAGMENT_FIELDS
    if unknown:
        raise ValueError(f"Selector '{name}' has unsupported keys: {', '.join(sorted(unknown))}")
    if not spec:
        raise ValueError(f"Selector '{name}' must define at least one fragment")

    for key in SCALAR_FIELDS:
        if key in spec and not isinstance(spec[key], str):
            raise ValueError(f"Selector '{name}' field '{key}' must be a string")

    for key in LIST_FIELDS:
        if key not in spec:
            continue
        values = spec[key]
        if isinstance(values, str):
            spec[key] = [values]
        elif not isinstance(values, list) or not all(isinstance(v, str) for v in values):
            raise ValueError(f"Selector '{name}' field '{key}' must be a string or list of strings")
        if not spec[key]:
            raise ValueError(f"Selector '{name}' field '{key}' must define at least one fragment")


def normalize_selectors(selectors: dict[str, Any]) -> dict[str, Any]:
    """Validate selector definitions and coerce scalar list fields to lists."""
    normalized = deepcopy(selectors)
    names = set(normalized)
    for name, spec in normalized.items():
        if not isinstance(spec, dict):
            raise ValueError(f"Selector '{name}' must be a mapping")
        if "combine" in spec:
            _validate_combine(name, spec, names)
        else:
            _validate_fragments(name, spec)
    return normalized
