"""JSON helpers."""

from __future__ import annotations

import json
from dataclasses import asdict, fields, is_dataclass
from typing import Any, TypeVar

T = TypeVar("T")


class ShapeMismatchError(ValueError):
    """Raised when decoded JSON does not fit the requested shape."""


def _default(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def get_json(value: Any) -> str:
    """Serialize a value to compact JSON, keeping key insertion order.

    NaN and infinities have no JSON spelling and raise ``ValueError``.
    """
    return json.dumps(
        value, separators=(",", ":"), ensure_ascii=False, allow_nan=False, default=_default
    )


def from_json(shape: type[T], text: str) -> T:
    """Decode JSON text into an instance of ``shape``.

    ``json.JSONDecodeError`` from malformed text is not caught.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ShapeMismatchError(f"Expected a JSON object for {shape.__name__}")

    if is_dataclass(shape):
        known = {f.name for f in fields(shape)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ShapeMismatchError(
                f"Unexpected keys for {shape.__name__}: {', '.join(unknown)}"
            )

    try:
        return shape(**data)
    except TypeError as exc:
        raise ShapeMismatchError(f"Cannot build {shape.__name__}: {exc}") from exc
