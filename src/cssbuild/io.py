"""Output CSV helpers."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Any


DEFAULT_OUTPUT_PATH = Path("output/selectors.csv")

OUTPUT_FIELDS = [
    "name",
    "selector",
    "error",
]


def ensure_output_parent(path: str | Path) -> Path:
    """Create the directory the selectors CSV goes into and return the path."""
    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)
    return output


def base_output_row(name: str) -> dict[str, Any]:
    return {"name": name, "selector": None, "error": None}


def open_output_writer(path: str | Path):
    """Open the selectors CSV for writing; the name/selector/error header is already written."""
    file = ensure_output_parent(path).open("w", newline="", encoding="utf-8")
    writer = csv.DictWriter(file, fieldnames=OUTPUT_FIELDS, extrasaction="ignore")
    writer.writeheader()
    return file, writer
