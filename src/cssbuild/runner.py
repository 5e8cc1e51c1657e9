"""Build selectors from definitions and write them out."""

from __future__ import annotations

import logging
from typing import Any

from .config import get_selectors, load_yaml, normalize_selectors
from .io import base_output_row, ensure_output_parent, open_output_writer
from .selectors import Selector, SelectorFacade, css_selector_builder

logger = logging.getLogger(__name__)

# Definition key -> builder method.
FRAGMENT_METHODS = {
    "element": "element",
    "id": "id",
    "classes": "class_",
    "attribute": "attr",
    "pseudo_classes": "pseudo_class",
    "pseudo_element": "pseudo_element",
}


class UnknownSelectorError(KeyError):
    """Raised when a definition name cannot be resolved."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown selector '{self.name}'"


def _build_fragments(spec: dict[str, Any], facade: SelectorFacade) -> Selector:
    """Feed fragments to the builder in the order the definition lists them."""
    target: Any = facade
    for key, value in spec.items():
        method = FRAGMENT_METHODS[key]
        values = value if isinstance(value, list) else [value]
        for item in values:
            target = getattr(target, method)(item)
    return target


def build_selector(
    name: str,
    definitions: dict[str, Any],
    facade: SelectorFacade = css_selector_builder,
    _resolving: tuple[str, ...] = (),
) -> Selector:
    """Build the named selector, resolving combine operands recursively."""
    if name not in definitions:
        raise UnknownSelectorError(name)
    if name in _resolving:
        chain = " -> ".join((*_resolving, name))
        raise ValueError(f"Selector reference cycle: {chain}")

    spec = definitions[name]
    if "combine" not in spec:
        return _build_fragments(spec, facade)

    left, combinator, right = spec["combine"]
    resolving = (*_resolving, name)
    return facade.combine(
        build_selector(left, definitions, facade, resolving),
        combinator,
        build_selector(right, definitions, facade, resolving),
    )


def build_all(definitions: dict[str, Any]) -> dict[str, str]:
    """Render every definition to CSS text."""
    return {name: build_selector(name, definitions).stringify() for name in definitions}


def run_pipeline(config_path: str, output_path: str) -> dict[str, int]:
    """Render all configured selectors and write output CSV."""
    cfg = load_yaml(config_path)
    definitions = normalize_selectors(get_selectors(cfg))

    ensure_output_parent(output_path)

    counts = {"built": 0, "failed": 0}
    output_file, writer = open_output_writer(output_path)
    with output_file:
        for name in definitions:
            out = base_output_row(name)
            try:
                out["selector"] = build_selector(name, definitions).stringify()
                counts["built"] += 1
                logger.debug("[%s] -> %s", name, out["selector"])
            except ValueError as exc:
                out["error"] = str(exc)
                counts["failed"] += 1
                logger.warning("[%s] failed: %s", name, exc)
            writer.writerow(out)

    logger.info(
        "Wrote %d selectors to %s (%d failed)", counts["built"], output_path, counts["failed"]
    )
    return counts
