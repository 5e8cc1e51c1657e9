"""CSS selector builder.

A selector is written as::

    element#id.class[attr]:pseudo-class::pseudo-element

Classes and pseudo-classes can repeat; element, id and pseudo-element
cannot. Parts must be added in that order. Two selectors can be joined
with a combinator (" ", ">", "+", "~").
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


SINGLETON_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)

COMBINATORS = (" ", ">", "+", "~")

# Grammar positions, in rendering order.
ELEMENT = 1
ID = 2
CLASS = 3
ATTRIBUTE = 4
PSEUDO_CLASS = 5
PSEUDO_ELEMENT = 6


class SelectorError(ValueError):
    """Base class for selector construction errors."""


class DuplicateSingletonError(SelectorError):
    def __init__(self, message: str = SINGLETON_MESSAGE) -> None:
        super().__init__(message)


class OrderViolationError(SelectorError):
    def __init__(self, message: str = ORDER_MESSAGE) -> None:
        super().__init__(message)


@dataclass
class SelectorDraft:
    """Accumulates the fragments of one simple selector.

    Every method mutates the draft and returns it, so calls chain.
    """

    element_name: str | None = None
    id_name: str | None = None
    classes: list[str] = field(default_factory=list)
    attribute: str | None = None
    pseudo_classes: list[str] = field(default_factory=list)
    pseudo_element_name: str | None = None
    stage: int = 0

    def _advance(self, position: int) -> None:
        if self.stage > position:
            raise OrderViolationError()
        self.stage = position

    def element(self, value: str) -> SelectorDraft:
        if self.element_name:
            raise DuplicateSingletonError()
        if self.stage != 0:
            raise OrderViolationError()
        self.element_name = value
        self.stage = ELEMENT
        return self

    def id(self, value: str) -> SelectorDraft:
        if self.id_name:
            raise DuplicateSingletonError()
        self._advance(ID)
        self.id_name = value
        return self

    def class_(self, value: str) -> SelectorDraft:
        self._advance(CLASS)
        self.classes.append(value)
        return self

    def attr(self, value: str) -> SelectorDraft:
        # A second attr() replaces the first; only ordering is enforced.
        self._advance(ATTRIBUTE)
        self.attribute = value
        return self

    def pseudo_class(self, value: str) -> SelectorDraft:
        self._advance(PSEUDO_CLASS)
        self.pseudo_classes.append(value)
        return self

    def pseudo_element(self, value: str) -> SelectorDraft:
        if self.pseudo_element_name:
            raise DuplicateSingletonError()
        self.pseudo_element_name = value
        self.stage = PSEUDO_ELEMENT
        return self

    def stringify(self) -> str:
        result = ""
        if self.element_name:
            result += self.element_name
        if self.id_name:
            result += f"#{self.id_name}"
        if self.classes:
            result += "." + ".".join(self.classes)
        if self.attribute:
            result += f"[{self.attribute}]"
        if self.pseudo_classes:
            result += ":" + ":".join(self.pseudo_classes)
        if self.pseudo_element_name:
            result += f"::{self.pseudo_element_name}"
        return result

    def __str__(self) -> str:
        return self.stringify()


@dataclass(frozen=True)
class CombinedSelector:
    left: Selector
    combinator: str
    right: Selector

    def stringify(self) -> str:
        return f"{self.left.stringify()} {self.combinator} {self.right.stringify()}"

    def __str__(self) -> str:
        return self.stringify()


Selector = Union[SelectorDraft, CombinedSelector]


class SelectorFacade:
    """Stateless entry point; each fragment call starts a new draft."""

    __slots__ = ()

    def element(self, value: str) -> SelectorDraft:
        return SelectorDraft().element(value)

    def id(self, value: str) -> SelectorDraft:
        return SelectorDraft().id(value)

    def class_(self, value: str) -> SelectorDraft:
        return SelectorDraft().class_(value)

    def attr(self, value: str) -> SelectorDraft:
        return SelectorDraft().attr(value)

    def pseudo_class(self, value: str) -> SelectorDraft:
        return SelectorDraft().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorDraft:
        return SelectorDraft().pseudo_element(value)

    def combine(self, left: Selector, combinator: str, right: Selector) -> CombinedSelector:
        return CombinedSelector(left=left, combinator=combinator, right=right)

    def stringify(self) -> str:
        return ""


# Expose the CSS spelling for callers that look the method up by name.
setattr(SelectorDraft, "class", SelectorDraft.class_)
setattr(SelectorFacade, "class", SelectorFacade.class_)


css_selector_builder = SelectorFacade()
