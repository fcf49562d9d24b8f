"""Error hierarchy for selector construction."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from cssbuilder.model.fragment import FragmentKind

REQUIRED_ORDER = "element, id, class, attribute, pseudo-class, pseudo-element"


class SelectorError(Exception):
    """Base error for all cssbuilder errors."""


class OrderError(SelectorError):
    """A fragment was appended after a fragment of higher rank."""

    def __init__(self, kind: FragmentKind, previous: FragmentKind) -> None:
        self.kind = kind
        self.previous = previous
        super().__init__(
            f"Cannot add {kind.value} after {previous.value}: selector parts "
            f"should be arranged in the following order: {REQUIRED_ORDER}"
        )


class CardinalityError(SelectorError):
    """A singleton fragment kind was appended a second time."""

    def __init__(self, kind: FragmentKind) -> None:
        self.kind = kind
        super().__init__(
            f"{kind.value.capitalize()} should not occur more than one time "
            "inside the selector"
        )


class InvalidCombinatorError(SelectorError, ValueError):
    """The value passed as a combinator is not one of ' ', '>', '+', '~'."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            f"Invalid combinator {value!r}: expected one of ' ', '>', '+', '~'"
        )


class FrozenSelectorError(SelectorError):
    """A fragment was appended to a selector that was already combined or rendered."""


class InvalidOperandError(SelectorError, TypeError):
    """An operand passed to ``combine`` is not a selector."""

    def __init__(self, side: str, value: Any) -> None:
        self.side = side
        self.value = value
        super().__init__(
            f"Invalid {side} operand {value!r}: expected a simple or combined selector"
        )
