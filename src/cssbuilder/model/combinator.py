"""Combinator model: the operators that join two selectors."""

from __future__ import annotations

from enum import Enum

from cssbuilder.errors import InvalidCombinatorError


class Combinator(Enum):
    """CSS combinators keyed by their symbol."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"

    @classmethod
    def coerce(cls, value: Combinator | str) -> Combinator:
        """Resolve a combinator from an enum member, its symbol, or its name.

        Names are case-insensitive and may use hyphens, so ``"child"`` and
        ``"general-sibling"`` resolve the same as ``">"`` and ``"~"``.
        Raises :class:`InvalidCombinatorError` for anything else.
        """
        if isinstance(value, Combinator):
            return value
        if not isinstance(value, str):
            raise InvalidCombinatorError(value)
        try:
            return cls(value)
        except ValueError:
            pass
        name = value.strip().upper().replace("-", "_")
        if name in cls.__members__:
            return cls.__members__[name]
        raise InvalidCombinatorError(value)
