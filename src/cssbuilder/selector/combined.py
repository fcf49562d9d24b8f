"""Combined selector: two selectors joined by a combinator."""

from __future__ import annotations

from dataclasses import dataclass

from cssbuilder.errors import InvalidOperandError
from cssbuilder.model.combinator import Combinator
from cssbuilder.selector.base import Selector
from cssbuilder.selector.simple import SimpleSelector


@dataclass(frozen=True)
class CombinedSelector:
    """A binary node ``left <combinator> right``.

    Both operands may themselves be combined selectors; rendering recurses
    left to right in the shape the tree was built.  The combinator symbol is
    always surrounded by single spaces, so the descendant combinator renders
    as three spaces unless ``compact_descendant`` is set.

    Simple operands are frozen on construction, so the node renders the
    same text for its whole lifetime.
    """

    left: Selector
    combinator: Combinator
    right: Selector
    compact_descendant: bool = False

    def __post_init__(self) -> None:
        for side, operand in (("left", self.left), ("right", self.right)):
            if not isinstance(operand, Selector):
                raise InvalidOperandError(side, operand)
        for operand in (self.left, self.right):
            if isinstance(operand, SimpleSelector):
                operand.freeze()

    def stringify(self) -> str:
        if self.combinator is Combinator.DESCENDANT and self.compact_descendant:
            separator = " "
        else:
            separator = f" {self.combinator.value} "
        return self.left.stringify() + separator + self.right.stringify()

    def __str__(self) -> str:
        return self.stringify()
