"""Fragment model: one part of a compound selector and its fixed rank."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FragmentKind(Enum):
    """The six kinds of simple selector parts.

    Ranks fix the order in which parts may appear inside one compound
    selector:
        1 = element, 2 = id, 3 = class, 4 = attribute,
        5 = pseudo-class, 6 = pseudo-element
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    def format(self, value: str) -> str:
        """Render *value* the way this kind appears in CSS text."""
        return _TEMPLATES[self].format(value)


_RANKS: dict[FragmentKind, int] = {
    FragmentKind.ELEMENT: 1,
    FragmentKind.ID: 2,
    FragmentKind.CLASS: 3,
    FragmentKind.ATTRIBUTE: 4,
    FragmentKind.PSEUDO_CLASS: 5,
    FragmentKind.PSEUDO_ELEMENT: 6,
}

_TEMPLATES: dict[FragmentKind, str] = {
    FragmentKind.ELEMENT: "{}",
    FragmentKind.ID: "#{}",
    FragmentKind.CLASS: ".{}",
    FragmentKind.ATTRIBUTE: "[{}]",
    FragmentKind.PSEUDO_CLASS: ":{}",
    FragmentKind.PSEUDO_ELEMENT: "::{}",
}


@dataclass(frozen=True)
class Fragment:
    """A raw value tagged with the kind of selector part it represents."""

    kind: FragmentKind
    value: str  # raw text, e.g. "main" for "#main"

    @property
    def rank(self) -> int:
        return self.kind.rank

    @property
    def text(self) -> str:
        return self.kind.format(self.value)
