"""Compound selector built by appending fragments in rank order."""

from __future__ import annotations

import logging

from cssbuilder.config import BuilderConfig
from cssbuilder.errors import CardinalityError, FrozenSelectorError, OrderError
from cssbuilder.model.fragment import Fragment, FragmentKind

logger = logging.getLogger(__name__)


class SimpleSelector:
    """An ordered run of fragments such as ``div#main.container``.

    Every append is validated against a small state machine: the rank of the
    last appended fragment (0 while empty) may never decrease, and the kinds
    listed in ``config.singleton_kinds`` may appear only once.  Appending
    methods return the selector itself so calls can be chained.

    Once the selector has been rendered or handed to ``combine`` it is
    frozen and further appends raise :class:`FrozenSelectorError`.
    """

    def __init__(self, config: BuilderConfig | None = None) -> None:
        self._config = config or BuilderConfig()
        self._fragments: list[Fragment] = []
        self._last_rank = 0
        self._seen: set[FragmentKind] = set()
        self._frozen = False

    # --- fragment appends -----------------------------------------------------

    def append(self, kind: FragmentKind, value: str) -> SimpleSelector:
        """Validate and append a fragment of *kind*."""
        if self._frozen:
            raise FrozenSelectorError(
                f"Cannot add {kind.value} to {self.stringify()!r}: "
                "selector was already combined or rendered"
            )
        if kind in self._seen and kind in self._config.singleton_kinds:
            logger.debug("Rejected duplicate %s %r", kind.value, value)
            raise CardinalityError(kind)
        if kind.rank < self._last_rank:
            logger.debug("Rejected out-of-order %s %r", kind.value, value)
            raise OrderError(kind, previous=self._fragments[-1].kind)

        fragment = Fragment(kind=kind, value=value)
        self._fragments.append(fragment)
        self._seen.add(kind)
        self._last_rank = kind.rank
        logger.debug("Appended %s fragment %r", kind.value, fragment.text)
        return self

    def element(self, value: str) -> SimpleSelector:
        """Append a type selector; allowed once, and only first."""
        return self.append(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> SimpleSelector:
        """Append ``#value``."""
        return self.append(FragmentKind.ID, value)

    def class_(self, value: str) -> SimpleSelector:
        """Append ``.value``; may repeat."""
        return self.append(FragmentKind.CLASS, value)

    def attr(self, value: str) -> SimpleSelector:
        """Append ``[value]``; may repeat."""
        return self.append(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SimpleSelector:
        """Append ``:value``; may repeat."""
        return self.append(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SimpleSelector:
        """Append ``::value``; allowed once, and only last."""
        return self.append(FragmentKind.PSEUDO_ELEMENT, value)

    # --- state ----------------------------------------------------------------

    @property
    def fragments(self) -> tuple[Fragment, ...]:
        return tuple(self._fragments)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Reject any further appends."""
        self._frozen = True

    # --- rendering ------------------------------------------------------------

    def stringify(self) -> str:
        """Return the fragments' CSS text joined in append order."""
        self._frozen = True
        return "".join(fragment.text for fragment in self._fragments)

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        text = "".join(fragment.text for fragment in self._fragments)
        return f"SimpleSelector({text!r})"
