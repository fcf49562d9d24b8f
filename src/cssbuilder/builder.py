"""Selector builder facade: entry points that create and combine selectors."""

from __future__ import annotations

import logging

from cssbuilder.config import BuilderConfig
from cssbuilder.model.combinator import Combinator
from cssbuilder.model.fragment import FragmentKind
from cssbuilder.selector.base import Selector
from cssbuilder.selector.combined import CombinedSelector
from cssbuilder.selector.simple import SimpleSelector

__all__ = ["SelectorBuilder", "css_selector_builder"]

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Stateless factory for selectors.

    Each seeding call returns a new, independent :class:`SimpleSelector`;
    the builder keeps nothing but its (immutable) configuration, so one
    instance can be shared freely.

        builder = SelectorBuilder()
        builder.combine(
            builder.element("ul").class_("menu"),
            ">",
            builder.element("li").pseudo_class("first-child"),
        ).stringify()
        # 'ul.menu > li:first-child'
    """

    def __init__(self, config: BuilderConfig | None = None) -> None:
        self.config = config or BuilderConfig()

    def fragment(self, kind: FragmentKind, value: str) -> SimpleSelector:
        """Create a selector seeded with one fragment of *kind*."""
        return SimpleSelector(self.config).append(kind, value)

    def element(self, value: str) -> SimpleSelector:
        """Start a selector with a type selector such as ``div``."""
        return self.fragment(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> SimpleSelector:
        """Start a selector with ``#value``."""
        return self.fragment(FragmentKind.ID, value)

    def class_(self, value: str) -> SimpleSelector:
        """Start a selector with ``.value``."""
        return self.fragment(FragmentKind.CLASS, value)

    def attr(self, value: str) -> SimpleSelector:
        """Start a selector with ``[value]``; *value* is inserted verbatim."""
        return self.fragment(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SimpleSelector:
        """Start a selector with ``:value``."""
        return self.fragment(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SimpleSelector:
        """Start a selector with ``::value``."""
        return self.fragment(FragmentKind.PSEUDO_ELEMENT, value)

    def combine(
        self, left: Selector, combinator: Combinator | str, right: Selector
    ) -> CombinedSelector:
        """Join *left* and *right* with *combinator*.

        Raises :class:`InvalidCombinatorError` (a ``ValueError``) when the
        combinator is not one of ``' '``, ``'>'``, ``'+'``, ``'~'``, and
        :class:`InvalidOperandError` (a ``TypeError``) when an operand is not
        a selector.  Simple operands are frozen; nothing else about them
        changes.
        """
        resolved = Combinator.coerce(combinator)
        node = CombinedSelector(
            left=left,
            combinator=resolved,
            right=right,
            compact_descendant=self.config.compact_descendant,
        )
        logger.debug("Combining with %s", resolved.name.lower())
        return node


css_selector_builder = SelectorBuilder()
