"""Base protocol for anything that renders to selector text."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Selector(Protocol):
    """A simple or combined selector."""

    def stringify(self) -> str: ...
