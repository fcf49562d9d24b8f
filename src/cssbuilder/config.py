from __future__ import annotations

from dataclasses import dataclass

from cssbuilder.model.fragment import FragmentKind


@dataclass(frozen=True)
class BuilderConfig:
    compact_descendant: bool = False  # render "a b" instead of "a   b"
    unique_id: bool = False  # also allow at most one #id per simple selector

    @property
    def singleton_kinds(self) -> frozenset[FragmentKind]:
        """Fragment kinds that may occur at most once in a simple selector."""
        kinds = {FragmentKind.ELEMENT, FragmentKind.PSEUDO_ELEMENT}
        if self.unique_id:
            kinds.add(FragmentKind.ID)
        return frozenset(kinds)
