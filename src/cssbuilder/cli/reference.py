"""CLI commands: cssbuilder kinds / combinators -- print reference tables."""

from __future__ import annotations

import click

from cssbuilder.model.combinator import Combinator
from cssbuilder.model.fragment import FragmentKind


@click.command()
def kinds() -> None:
    """List fragment kinds in the order they must appear."""
    for kind in sorted(FragmentKind, key=lambda k: k.rank):
        click.echo(f"  {kind.rank}  {kind.value:<15} {kind.format('value')}")


@click.command()
def combinators() -> None:
    """List combinators and their symbols."""
    for combinator in Combinator:
        name = combinator.name.lower().replace("_", "-")
        click.echo(f"  {name:<17} {combinator.value!r}")
