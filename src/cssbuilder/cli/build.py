"""CLI command: cssbuilder build -- assemble a selector from parts."""

from __future__ import annotations

import sys

import click

from cssbuilder.builder import SelectorBuilder
from cssbuilder.config import BuilderConfig
from cssbuilder.errors import InvalidCombinatorError, SelectorError
from cssbuilder.model.combinator import Combinator
from cssbuilder.model.fragment import FragmentKind
from cssbuilder.selector.base import Selector
from cssbuilder.selector.simple import SimpleSelector

# Token prefixes accepted for each fragment kind ("attr" is a short alias).
_KIND_TOKENS: dict[str, FragmentKind] = {kind.value: kind for kind in FragmentKind}
_KIND_TOKENS["attr"] = FragmentKind.ATTRIBUTE


def _as_combinator(token: str) -> Combinator | None:
    if "=" in token:
        return None
    try:
        return Combinator.coerce(token)
    except InvalidCombinatorError:
        return None


def assemble(tokens: tuple[str, ...] | list[str], builder: SelectorBuilder) -> Selector:
    """Build a selector from ``kind=value`` parts and combinator tokens.

    Consecutive parts form one simple selector; each combinator token closes
    the current one.  Combinations nest to the right, so
    ``a + b ~ c`` becomes ``combine(a, '+', combine(b, '~', c))``.
    """
    simples: list[SimpleSelector] = []
    joins: list[Combinator] = []
    current: SimpleSelector | None = None

    for token in tokens:
        combinator = _as_combinator(token)
        if combinator is not None:
            if current is None:
                raise click.UsageError(f"Combinator {token!r} must follow a selector part")
            simples.append(current)
            joins.append(combinator)
            current = None
            continue

        label, sep, value = token.partition("=")
        kind = _KIND_TOKENS.get(label.strip().lower())
        if not sep or kind is None:
            raise click.BadParameter(
                f"{token!r} is neither a kind=value part nor a combinator",
                param_hint="TOKENS",
            )
        if current is None:
            current = builder.fragment(kind, value)
        else:
            current.append(kind, value)

    if current is None:
        raise click.UsageError("Expected a selector part after the last combinator")
    simples.append(current)

    result: Selector = simples[-1]
    for left, combinator in zip(reversed(simples[:-1]), reversed(joins)):
        result = builder.combine(left, combinator, result)
    return result


@click.command()
@click.argument("tokens", nargs=-1, required=True)
@click.option("--compact", is_flag=True, help="Render the descendant combinator as one space.")
@click.option("--unique-id", is_flag=True, help="Allow at most one #id per compound selector.")
def build(tokens: tuple[str, ...], compact: bool, unique_id: bool) -> None:
    """Build a selector from parts and combinators and print it.

    Parts are written kind=value (element, id, class, attr, pseudo-class,
    pseudo-element); combinators are '>', '+', '~' or 'descendant'.

    \b
    Example:
        cssbuilder build element=ul class=menu '>' element=li pseudo-class=first-child
    """
    builder = SelectorBuilder(BuilderConfig(compact_descendant=compact, unique_id=unique_id))
    try:
        selector = assemble(tokens, builder)
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)
    click.echo(selector.stringify())
