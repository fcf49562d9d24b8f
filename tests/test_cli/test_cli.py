"""Tests for the cssbuilder CLI commands."""
from __future__ import annotations

import pytest
from click.testing import CliRunner

from cssbuilder import __version__
from cssbuilder.builder import SelectorBuilder
from cssbuilder.cli.build import assemble
from cssbuilder.cli.main import cli
from cssbuilder.selector import CombinedSelector


def _run(*args: str):
    return CliRunner().invoke(cli, list(args))


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help(self) -> None:
        result = _run("--help")
        assert result.exit_code == 0
        assert "compose CSS selectors" in result.output

    def test_lists_commands(self) -> None:
        result = _run("--help")
        assert "build" in result.output
        assert "kinds" in result.output
        assert "combinators" in result.output

    def test_version(self) -> None:
        result = _run("--version")
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# build command
# ---------------------------------------------------------------------------


class TestBuildCommand:
    def test_simple(self) -> None:
        result = _run("build", "element=a", 'attr=href$=".png"', "pseudo-class=focus")
        assert result.exit_code == 0
        assert result.output.strip() == 'a[href$=".png"]:focus'

    def test_combined(self) -> None:
        result = _run(
            "build",
            "element=div", "id=main", "class=container", "class=draggable",
            "+",
            "element=table", "id=data",
            "~",
            "element=tr", "pseudo-class=nth-of-type(even)",
            "descendant",
            "element=td", "pseudo-class=nth-of-type(even)",
        )
        assert result.exit_code == 0
        assert result.output.rstrip("\n") == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_compact(self) -> None:
        result = _run("build", "--compact", "element=ul", " ", "element=li")
        assert result.exit_code == 0
        assert result.output.rstrip("\n") == "ul li"

    def test_order_error_exits_nonzero(self) -> None:
        result = _run("build", "class=a", "element=div")
        assert result.exit_code == 1
        assert "Selector error" in result.output

    def test_cardinality_error_exits_nonzero(self) -> None:
        result = _run("build", "element=div", "element=span")
        assert result.exit_code == 1
        assert "more than one time" in result.output

    def test_unique_id(self) -> None:
        assert _run("build", "id=a", "id=b").exit_code == 0
        assert _run("build", "--unique-id", "id=a", "id=b").exit_code == 1

    def test_unknown_token(self) -> None:
        result = _run("build", "tag=div")
        assert result.exit_code == 2

    def test_leading_combinator(self) -> None:
        result = _run("build", ">", "element=li")
        assert result.exit_code == 2

    def test_trailing_combinator(self) -> None:
        result = _run("build", "element=ul", ">")
        assert result.exit_code == 2

    def test_requires_tokens(self) -> None:
        assert _run("build").exit_code == 2

    def test_verbose(self) -> None:
        result = _run("--verbose", "build", "element=p")
        assert result.exit_code == 0


class TestAssemble:
    def test_nests_to_the_right(self) -> None:
        selector = assemble(["element=a", "+", "element=b", "~", "element=c"], SelectorBuilder())
        assert isinstance(selector, CombinedSelector)
        assert isinstance(selector.right, CombinedSelector)
        assert selector.stringify() == "a + b ~ c"

    def test_single_part(self) -> None:
        assert assemble(["pseudo-element=before"], SelectorBuilder()).stringify() == "::before"

    def test_kind_token_case_insensitive(self) -> None:
        assert assemble(["CLASS=x"], SelectorBuilder()).stringify() == ".x"


# ---------------------------------------------------------------------------
# reference commands
# ---------------------------------------------------------------------------


class TestReferenceCommands:
    def test_kinds_in_rank_order(self) -> None:
        result = _run("kinds")
        assert result.exit_code == 0
        lines = [line.split()[1] for line in result.output.splitlines()]
        assert lines == ["element", "id", "class", "attribute", "pseudo-class", "pseudo-element"]

    def test_kinds_shows_format(self) -> None:
        assert "::value" in _run("kinds").output

    @pytest.mark.parametrize("name", ["descendant", "child", "adjacent-sibling", "general-sibling"])
    def test_combinators(self, name: str) -> None:
        result = _run("combinators")
        assert result.exit_code == 0
        assert name in result.output
