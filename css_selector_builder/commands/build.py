"""
:Description: CLI for building a compound selector from a list of fragments.
"""

from __future__ import annotations

import logging
import sys
from typing import Final, Optional

import click

from css_selector_builder.builder.css_selector_builder import css_selector_builder
from css_selector_builder.builder.enums import ALL_FRAGMENT_KINDS, FragmentKind
from css_selector_builder.builder.exceptions import SelectorBuilderException
from css_selector_builder.builder.selector import CompoundSelector
from css_selector_builder.builder.selector_json import to_json_str
from css_selector_builder.commands.utils.print import print_err, print_out
from css_selector_builder.commands.utils.types import ExitCode

# Truncates the `__name__` to the command name.
log = logging.getLogger(__name__.rsplit(".", maxsplit=1)[-1])


def _parse_fragments(
    ctx: click.Context, param: click.Parameter, value: tuple[str, ...]  # pylint: disable=unused-argument
) -> list[tuple[FragmentKind, str]]:
    """
    Splits each `KIND:VALUE` argument on the first colon. Values may contain colons of their own, as in
    `pseudo-class:not(:hover)`.

    :param ctx: Click's context object
    :param param: Argument parameter
    :param value: Raw fragment arguments
    :raises click.BadParameter: If an argument is malformed or names an unknown fragment kind.
    :returns: The parsed `(kind, value)` pairs, in the order given
    """
    fragments: list[tuple[FragmentKind, str]] = []
    for arg in value:
        kind, sep, frag_value = arg.partition(":")
        if not sep:
            raise click.BadParameter(f"Expected KIND:VALUE, got `{arg}`")
        if kind not in ALL_FRAGMENT_KINDS:
            valid_kinds: Final[str] = ", ".join(str(k) for k in FragmentKind)
            raise click.BadParameter(f"Unknown fragment kind `{kind}`. Expected one of: {valid_kinds}")
        fragments.append((FragmentKind(kind), frag_value))
    return fragments


@click.command(short_help="Builds a compound selector from fragments.")
@click.argument("fragments", nargs=-1, required=True, callback=_parse_fragments)
@click.option(
    "--json",
    "-j",
    "as_json",
    is_flag=True,
    default=False,
    help="Prints the selector as a JSON document instead of CSS text.",
)
def build(fragments: list[tuple[FragmentKind, str]], as_json: bool) -> None:
    """
    Builds a single compound selector. Fragments are applied in the order given.

    FRAGMENTS: One or more `KIND:VALUE` pairs, where KIND is one of: element, id, class, attribute, pseudo-class,
    pseudo-element
    """
    selector: Optional[CompoundSelector] = None
    try:
        for kind, value in fragments:
            log.debug("Adding %s fragment: %s", kind, value)
            if selector is None:
                selector = css_selector_builder.fragment(kind, value)
            else:
                selector = selector.extend(kind, value)
    except SelectorBuilderException as e:
        print_err(str(e))
        sys.exit(ExitCode.BUILD_ERROR)

    # `required=True` guarantees at least one fragment.
    assert selector is not None
    print_out(to_json_str(selector, indent=2) if as_json else selector.stringify())
    sys.exit(ExitCode.SUCCESS)
