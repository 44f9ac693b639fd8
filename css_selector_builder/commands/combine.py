"""
:Description: CLI for joining two selector JSON documents with a combinator.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Final

import click

from css_selector_builder.builder.css_selector_builder import css_selector_builder
from css_selector_builder.builder.exceptions import (
    InvalidCombinator,
    SelectorBuilderException,
    SelectorSchemaValidationException,
)
from css_selector_builder.builder.selector import Selector
from css_selector_builder.builder.selector_json import from_json_str, to_json_str
from css_selector_builder.commands.utils.print import print_err, print_out
from css_selector_builder.commands.utils.types import ExitCode

# Truncates the `__name__` to the command name.
log = logging.getLogger(__name__.rsplit(".", maxsplit=1)[-1])


def _load_selector(file_path: Path) -> Selector:
    """
    Reads and restores a single selector document, exiting the program on failure.

    :param file_path: Path to the JSON file containing one selector document
    :returns: The restored selector
    """
    try:
        return from_json_str(file_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError:
        print_err(f"Non-JSON file provided: {file_path}")
        sys.exit(ExitCode.JSON_ERROR)
    except IOError:
        print_err(f"Couldn't read the given JSON file: {file_path}")
        sys.exit(ExitCode.IO_ERROR)  # untested
    except SelectorSchemaValidationException:
        print_err(f"The selector document provided did not follow the expected schema: {file_path}")
        sys.exit(ExitCode.SCHEMA_ERROR)
    except SelectorBuilderException as e:
        print_err(f"The selector in {file_path} could not be built: {e}")
        sys.exit(ExitCode.BUILD_ERROR)


@click.command(short_help="Joins two selector documents with a combinator.")
@click.argument("left_file_path", type=click.Path(exists=True, path_type=str, dir_okay=False))
@click.argument("combinator", type=str)
@click.argument("right_file_path", type=click.Path(exists=True, path_type=str, dir_okay=False))
@click.option(
    "--json",
    "-j",
    "as_json",
    is_flag=True,
    default=False,
    help="Prints the combined selector as a JSON document instead of CSS text.",
)
def combine(left_file_path: str, combinator: str, right_file_path: str, as_json: bool) -> None:
    """
    Joins two selectors, each stored as a JSON document, and prints the result.

    LEFT_FILE_PATH: Path to the JSON file containing the left-hand selector
    COMBINATOR: One of ' ', '+', '~', '>'
    RIGHT_FILE_PATH: Path to the JSON file containing the right-hand selector
    """
    left: Final[Selector] = _load_selector(Path(left_file_path))
    right: Final[Selector] = _load_selector(Path(right_file_path))
    log.debug("Combining `%s` and `%s` with `%s`", left, right, combinator)

    try:
        result: Final[Selector] = css_selector_builder.combine(left, combinator, right)
    except InvalidCombinator as e:
        print_err(str(e))
        sys.exit(ExitCode.ILLEGAL_OPERATION)

    print_out(to_json_str(result, indent=2) if as_json else result.stringify())
    sys.exit(ExitCode.SUCCESS)

