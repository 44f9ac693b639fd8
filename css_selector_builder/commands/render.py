"""
:Description: CLI for rendering selector JSON documents to CSS text.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Final, cast

import click

from css_selector_builder.builder.exceptions import SelectorBuilderException, SelectorSchemaValidationException
from css_selector_builder.builder.selector_json import from_json
from css_selector_builder.commands.utils.print import print_err, print_messages, print_out
from css_selector_builder.commands.utils.types import ExitCode
from css_selector_builder.types import JsonType, MessageCategory, MessageTable

# Truncates the `__name__` to the command name.
log = logging.getLogger(__name__.rsplit(".", maxsplit=1)[-1])


# In order for `click` to play nice with `pyfakefs`, we set `path_type=str` and delay converting to a `Path`.
@click.command(short_help="Renders selector JSON documents as CSS text.")
@click.argument("json_file_path", type=click.Path(exists=True, path_type=str, dir_okay=False))
def render(json_file_path: str) -> None:
    """
    Renders each selector document found in a JSON file, one per line. The file may contain a single selector
    document or a list of them. Documents that fail to load are reported and skipped.

    JSON_FILE_PATH: Path to the JSON file containing the selector document(s)
    """
    try:
        contents: JsonType = cast(JsonType, json.loads(Path(json_file_path).read_text(encoding="utf-8")))
    except json.JSONDecodeError:
        print_err(f"Non-JSON file provided: {json_file_path}")
        sys.exit(ExitCode.JSON_ERROR)
    except IOError:
        print_err(f"Couldn't read the given JSON file: {json_file_path}")
        sys.exit(ExitCode.IO_ERROR)  # untested

    documents: Final[list[JsonType]] = contents if isinstance(contents, list) else [contents]
    log.debug("Rendering %d selector document(s) from %s", len(documents), json_file_path)

    msg_tbl = MessageTable()
    schema_failed = False
    build_failed = False
    if not documents:
        msg_tbl.add_message(MessageCategory.WARNING, f"No selector documents were found in {json_file_path}.")
    for idx, document in enumerate(documents):
        try:
            print_out(from_json(document).stringify())
        except SelectorSchemaValidationException:
            msg_tbl.add_message(MessageCategory.ERROR, f"Document #{idx} does not follow the selector schema.")
            schema_failed = True
        except SelectorBuilderException as e:
            msg_tbl.add_message(MessageCategory.ERROR, f"Document #{idx} could not be built: {e}")
            build_failed = True

    if msg_tbl.get_totals_message():
        print_messages(MessageCategory.WARNING, msg_tbl)
        print_messages(MessageCategory.ERROR, msg_tbl)
        print_err(msg_tbl.get_totals_message())
    # Schema failures take precedence over rule violations.
    if schema_failed:
        sys.exit(ExitCode.SCHEMA_ERROR)
    if build_failed:
        sys.exit(ExitCode.BUILD_ERROR)
    sys.exit(ExitCode.SUCCESS)
