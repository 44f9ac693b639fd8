"""
:Description: Tests the `combine` CLI
"""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner
from pyfakefs.fake_filesystem import FakeFilesystem

from css_selector_builder.commands.combine import combine
from css_selector_builder.commands.utils.types import ExitCode
from tests.file_loading import get_test_path, load_file
from tests.smoke_testing import assert_cli_usage


def test_usage() -> None:
    """
    Smoke test that ensures rendering of the help menu
    """
    assert_cli_usage(combine)


@pytest.mark.parametrize(
    "left,combinator,right,expected",
    [
        ("selectors/div_main.json", "+", "selectors/table_data.json", "div#main.container.draggable + table#data"),
        ("selectors/table_data.json", ">", "selectors/link_png.json", 'table#data > a[href$=".png"]:focus'),
        ("selectors/table_data.json", " ", "selectors/table_data.json", "table#data   table#data"),
        (
            "selectors/div_main.json",
            "~",
            "selectors/nested_combination.json",
            "div#main.container.draggable ~ div#main.container.draggable"
            " + table#data ~ tr:nth-of-type(even)   td:nth-of-type(even)",
        ),
    ],
)
def test_combine_cli(left: str, combinator: str, right: str, expected: str, fs: FakeFilesystem) -> None:
    """
    Combines two valid selector documents.

    :param left: Left-hand selector document test file
    :param combinator: Combinator token
    :param right: Right-hand selector document test file
    :param expected: Expected selector text
    :param fs: pyfakefs fixture used to replace the file system
    """
    runner = CliRunner()
    fs.add_real_directory(get_test_path())

    result = runner.invoke(combine, [str(get_test_path() / left), combinator, str(get_test_path() / right)])
    assert result.exit_code == ExitCode.SUCCESS
    assert result.output == f"{expected}\n"


def test_combine_cli_json(fs: FakeFilesystem) -> None:
    """
    The `--json` flag prints the combined selector document.

    :param fs: pyfakefs fixture used to replace the file system
    """
    runner = CliRunner()
    fs.add_real_directory(get_test_path())

    left = get_test_path() / "selectors/div_main.json"
    right = get_test_path() / "selectors/table_data.json"
    result = runner.invoke(combine, ["--json", str(left), "+", str(right)])
    assert result.exit_code == ExitCode.SUCCESS
    assert json.loads(result.output) == {
        "left": json.loads(load_file("selectors/div_main.json")),
        "combinator": "+",
        "right": json.loads(load_file("selectors/table_data.json")),
    }


@pytest.mark.parametrize(
    "left,combinator,right,exit_code",
    [
        ("selectors/div_main.json", "<", "selectors/table_data.json", ExitCode.ILLEGAL_OPERATION),
        ("selectors/div_main.json", "++", "selectors/table_data.json", ExitCode.ILLEGAL_OPERATION),
        ("selectors/not_json.txt", "+", "selectors/table_data.json", ExitCode.JSON_ERROR),
        ("selectors/div_main.json", "+", "selectors/empty_fragments.json", ExitCode.SCHEMA_ERROR),
        ("selectors/duplicate_id.json", "+", "selectors/table_data.json", ExitCode.BUILD_ERROR),
        # Only single selector documents may be combined
        ("selectors/selector_list.json", "+", "selectors/table_data.json", ExitCode.SCHEMA_ERROR),
    ],
)
def test_combine_cli_failures(
    left: str, combinator: str, right: str, exit_code: ExitCode, fs: FakeFilesystem
) -> None:
    """
    Reports invalid inputs with the matching exit code.

    :param left: Left-hand selector document test file
    :param combinator: Combinator token
    :param right: Right-hand selector document test file
    :param exit_code: Expected exit code
    :param fs: pyfakefs fixture used to replace the file system
    """
    runner = CliRunner()
    fs.add_real_directory(get_test_path())

    result = runner.invoke(combine, [str(get_test_path() / left), combinator, str(get_test_path() / right)])
    assert result.exit_code == exit_code
