"""
:Description: Tests the primary CLI interface, found under `css_selector_builder.commands.css_selector_builder`
"""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from css_selector_builder.commands.css_selector_builder import css_selector_builder


def test_usage() -> None:
    """
    Ensure failure to provide a sub-command results in rendering the help menu
    """
    runner = CliRunner()
    # No commands are provided
    result = runner.invoke(css_selector_builder, [])
    assert result.output.startswith("Usage:")
    # Help is specified
    result = runner.invoke(css_selector_builder, ["--help"])
    assert result.exit_code == 0
    assert result.output.startswith("Usage:")


@pytest.mark.parametrize("command", ["build", "combine", "render"])
def test_sub_commands_registered(command: str) -> None:
    """
    Ensures every sub-command is reachable from the base CLI.

    :param command: Name of the sub-command
    """
    runner = CliRunner()
    result = runner.invoke(css_selector_builder, [command, "--help"])
    assert result.exit_code == 0
    assert result.output.startswith("Usage:")


def test_verbose_build() -> None:
    """
    The verbose flag is accepted ahead of a sub-command.
    """
    runner = CliRunner()
    result = runner.invoke(css_selector_builder, ["--verbose", "build", "element:a", "class:b"])
    assert result.exit_code == 0
    assert "a.b" in result.output
