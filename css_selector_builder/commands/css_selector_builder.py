"""
:Description: Base CLI for all `css-selector-builder` commands
"""

from __future__ import annotations

import logging

import click

from css_selector_builder.commands.build import build
from css_selector_builder.commands.combine import combine
from css_selector_builder.commands.render import render


@click.group()
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    show_default=True,
    help="Enables verbose logging (for commands that use the logger).",
)
@click.version_option(package_name="css-selector-builder")
def css_selector_builder(verbose: bool) -> None:
    """
    Command line interface for composing CSS selectors.
    """
    # Initialize the logger, available to all commands.
    logging.basicConfig(
        format="%(asctime)s[%(levelname)s][%(name)s]: %(message)s",
        level=logging.DEBUG if verbose else logging.INFO,
    )


css_selector_builder.add_command(build)
css_selector_builder.add_command(combine)
css_selector_builder.add_command(render)


if __name__ == "__main__":
    css_selector_builder(False)
