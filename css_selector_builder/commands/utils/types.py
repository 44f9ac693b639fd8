"""
:Description: Contains types and constants used by CLI commands.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """
    Error codes to return upon script completion.

    All commands define their error codes here, so that they can interop with unique codes for errors without overlap.
    """

    ## All Scripts ##
    SUCCESS = 0
    CLICK_ERROR = 1  # Controlled by the `click` library
    CLICK_USAGE = 2  # Controlled by the `click` library
    JSON_ERROR = 4
    IO_ERROR = 5

    ## Selector construction ##
    # Errors are roughly ordered by increasing severity
    SCHEMA_ERROR = 100
    BUILD_ERROR = 101
    ILLEGAL_OPERATION = 102
