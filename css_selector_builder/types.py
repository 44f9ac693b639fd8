"""
:Description: Provides public types, type aliases, constants, and small classes used by all modules.
"""

from __future__ import annotations

from enum import StrEnum, auto
from typing import Final, Union

# Base types that can store value
Primitives = Union[str, int, float, bool, None]
# Type that represents a JSON-like type
JsonType = Union[dict[str, "JsonType"], list["JsonType"], Primitives]

# Type that represents a JSON document describing a single selector
SelectorJsonType = dict[str, JsonType]

# Types that build up to types used in `jsonschema`s
SchemaPrimitives = Union[str, int, bool, None]
SchemaDetails = Union[dict[str, "SchemaDetails"], list["SchemaDetails"], SchemaPrimitives]
# Type for a schema object used by the `jsonschema` library
SchemaType = dict[str, SchemaDetails]


class MessageCategory(StrEnum):
    """
    Categories to classify messages into.
    """

    ERROR = auto()
    WARNING = auto()


class MessageTable:
    """
    Stores and tags messages that may come up during library operations. It is up to the client program to handle the
    logging of these messages. In other words, this class aims to keep logging out of the library code by providing
    an object that can track debugging information.
    """

    def __init__(self) -> None:
        """
        Constructs an empty message table
        """
        self._tbl: dict[MessageCategory, list[str]] = {}

    def add_message(self, category: MessageCategory, message: str) -> None:
        """
        Adds a message to the table

        :param category: Category to file the message under
        :param message: Message to store
        """
        if category not in self._tbl:
            self._tbl[category] = []
        self._tbl[category].append(message)

    def get_messages(self, category: MessageCategory) -> list[str]:
        """
        Returns all the messages stored in a given category

        :param category: Category to target
        :returns: A list containing all the messages stored in a category.
        """
        if category not in self._tbl:
            return []
        return self._tbl[category]

    def get_message_count(self, category: MessageCategory) -> int:
        """
        Returns how many messages are stored in a given category

        :param category: Category to target
        :returns: The number of messages stored in a category.
        """
        if category not in self._tbl:
            return 0
        return len(self._tbl[category])

    def get_totals_message(self) -> str:
        """
        Convenience function that returns a displayable count of the number of warnings and errors contained in the
        messaging object.

        :returns: A message indicating the number of errors and warnings that have been accumulated. If there are none,
            an empty string is returned.
        """
        if not self._tbl:
            return ""

        def _pluralize(n: int, s: str) -> str:
            if n == 1:
                return s
            return f"{s}s"

        num_errors: Final[int] = self.get_message_count(MessageCategory.ERROR)
        errors: Final[str] = f"{num_errors} " + _pluralize(num_errors, "error")
        num_warnings: Final[int] = self.get_message_count(MessageCategory.WARNING)
        warnings: Final[str] = f"{num_warnings} " + _pluralize(num_warnings, "warning")

        return f"{errors} and {warnings} were found."
