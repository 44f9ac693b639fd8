"""
:Description: Provides exceptions thrown by the selector builder.
"""

from __future__ import annotations

import json
from typing import Final

from css_selector_builder.builder.enums import FragmentKind
from css_selector_builder.types import JsonType


class SelectorBuilderException(Exception):
    """
    Base exception for all other selector builder exceptions. Should not be raised directly.
    """


class DuplicateSingletonFragment(SelectorBuilderException):
    """
    Indicates that an element, id, or pseudo-element fragment was added to a selector that already contains one.
    """

    MESSAGE: Final[str] = "Element, id and pseudo-element should not occur more than one time inside the selector"

    def __init__(self, kind: FragmentKind):
        """
        Constructs a DuplicateSingletonFragment Exception.

        :param kind: Kind of the fragment that was repeated.
        """
        self.kind = kind
        super().__init__(DuplicateSingletonFragment.MESSAGE)


class FragmentOrderViolation(SelectorBuilderException):
    """
    Indicates that a fragment was added after a fragment that must follow it.
    """

    MESSAGE: Final[str] = (
        "Selector parts should be arranged in the following order:"
        " element, id, class, attribute, pseudo-class, pseudo-element"
    )

    def __init__(self, kind: FragmentKind, conflict: FragmentKind):
        """
        Constructs a FragmentOrderViolation Exception.

        :param kind: Kind of the fragment being added.
        :param conflict: Kind of the existing fragment that should have come after `kind`.
        """
        self.kind = kind
        self.conflict = conflict
        super().__init__(FragmentOrderViolation.MESSAGE)


class InvalidSelectorParent(SelectorBuilderException):
    """
    Indicates that a compound selector was constructed on top of something other than a compound selector.
    """

    def __init__(self, parent: object):
        """
        Constructs an InvalidSelectorParent Exception.

        :param parent: The rejected parent.
        """
        self.parent = parent
        super().__init__(f"A compound selector can only extend another compound selector, not {type(parent).__name__}")


class InvalidCombinator(SelectorBuilderException):
    """
    Indicates that `combine()` was given a token that is not a CSS combinator.
    """

    def __init__(self, token: object):
        """
        Constructs an InvalidCombinator Exception.

        :param token: The rejected combinator token.
        """
        self.token = token
        super().__init__(f"Invalid combinator {token!r}. Expected one of: ' ', '+', '~', '>'")


class SelectorSchemaValidationException(SelectorBuilderException):
    """
    Indicates that the calling code has attempted to load a selector document that does not meet the schema criteria.
    """

    def __init__(self, document: JsonType):
        """
        Constructs a Selector Schema Validation Exception

        :param document: The offending selector document.
        """
        self.document = document
        super().__init__(f"Invalid selector document was provided:\n{json.dumps(document, indent=2)}")
