"""
:Description: Provides enumerated types used by the selector builder.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Final


class FragmentKind(StrEnum):
    """
    Kinds of fragments that make up a compound selector. Members are declared in canonical CSS order, which is the
    order fragments must appear in, left to right.
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"


class Combinator(StrEnum):
    """
    Tokens that join two selectors into one.
    """

    DESCENDANT = " "
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
    CHILD = ">"


# Set of all fragment kinds
ALL_FRAGMENT_KINDS: Final[set[FragmentKind]] = set(FragmentKind)

# Fragment kinds that may occur at most once in a compound selector
SINGLETON_FRAGMENT_KINDS: Final[frozenset[FragmentKind]] = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)

# Position of each kind in the canonical order. Enum iteration follows declaration order.
FRAGMENT_ORDER: Final[dict[FragmentKind, int]] = {kind: idx for idx, kind in enumerate(FragmentKind)}

# Set of all accepted combinator tokens
ALL_COMBINATORS: Final[set[Combinator]] = set(Combinator)
