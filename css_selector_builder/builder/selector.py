"""
:Description: Provides the immutable selector value types produced by the selector builder.

A selector is either a `CompoundSelector`, a singly-linked chain of fragments describing one element
(`div#main.container`), or a `CombinationSelector`, two selectors joined by a combinator (`div + p`). Every value is
frozen once constructed. Extending a selector returns a new value that links back to the original, so one base
selector can safely be reused for many extensions.
"""

from __future__ import annotations

from abc import ABCMeta, abstractmethod
from dataclasses import dataclass
from typing import Final, Optional

from css_selector_builder.builder.enums import FRAGMENT_ORDER, SINGLETON_FRAGMENT_KINDS, Combinator, FragmentKind
from css_selector_builder.builder.exceptions import (
    DuplicateSingletonFragment,
    FragmentOrderViolation,
    InvalidSelectorParent,
)
from css_selector_builder.types import JsonType, SelectorJsonType

# Text placed before and after the value of each kind of fragment
_FRAGMENT_SYNTAX: Final[dict[FragmentKind, tuple[str, str]]] = {
    FragmentKind.ELEMENT: ("", ""),
    FragmentKind.ID: ("#", ""),
    FragmentKind.CLASS: (".", ""),
    FragmentKind.ATTRIBUTE: ("[", "]"),
    FragmentKind.PSEUDO_CLASS: (":", ""),
    FragmentKind.PSEUDO_ELEMENT: ("::", ""),
}


def _render_fragment(kind: FragmentKind, value: str) -> str:
    """
    Renders a single fragment.

    :param kind: Kind of the fragment
    :param value: Raw text of the fragment
    :returns: The fragment text, such as `#main` or `[href]`
    """
    prefix, suffix = _FRAGMENT_SYNTAX[kind]
    return f"{prefix}{value}{suffix}"


class Selector(metaclass=ABCMeta):
    """
    Abstract base for all selector values.
    """

    @abstractmethod
    def stringify(self) -> str:
        """
        Renders the selector as CSS text. Rendering is a pure, read-only traversal.

        :returns: The canonical CSS string for this selector
        """

    @abstractmethod
    def to_json(self) -> SelectorJsonType:
        """
        Encodes the selector structure as a JSON-compatible document.

        :returns: A document that `selector_json.from_json()` can restore this selector from
        """

    def __str__(self) -> str:
        """
        Renders the selector as CSS text.

        :returns: Same as `stringify()`
        """
        return self.stringify()


@dataclass(frozen=True, eq=False, repr=False)
class CompoundSelector(Selector):
    """
    One fragment of a compound selector, linked to the fragments that precede it.

    Construction validates the new fragment against every ancestor in the chain, so an invalid compound selector can
    never exist. Equality, hashing, and rendering walk the chain with loops, so chains of any length are supported.
    """

    parent: Optional[CompoundSelector]
    kind: FragmentKind
    value: str

    def __post_init__(self) -> None:
        """
        Enforces the uniqueness and ordering rules against the ancestor chain.

        :raises DuplicateSingletonFragment: If a second element, id, or pseudo-element is added
        :raises InvalidSelectorParent: If the parent is not a compound selector
        :raises FragmentOrderViolation: If an ancestor holds a fragment that must come after this one
        """
        if self.parent is not None and not isinstance(self.parent, CompoundSelector):
            raise InvalidSelectorParent(self.parent)

        if self.kind in SINGLETON_FRAGMENT_KINDS:
            node = self.parent
            while node is not None:
                if node.kind == self.kind:
                    raise DuplicateSingletonFragment(self.kind)
                node = node.parent

        rank: Final[int] = FRAGMENT_ORDER[self.kind]
        node = self.parent
        while node is not None:
            if FRAGMENT_ORDER[node.kind] > rank:
                raise FragmentOrderViolation(self.kind, node.kind)
            node = node.parent

    def fragments(self) -> list[tuple[FragmentKind, str]]:
        """
        Lists the fragments of this chain, from the root to this node.

        :returns: `(kind, value)` pairs in rendering order
        """
        chain: list[tuple[FragmentKind, str]] = []
        node: Optional[CompoundSelector] = self
        while node is not None:
            chain.append((node.kind, node.value))
            node = node.parent
        chain.reverse()
        return chain

    def render_fragment(self) -> str:
        """
        Renders only the fragment carried by this node.

        :returns: The fragment text, such as `#main` or `[href]`
        """
        return _render_fragment(self.kind, self.value)

    def __eq__(self, other: object) -> bool:
        """
        Determine if two compound selectors hold the same fragments, in the same order.

        :param other: Other object to check against
        :returns: True if both selectors are made of identical fragments. False otherwise.
        """
        if not isinstance(other, CompoundSelector):
            return False
        return self.fragments() == other.fragments()

    def __hash__(self) -> int:
        return hash(tuple(self.fragments()))

    def __repr__(self) -> str:
        return f"CompoundSelector({self.stringify()!r})"

    def stringify(self) -> str:
        return "".join(_render_fragment(kind, value) for kind, value in self.fragments())

    def to_json(self) -> SelectorJsonType:
        fragments: list[JsonType] = [{"kind": str(kind), "value": value} for kind, value in self.fragments()]
        return {"fragments": fragments}

    def extend(self, kind: FragmentKind, value: str) -> CompoundSelector:
        """
        Returns a new selector that extends this one with a fragment. This selector is left untouched.

        :param kind: Kind of fragment to append
        :param value: Raw text of the fragment
        :returns: The extended selector
        """
        return CompoundSelector(self, kind, value)

    def element(self, value: str) -> CompoundSelector:
        """
        Appends a type selector, like `div`.

        :param value: Element name
        :returns: The extended selector
        """
        return self.extend(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> CompoundSelector:
        """
        Appends an id selector, like `#main`.

        :param value: Element id
        :returns: The extended selector
        """
        return self.extend(FragmentKind.ID, value)

    def class_(self, value: str) -> CompoundSelector:
        """
        Appends a class selector, like `.container`.

        :param value: Class name
        :returns: The extended selector
        """
        return self.extend(FragmentKind.CLASS, value)

    def attr(self, value: str) -> CompoundSelector:
        """
        Appends an attribute selector. The value is wrapped in brackets as-is.

        :param value: Attribute expression, like `href$=".png"`
        :returns: The extended selector
        """
        return self.extend(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> CompoundSelector:
        """
        Appends a pseudo-class, like `:focus`.

        :param value: Pseudo-class name and arguments
        :returns: The extended selector
        """
        return self.extend(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> CompoundSelector:
        """
        Appends a pseudo-element, like `::before`.

        :param value: Pseudo-element name
        :returns: The extended selector
        """
        return self.extend(FragmentKind.PSEUDO_ELEMENT, value)


@dataclass(frozen=True)
class CombinationSelector(Selector):
    """
    Two selectors joined by a combinator. Either side may itself be a combination.
    """

    left: Selector
    combinator: Combinator
    right: Selector

    def stringify(self) -> str:
        # Nested combinations are rendered without grouping, so a nested descendant combinator keeps its padding.
        return f"{self.left.stringify()} {self.combinator} {self.right.stringify()}"

    def to_json(self) -> SelectorJsonType:
        return {
            "left": self.left.to_json(),
            "combinator": str(self.combinator),
            "right": self.right.to_json(),
        }
