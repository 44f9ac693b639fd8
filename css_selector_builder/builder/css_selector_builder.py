"""
:Description: Provides the `CssSelectorBuilder` facade, the entry point for constructing CSS selectors.

Example:

    builder = CssSelectorBuilder()
    builder.id("main").class_("container").class_("editable").stringify()
        => "#main.container.editable"
    builder.combine(builder.element("div").id("main"), "+", builder.element("p")).stringify()
        => "div#main + p"
"""

from __future__ import annotations

from typing import Final

from css_selector_builder.builder.enums import Combinator, FragmentKind
from css_selector_builder.builder.exceptions import InvalidCombinator
from css_selector_builder.builder.selector import CombinationSelector, CompoundSelector, Selector


class CssSelectorBuilder:
    """
    Stateless facade that starts new selectors. Every method returns a new, immutable `Selector`.
    """

    @staticmethod
    def fragment(kind: FragmentKind, value: str) -> CompoundSelector:
        """
        Starts a new compound selector with a single fragment.

        :param kind: Kind of the first fragment
        :param value: Raw text of the fragment
        :returns: A new compound selector
        """
        return CompoundSelector(None, kind, value)

    def element(self, value: str) -> CompoundSelector:
        """
        Starts a selector with a type selector, like `div`.

        :param value: Element name
        :returns: A new compound selector
        """
        return self.fragment(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> CompoundSelector:
        """
        Starts a selector with an id selector, like `#main`.

        :param value: Element id
        :returns: A new compound selector
        """
        return self.fragment(FragmentKind.ID, value)

    def class_(self, value: str) -> CompoundSelector:
        """
        Starts a selector with a class selector, like `.container`.

        :param value: Class name
        :returns: A new compound selector
        """
        return self.fragment(FragmentKind.CLASS, value)

    def attr(self, value: str) -> CompoundSelector:
        """
        Starts a selector with an attribute selector, like `[href]`.

        :param value: Attribute expression
        :returns: A new compound selector
        """
        return self.fragment(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> CompoundSelector:
        """
        Starts a selector with a pseudo-class, like `:focus`.

        :param value: Pseudo-class name and arguments
        :returns: A new compound selector
        """
        return self.fragment(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> CompoundSelector:
        """
        Starts a selector with a pseudo-element, like `::before`.

        :param value: Pseudo-element name
        :returns: A new compound selector
        """
        return self.fragment(FragmentKind.PSEUDO_ELEMENT, value)

    @staticmethod
    def combine(selector1: Selector, combinator: Combinator | str, selector2: Selector) -> CombinationSelector:
        """
        Joins two selectors with a combinator.

        :param selector1: Left-hand selector
        :param combinator: One of `' '`, `'+'`, `'~'` or `'>'`
        :param selector2: Right-hand selector
        :raises InvalidCombinator: If the combinator token is not recognized
        :returns: A new combination selector
        """
        try:
            token: Final[Combinator] = Combinator(combinator)
        except ValueError as e:
            raise InvalidCombinator(combinator) from e
        return CombinationSelector(selector1, token, selector2)


# Shared facade instance. The builder holds no state, so it is safe to use from anywhere.
css_selector_builder: Final[CssSelectorBuilder] = CssSelectorBuilder()
