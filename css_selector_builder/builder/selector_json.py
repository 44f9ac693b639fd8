"""
:Description: Encodes selectors to JSON documents and restores them. Restored selectors are rebuilt through the
                builder facade, so every construction-time rule is checked again.
"""

from __future__ import annotations

import json
from typing import Final, Optional, cast

from jsonschema import validate as schema_validate

from css_selector_builder.builder.css_selector_builder import css_selector_builder
from css_selector_builder.builder.enums import ALL_COMBINATORS, ALL_FRAGMENT_KINDS, FragmentKind
from css_selector_builder.builder.exceptions import SelectorSchemaValidationException
from css_selector_builder.builder.selector import Selector
from css_selector_builder.types import JsonType, SchemaType, SelectorJsonType

# Schema for a selector document. Compound selectors list their fragments from left to right.
SELECTOR_JSON_SCHEMA: Final[SchemaType] = {
    "$defs": {
        "fragment": {
            "type": "object",
            "properties": {
                "kind": {"enum": sorted(str(kind) for kind in ALL_FRAGMENT_KINDS)},
                "value": {"type": "string"},
            },
            "required": ["kind", "value"],
            "additionalProperties": False,
        },
        "compound": {
            "type": "object",
            "properties": {
                "fragments": {
                    "type": "array",
                    "items": {"$ref": "#/$defs/fragment"},
                    "minItems": 1,
                },
            },
            "required": ["fragments"],
            "additionalProperties": False,
        },
        "combination": {
            "type": "object",
            "properties": {
                "left": {"$ref": "#/$defs/selector"},
                "combinator": {"enum": sorted(str(op) for op in ALL_COMBINATORS)},
                "right": {"$ref": "#/$defs/selector"},
            },
            "required": ["left", "combinator", "right"],
            "additionalProperties": False,
        },
        "selector": {
            "oneOf": [
                {"$ref": "#/$defs/compound"},
                {"$ref": "#/$defs/combination"},
            ],
        },
    },
    "$ref": "#/$defs/selector",
}


def _build_selector(document: SelectorJsonType) -> Selector:
    """
    Recursively constructs a selector from a document that has already passed schema validation.

    :param document: Selector document
    :returns: The equivalent selector
    """
    if "fragments" not in document:
        return css_selector_builder.combine(
            _build_selector(cast(SelectorJsonType, document["left"])),
            cast(str, document["combinator"]),
            _build_selector(cast(SelectorJsonType, document["right"])),
        )

    fragments: Final = cast(list[dict[str, str]], document["fragments"])
    first: Final[dict[str, str]] = fragments[0]
    selector = css_selector_builder.fragment(FragmentKind(first["kind"]), first["value"])
    for fragment in fragments[1:]:
        selector = selector.extend(FragmentKind(fragment["kind"]), fragment["value"])
    return selector


def from_json(document: JsonType) -> Selector:
    """
    Restores a selector from a JSON document.

    :param document: Selector document, as produced by `Selector.to_json()`
    :raises SelectorSchemaValidationException: If the document does not conform to the selector schema
    :raises DuplicateSingletonFragment: If a compound selector repeats an element, id, or pseudo-element
    :raises FragmentOrderViolation: If a compound selector lists its fragments out of order
    :returns: The restored selector
    """
    try:
        schema_validate(document, SELECTOR_JSON_SCHEMA)
    except Exception as e:
        raise SelectorSchemaValidationException(document) from e
    return _build_selector(cast(SelectorJsonType, document))


def from_json_str(text: str) -> Selector:
    """
    Restores a selector from JSON text.

    :param text: JSON text holding a selector document
    :raises json.JSONDecodeError: If the text is not JSON
    :returns: The restored selector
    """
    return from_json(cast(JsonType, json.loads(text)))


def to_json_str(selector: Selector, indent: Optional[int] = None) -> str:
    """
    Encodes a selector as JSON text.

    :param selector: Selector to encode
    :param indent: (Optional) Indentation level, forwarded to `json.dumps()`
    :returns: JSON text
    """
    return json.dumps(selector.to_json(), indent=indent)
