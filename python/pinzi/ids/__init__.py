"""Ideographic Description Sequence (IDS) parsing.

Usage:
    from pinzi.ids import parse_ids, ids_to_string, walk_ids, flatten_ids

    node = parse_ids("⿱⿱亠口小")
    [leaf.character for leaf in walk_ids(node)]  # ["亠", "口", "小"]
    ids_to_string(flatten_ids(node))             # "⿳亠口小"
"""

from .nodes import (
    IdsOperator,
    IdsNode,
    IdsLeaf,
    OperatorNode,
    LeftToRight,
    AboveToBelow,
    LeftToMiddleToRight,
    AboveToMiddleAndBelow,
    FullSurround,
    SurroundFromAbove,
    SurroundFromBelow,
    SurroundFromLeft,
    SurroundFromRight,
    SurroundFromUpperLeft,
    SurroundFromUpperRight,
    SurroundFromLowerLeft,
    SurroundFromLowerRight,
    Overlaid,
    HorizontalReflection,
    Rotation,
    LeafCharacter,
    LeafUnknownCharacter,
    stroke_count_placeholder_or_none,
    stroke_count_to_character,
    unicode_short_identifier,
)
from .parser import Cursor, parse_ids, parse_ids_strict
from .tree import ids_to_string, walk_ids, flatten_ids

__all__ = [
    "IdsOperator",
    "IdsNode",
    "IdsLeaf",
    "OperatorNode",
    "LeftToRight",
    "AboveToBelow",
    "LeftToMiddleToRight",
    "AboveToMiddleAndBelow",
    "FullSurround",
    "SurroundFromAbove",
    "SurroundFromBelow",
    "SurroundFromLeft",
    "SurroundFromRight",
    "SurroundFromUpperLeft",
    "SurroundFromUpperRight",
    "SurroundFromLowerLeft",
    "SurroundFromLowerRight",
    "Overlaid",
    "HorizontalReflection",
    "Rotation",
    "LeafCharacter",
    "LeafUnknownCharacter",
    "stroke_count_placeholder_or_none",
    "stroke_count_to_character",
    "unicode_short_identifier",
    "Cursor",
    "parse_ids",
    "parse_ids_strict",
    "ids_to_string",
    "walk_ids",
    "flatten_ids",
]
