"""Recursive-descent parser for IDS strings.

Usage:
    from pinzi.ids import parse_ids, Cursor

    node = parse_ids("⿰木目")

    # Parse one node out of a longer string
    cursor = Cursor()
    node = parse_ids("⿰a⿱bcXYZ", cursor)
    cursor.index  # 5, the rest is left for the caller
"""

from dataclasses import dataclass, fields
from typing import Optional

from ..errors import IdsParseError
from .nodes import (
    IdsNode,
    IdsOperator,
    LeafCharacter,
    LeafUnknownCharacter,
    is_operator_code_point,
    stroke_count_placeholder_or_none,
)


@dataclass
class Cursor:
    """Position of the next unread character, shared across recursive calls."""

    index: int = 0


def parse_ids(ids: str, cursor: Optional[Cursor] = None) -> IdsNode:
    """Parse one IDS node starting at the cursor.

    Consumes exactly one node's worth of characters and advances the cursor
    past it. Trailing characters are left unread.

    Args:
        ids: IDS text.
        cursor: Where to start; a fresh cursor at 0 is used if None.

    Returns:
        The parsed node.

    Raises:
        IdsParseError: If the text ends before the node is complete, or an
            operator character has no known operator.
    """
    if cursor is None:
        cursor = Cursor()

    if cursor.index >= len(ids):
        raise IdsParseError("unexpected end of IDS", ids, cursor.index)

    char = ids[cursor.index]
    cursor.index += 1
    code_point = ord(char)

    if is_operator_code_point(code_point):
        operator = IdsOperator.from_char(char)
        if operator is None:
            raise IdsParseError(
                f"unexpected combining character {char!r}", ids, cursor.index - 1
            )
        node_type = operator.node_type
        children = [parse_ids(ids, cursor) for _ in fields(node_type)]
        return node_type(*children)

    stroke_count = stroke_count_placeholder_or_none(code_point)
    if stroke_count is not None:
        return LeafUnknownCharacter(stroke_count)

    return LeafCharacter(char)


def parse_ids_strict(ids: str) -> IdsNode:
    """Parse a whole IDS string, rejecting trailing characters."""
    cursor = Cursor()
    node = parse_ids(ids, cursor)
    if cursor.index != len(ids):
        raise IdsParseError(
            f"trailing characters {ids[cursor.index:]!r}", ids, cursor.index
        )
    return node
