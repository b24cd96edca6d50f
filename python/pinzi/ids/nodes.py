"""IDS node types.

An Ideographic Description Sequence describes how a CJK character is put
together from components, e.g. 相 is ``⿰木目`` (木 left of 目).

A parsed sequence is a tree of frozen dataclasses:
    - 16 operator nodes, one per IDS operator (U+2FF0..U+2FFF), whose fields
      are the child nodes in reading order
    - LeafCharacter, a literal component character
    - LeafUnknownCharacter, an unidentified component drawn with N strokes,
      written ①..⑳ in IDS text

Field declaration order is the order children appear in IDS text.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, ClassVar, Optional, Union

OPERATOR_FIRST_CODE_POINT = 0x2FF0  # ⿰ (12272)
OPERATOR_LAST_CODE_POINT = 0x2FFF  # ⿿ (12287)

# ① is U+2460 (9312), so a stroke count N is written as chr(N + 9311).
STROKE_PLACEHOLDER_OFFSET = 9311
MIN_STROKE_COUNT = 1
MAX_STROKE_COUNT = 20


class IdsOperator(Enum):
    """IDS composition operators, valued by their Unicode character."""

    LEFT_TO_RIGHT = "\u2ff0"  # ⿰
    ABOVE_TO_BELOW = "\u2ff1"  # ⿱
    LEFT_TO_MIDDLE_TO_RIGHT = "\u2ff2"  # ⿲
    ABOVE_TO_MIDDLE_AND_BELOW = "\u2ff3"  # ⿳
    FULL_SURROUND = "\u2ff4"  # ⿴
    SURROUND_FROM_ABOVE = "\u2ff5"  # ⿵
    SURROUND_FROM_BELOW = "\u2ff6"  # ⿶
    SURROUND_FROM_LEFT = "\u2ff7"  # ⿷
    SURROUND_FROM_UPPER_LEFT = "\u2ff8"  # ⿸
    SURROUND_FROM_UPPER_RIGHT = "\u2ff9"  # ⿹
    SURROUND_FROM_LOWER_LEFT = "\u2ffa"  # ⿺
    OVERLAID = "\u2ffb"  # ⿻
    SURROUND_FROM_RIGHT = "\u2ffc"  # ⿼
    SURROUND_FROM_LOWER_RIGHT = "\u2ffd"  # ⿽
    HORIZONTAL_REFLECTION = "\u2ffe"  # ⿾
    ROTATION = "\u2fff"  # ⿿

    @classmethod
    def from_char(cls, char: str) -> Optional["IdsOperator"]:
        """Get the operator for a character, or None if it isn't one."""
        try:
            return cls(char)
        except ValueError:
            return None

    @property
    def code_point(self) -> int:
        return ord(self.value)

    @property
    def node_type(self) -> type["OperatorNode"]:
        """The node class built for this operator."""
        return _NODE_TYPES[self]

    @property
    def arity(self) -> int:
        """Number of child components the operator takes."""
        return len(fields(self.node_type))


def is_operator_code_point(code_point: int) -> bool:
    """Check if a code point is in the block reserved for IDS operators."""
    return OPERATOR_FIRST_CODE_POINT <= code_point <= OPERATOR_LAST_CODE_POINT


class IdsNode:
    """Base class of every node in a parsed IDS tree."""

    def to_dict(self) -> dict[str, Any]:
        """Convert to a nested dictionary for JSON output."""
        data: dict[str, Any] = {"type": self.type_name}
        for f in fields(self):
            value = getattr(self, f.name)
            data[f.name] = value.to_dict() if isinstance(value, IdsNode) else value
        return data

    @property
    def type_name(self) -> str:
        return type(self).__name__


class OperatorNode(IdsNode):
    """Base class of the 16 operator nodes."""

    operator: ClassVar[IdsOperator]

    def children(self) -> tuple[IdsNode, ...]:
        """Child nodes in IDS text order."""
        # Field order is text order: parse_ids, ids_to_string and walk_ids rely on it.
        return tuple(getattr(self, f.name) for f in fields(self))

    @property
    def type_name(self) -> str:
        return self.operator.value


@dataclass(frozen=True)
class LeftToRight(OperatorNode):
    operator: ClassVar[IdsOperator] = IdsOperator.LEFT_TO_RIGHT

    left: IdsNode
    right: IdsNode


@dataclass(frozen=True)
class AboveToBelow(OperatorNode):
    operator: ClassVar[IdsOperator] = IdsOperator.ABOVE_TO_BELOW

    above: IdsNode
    below: IdsNode


@dataclass(frozen=True)
class LeftToMiddleToRight(OperatorNode):
    operator: ClassVar[IdsOperator] = IdsOperator.LEFT_TO_MIDDLE_TO_RIGHT

    left: IdsNode
    middle: IdsNode
    right: IdsNode


@dataclass(frozen=True)
class AboveToMiddleAndBelow(OperatorNode):
    operator: ClassVar[IdsOperator] = IdsOperator.ABOVE_TO_MIDDLE_AND_BELOW

    above: IdsNode
    middle: IdsNode
    below: IdsNode


@dataclass(frozen=True)
class FullSurround(OperatorNode):
    operator: ClassVar[IdsOperator] = IdsOperator.FULL_SURROUND

    surrounding: IdsNode
    surrounded: IdsNode


@dataclass(frozen=True)
class SurroundFromAbove(OperatorNode):
    operator: ClassVar[IdsOperator] = IdsOperator.SURROUND_FROM_ABOVE

    above: IdsNode
    surrounded: IdsNode


@dataclass(frozen=True)
class SurroundFromBelow(OperatorNode):
    operator: ClassVar[IdsOperator] = IdsOperator.SURROUND_FROM_BELOW

    below: IdsNode
    surrounded: IdsNode


@dataclass(frozen=True)
class SurroundFromLeft(OperatorNode):
    operator: ClassVar[IdsOperator] = IdsOperator.SURROUND_FROM_LEFT

    left: IdsNode
    surrounded: IdsNode


@dataclass(frozen=True)
class SurroundFromRight(OperatorNode):
    operator: ClassVar[IdsOperator] = IdsOperator.SURROUND_FROM_RIGHT

    right: IdsNode
    surrounded: IdsNode


@dataclass(frozen=True)
class SurroundFromUpperLeft(OperatorNode):
    operator: ClassVar[IdsOperator] = IdsOperator.SURROUND_FROM_UPPER_LEFT

    upper_left: IdsNode
    surrounded: IdsNode


@dataclass(frozen=True)
class SurroundFromUpperRight(OperatorNode):
    operator: ClassVar[IdsOperator] = IdsOperator.SURROUND_FROM_UPPER_RIGHT

    upper_right: IdsNode
    surrounded: IdsNode


@dataclass(frozen=True)
class SurroundFromLowerLeft(OperatorNode):
    operator: ClassVar[IdsOperator] = IdsOperator.SURROUND_FROM_LOWER_LEFT

    lower_left: IdsNode
    surrounded: IdsNode


@dataclass(frozen=True)
class SurroundFromLowerRight(OperatorNode):
    operator: ClassVar[IdsOperator] = IdsOperator.SURROUND_FROM_LOWER_RIGHT

    lower_right: IdsNode
    surrounded: IdsNode


@dataclass(frozen=True)
class Overlaid(OperatorNode):
    operator: ClassVar[IdsOperator] = IdsOperator.OVERLAID

    overlay: IdsNode
    underlay: IdsNode


@dataclass(frozen=True)
class HorizontalReflection(OperatorNode):
    operator: ClassVar[IdsOperator] = IdsOperator.HORIZONTAL_REFLECTION

    reflected: IdsNode


@dataclass(frozen=True)
class Rotation(OperatorNode):
    operator: ClassVar[IdsOperator] = IdsOperator.ROTATION

    rotated: IdsNode


@dataclass(frozen=True)
class LeafCharacter(IdsNode):
    """A literal component, e.g. 木."""

    character: str

    def __post_init__(self):
        if len(self.character) != 1:
            raise ValueError(
                f"LeafCharacter takes a single character, got {self.character!r}"
            )


@dataclass(frozen=True)
class LeafUnknownCharacter(IdsNode):
    """An unidentified component with a known stroke count."""

    stroke_count: int

    def __post_init__(self):
        if not MIN_STROKE_COUNT <= self.stroke_count <= MAX_STROKE_COUNT:
            raise ValueError(
                f"stroke_count must be {MIN_STROKE_COUNT}-{MAX_STROKE_COUNT}, "
                f"got {self.stroke_count}"
            )


IdsLeaf = Union[LeafCharacter, LeafUnknownCharacter]

_NODE_TYPES: dict[IdsOperator, type[OperatorNode]] = {
    cls.operator: cls
    for cls in (
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
    )
}

_missing = set(IdsOperator) - set(_NODE_TYPES)
if _missing:
    raise RuntimeError(f"IDS operators without a node type: {sorted(o.name for o in _missing)}")


def stroke_count_placeholder_or_none(char_or_code_point: Union[str, int]) -> Optional[int]:
    """Get the stroke count written by a circled digit (①..⑳), else None."""
    if isinstance(char_or_code_point, str):
        code_point = ord(char_or_code_point)
    else:
        code_point = char_or_code_point
    stroke_count = code_point - STROKE_PLACEHOLDER_OFFSET
    if MIN_STROKE_COUNT <= stroke_count <= MAX_STROKE_COUNT:
        return stroke_count
    return None


def stroke_count_to_character(stroke_count: int) -> str:
    """Get the circled digit placeholder for a stroke count."""
    return chr(stroke_count + STROKE_PLACEHOLDER_OFFSET)


def unicode_short_identifier(character: str) -> str:
    """Format a character's code point the way Unicode charts do, e.g. U+6728."""
    if not character:
        raise ValueError("could not get code point for an empty string")
    return f"U+{ord(character[0]):04X}"
