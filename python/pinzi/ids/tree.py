"""Operations on parsed IDS trees: serialize, walk leaves, flatten."""

from typing import Iterator

from .nodes import (
    AboveToBelow,
    AboveToMiddleAndBelow,
    IdsLeaf,
    IdsNode,
    LeafCharacter,
    LeafUnknownCharacter,
    LeftToMiddleToRight,
    LeftToRight,
    OperatorNode,
    Overlaid,
    stroke_count_to_character,
)


def ids_to_string(node: IdsNode) -> str:
    """Serialize a tree back to IDS text.

    Inverse of ``parse_ids``: ``ids_to_string(parse_ids(s)) == s``.
    """
    if isinstance(node, OperatorNode):
        return node.operator.value + "".join(
            ids_to_string(child) for child in node.children()
        )
    if isinstance(node, LeafCharacter):
        return node.character
    if isinstance(node, LeafUnknownCharacter):
        return stroke_count_to_character(node.stroke_count)
    raise TypeError(f"unexpected ids node: {node!r}")


def walk_ids(node: IdsNode) -> Iterator[IdsLeaf]:
    """Yield the leaves of a tree in reading order.

    Children are visited in IDS text order, except for ⿻ where the underlay
    comes before the overlay (paint order).
    """
    if isinstance(node, Overlaid):
        yield from walk_ids(node.underlay)
        yield from walk_ids(node.overlay)
    elif isinstance(node, OperatorNode):
        for child in node.children():
            yield from walk_ids(child)
    elif isinstance(node, (LeafCharacter, LeafUnknownCharacter)):
        yield node
    else:
        raise TypeError(f"unexpected ids node: {node!r}")


def flatten_ids(node: IdsNode) -> IdsNode:
    """Collapse ⿱⿱ into ⿳ and ⿰⿰ into ⿲.

    Only the root is inspected. When it matches, the three components of the
    new ternary node are flattened in turn; any other node is returned as is.

    Examples:
        ⿱⿱abc -> ⿳abc
        ⿰a⿰bc -> ⿲abc
    """
    if isinstance(node, AboveToBelow):
        if isinstance(node.above, AboveToBelow):
            return AboveToMiddleAndBelow(
                above=flatten_ids(node.above.above),
                middle=flatten_ids(node.above.below),
                below=flatten_ids(node.below),
            )
        if isinstance(node.below, AboveToBelow):
            return AboveToMiddleAndBelow(
                above=flatten_ids(node.above),
                middle=flatten_ids(node.below.above),
                below=flatten_ids(node.below.below),
            )
    elif isinstance(node, LeftToRight):
        if isinstance(node.left, LeftToRight):
            return LeftToMiddleToRight(
                left=flatten_ids(node.left.left),
                middle=flatten_ids(node.left.right),
                right=flatten_ids(node.right),
            )
        if isinstance(node.right, LeftToRight):
            return LeftToMiddleToRight(
                left=flatten_ids(node.left),
                middle=flatten_ids(node.right.left),
                right=flatten_ids(node.right.right),
            )
    return node
