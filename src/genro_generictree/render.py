# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Vertical text diagram of a GenericTree.

The diagram is drawn top to bottom, one node per line, with a two-row
margin per node built from stems::

    A
    |
    |_ B
    |  |
    |  |_ E
    |
    |_ C

A vertical stem keeps running in a margin column as long as a later
sibling at that level is still to be printed below.
"""

from __future__ import annotations

import io
import logging
from typing import TextIO, TYPE_CHECKING

if TYPE_CHECKING:
    from .node import TreeNode
    from .tree import GenericTree

logger = logging.getLogger(__name__)

EMPTY_TREE_MARKER = "[empty tree]"
TOMBSTONE_MARKER = "[null]"

# Each node takes a stem row, then the row carrying its value.
LAST_ROW = 2


def describe(node: TreeNode | None) -> str:
    """Text shown for a node slot, with tombstones as TOMBSTONE_MARKER."""
    if node is None:
        return TOMBSTONE_MARKER
    return str(node.value)


def _write_margin(stream: TextIO, cur_margin: list[bool]) -> None:
    last_column = len(cur_margin) - 1
    for row in range(1, LAST_ROW + 1):
        for column, show_stem in enumerate(cur_margin):
            stem = "|" if show_stem else " "
            if column == last_column:
                if row == LAST_ROW:
                    stream.write(stem + "_ ")
                elif show_stem:
                    stream.write(stem + "\n")
                else:
                    # no trailing blanks before a newline
                    stream.write("\n")
            else:
                stream.write(stem + "  ")


def write_tree(tree: GenericTree, stream: TextIO) -> None:
    """Write the diagram of tree to a text stream.

    With tree.debug set, the diagram is replaced by a flat
    ``Depth: <n> Data: <value>`` listing and every visited node is also
    traced on the module logger.

    Args:
        tree: The tree to draw. It is only read.
        stream: Any object with a write(str) method.
    """
    root = tree.root
    if root is None:
        stream.write(EMPTY_TREE_MARKER + "\n")
        return

    # Each entry: (node, depth, current margin, trailing margin)
    to_explore: list[tuple[TreeNode | None, int, list[bool], list[bool]]] = [
        (root, 0, [], [])
    ]

    while to_explore:
        node, depth, cur_margin, trailing_margin = to_explore.pop()

        if tree.debug:
            logger.debug("Printing node at depth %d: %s", depth, describe(node))
            stream.write(f"Depth: {depth} Data: {describe(node)}\n")
        else:
            _write_margin(stream, cur_margin)
            stream.write(describe(node) + "\n")

        if node is None or not node.children:
            continue

        # Pushed right to left so the leftmost child is popped first.
        rightmost = len(node.children) - 1
        for index in range(rightmost, -1, -1):
            to_explore.append((
                node.children[index],
                depth + 1,
                trailing_margin + [True],
                trailing_margin + [index != rightmost],
            ))


def render_tree(tree: GenericTree) -> str:
    """Return the diagram of tree as a string.

    Example:
        >>> tree = GenericTree('A')
        >>> _ = tree.root.add_child('B')
        >>> print(render_tree(tree), end='')
        A
        |
        |_ B
    """
    buffer = io.StringIO()
    write_tree(tree, buffer)
    return buffer.getvalue()
