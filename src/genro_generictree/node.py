# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""GenericTree node class."""

from __future__ import annotations

import copy
import weakref
from typing import Any

from .exceptions import CorruptionError, ReleasedNodeError


class TreeNode:
    """A node in a GenericTree hierarchy.

    Each node has:
    - value: A copy of the payload given at construction time
    - children: Ordered list of owned child slots. A slot holding None is
      a tombstone left by a deletion, swept by GenericTree.compress()
    - parent: Weak back-reference to the owning node (None for the root)

    Ownership runs downward only: a node keeps its children alive through
    the children list, while the parent link is a weakref.ref and never
    keeps the parent alive.

    Example:
        >>> root = TreeNode('A')
        >>> b = root.add_child('B')
        >>> b.parent is root
        True
        >>> [child.value for child in root.children]
        ['B']
    """

    __slots__ = ('value', 'children', '_parent_ref', '_released', '__weakref__')

    def __init__(self, value: Any = None) -> None:
        """Initialize a TreeNode.

        Args:
            value: The payload. It is copied in with copy.copy so later
                changes to the caller's object do not leak into the tree.
        """
        self.value = copy.copy(value)
        self.children: list[TreeNode | None] = []
        self._parent_ref: weakref.ref[TreeNode] | None = None
        self._released = False

    def __repr__(self) -> str:
        if self._released:
            return f"TreeNode({self.value!r}, released)"
        return f"TreeNode({self.value!r}, children={len(self.live_children())})"

    @property
    def parent(self) -> TreeNode | None:
        """The parent node, or None for a root or a released node."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def is_root(self) -> bool:
        """True if this node has no parent."""
        return self.parent is None

    @property
    def is_released(self) -> bool:
        """True once a deletion has released this node."""
        return self._released

    def live_children(self) -> list[TreeNode]:
        """Return the children in order, skipping tombstones."""
        return [child for child in self.children if child is not None]

    def add_child(self, value: Any) -> TreeNode:
        """Append a new rightmost child holding a copy of value.

        Args:
            value: Payload for the new child.

        Returns:
            The new child node.

        Raises:
            ReleasedNodeError: If this node was already released.
        """
        if self._released:
            raise ReleasedNodeError(
                f"Cannot add a child to released node {self.value!r}"
            )
        child = TreeNode(value)
        child._parent_ref = weakref.ref(self)
        self.children.append(child)
        return child

    def _release(self) -> None:
        """Drop every link held by this node and mark it released."""
        if self._released:
            raise CorruptionError(f"Node {self.value!r} released twice")
        self.children = []
        self._parent_ref = None
        self._released = True
