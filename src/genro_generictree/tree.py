# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""GenericTree - An ordered, rooted multi-way tree container.

This module provides the GenericTree class, the owner of a hierarchy of
TreeNode instances. The tree owns its root, every node owns its children,
and parent links are weak, so the structure never holds a reference cycle.

Key Features:
    - **Ordered children**: Insertion order is kept by every operation
    - **Subtree deletion**: Two-phase, every node is enumerated before any
      node is released, and each node is released exactly once
    - **Cross-tree detection**: Handles from another tree are rejected
    - **Tombstones**: Deleted children leave a None slot behind, swept in
      one pass by compress()
    - **Diagram output**: render() draws the tree as vertical text

Example:
    Basic usage::

        tree = GenericTree('A')
        b = tree.root.add_child('B')
        tree.root.add_child('C')
        b.add_child('E')

        tree.delete_subtree(b)
        tree.compress()
        print(tree.render())

    Counting releases::

        released = []
        tree.subscribe('counter', release=lambda node, value: released.append(value))
        tree.clear()
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Any, Callable, TextIO

from .exceptions import (
    AlreadyInitializedError,
    CorruptionError,
    CrossTreeError,
    InternalInvariantError,
)
from .node import TreeNode
from .render import describe, render_tree, write_tree

logger = logging.getLogger(__name__)

ReleaseCallback = Callable[..., Any]

_MISSING = object()


class GenericTree:
    """A container owning exactly one root TreeNode, or none when empty.

    GenericTree provides:
    - create_root(value): Install the root of an empty tree
    - delete_subtree(node): Remove a node and everything below it
    - clear(): Remove the whole tree
    - compress(): Sweep the tombstones left by deletions
    - render() / write(stream): Vertical text diagram

    Children are appended through the nodes themselves, see
    TreeNode.add_child().

    Attributes:
        debug: When True, deletion and rendering trace each node they
            visit on the module loggers at DEBUG level, and render()
            produces a flat depth/value listing instead of the diagram.

    Example:
        >>> tree = GenericTree()
        >>> tree.is_empty
        True
        >>> root = tree.create_root('A')
        >>> root.add_child('B').value
        'B'
    """

    __slots__ = ('_root', 'debug', '_release_subscribers')

    def __init__(self, root_value: Any = _MISSING, *, debug: bool = False) -> None:
        """Initialize a GenericTree.

        Args:
            root_value: Optional value for the root. When given, the root
                is created immediately; None is a valid root value.
            debug: Enable diagnostic tracing.

        Example:
            >>> GenericTree()  # empty
            >>> GenericTree('A')  # with a root holding 'A'
            >>> GenericTree('A', debug=True)
        """
        self._root: TreeNode | None = None
        self.debug = debug
        self._release_subscribers: dict[str, ReleaseCallback] = {}

        if root_value is not _MISSING:
            self.create_root(root_value)

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        if self._root is None:
            return "GenericTree(empty)"
        return f"GenericTree(root={self._root.value!r})"

    def __str__(self) -> str:
        return self.render()

    def __enter__(self) -> GenericTree:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.clear()

    # ==================== Root ====================

    @property
    def root(self) -> TreeNode | None:
        """The root node, or None if the tree is empty."""
        return self._root

    def get_root(self) -> TreeNode | None:
        """Return the root node, or None if the tree is empty."""
        return self._root

    @property
    def is_empty(self) -> bool:
        """True if the tree has no root."""
        return self._root is None

    def create_root(self, value: Any) -> TreeNode:
        """Create the root node of an empty tree.

        Args:
            value: Payload for the root, copied in.

        Returns:
            The new root node.

        Raises:
            AlreadyInitializedError: If the tree already has a root.
        """
        if self._root is not None:
            message = "Tried to create_root when root already exists"
            logger.error(message)
            raise AlreadyInitializedError(message)

        self._root = TreeNode(value)
        return self._root

    # ==================== Subscriptions ====================

    def subscribe(
        self,
        subscriber_id: str,
        release: ReleaseCallback,
    ) -> None:
        """Register a callback notified for every released node.

        The callback is invoked as ``release(node=node, value=value)``
        once per node, after the whole subtree has been released and the
        tree updated. An exception raised by a callback propagates to the
        caller of the deletion; the deletion itself is already complete.

        Args:
            subscriber_id: Key used to unsubscribe later. Subscribing
                again with the same id replaces the callback.
            release: Callback for node releases.

        Raises:
            TypeError: If release is not callable.
        """
        if not callable(release):
            raise TypeError(
                f"release must be callable, not {type(release).__name__}"
            )
        self._release_subscribers[subscriber_id] = release

    def unsubscribe(self, subscriber_id: str) -> None:
        """Remove a subscriber. Unknown ids are ignored."""
        self._release_subscribers.pop(subscriber_id, None)

    def _on_node_released(self, node: TreeNode) -> None:
        for callback in list(self._release_subscribers.values()):
            callback(node=node, value=node.value)

    # ==================== Deletion ====================

    def _check_ownership(self, node: TreeNode) -> None:
        """Raise CrossTreeError unless node's topmost ancestor is our root."""
        ancestor = node
        while ancestor.parent is not None:
            ancestor = ancestor.parent
        if ancestor is not self._root:
            raise CrossTreeError(
                f"Tried to delete node {node.value!r} from a different tree"
            )

    def _detach(self, node: TreeNode) -> None:
        """Replace node's slot in its parent's children with a tombstone."""
        parent = node.parent
        if parent is None:
            return
        for index, child in enumerate(parent.children):
            if child is node:
                parent.children[index] = None
                return
        message = "Target node to delete was not listed as a child of its parent"
        logger.error(message)
        raise CorruptionError(message)

    def delete_subtree(self, node: TreeNode | None) -> None:
        """Remove node and its entire subtree from this tree.

        Deletion runs in two phases. Every node below the target is first
        collected; only then are the collected nodes released, in reverse
        order of discovery. The target's slot in its parent is left as a
        tombstone (None) until the next compress().

        Deleting the root empties the tree.

        Args:
            node: The subtree root to delete. None is a no-op.

        Raises:
            CrossTreeError: If node does not belong to this tree.
            CorruptionError: If node is missing from its parent's children.
        """
        if node is None:
            return

        self._check_ownership(node)
        targeting_root = node is self._root
        self._detach(node)

        to_explore: list[TreeNode | None] = [node]
        to_release: list[TreeNode] = []
        while to_explore:
            current = to_explore.pop()
            if self.debug:
                logger.debug("Exploring node: %s", describe(current))
            if current is None:
                continue
            to_release.append(current)
            to_explore.extend(current.children)

        released: list[TreeNode] = []
        while to_release:
            current = to_release.pop()
            if self.debug:
                logger.debug("Deleting node: %s", describe(current))
            current._release()
            released.append(current)

        if targeting_root:
            self._root = None

        # Subscribers only run once the tree is consistent again.
        for current in released:
            self._on_node_released(current)

    def clear(self) -> None:
        """Delete the whole tree, leaving it empty.

        Raises:
            InternalInvariantError: If the root is still set afterwards.
        """
        self.delete_subtree(self._root)
        if self._root is not None:
            message = "clear() detected that delete_subtree() had not reset the root"
            logger.error(message)
            raise InternalInvariantError(message)

    # ==================== Compaction ====================

    def _compact_children(self, node: TreeNode) -> list[TreeNode | None]:
        """Return node's children without tombstones, in order."""
        return [child for child in node.children if child is not None]

    def compress(self) -> None:
        """Remove tombstones from every children list, breadth first.

        Live nodes keep their identity and left-to-right order. Call it
        after a batch of deletions rather than after each one.

        Raises:
            CorruptionError: If a tombstone ever reaches the work queue.
        """
        if self._root is None:
            return

        swept = 0
        to_explore: deque[TreeNode | None] = deque([self._root])
        while to_explore:
            node = to_explore.popleft()
            if node is None:
                message = "Compression exploration queued a tombstone"
                logger.error(message)
                raise CorruptionError(message)

            survivors = self._compact_children(node)
            swept += len(node.children) - len(survivors)
            to_explore.extend(survivors)
            node.children = survivors

        if self.debug:
            logger.debug("Compression swept %d tombstone(s)", swept)

    # ==================== Output ====================

    def render(self) -> str:
        """Return the vertical text diagram of the tree."""
        return render_tree(self)

    def write(self, stream: TextIO) -> None:
        """Write the vertical text diagram of the tree to stream."""
        write_tree(self, stream)
