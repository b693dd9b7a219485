# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-GenericTree - An ordered, rooted multi-way tree container.

A lightweight, zero-dependency library providing a tree of owned nodes
with two-phase subtree deletion, tombstone compaction and a vertical
text diagram renderer.
"""

__version__ = "0.1.0"

from .exceptions import (
    AlreadyInitializedError,
    CorruptionError,
    CrossTreeError,
    GenericTreeError,
    InternalInvariantError,
    ReleasedNodeError,
)
from .node import TreeNode
from .render import EMPTY_TREE_MARKER, TOMBSTONE_MARKER, render_tree, write_tree
from .tree import GenericTree

__all__ = [
    # Core classes
    "GenericTree",
    "TreeNode",
    # Rendering
    "render_tree",
    "write_tree",
    "EMPTY_TREE_MARKER",
    "TOMBSTONE_MARKER",
    # Exceptions
    "GenericTreeError",
    "AlreadyInitializedError",
    "CrossTreeError",
    "CorruptionError",
    "InternalInvariantError",
    "ReleasedNodeError",
]
