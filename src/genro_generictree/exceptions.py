# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""GenericTree exceptions."""

from __future__ import annotations


class GenericTreeError(Exception):
    """Base exception for GenericTree errors."""

    pass


class AlreadyInitializedError(GenericTreeError):
    """Raised when create_root is called on a tree that already has a root."""

    pass


class CrossTreeError(GenericTreeError):
    """Raised when a node handle does not trace back to this tree's root."""

    pass


class CorruptionError(GenericTreeError):
    """Raised when the tree's own parent/child linkage is found broken.

    This signals a bug in the container, not caller misuse. The structure
    should not be trusted after it is raised.
    """

    pass


class InternalInvariantError(CorruptionError):
    """Raised when clear() finds the root still set after releasing it."""

    pass


class ReleasedNodeError(GenericTreeError):
    """Raised when a released node is asked to take a new child."""

    pass
