from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the recursive type definitions produced by the tree builder and
consumed by the renderer. Directory and file entries are distinct types so
that a file node never carries a children collection.
"""

import errno as _errno
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

class NodeKind(str, Enum):
    """Tag identifying the variant of a tree node."""
    DIRECTORY = "directory"
    FILE = "file"


@dataclass(frozen=True)
class FileNode:
    """
    Represents a leaf entry (non-directory) in the directory tree.

    Attributes:
        name: Bare entry name.
        depth: Nesting level relative to the root.
    """
    name: str
    depth: int

    @property
    def kind(self) -> NodeKind:
        return NodeKind.FILE


@dataclass(frozen=True)
class DirectoryNode:
    """
    Represents a directory entry and its exclusively owned children.

    Attributes:
        name: Entry name suffixed with the directory separator.
        depth: Nesting level relative to the root (root = 0).
        children: Child nodes in the order the builder attached them.
    """
    name: str
    depth: int
    children: Tuple["Node", ...] = ()

    @property
    def kind(self) -> NodeKind:
        return NodeKind.DIRECTORY


Node = Union[DirectoryNode, FileNode]


@dataclass(frozen=True)
class Tree:
    """
    A fully built directory tree.

    Attributes:
        root: Directory node at depth 0.
        dir_count: Included directories below the root (0 if not counted).
        file_count: Included files (0 if not counted).
    """
    root: DirectoryNode
    dir_count: int = 0
    file_count: int = 0

# -----------------------------------------------------------------------------
# BUILD CONFIGURATION AND RESULTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TreeOptions:
    """
    Immutable options consumed by the tree builder.

    Attributes:
        path: Root directory to walk.
        include_hidden: Keep entries whose name starts with the hidden marker.
        count_entries: Track directory and file totals.
        dirs_only: Omit non-directory entries.
        sort_entries: Sort siblings by name before recursing.
        follow_symlinks: Treat symlinks to directories as directories.
    """
    path: str = "."
    include_hidden: bool = False
    count_entries: bool = False
    dirs_only: bool = False
    sort_entries: bool = False
    follow_symlinks: bool = True


@dataclass(frozen=True)
class WalkResult:
    """Rendered tree text plus the totals collected during the walk."""
    text: str
    dir_count: int = 0
    file_count: int = 0

# -----------------------------------------------------------------------------
# ERRORS
# -----------------------------------------------------------------------------

class TreeBuildError(OSError):
    """
    Raised when listing a directory fails during a walk.

    The originating OSError is chained as ``__cause__`` and its errno and
    strerror are mirrored on this instance.
    """

    def __init__(self, path: str, cause: Optional[OSError] = None) -> None:
        code = getattr(cause, "errno", None) or _errno.EIO
        reason = getattr(cause, "strerror", None) or str(cause or "I/O error")
        super().__init__(code, reason, path)
        self.path = path
        self.cause = cause

    def __str__(self) -> str:
        return f"Cannot list directory '{self.path}': {self.strerror}"
