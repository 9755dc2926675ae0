from __future__ import annotations

"""
Unit tests for Domain Models.

Verifies:
1. The directory/file node variants and their kind tags.
2. Immutability of frozen dataclasses.
3. TreeBuildError metadata and cause chaining.
"""

import dataclasses
import errno

import pytest

from treeify.domain.tree_models import (
    DirectoryNode,
    FileNode,
    NodeKind,
    Tree,
    TreeBuildError,
    TreeOptions,
    WalkResult,
)


def test_new_tree_root_is_empty_directory() -> None:
    tree = Tree(root=DirectoryNode(name="foo/", depth=0))

    assert tree.root.name == "foo/"
    assert tree.root.kind is NodeKind.DIRECTORY
    assert tree.root.children == ()
    assert tree.dir_count == 0
    assert tree.file_count == 0


def test_file_node_has_no_children_collection() -> None:
    node = FileNode(name="foo.txt", depth=1)

    assert node.name == "foo.txt"
    assert node.depth == 1
    assert node.kind is NodeKind.FILE
    assert not hasattr(node, "children")


def test_nodes_are_immutable() -> None:
    node = DirectoryNode(name="a/", depth=1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        node.depth = 2  # type: ignore[misc]


def test_tree_options_defaults() -> None:
    opts = TreeOptions()
    assert opts.include_hidden is False
    assert opts.count_entries is False
    assert opts.dirs_only is False
    assert opts.sort_entries is False
    assert opts.follow_symlinks is True


def test_walk_result_defaults() -> None:
    result = WalkResult(text="|a/\n|---b\n")
    assert result.dir_count == 0
    assert result.file_count == 0
    assert set(f.name for f in dataclasses.fields(result)) == {"text", "dir_count", "file_count"}


def test_tree_build_error_mirrors_cause() -> None:
    cause = PermissionError(errno.EACCES, "Permission denied")
    err = TreeBuildError("/secret", cause)

    assert isinstance(err, OSError)
    assert err.errno == errno.EACCES
    assert err.path == "/secret"
    assert err.cause is cause
    assert "Permission denied" in str(err)
    assert "/secret" in str(err)


def test_tree_build_error_without_cause_defaults_to_eio() -> None:
    err = TreeBuildError("/x")
    assert err.errno == errno.EIO
