from __future__ import annotations

"""
Integration tests for FileSystem Infrastructure.

Validates data directory resolution, path normalization, root name
derivation and directory listing.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from treeify.infra.fs import (
    get_user_data_dir,
    list_entries,
    normalize_path,
    root_display_name,
    safe_mkdir,
)

# -----------------------------------------------------------------------------
# PATH RESOLUTION TESTS
# -----------------------------------------------------------------------------

def test_get_user_data_dir_unix() -> None:
    mock_home = "/home/testuser"
    with patch("os.name", "posix"):
        with patch("os.path.expanduser", return_value=mock_home):
            path = get_user_data_dir()
            assert path.replace("\\", "/").endswith("/home/testuser/.treeify")


def test_normalize_path_fallback(tmp_path: Path) -> None:
    assert normalize_path("", str(tmp_path)) == str(tmp_path)
    assert normalize_path(None, str(tmp_path)) == str(tmp_path)


@pytest.mark.parametrize("raw, expected", [
    ("/home/user/project", "project"),
    ("/home/user/project/", "project"),
    ("project", "project"),
    ("/", ""),
    (".", ""),
    ("..", ""),
    ("proj/.", "proj"),
    ("./proj", "proj"),
    ("/home/user/..", ""),
])
def test_root_display_name(raw: str, expected: str) -> None:
    assert root_display_name(raw) == expected


@pytest.mark.skipif(os.name == "nt", reason="':' is a drive separator on Windows")
def test_root_display_name_keeps_colon_on_posix(tmp_path: Path) -> None:
    from treeify.core.analysis.tree_generator import build_tree

    target = tmp_path / "data:"
    target.mkdir()

    assert root_display_name(str(target)) == "data:"
    assert build_tree(str(target)).root.name == "data:/"
    assert build_tree(str(tmp_path / "data:" / ".")).root.name == "data:/"

# -----------------------------------------------------------------------------
# LISTING TESTS
# -----------------------------------------------------------------------------

def test_list_entries_classifies_and_sorts(sample_tree: Path) -> None:
    entries = list_entries(str(sample_tree), sort=True)

    assert [name for name, _, _ in entries] == [".foo2", "foo", "foo.txt", "foo1"]
    kinds = {name: is_dir for name, _, is_dir in entries}
    assert kinds == {".foo2": True, "foo": True, "foo.txt": False, "foo1": True}
    assert all(full == os.path.join(str(sample_tree), name) for name, full, _ in entries)


def test_list_entries_missing_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        list_entries(str(tmp_path / "absent"))


def test_safe_mkdir_reports_failure(tmp_path: Path) -> None:
    ok, err = safe_mkdir(str(tmp_path / "a" / "b"))
    assert ok is True and err is None

    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")
    ok, err = safe_mkdir(str(blocker))
    assert ok is False
    assert err
