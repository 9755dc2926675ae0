from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared filesystem fixtures used across unit and integration tests.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Create the reference directory layout.

    Structure:
    /_test
      /foo
      /foo1
      /.foo2
      foo.txt
    """
    root = tmp_path / "_test"
    root.mkdir()
    (root / "foo").mkdir()
    (root / "foo1").mkdir()
    (root / ".foo2").mkdir()
    (root / "foo.txt").write_text("", encoding="utf-8")
    return root


@pytest.fixture
def nested_tree(tmp_path: Path) -> Path:
    """
    Create a deeper layout with hidden entries at several levels.

    Structure:
    /project
      /src
        /pkg
          core.py
          .cache
        main.py
      /.git
        HEAD
      README.md
      .env
    """
    root = tmp_path / "project"
    pkg = root / "src" / "pkg"
    pkg.mkdir(parents=True)
    (pkg / "core.py").write_text("x = 1", encoding="utf-8")
    (pkg / ".cache").write_text("", encoding="utf-8")
    (root / "src" / "main.py").write_text("", encoding="utf-8")
    (root / ".git").mkdir()
    (root / ".git" / "HEAD").write_text("ref", encoding="utf-8")
    (root / "README.md").write_text("# Docs", encoding="utf-8")
    (root / ".env").write_text("", encoding="utf-8")
    return root


@pytest.fixture
def mock_config_dict(tmp_path: Path) -> Dict[str, Any]:
    """Return a valid, complete configuration dictionary for testing."""
    return {
        "path": str(tmp_path),
        "include_hidden": False,
        "count_entries": False,
        "dirs_only": False,
        "sort_entries": False,
        "follow_symlinks": True,
        "output_file": "",
        "json_output": False,
        "log_level": "WARNING",
        "log_file": "",
    }
