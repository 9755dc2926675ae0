from __future__ import annotations

"""
Unit tests for the Configuration Validator.

Verifies type coercion, path normalization, strict mode and the
conversion of a clean configuration into TreeOptions.
"""

import os

import pytest

from treeify.core.validator import options_from_config, validate_config
from treeify.domain.tree_models import TreeOptions


def test_valid_config_passes_without_warnings(mock_config_dict) -> None:
    clean, warnings = validate_config(mock_config_dict)

    assert warnings == []
    assert clean["path"] == os.path.abspath(mock_config_dict["path"])
    assert clean["include_hidden"] is False


def test_non_dict_config_falls_back_to_defaults() -> None:
    clean, warnings = validate_config(["not", "a", "dict"])

    assert clean["include_hidden"] is False
    assert any("Invalid config type" in w for w in warnings)


def test_non_dict_config_strict_raises() -> None:
    with pytest.raises(TypeError):
        validate_config("nope", strict=True)


def test_bool_coercion_from_strings_and_numbers(mock_config_dict) -> None:
    mock_config_dict["include_hidden"] = "yes"
    mock_config_dict["count_entries"] = 1
    mock_config_dict["sort_entries"] = "off"

    clean, warnings = validate_config(mock_config_dict)

    assert clean["include_hidden"] is True
    assert clean["count_entries"] is True
    assert clean["sort_entries"] is False
    assert len(warnings) == 3


def test_invalid_bool_uses_fallback(mock_config_dict) -> None:
    mock_config_dict["dirs_only"] = [1, 2]
    clean, warnings = validate_config(mock_config_dict)

    assert clean["dirs_only"] is False
    assert any("dirs_only" in w for w in warnings)


def test_invalid_bool_strict_raises(mock_config_dict) -> None:
    mock_config_dict["dirs_only"] = "maybe"
    with pytest.raises(TypeError):
        validate_config(mock_config_dict, strict=True)


def test_empty_path_defaults_to_cwd(mock_config_dict) -> None:
    mock_config_dict["path"] = "   "
    clean, _ = validate_config(mock_config_dict)
    assert clean["path"] == os.path.abspath(os.getcwd())


def test_path_expands_environment(mock_config_dict, monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("TREEIFY_TEST_DIR", str(tmp_path))
    mock_config_dict["path"] = os.path.join("$TREEIFY_TEST_DIR", "sub")

    clean, _ = validate_config(mock_config_dict)
    assert clean["path"] == os.path.join(str(tmp_path), "sub")


def test_log_level_is_normalized(mock_config_dict) -> None:
    mock_config_dict["log_level"] = "debug"
    clean, _ = validate_config(mock_config_dict)
    assert clean["log_level"] == "DEBUG"

    mock_config_dict["log_level"] = "chatty"
    clean, warnings = validate_config(mock_config_dict)
    assert clean["log_level"] == "INFO"
    assert warnings


def test_unknown_keys_are_dropped(mock_config_dict) -> None:
    mock_config_dict["colour"] = "blue"
    clean, _ = validate_config(mock_config_dict)
    assert "colour" not in clean


def test_options_from_config(mock_config_dict) -> None:
    mock_config_dict["include_hidden"] = True
    mock_config_dict["follow_symlinks"] = False
    clean, _ = validate_config(mock_config_dict)

    opts = options_from_config(clean)

    assert isinstance(opts, TreeOptions)
    assert opts.path == clean["path"]
    assert opts.include_hidden is True
    assert opts.follow_symlinks is False
    assert opts.count_entries is False
