from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
argparse namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

from treeify.domain.constants import APP_NAME, APP_VERSION
from treeify.infra.logging import get_default_log_path

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the treeify CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Print the contents of a directory as an indented tree.",
    )

    p.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Directory to list (default: current directory).",
    )

    # --- Walk behaviour ---
    p.add_argument(
        "-a", "--all",
        dest="include_hidden",
        action="store_true",
        help="Include hidden entries (names starting with '.').",
    )
    p.add_argument(
        "-c", "--count",
        dest="count_entries",
        action="store_true",
        help="Print the number of directories and files after the tree.",
    )
    p.add_argument(
        "-d", "--dirs-only",
        dest="dirs_only",
        action="store_true",
        help="List directories only.",
    )
    p.add_argument(
        "-s", "--sort",
        dest="sort_entries",
        action="store_true",
        help="Sort entries by name.",
    )
    p.add_argument(
        "--no-follow-symlinks",
        action="store_true",
        help="Treat symbolic links to directories as plain entries.",
    )

    # --- Output ---
    p.add_argument(
        "-o", "--output",
        dest="output_file",
        default=None,
        help="Also save the tree to this file.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Emit the tree as JSON.",
    )

    # --- Configuration and diagnostics ---
    p.add_argument(
        "--config",
        dest="config_file",
        default=None,
        help="Load defaults from a JSON configuration file.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Persist the effective configuration and exit.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        nargs="?",
        const=get_default_log_path(),
        default=None,
        help="Write diagnostics to a rotating log file (default location if no value).",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {APP_VERSION}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Flags only override when set, so values from a config file survive.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["path"] = args.path
    overrides["output_file"] = args.output_file
    overrides["log_file"] = args.log_file

    for flag in ("include_hidden", "count_entries", "dirs_only", "sort_entries", "json_output"):
        if getattr(args, flag):
            overrides[flag] = True

    if args.no_follow_symlinks:
        overrides["follow_symlinks"] = False
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides
