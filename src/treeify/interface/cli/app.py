from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: merging of configuration sources (defaults,
optional JSON file and CLI overrides), logging bootstrap, pre-flight checks
on the target directory, tree generation and output rendering.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional

from treeify.core.analysis.tree_generator import build_tree, run, save_tree_to_disk
from treeify.core.analysis.tree_renderer import tree_to_dict
from treeify.core.validator import options_from_config, validate_config
from treeify.domain.config import load_config, save_config
from treeify.domain.tree_models import TreeBuildError, TreeOptions, WalkResult
from treeify.infra.logging import LoggingConfig, configure_logging, get_logger
from treeify.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_BAD_INPUT = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Configuration hierarchy: defaults < config file < CLI flags
    base_conf = load_config(args.config_file)
    overrides = cli_args.args_to_overrides(args)
    clean_conf, warnings = validate_config(_merge_config(base_conf, overrides))

    # 3. Logging bootstrap
    configure_logging(LoggingConfig(
        level=clean_conf["log_level"],
        console=True,
        log_file=clean_conf["log_file"] or None,
    ))
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK
    if args.save_config:
        return EXIT_OK if save_config(clean_conf, args.config_file) else EXIT_FAILURE

    # 4. Pre-flight input verification
    options = options_from_config(clean_conf)
    if not os.path.isdir(options.path):
        msg = f"'{options.path}' is not a directory."
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_BAD_INPUT

    # 5. Generation and output
    try:
        if clean_conf["json_output"]:
            output = _render_json(options)
        else:
            output = _render_text(run(options), options)
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except TreeBuildError as e:
        logger.debug("Tree generation failed", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE

    sys.stdout.write(output)

    if clean_conf["output_file"] and not save_tree_to_disk(clean_conf["output_file"], output):
        print(f"ERROR: Could not write '{clean_conf['output_file']}'.", file=sys.stderr)
        return EXIT_FAILURE

    return EXIT_OK

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow-merge non-None override values into the base configuration."""
    out = dict(base)
    for k, v in overrides.items():
        if k in out and v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _render_text(result: WalkResult, options: TreeOptions) -> str:
    if not options.count_entries:
        return result.text
    dirs = _plural(result.dir_count, "directory", "directories")
    files = _plural(result.file_count, "file", "files")
    return f"{result.text}\n{dirs}, {files}\n"


def _render_json(options: TreeOptions) -> str:
    try:
        tree = build_tree(options.path, options)
    except TreeBuildError as e:
        logger.error(f"Tree generation aborted: {e}")
        raise
    payload: Dict[str, Any] = {
        "tree": tree_to_dict(tree),
        "dir_count": tree.dir_count,
        "file_count": tree.file_count,
    }
    return json.dumps(payload, ensure_ascii=False, indent=2) + "\n"


def _plural(n: int, singular: str, plural: str) -> str:
    return f"{n} {singular if n == 1 else plural}"


if __name__ == "__main__":
    sys.exit(main())
