from __future__ import annotations

"""
Directory Tree Generator.

Constructs a hierarchical representation of a directory. Two strategies
share the same filtering and failure rules: 'build_tree' materializes a
node tree for later rendering or inspection, while 'walk_tree' renders
lines directly during the walk. Both produce identical text for the same
filesystem state.
"""

import logging
import os
from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Tuple

from treeify.core.analysis.tree_renderer import format_line, render_tree
from treeify.domain.constants import DIR_SUFFIX, HIDDEN_MARKER, INIT_DEPTH
from treeify.domain.tree_models import (
    DirectoryNode,
    FileNode,
    Node,
    Tree,
    TreeBuildError,
    TreeOptions,
    WalkResult,
)
from treeify.infra.fs import Entry, list_entries, real_path, root_display_name, safe_mkdir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(root_path: str, options: Optional[TreeOptions] = None) -> Tree:
    """
    Walk a directory recursively and return its node tree.

    Args:
        root_path: Directory to walk. It is not validated beforehand; a
            missing or non-directory path fails on the first listing.
        options: Filtering and counting options. 'options.path' is ignored
            in favour of 'root_path'.

    Returns:
        Tree: Root directory node at depth 0 plus the collected counts.

    Raises:
        TreeBuildError: If any directory listing fails. No partial tree is
            returned.
    """
    opts = options or TreeOptions(path=root_path)
    logger.debug(f"Building directory tree for: {root_path}")

    counter = _Counter()
    children = _build_children(
        str(root_path), INIT_DEPTH, opts, counter, frozenset([real_path(root_path)])
    )
    root = DirectoryNode(name=root_display_name(root_path) + DIR_SUFFIX, depth=0, children=children)

    tree = Tree(
        root=root,
        dir_count=counter.dirs if opts.count_entries else 0,
        file_count=counter.files if opts.count_entries else 0,
    )
    logger.debug(f"Tree built: {counter.dirs} directories, {counter.files} files")
    return tree


def walk_tree(root_path: str, options: Optional[TreeOptions] = None) -> WalkResult:
    """
    Render a directory directly into text without materializing nodes.

    Uses the same filtering, ordering and failure semantics as 'build_tree'.

    Raises:
        TreeBuildError: If any directory listing fails.
    """
    opts = options or TreeOptions(path=root_path)
    logger.debug(f"Walking directory tree for: {root_path}")

    counter = _Counter()
    lines: List[str] = [format_line(root_display_name(root_path) + DIR_SUFFIX, 0)]
    _walk_into(str(root_path), INIT_DEPTH, opts, counter, frozenset([real_path(root_path)]), lines)

    return WalkResult(
        text="".join(lines),
        dir_count=counter.dirs if opts.count_entries else 0,
        file_count=counter.files if opts.count_entries else 0,
    )


def run(options: TreeOptions) -> WalkResult:
    """
    Build the tree for 'options.path' and render it.

    Returns:
        WalkResult: Rendered text and, when counting is enabled, totals.

    Raises:
        TreeBuildError: If any directory listing fails.
    """
    logger.info(f"Generating directory tree for: {options.path}")
    try:
        tree = build_tree(options.path, options)
    except TreeBuildError as e:
        logger.error(f"Tree generation aborted: {e}")
        raise

    return WalkResult(
        text=render_tree(tree),
        dir_count=tree.dir_count,
        file_count=tree.file_count,
    )


def save_tree_to_disk(save_path: str, text: str) -> bool:
    """
    Persist rendered tree text to the filesystem.

    Failures are logged rather than raised.

    Returns:
        bool: True if the file was written.
    """
    out_dir = os.path.dirname(os.path.abspath(save_path))
    ok, err = safe_mkdir(out_dir)
    if not ok:
        logger.error(f"Failed to create output directory '{out_dir}': {err}")
        return False

    try:
        with open(save_path, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
    except OSError as e:
        logger.error(f"Failed to save tree to '{save_path}': {e}")
        return False

    logger.info(f"Tree saved to file: {save_path}")
    return True

# -----------------------------------------------------------------------------
# INTERNAL HELPERS (SCANNING)
# -----------------------------------------------------------------------------

@dataclass
class _Counter:
    dirs: int = 0
    files: int = 0


def _visible_entries(path: str, opts: TreeOptions) -> List[Entry]:
    """List a directory and drop the entries excluded by the options."""
    try:
        entries = list_entries(path, follow_symlinks=opts.follow_symlinks, sort=opts.sort_entries)
    except OSError as e:
        raise TreeBuildError(path, e) from e

    visible: List[Entry] = []
    for name, full_path, is_dir in entries:
        if not opts.include_hidden and name.startswith(HIDDEN_MARKER):
            logger.debug(f"Skipping hidden entry: {full_path}")
            continue
        if opts.dirs_only and not is_dir:
            continue
        visible.append((name, full_path, is_dir))
    return visible


def _enter(full_path: str, ancestors: FrozenSet[str]) -> Optional[FrozenSet[str]]:
    """
    Return the ancestor set for descending into 'full_path', or None if the
    directory already appears on the current descent path.
    """
    canonical = real_path(full_path)
    if canonical in ancestors:
        logger.warning(f"Directory cycle detected, not descending: {full_path}")
        return None
    return ancestors | {canonical}


def _build_children(
        path: str,
        depth: int,
        opts: TreeOptions,
        counter: _Counter,
        ancestors: FrozenSet[str],
) -> Tuple[Node, ...]:
    children: List[Node] = []

    for name, full_path, is_dir in _visible_entries(path, opts):
        if is_dir:
            counter.dirs += 1
            below = _enter(full_path, ancestors)
            grandchildren: Tuple[Node, ...] = ()
            if below is not None:
                grandchildren = _build_children(full_path, depth + 1, opts, counter, below)
            children.append(DirectoryNode(name=name + DIR_SUFFIX, depth=depth, children=grandchildren))
        else:
            counter.files += 1
            children.append(FileNode(name=name, depth=depth))

    return tuple(children)


def _walk_into(
        path: str,
        depth: int,
        opts: TreeOptions,
        counter: _Counter,
        ancestors: FrozenSet[str],
        lines: List[str],
) -> None:
    for name, full_path, is_dir in _visible_entries(path, opts):
        if is_dir:
            counter.dirs += 1
            lines.append(format_line(name + DIR_SUFFIX, depth))
            below = _enter(full_path, ancestors)
            if below is not None:
                _walk_into(full_path, depth + 1, opts, counter, below, lines)
        else:
            counter.files += 1
            lines.append(format_line(name, depth))
