from __future__ import annotations

"""
Tree Renderer.

Converts Tree models into their text representation: one line per node,
each made of the line marker, one indent unit per depth level and the
node's display name. Rendering is pure and cannot fail.
"""

from typing import Any, Dict, List

from treeify.domain.constants import INDENT_UNIT, LINE_MARKER, LINE_TERMINATOR
from treeify.domain.tree_models import DirectoryNode, Node, Tree

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(tree: Tree) -> str:
    """
    Serialize a Tree into its indented text listing.

    Nodes are emitted in pre-order; siblings keep the order in which the
    builder attached them. The output ends with a line terminator.

    Args:
        tree: Fully built tree.

    Returns:
        str: The rendered listing.
    """
    lines: List[str] = []
    _render_node(tree.root, lines)
    return "".join(lines)


def format_line(name: str, depth: int) -> str:
    """Format a single listing line for an entry at the given depth."""
    return f"{LINE_MARKER}{INDENT_UNIT * depth}{name}{LINE_TERMINATOR}"


def tree_to_dict(tree: Tree) -> Dict[str, Any]:
    """
    Convert a Tree into nested JSON-serializable mappings.

    Only directory mappings carry a 'children' key.
    """
    return _node_to_dict(tree.root)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _render_node(node: Node, lines: List[str]) -> None:
    lines.append(format_line(node.name, node.depth))
    if isinstance(node, DirectoryNode):
        for child in node.children:
            _render_node(child, lines)


def _node_to_dict(node: Node) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "name": node.name,
        "kind": node.kind.value,
        "depth": node.depth,
    }
    if isinstance(node, DirectoryNode):
        data["children"] = [_node_to_dict(child) for child in node.children]
    return data
