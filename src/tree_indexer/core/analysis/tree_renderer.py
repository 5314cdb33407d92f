from __future__ import annotations

"""
Tree Renderer.

Converts an annotated TreeNode hierarchy into the markdown report handed
to the agent: a tree diagram of the whole walk followed by fenced dumps of
every root-level file.
"""

import os
from typing import List

from tree_indexer.domain.constants import DEFAULT_LANGUAGE, LANGUAGE_LABELS
from tree_indexer.domain.tree_models import TreeNode
from tree_indexer.infra.fs import format_size

NO_ROOT_FILES = "_No root-level files found._"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def format_output(root: TreeNode, root_path: str) -> str:
    """
    Render the full directory index report.

    Args:
        root: Root node returned by build_tree, with root files classified.
        root_path: Resolved root path shown in the title.

    Returns:
        str: Markdown report.
    """
    lines: List[str] = [
        f"# Directory Index: {root_path}",
        "",
        "## File Structure",
        "",
        "```",
    ]
    lines.extend(render_tree(root))
    lines.extend([
        "```",
        "",
        "## Root Level Files",
        "",
    ])

    root_files = root.iter_files()
    if not root_files:
        lines.append(NO_ROOT_FILES)
        return "\n".join(lines)

    for node in root_files:
        if node.content is not None:
            body = node.content
        elif node.error:
            body = f"[{node.error}]"
        else:
            body = "[No content]"
        lines.append(f"### {node.name}")
        lines.append("```" + language_for(node.name))
        lines.append(body)
        lines.append("```")
        lines.append("")

    return "\n".join(lines)


def render_tree(root: TreeNode) -> List[str]:
    """
    Render the tree diagram, starting with the root label.

    Args:
        root: Root node of the walk.

    Returns:
        List[str]: Diagram lines.
    """
    label = os.path.basename(root.path.rstrip(os.sep)) or root.path
    lines: List[str] = [f"{label}/"]
    if root.error:
        lines[0] += f" [{root.error}]"
    render_tree_structure(root.children or [], lines, prefix="")
    return lines


def render_tree_structure(nodes: List[TreeNode], lines: List[str], prefix: str = "") -> None:
    """
    Recursively append one line per node using box-drawing connectors.

    Args:
        nodes: Sibling nodes in display order.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix for the current recursion level.
    """
    ordered = sorted(nodes, key=lambda n: 0 if n.is_dir else 1)
    total = len(ordered)

    for i, node in enumerate(ordered):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "

        if node.is_dir:
            text = f"{node.name}/"
        else:
            text = node.name
            if node.size is not None:
                text += f" ({format_size(node.size)})"
        if node.error:
            text += f" [{node.error}]"
        lines.append(f"{prefix}{connector}{text}")

        if node.is_dir and node.children:
            new_prefix = prefix + ("    " if is_last else "│   ")
            render_tree_structure(node.children, lines, prefix=new_prefix)


def language_for(file_name: str) -> str:
    """Map a file name to the syntax label of its fenced block."""
    _, ext = os.path.splitext(file_name)
    return LANGUAGE_LABELS.get(ext.lower(), DEFAULT_LANGUAGE)
