"""Building and rendering a directory-style tree from flat path lines."""

from __future__ import annotations

import logging
from typing import Iterable

from pathtree.models import TreeNode, TreeOptions
from pathtree.path_filter import filter_paths
from pathtree.path_parser import parse_paths

logger = logging.getLogger(__name__)

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
SPACE = "    "


def insert(root: TreeNode, segments: list[str]) -> None:
    """Add the chain of *segments* under *root*, reusing existing nodes."""
    node = root
    for segment in segments:
        child = node.children.get(segment)
        if child is None:
            child = TreeNode(segment)
            node.children[segment] = child
        node = child


def build_tree(paths: Iterable[str], separator: str = "/") -> TreeNode:
    """Fold every path line into a single tree under a nameless root."""
    root = TreeNode("")
    for segments in parse_paths(paths, separator):
        insert(root, segments)
    return root


def render_tree(
    root: TreeNode,
    compact: bool = False,
    separator: str = "/",
) -> list[str]:
    """Render the tree below *root* as display lines.

    Example output:
        ├── Cargo.toml
        └── src
            ├── lib
            │   └── tree_generator.rs
            └── main.rs

    With *compact*, chains of directories that each hold a single
    sub-directory are printed on one line (``dotfiles/nvim``).
    """
    lines: list[str] = []
    # Frames are [node, prefix, sorted child names, index of next child]
    stack: list[list] = [[root, "", sorted(root.children), 0]]
    while stack:
        frame = stack[-1]
        node, prefix, names, index = frame
        if index == len(names):
            stack.pop()
            continue
        frame[3] = index + 1

        name = names[index]
        child = node.children[name]
        is_last = index == len(names) - 1
        connector = LAST_BRANCH if is_last else BRANCH

        label = name
        if compact:
            label, child = _fold_chain(child, separator)
        lines.append(f"{prefix}{connector}{label}")

        if child.children:
            extension = SPACE if is_last else PIPE
            stack.append([child, prefix + extension, sorted(child.children), 0])
    return lines


def _fold_chain(node: TreeNode, separator: str) -> tuple[str, TreeNode]:
    """Follow single-child directory chains starting at *node*.

    Returns the joined label and the last node of the chain. A lone child
    without children of its own stays on its own line.
    """
    label = node.name
    while len(node.children) == 1:
        (only,) = node.children.values()
        if only.is_leaf:
            break
        label = f"{label}{separator}{only.name}"
        node = only
    return label, node


def generate_tree(
    paths: Iterable[str],
    options: TreeOptions | None = None,
) -> list[str]:
    """Filter, parse, build and render *paths* in one go.

    Raises InvalidPatternError (a ValueError) if a filter pattern does not
    compile, and ValueError for an empty separator.
    """
    options = options or TreeOptions()
    if not options.separator:
        raise ValueError("separator must not be empty")

    if options.include or options.exclude:
        paths = filter_paths(paths, options)

    root = build_tree(paths, options.separator)
    lines = render_tree(root, compact=options.compact, separator=options.separator)
    logger.debug(
        "Rendered %d lines for %d top-level entries", len(lines), len(root.children)
    )
    return lines


def format_tree(
    paths: Iterable[str],
    options: TreeOptions | None = None,
) -> str:
    """Return the rendered tree as text, one newline-terminated line per node."""
    return "".join(f"{line}\n" for line in generate_tree(paths, options))
