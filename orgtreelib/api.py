"""High-level API for OrgTreeLib.

This module provides simple, functional interfaces for common operations.
These functions wrap the visitor/driver API for ease of use in simple cases.
"""

import io
from typing import Any, Dict, Iterator, Optional

from .config import PrintConfig, TraversalConfig
from .core.node import NodeKind, OrgNode
from .core.traverser import traverse, walk
from .core.visitor import PrintVisitor, SearchVisitor


def traverse_tree(
    root: OrgNode,
    config: Optional[TraversalConfig] = None,
    max_depth: Optional[int] = None,
) -> Iterator[OrgNode]:
    """Iterate over the nodes under ``root`` in depth-first pre-order.

    Args:
        root: Starting node
        config: Optional TraversalConfig
        max_depth: Shortcut for ``TraversalConfig(max_depth=...)``; ignored
            when config is given

    Yields:
        OrgNode instances

    Example:
        >>> for node in traverse_tree(mcgill, max_depth=1):
        ...     print(node.name)
    """
    if config is None and max_depth is not None:
        config = TraversalConfig(max_depth=max_depth)
    for node, _ in walk(root, config):
        yield node


def find_committee(root: OrgNode, name: str) -> OrgNode:
    """Search the tree for a committee named ``name``.

    When several committees share the name, the last one in pre-order wins.

    Returns:
        The committee, or NULL_NODE if none matched
    """
    searcher = SearchVisitor(name)
    root.accept(searcher)
    return searcher.get_result()


def count_nodes(root: OrgNode, config: Optional[TraversalConfig] = None) -> int:
    """Count nodes reachable from ``root``.

    Example:
        >>> count = count_nodes(mcgill)
        >>> print(f"Found {count} nodes")
    """
    count = 0
    for _ in walk(root, config):
        count += 1
    return count


def render_tree(root: OrgNode,
                print_config: Optional[PrintConfig] = None,
                config: Optional[TraversalConfig] = None) -> str:
    """Return the PrintVisitor rendering of the tree as a string."""
    buffer = io.StringIO()
    traverse(root, PrintVisitor(stream=buffer, config=print_config), config)
    return buffer.getvalue()


def get_tree_stats(root: OrgNode) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary with ``total_nodes``, ``max_depth``, ``leaf_nodes`` and
        one ``<kind>_count`` entry per concrete node kind
    """
    stats: Dict[str, Any] = {
        'total_nodes': 0,
        'max_depth': 0,
        'leaf_nodes': 0,
    }
    for kind in NodeKind:
        if kind is not NodeKind.NULL:
            stats[f'{kind.value}_count'] = 0

    for node, depth in walk(root):
        stats['total_nodes'] += 1
        stats['max_depth'] = max(stats['max_depth'], depth)
        stats[f'{node.kind.value}_count'] += 1
        if node.is_leaf():
            stats['leaf_nodes'] += 1

    return stats
