"""Traversal driver for OrgTreeLib.

All descent into children lives here. Nodes only know their children and visitors only
react to the node they are handed, so a visitor can never silently cut off
a subtree by forgetting to recurse. Pruning is explicit: a hook returns
``False``.
"""

from typing import Any, Callable, Iterator, List, Optional, Set, Tuple

from ..config import TraversalConfig
from ..error_policies import ErrorPolicy
from ..errors import ConfigurationError, CycleError
from .node import OrgNode

VisitFn = Callable[[OrgNode, int], Any]


def _resolve_config(config: Optional[TraversalConfig]) -> TraversalConfig:
    if config is None:
        return TraversalConfig()
    config_errors = config.validate()
    if config_errors:
        raise ConfigurationError(
            f"Invalid configuration: {'; '.join(config_errors)}"
        )
    return config


def _walk(root: OrgNode,
          config: TraversalConfig,
          policy: ErrorPolicy,
          visit: Optional[VisitFn]) -> Iterator[Tuple[OrgNode, int]]:
    """Depth-first, pre-order walk; yields each node after it was visited.

    Uses an explicit stack of (node, depth, children iterator) entries, one
    per level of the current path, so tree depth is not bounded by the
    interpreter recursion limit.
    """
    on_path: Set[int] = set()

    def enter(node: OrgNode, depth: int) -> Tuple[bool, bool]:
        """Visit one node; returns (dispatched, explore_children)."""
        if node.is_null():
            return False, False

        if config.detect_cycles and id(node) in on_path:
            policy.handle(
                CycleError(f"Cycle detected: {node.name!r} is its own ancestor", node=node),
                node, depth
            )
            return False, False

        outcome = None
        if visit is not None:
            try:
                outcome = visit(node, depth)
            except Exception as e:
                policy.handle(e, node, depth)
                return False, False

        return True, outcome is not False and config.should_explore(depth)

    dispatched, explore = enter(root, 0)
    if not dispatched:
        return
    yield (root, 0)
    if not explore:
        return

    on_path.add(id(root))
    stack: List[Tuple[OrgNode, int, Iterator[OrgNode]]] = [(root, 0, root.children())]

    while stack:
        node, depth, children = stack[-1]
        child = next(children, None)
        if child is None:
            stack.pop()
            on_path.discard(id(node))
            continue

        dispatched, explore = enter(child, depth + 1)
        if not dispatched:
            continue
        yield (child, depth + 1)

        if explore:
            on_path.add(id(child))
            stack.append((child, depth + 1, child.children()))


def traverse(root: OrgNode, visitor, config: Optional[TraversalConfig] = None) -> int:
    """Walk the tree under ``root``, dispatching to ``visitor`` at every node.

    Order is depth-first pre-order by insertion: a University's faculties in
    order; within a Faculty all departments (each with its committees,
    recursively) before the Faculty's own committees; committees recurse
    into sub-committees only.

    Args:
        root: Node to start from (depth 0)
        visitor: Object implementing the Visitor hooks
        config: Optional TraversalConfig (depth limit, cycle guard, error policy)

    Returns:
        Number of nodes whose hook was dispatched

    Raises:
        ConfigurationError: If config fails validation
        CycleError: On a cycle, under the default fail-fast policy
    """
    config = _resolve_config(config)
    policy = config.get_error_policy()

    def visit(node: OrgNode, depth: int) -> Any:
        return node.dispatch(visitor, depth)

    count = 0
    for _ in _walk(root, config, policy, visit):
        count += 1
    return count


def walk(root: OrgNode, config: Optional[TraversalConfig] = None) -> Iterator[Tuple[OrgNode, int]]:
    """Iterate over ``(node, depth)`` pairs in traversal order.

    Same order, depth limit and cycle handling as ``traverse``, without a
    visitor.
    """
    config = _resolve_config(config)
    yield from _walk(root, config, config.get_error_policy(), None)
