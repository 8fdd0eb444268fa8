"""
Error handling policies for OrgTreeLib.

This module provides a flexible error handling system through the Policy pattern,
allowing users to define how errors should be handled during tree traversal.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List
import sys


class ErrorPolicy(ABC):
    """
    Base class for error handling policies.

    The traversal driver hands every failure it meets (a cycle, or an
    exception raised by a visitor hook) to the configured policy. The
    policy either re-raises, stopping traversal, or returns, in which case
    the subtree below the failing node is skipped.
    """

    @abstractmethod
    def handle(self, error: Exception, node: Any, depth: int) -> None:
        """
        Handle an error that occurred while visiting a node.

        Args:
            error: The exception that was raised
            node: The node being processed when the error occurred
            depth: Depth of that node relative to the traversal root
        """
        pass


class FailFastPolicy(ErrorPolicy):
    """
    Policy that immediately re-raises any error, stopping traversal.

    This is the default behavior - any error will halt the entire operation.
    """

    def handle(self, error: Exception, node: Any, depth: int) -> None:
        """Re-raise the error immediately."""
        raise error


class ContinueOnErrorsPolicy(ErrorPolicy):
    """
    Policy that records errors and continues traversal.

    Errors are collected for later inspection and the offending subtree is
    skipped, so the rest of the tree is still visited.
    """

    def __init__(self, verbose: bool = True):
        """
        Initialize the policy.

        Args:
            verbose: If True, print warnings to stderr when errors occur
        """
        self.errors: List[Dict[str, Any]] = []
        self.skipped_nodes: List[Any] = []
        self.verbose = verbose

    def handle(self, error: Exception, node: Any, depth: int) -> None:
        """Record the error and let traversal continue."""
        name = node.name if hasattr(node, 'name') else str(node)

        self.errors.append({
            'node': name,
            'depth': depth,
            'error': error,
            'error_type': type(error).__name__,
            'error_message': str(error),
        })
        self.skipped_nodes.append(node)

        if self.verbose:
            print(f"\nWARNING: Skipping subtree of '{name}' at depth {depth}: {error}",
                  file=sys.stderr)

    def get_statistics(self) -> dict:
        """
        Get statistics about errors encountered.

        Returns:
            Dictionary with error counts and details
        """
        by_type: Dict[str, int] = {}
        for record in self.errors:
            by_type[record['error_type']] = by_type.get(record['error_type'], 0) + 1
        return {
            'total_errors': len(self.errors),
            'cycle_errors': by_type.get('CycleError', 0),
            'skipped_nodes': len(self.skipped_nodes),
            'errors_by_type': by_type,
        }

    def clear(self) -> None:
        """Forget recorded errors so the policy can be reused."""
        self.errors.clear()
        self.skipped_nodes.clear()


class CollectErrorsPolicy(ContinueOnErrorsPolicy):
    """
    Policy that collects all errors without printing, for batch processing.
    """

    def __init__(self):
        super().__init__(verbose=False)
