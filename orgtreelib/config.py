"""Configuration system for OrgTreeLib.

This module defines how users control a traversal (depth limit, cycle
detection, error handling) and how PrintVisitor lays out its output.
"""

from dataclasses import dataclass
from typing import List, Optional

from .error_policies import ContinueOnErrorsPolicy, ErrorPolicy, FailFastPolicy


@dataclass
class TraversalConfig:
    """Complete configuration for a traversal.

    The default configuration walks the whole tree, guards against cycles,
    and fails fast on any error.
    """

    max_depth: Optional[int] = None            # Deepest level dispatched (root = 0)
    detect_cycles: bool = True                 # Track the current path by identity
    error_policy: Optional[ErrorPolicy] = None  # None means FailFastPolicy

    def get_error_policy(self) -> ErrorPolicy:
        """Return the configured policy, creating the default lazily."""
        if self.error_policy is None:
            self.error_policy = FailFastPolicy()
        return self.error_policy

    def should_explore(self, depth: int) -> bool:
        """Check if children of a node at this depth should be visited.

        Args:
            depth: Current depth

        Returns:
            True if we should go deeper
        """
        if self.max_depth is None:
            return True
        return depth < self.max_depth

    # Convenience constructors for common configurations

    @classmethod
    def shallow(cls, max_depth: int = 1) -> 'TraversalConfig':
        """Create config that stops below ``max_depth``.

        Args:
            max_depth: How deep to go (default 1 = root and its direct children)
        """
        return cls(max_depth=max_depth)

    @classmethod
    def lenient(cls, verbose: bool = False) -> 'TraversalConfig':
        """Create config that records errors and keeps going.

        Args:
            verbose: Print a warning to stderr for every error
        """
        return cls(error_policy=ContinueOnErrorsPolicy(verbose=verbose))

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.max_depth is not None:
            if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
                errors.append("max_depth must be an integer")
            elif self.max_depth < 0:
                errors.append("max_depth cannot be negative")

        if self.error_policy is not None and not isinstance(self.error_policy, ErrorPolicy):
            errors.append("error_policy must be an ErrorPolicy instance")

        return errors


@dataclass
class PrintConfig:
    """Layout of PrintVisitor output."""

    indent: str = "   "             # Repeated once per level of depth
    committee_prefix: str = "C: "   # Marks committee lines

    def validate(self) -> List[str]:
        errors = []
        if not isinstance(self.indent, str):
            errors.append("indent must be a string")
        if not isinstance(self.committee_prefix, str):
            errors.append("committee_prefix must be a string")
        return errors
