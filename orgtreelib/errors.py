"""Exception hierarchy for OrgTreeLib.

All library errors derive from OrgTreeError so callers can catch
everything raised by the library with a single except clause.
"""


class OrgTreeError(Exception):
    """Base class for all OrgTreeLib errors."""
    pass


class InvalidNodeError(OrgTreeError, ValueError):
    """Raised when a node is constructed or attached incorrectly.

    Covers a missing/empty name and adding a child of the wrong kind
    (e.g. a Department passed to ``University.add_faculty``).
    """
    pass


class CycleError(OrgTreeError):
    """Raised when a committee would become (or is found to be) its own ancestor."""

    def __init__(self, message: str, node=None):
        super().__init__(message)
        self.node = node


class ConfigurationError(OrgTreeError):
    """Raised when a TraversalConfig fails validation."""
    pass
