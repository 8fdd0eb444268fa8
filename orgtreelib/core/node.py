"""Organisational node types for OrgTreeLib.

Nodes are plain containers arranged in a strict containment tree:

    University
    └── Faculty
        ├── Department
        │   └── Committee
        │       └── Committee (recursively)
        └── Committee
            └── Committee (recursively)

Each node carries a ``kind`` tag. Visitor dispatch is a lookup on that tag,
and recursion into children is owned by the traversal driver (see
``traverser.py``), not by the nodes or the visitors.
"""

from abc import ABC
from enum import Enum
from typing import Any, Dict, Iterator, List

from ..errors import CycleError, InvalidNodeError


class NodeKind(Enum):
    """Tag identifying the concrete variant of an OrgNode."""
    UNIVERSITY = "university"
    FACULTY = "faculty"
    DEPARTMENT = "department"
    COMMITTEE = "committee"
    NULL = "null"


# Visitor hook fired for each node kind. NULL has no hook: visiting it is a no-op.
_VISIT_HOOKS = {
    NodeKind.UNIVERSITY: "visit_university",
    NodeKind.FACULTY: "visit_faculty",
    NodeKind.DEPARTMENT: "visit_department",
    NodeKind.COMMITTEE: "visit_committee",
}


class OrgNode(ABC):
    """Abstract base class for every node in the organisational tree.

    A node has an immutable, non-empty name and a kind tag. It knows its
    direct children (in traversal order) but nothing about its parent.
    """

    kind: NodeKind

    def __init__(self, name: str):
        """Create a node.

        Args:
            name: Display name of the node

        Raises:
            InvalidNodeError: If name is None, not a string, or empty
        """
        if name is None:
            raise InvalidNodeError(f"{self.__class__.__name__} requires a name")
        if not isinstance(name, str):
            raise InvalidNodeError(
                f"{self.__class__.__name__} name must be a string, got {type(name).__name__}"
            )
        if not name:
            raise InvalidNodeError(f"{self.__class__.__name__} name cannot be empty")
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def get_name(self) -> str:
        """Return the immutable node name."""
        return self._name

    def is_null(self) -> bool:
        """True only for the "no result" sentinel."""
        return False

    def children(self) -> Iterator["OrgNode"]:
        """Iterate over direct children in canonical traversal order."""
        return iter(())

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        for _ in self.children():
            return False
        return True

    def metadata(self) -> Dict[str, Any]:
        """Return lightweight information about this node."""
        return {
            'name': self._name,
            'kind': self.kind.value,
            'child_count': sum(1 for _ in self.children()),
        }

    def dispatch(self, visitor, depth: int = 0) -> Any:
        """Invoke the visitor hook matching this node's kind.

        This fires exactly one hook and never recurses.

        Args:
            visitor: Visitor instance
            depth: Depth of this node relative to the traversal root

        Returns:
            Whatever the hook returned (``False`` prunes the subtree)
        """
        hook = _VISIT_HOOKS.get(self.kind)
        if hook is None:
            return None
        return getattr(visitor, hook)(self, depth)

    def accept(self, visitor, config=None) -> int:
        """Walk the subtree rooted here, dispatching to ``visitor`` at each node.

        Args:
            visitor: Visitor instance
            config: Optional TraversalConfig

        Returns:
            Number of nodes dispatched
        """
        from .traverser import traverse
        return traverse(self, visitor, config)

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self._name!r})"


class NullOrgNode(OrgNode):
    """Sentinel meaning "no result"; satisfies the OrgNode interface."""

    kind = NodeKind.NULL

    def __init__(self):
        super().__init__("Null")

    def is_null(self) -> bool:
        return True

    def accept(self, visitor, config=None) -> int:
        return 0


NULL_NODE = NullOrgNode()


def _require(child: Any, expected: type, method: str) -> None:
    if not isinstance(child, expected):
        raise InvalidNodeError(
            f"{method} expects a {expected.__name__}, got {type(child).__name__}"
        )


class University(OrgNode):
    """Root of the organisational tree; owns Faculties."""

    kind = NodeKind.UNIVERSITY

    def __init__(self, name: str):
        super().__init__(name)
        self._faculties: List["Faculty"] = []

    def add_faculty(self, faculty: "Faculty") -> None:
        _require(faculty, Faculty, "add_faculty")
        self._faculties.append(faculty)

    def get_faculties(self) -> Iterator["Faculty"]:
        return iter(self._faculties)

    def children(self) -> Iterator[OrgNode]:
        return iter(self._faculties)


class Faculty(OrgNode):
    """Owns Departments and, separately, its own Committees.

    Departments (with their whole subtrees) are traversed before the
    Faculty's direct Committees.
    """

    kind = NodeKind.FACULTY

    def __init__(self, name: str):
        super().__init__(name)
        self._departments: List["Department"] = []
        self._committees: List["Committee"] = []

    def add_department(self, department: "Department") -> None:
        _require(department, Department, "add_department")
        self._departments.append(department)

    def add_committee(self, committee: "Committee") -> None:
        _require(committee, Committee, "add_committee")
        self._committees.append(committee)

    def get_departments(self) -> Iterator["Department"]:
        return iter(self._departments)

    def get_committees(self) -> Iterator["Committee"]:
        return iter(self._committees)

    def children(self) -> Iterator[OrgNode]:
        yield from self._departments
        yield from self._committees


class Department(OrgNode):
    """Owns Committees."""

    kind = NodeKind.DEPARTMENT

    def __init__(self, name: str):
        super().__init__(name)
        self._committees: List["Committee"] = []

    def add_committee(self, committee: "Committee") -> None:
        _require(committee, Committee, "add_committee")
        self._committees.append(committee)

    def get_committees(self) -> Iterator["Committee"]:
        return iter(self._committees)

    def children(self) -> Iterator[OrgNode]:
        return iter(self._committees)


class Committee(OrgNode):
    """Owns sub-Committees; the only recursive relation in the model."""

    kind = NodeKind.COMMITTEE

    def __init__(self, name: str):
        super().__init__(name)
        self._committees: List["Committee"] = []

    def add_committee(self, committee: "Committee") -> None:
        """Append a sub-committee.

        Raises:
            InvalidNodeError: If committee is not a Committee
            CycleError: If committee is this node or already contains it
        """
        _require(committee, Committee, "add_committee")
        if _subtree_contains(committee, self):
            raise CycleError(
                f"Adding committee {committee.name!r} to {self.name!r} would create a cycle",
                node=committee,
            )
        self._committees.append(committee)

    def get_committees(self) -> Iterator["Committee"]:
        return iter(self._committees)

    def children(self) -> Iterator[OrgNode]:
        return iter(self._committees)


def _subtree_contains(root: OrgNode, target: OrgNode) -> bool:
    """Identity search for target in the subtree rooted at root (root included)."""
    stack: List[OrgNode] = [root]
    seen = set()
    while stack:
        node = stack.pop()
        if node is target:
            return True
        if id(node) in seen:
            continue
        seen.add(id(node))
        stack.extend(node.children())
    return False
