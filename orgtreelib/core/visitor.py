"""Visitors for OrgTreeLib.

A visitor adds an operation over the organisational tree without touching
the node classes. It implements one hook per node kind; the traversal
driver decides the order and handles recursion. A hook returns ``False``
to skip the subtree below the node it was handed.
"""

import sys
from abc import ABC, abstractmethod
from typing import Any, List, Optional, TextIO, Tuple

from ..config import PrintConfig
from ..errors import ConfigurationError
from .node import NULL_NODE, Committee, Department, Faculty, OrgNode, University


class Visitor(ABC):
    """Abstract visitor: one hook per concrete node kind."""

    @abstractmethod
    def visit_university(self, university: University, depth: int) -> Any:
        pass

    @abstractmethod
    def visit_faculty(self, faculty: Faculty, depth: int) -> Any:
        pass

    @abstractmethod
    def visit_department(self, department: Department, depth: int) -> Any:
        pass

    @abstractmethod
    def visit_committee(self, committee: Committee, depth: int) -> Any:
        pass


class DefaultVisitor(Visitor):
    """Visitor whose hooks do nothing, so every node gets visited.

    Subclass it and override only the hooks you care about.
    """

    def visit_university(self, university: University, depth: int) -> Any:
        return None

    def visit_faculty(self, faculty: Faculty, depth: int) -> Any:
        return None

    def visit_department(self, department: Department, depth: int) -> Any:
        return None

    def visit_committee(self, committee: Committee, depth: int) -> Any:
        return None


class PrintVisitor(Visitor):
    """Writes one indented line per node.

    Indentation is ``config.indent`` repeated ``depth`` times, so the root
    is flush left. Committee lines carry ``config.committee_prefix``.

    Every line is written to the stream as it is produced. ``lines`` holds
    only the most recent traversal: it is reset when a depth-0 node (the
    traversal root) is visited, so a reused printer never mixes runs.

    Example output for the default layout::

        McGill
           Science
              Computer Science
                 C: MSc
    """

    def __init__(self, stream: Optional[TextIO] = None, config: Optional[PrintConfig] = None):
        self.config = config or PrintConfig()
        config_errors = self.config.validate()
        if config_errors:
            raise ConfigurationError(f"Invalid print configuration: {'; '.join(config_errors)}")
        self.stream = stream
        self.lines: List[str] = []

    def _emit(self, text: str, depth: int) -> None:
        if depth == 0:
            self.lines = []
        line = self.config.indent * depth + text
        self.lines.append(line)
        print(line, file=self.stream if self.stream is not None else sys.stdout)

    def visit_university(self, university: University, depth: int) -> Any:
        self._emit(university.name, depth)

    def visit_faculty(self, faculty: Faculty, depth: int) -> Any:
        self._emit(faculty.name, depth)

    def visit_department(self, department: Department, depth: int) -> Any:
        self._emit(department.name, depth)

    def visit_committee(self, committee: Committee, depth: int) -> Any:
        self._emit(self.config.committee_prefix + committee.name, depth)

    def getvalue(self) -> str:
        """Lines of the most recent traversal, one node per line."""
        return "\n".join(self.lines)


class SearchVisitor(DefaultVisitor):
    """Finds a committee by exact name.

    The walk never stops early: every matching committee overwrites the
    stored result, so when several committees share a name the one visited
    LAST in pre-order is returned.
    """

    def __init__(self, query: str):
        self.query = query
        self.result: OrgNode = NULL_NODE

    def visit_committee(self, committee: Committee, depth: int) -> Any:
        if committee.name == self.query:
            self.result = committee
        return None

    def get_result(self) -> OrgNode:
        """The matching committee, or NULL_NODE if none matched."""
        return self.result

    @property
    def found(self) -> bool:
        return not self.result.is_null()

    def result_or_none(self) -> Optional[Committee]:
        return None if self.result.is_null() else self.result


class CollectingVisitor(DefaultVisitor):
    """Records ``(kind, name, depth)`` for every node, in visit order."""

    def __init__(self):
        self.visited: List[Tuple[str, str, int]] = []
        self.nodes: List[OrgNode] = []

    def _record(self, node: OrgNode, depth: int) -> None:
        self.visited.append((node.kind.value, node.name, depth))
        self.nodes.append(node)

    def visit_university(self, university: University, depth: int) -> Any:
        self._record(university, depth)

    def visit_faculty(self, faculty: Faculty, depth: int) -> Any:
        self._record(faculty, depth)

    def visit_department(self, department: Department, depth: int) -> Any:
        self._record(department, depth)

    def visit_committee(self, committee: Committee, depth: int) -> Any:
        self._record(committee, depth)

    def names(self) -> List[str]:
        return [name for _, name, _ in self.visited]
