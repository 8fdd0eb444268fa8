"""Core abstractions for OrgTreeLib.

This module contains the node hierarchy, the visitor protocol and the
traversal driver that connects them.
"""

from .node import (
    NodeKind,
    OrgNode,
    NullOrgNode,
    NULL_NODE,
    University,
    Faculty,
    Department,
    Committee,
)
from .visitor import (
    Visitor,
    DefaultVisitor,
    PrintVisitor,
    SearchVisitor,
    CollectingVisitor,
)
from .traverser import traverse, walk

__all__ = [
    "NodeKind",
    "OrgNode",
    "NullOrgNode",
    "NULL_NODE",
    "University",
    "Faculty",
    "Department",
    "Committee",
    "Visitor",
    "DefaultVisitor",
    "PrintVisitor",
    "SearchVisitor",
    "CollectingVisitor",
    "traverse",
    "walk",
]
