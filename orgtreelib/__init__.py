"""OrgTreeLib - Visitor-based traversal of university org charts.

Build a tree of University -> Faculty -> Department -> Committee nodes,
then run visitors over it:

    from orgtreelib import University, Faculty, SearchVisitor

    mcgill = University("McGill")
    ...
    searcher = SearchVisitor("Web")
    mcgill.accept(searcher)
    searcher.get_result()

The traversal driver owns all recursion; visitors only react to the node
they are handed.
"""

__version__ = "0.1.0"

from .errors import OrgTreeError, InvalidNodeError, CycleError, ConfigurationError
from .error_policies import (
    ErrorPolicy,
    FailFastPolicy,
    ContinueOnErrorsPolicy,
    CollectErrorsPolicy,
)
from .config import TraversalConfig, PrintConfig
from .core import (
    NodeKind,
    OrgNode,
    NullOrgNode,
    NULL_NODE,
    University,
    Faculty,
    Department,
    Committee,
    Visitor,
    DefaultVisitor,
    PrintVisitor,
    SearchVisitor,
    CollectingVisitor,
    traverse,
    walk,
)
from .api import (
    traverse_tree,
    find_committee,
    count_nodes,
    render_tree,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Errors
    "OrgTreeError",
    "InvalidNodeError",
    "CycleError",
    "ConfigurationError",
    "ErrorPolicy",
    "FailFastPolicy",
    "ContinueOnErrorsPolicy",
    "CollectErrorsPolicy",
    # Config
    "TraversalConfig",
    "PrintConfig",
    # Core
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
    # API
    "traverse_tree",
    "find_committee",
    "count_nodes",
    "render_tree",
    "get_tree_stats",
]
