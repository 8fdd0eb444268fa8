"""Testing utilities for OrgTreeLib consumers."""

from .fixtures import build_mcgill, build_scenario_tree, build_duplicate_names_tree

__all__ = [
    "build_mcgill",
    "build_scenario_tree",
    "build_duplicate_names_tree",
]
