#!/usr/bin/env python3
"""Demo script for OrgTreeLib.

Builds the McGill org chart, prints it, and searches it for committees.

Usage:
    python examples/university_demo.py            # print tree, run sample searches
    python examples/university_demo.py Web Foo    # search for specific committees
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from orgtreelib import PrintVisitor, SearchVisitor, get_tree_stats
from orgtreelib.testing import build_mcgill


def demo_print(mcgill):
    """Show the whole chart with one indent per level."""
    print("\n=== Org Chart ===\n")
    mcgill.accept(PrintVisitor())


def demo_search(mcgill, queries):
    """Search for each committee name; a miss yields the null node."""
    print("\n=== Committee Search ===\n")
    for query in queries:
        searcher = SearchVisitor(query)
        mcgill.accept(searcher)
        result = searcher.get_result()
        status = "not found" if result.is_null() else "found"
        print(f"  {query!r}: {result.get_name()} ({status})")


def demo_stats(mcgill):
    print("\n=== Statistics ===\n")
    for key, value in get_tree_stats(mcgill).items():
        print(f"  {key}: {value}")


def main():
    queries = sys.argv[1:] or ["Web", "MSc", "Foo"]
    mcgill, _ = build_mcgill()

    demo_print(mcgill)
    demo_search(mcgill, queries)
    demo_stats(mcgill)


if __name__ == "__main__":
    print("OrgTreeLib - University Org Chart Example")
    print("=" * 50)
    main()
