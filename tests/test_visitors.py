"""Tests for PrintVisitor, SearchVisitor and CollectingVisitor."""

import io
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from orgtreelib import (
    University,
    Faculty,
    Committee,
    NULL_NODE,
    Visitor,
    PrintVisitor,
    SearchVisitor,
    CollectingVisitor,
    PrintConfig,
    ConfigurationError,
    walk,
)
from orgtreelib.testing import (
    build_mcgill,
    build_scenario_tree,
    build_duplicate_names_tree,
)


MCGILL_RENDERING = (
    "McGill\n"
    "   Science\n"
    "      Computer Science\n"
    "         C: MSc\n"
    "            C: Web\n"
    "      Physics\n"
    "      C: Academic\n"
    "      C: Scholarship\n"
    "   Arts\n"
    "      History and Classical Studies\n"
    "      C: Students\n"
)


# ============================================================================
# Visitor protocol
# ============================================================================

def test_visitor_is_abstract():
    with pytest.raises(TypeError):
        Visitor()


def test_incomplete_visitor_cannot_be_instantiated():
    class OnlyCommittees(Visitor):
        def visit_committee(self, committee, depth):
            pass

    with pytest.raises(TypeError):
        OnlyCommittees()


# ============================================================================
# PrintVisitor
# ============================================================================

def test_print_visitor_output():
    mcgill, _ = build_mcgill()
    stream = io.StringIO()
    mcgill.accept(PrintVisitor(stream=stream))
    assert stream.getvalue() == MCGILL_RENDERING


def test_print_visitor_indent_equals_depth():
    """Each line is indented once per level below the root."""
    mcgill, _ = build_mcgill()
    printer = PrintVisitor(stream=io.StringIO())
    mcgill.accept(printer)

    depths = [depth for _, depth in walk(mcgill)]
    assert len(printer.lines) == len(depths)
    for line, depth in zip(printer.lines, depths):
        stripped = line.lstrip(" ")
        assert len(line) - len(stripped) == 3 * depth


def test_print_visitor_defaults_to_stdout(capsys):
    m, _ = build_scenario_tree()
    m.accept(PrintVisitor())
    captured = capsys.readouterr()
    assert captured.out == (
        "M\n"
        "   Sci\n"
        "      CS\n"
        "         C: MSc\n"
        "            C: Web\n"
        "      C: Admin\n"
    )


def test_print_visitor_custom_layout():
    m, _ = build_scenario_tree()
    printer = PrintVisitor(stream=io.StringIO(),
                           config=PrintConfig(indent="..", committee_prefix="* "))
    m.accept(printer)
    assert printer.getvalue() == "\n".join([
        "M",
        "..Sci",
        "....CS",
        "......* MSc",
        "........* Web",
        "....* Admin",
    ])


def test_print_visitor_rejects_bad_config():
    with pytest.raises(ConfigurationError):
        PrintVisitor(config=PrintConfig(indent=None))


def test_print_visitor_can_be_reused_without_drift():
    """Depth comes from the driver, so a second run prints identically."""
    mcgill, _ = build_mcgill()
    stream = io.StringIO()
    printer = PrintVisitor(stream=stream)
    mcgill.accept(printer)
    mcgill.accept(printer)
    assert stream.getvalue() == MCGILL_RENDERING * 2


def test_print_visitor_lines_hold_latest_run_only():
    """The stream gets every run; ``lines`` and ``getvalue`` only the last one."""
    mcgill, nodes = build_mcgill()
    printer = PrintVisitor(stream=io.StringIO())
    mcgill.accept(printer)
    assert printer.getvalue() == MCGILL_RENDERING.rstrip("\n")

    nodes["cs"].accept(printer)
    assert printer.lines == ["Computer Science", "   C: MSc", "      C: Web"]
    assert printer.getvalue() == "Computer Science\n   C: MSc\n      C: Web"


# ============================================================================
# SearchVisitor
# ============================================================================

@pytest.mark.parametrize("query,key", [
    ("Web", "web"),
    ("MSc", "msc"),
    ("Admin", "admin"),
])
def test_search_single_match(query, key):
    m, nodes = build_scenario_tree()
    searcher = SearchVisitor(query)
    m.accept(searcher)
    assert searcher.get_result() is nodes[key]
    assert searcher.found
    assert searcher.result_or_none() is nodes[key]


def test_search_no_match_returns_null_node():
    m, _ = build_scenario_tree()
    searcher = SearchVisitor("Zzz")
    m.accept(searcher)
    result = searcher.get_result()
    assert result.is_null()
    assert result is NULL_NODE
    assert not searcher.found
    assert searcher.result_or_none() is None


def test_search_before_accept_is_null():
    assert SearchVisitor("Web").get_result().is_null()


def test_search_only_matches_committees():
    """Faculties and departments with the query name are ignored."""
    m, _ = build_scenario_tree()
    for query in ("M", "Sci", "CS"):
        searcher = SearchVisitor(query)
        m.accept(searcher)
        assert searcher.get_result().is_null()


def test_search_is_exact_match():
    m, _ = build_scenario_tree()
    for query in ("web", "We", "Web ", ""):
        searcher = SearchVisitor(query)
        m.accept(searcher)
        assert searcher.get_result().is_null()


def test_search_last_match_wins():
    """Several committees share the name; the last one in pre-order is kept."""
    u, nodes = build_duplicate_names_tree()
    searcher = SearchVisitor("Board")
    u.accept(searcher)
    assert searcher.get_result() is nodes['second_faculty_board']


def test_search_last_match_within_faculty():
    """Faculty's own committees come after its departments' committees."""
    _, nodes = build_duplicate_names_tree()
    searcher = SearchVisitor("Board")
    nodes['f1'].accept(searcher)
    assert searcher.get_result() is nodes['faculty_board']


def test_search_last_match_includes_nested():
    """A nested committee is visited after its parent, so it wins."""
    _, nodes = build_duplicate_names_tree()
    searcher = SearchVisitor("Board")
    nodes['d1'].accept(searcher)
    assert searcher.get_result() is nodes['nested_board']


def test_search_across_faculties_in_insertion_order():
    u = University("U")
    first, second = Faculty("First"), Faculty("Second")
    early, late = Committee("Same"), Committee("Same")
    u.add_faculty(first)
    u.add_faculty(second)
    first.add_committee(early)
    second.add_committee(late)

    searcher = SearchVisitor("Same")
    u.accept(searcher)
    assert searcher.get_result() is late


# ============================================================================
# CollectingVisitor
# ============================================================================

def test_collecting_visitor_records_nodes_and_depths():
    m, nodes = build_scenario_tree()
    collector = CollectingVisitor()
    m.accept(collector)
    assert collector.names() == ["M", "Sci", "CS", "MSc", "Web", "Admin"]
    assert collector.nodes[4] is nodes['web']
    assert collector.visited[4] == ('committee', 'Web', 4)
