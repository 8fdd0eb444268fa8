"""Sample trees for OrgTreeLib consumers and test suites.

Each builder returns ``(root, nodes)`` where ``nodes`` maps a short key to
every node in the tree, so tests can assert on identity rather than names.
"""

from typing import Dict, Tuple

from ..core.node import Committee, Department, Faculty, OrgNode, University


def build_mcgill() -> Tuple[University, Dict[str, OrgNode]]:
    """Build the McGill demo tree.

    Structure:
    McGill
    ├── Science
    │   ├── Computer Science
    │   │   └── C: MSc
    │   │       └── C: Web
    │   ├── Physics
    │   ├── C: Academic
    │   └── C: Scholarship
    └── Arts
        ├── History and Classical Studies
        └── C: Students
    """
    mcgill = University("McGill")

    science = Faculty("Science")
    arts = Faculty("Arts")

    cs = Department("Computer Science")
    physics = Department("Physics")
    history = Department("History and Classical Studies")

    academic = Committee("Academic")
    scholarship = Committee("Scholarship")
    msc = Committee("MSc")
    web = Committee("Web")
    students = Committee("Students")

    mcgill.add_faculty(science)
    mcgill.add_faculty(arts)
    science.add_department(cs)
    science.add_department(physics)
    arts.add_department(history)

    science.add_committee(academic)
    science.add_committee(scholarship)
    arts.add_committee(students)

    cs.add_committee(msc)
    msc.add_committee(web)

    return mcgill, {
        'mcgill': mcgill,
        'science': science,
        'arts': arts,
        'cs': cs,
        'physics': physics,
        'history': history,
        'academic': academic,
        'scholarship': scholarship,
        'msc': msc,
        'web': web,
        'students': students,
    }


def build_scenario_tree() -> Tuple[University, Dict[str, OrgNode]]:
    """Build the minimal search scenario.

    Structure:
    M
    └── Sci
        ├── CS
        │   └── C: MSc
        │       └── C: Web
        └── C: Admin
    """
    m = University("M")
    sci = Faculty("Sci")
    cs = Department("CS")
    msc = Committee("MSc")
    web = Committee("Web")
    admin = Committee("Admin")

    m.add_faculty(sci)
    sci.add_department(cs)
    cs.add_committee(msc)
    msc.add_committee(web)
    sci.add_committee(admin)

    return m, {'m': m, 'sci': sci, 'cs': cs, 'msc': msc, 'web': web, 'admin': admin}


def build_duplicate_names_tree() -> Tuple[University, Dict[str, OrgNode]]:
    """Build a tree where several committees are named "Board".

    Pre-order of the "Board" committees: dept_board, nested_board,
    faculty_board, second_faculty_board.

    Structure:
    U
    ├── F1
    │   ├── D1
    │   │   └── C: Board          (dept_board)
    │   │       └── C: Board      (nested_board)
    │   └── C: Board              (faculty_board)
    └── F2
        └── C: Ethics
            └── C: Board          (second_faculty_board)
    """
    u = University("U")
    f1 = Faculty("F1")
    f2 = Faculty("F2")
    d1 = Department("D1")
    dept_board = Committee("Board")
    nested_board = Committee("Board")
    faculty_board = Committee("Board")
    ethics = Committee("Ethics")
    second_faculty_board = Committee("Board")

    u.add_faculty(f1)
    u.add_faculty(f2)
    f1.add_department(d1)
    d1.add_committee(dept_board)
    dept_board.add_committee(nested_board)
    f1.add_committee(faculty_board)
    f2.add_committee(ethics)
    ethics.add_committee(second_faculty_board)

    return u, {
        'u': u,
        'f1': f1,
        'f2': f2,
        'd1': d1,
        'dept_board': dept_board,
        'nested_board': nested_board,
        'faculty_board': faculty_board,
        'ethics': ethics,
        'second_faculty_board': second_faculty_board,
    }
