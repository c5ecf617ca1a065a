"""Text rendering for the directory tree and single-employee details.

Both renderers are pure: they return a string and never print.

Directory layout
----------------
Depth-first, pre-order, two spaces of indent per level.  A bracketed
department header is inserted whenever the department differs from the
one of the previously rendered employee — anywhere in the tree, not
only at the roots::

    <blank line>
    [ Engineering ]
    Ada Lovelace (CTO)
      Grace Hopper (Engineer)

      [ Design ]
      Susan Kare (Designer)
"""

from __future__ import annotations

from bhr.core.hierarchy import Directory
from bhr.core.models import EmployeeDetails

INDENT: str = "  "
LABEL_WIDTH: int = 15


# ---------------------------------------------------------------------------
# Directory tree
# ---------------------------------------------------------------------------

def render_directory(directory: Directory) -> str:
    """Render every root of *directory* and its reports, in directory order.

    The walk keeps its own stack, so reporting chains of any depth render.
    """
    lines: list[str] = []
    current_department = ""
    # Pending (position, level) pairs; the top is rendered next.
    stack = [(position, 0) for position in reversed(list(directory.roots()))]
    while stack:
        position, level = stack.pop()
        current_department = _render_node(
            directory,
            position,
            lines,
            level=level,
            current_department=current_department,
        )
        children = directory.nodes[position].children
        stack.extend((child, level + 1) for child in reversed(children))
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def _render_department(
    lines: list[str],
    level: int,
    current_department: str,
    department: str,
) -> str:
    """Emit a header if *department* changes; return the new running department."""
    if department != current_department:
        lines.append("")
        lines.append(f"{INDENT * level}[ {department} ]")
    return department


def _render_node(
    directory: Directory,
    position: int,
    lines: list[str],
    *,
    level: int,
    current_department: str,
) -> str:
    """Append the line for the employee at *position* to *lines*.

    The running department is passed in and handed back so that a change
    seen deep in one subtree carries over to the next sibling.
    """
    employee = directory.nodes[position].employee
    current_department = _render_department(
        lines, level, current_department, employee.department,
    )
    lines.append(f"{INDENT * level}{employee.display_name} ({employee.job_title})")
    return current_department


# ---------------------------------------------------------------------------
# Single employee
# ---------------------------------------------------------------------------

def _labelled(label: str, value: str) -> str:
    return f"{label:<{LABEL_WIDTH}}{value}"


def render_employee(details: EmployeeDetails) -> str:
    """Render *details* as aligned ``Label: value`` lines.

    Empty fields are left out rather than shown blank.
    """
    lines: list[str] = []

    if details.id:
        lines.append(_labelled("ID: ", details.id))

    if details.display_name:
        name = details.display_name
        if details.job_title:
            name += f" ({details.job_title})"
        lines.append(_labelled("Name: ", name))

    for label, value in (
        ("Email: ", details.work_email),
        ("Phone: ", details.work_phone),
        ("Department: ", details.department),
        ("Supervisor: ", details.supervisor),
        ("Hire date: ", details.hire_date),
        ("Location: ", details.location),
    ):
        if value:
            lines.append(_labelled(label, value))

    if not lines:
        return ""
    return "\n".join(lines) + "\n"
