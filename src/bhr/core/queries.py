"""Entry points over an already fetched list of employees.

These compose the filter, hierarchy and render modules.  They perform
no I/O and are what the services call once data has arrived.
"""

from __future__ import annotations

from collections.abc import Sequence

from bhr.core.hierarchy import build_directory
from bhr.core.models import Employee
from bhr.core.record_filter import build_name_filter, build_record_filter
from bhr.core.render import render_directory


def build_and_render_directory(
    employees: Sequence[Employee],
    department_pattern: str = "",
    title_pattern: str = "",
) -> str:
    """Filter *employees*, rebuild their hierarchy and render it as text."""
    record_filter = build_record_filter(department_pattern, title_pattern)
    return render_directory(build_directory(employees, record_filter))


def find_by_name(employees: Sequence[Employee], name_pattern: str) -> Employee | None:
    """Return the first employee whose display name matches *name_pattern*.

    Further matches are ignored; ``None`` means nobody matched.
    """
    name_filter = build_name_filter(name_pattern)
    return next((employee for employee in employees if name_filter(employee)), None)
