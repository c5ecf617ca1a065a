"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* Filtering, hierarchy building and rendering must be deterministic.
"""

from bhr.core.directory_service import DirectoryService
from bhr.core.employee_service import EmployeeService
from bhr.core.hierarchy import Directory, build_directory
from bhr.core.models import Employee, EmployeeDetails, HierarchyNode
from bhr.core.protocols import DirectoryProvider
from bhr.core.queries import build_and_render_directory, find_by_name
from bhr.core.record_filter import RecordFilter, build_name_filter, build_record_filter
from bhr.core.render import render_directory, render_employee

__all__: list[str] = [
    "Directory",
    "DirectoryProvider",
    "DirectoryService",
    "Employee",
    "EmployeeDetails",
    "EmployeeService",
    "HierarchyNode",
    "RecordFilter",
    "build_and_render_directory",
    "build_directory",
    "build_name_filter",
    "build_record_filter",
    "find_by_name",
    "render_directory",
    "render_employee",
]
