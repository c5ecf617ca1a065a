"""Domain models for bhr.

:class:`Employee` and :class:`EmployeeDetails` are **frozen** dataclasses —
immutable value objects parsed once from an API response.  They carry
zero I/O and no dependencies on external packages.

:class:`HierarchyNode` is the only mutable model: the hierarchy builder
links nodes together while it runs, after which nodes are treated as
read-only.
"""

from __future__ import annotations

from dataclasses import dataclass, field


# ---------------------------------------------------------------------------
# Directory entry
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Employee:
    """One flat row of the employee directory."""

    id: str
    """BambooHR employee ID."""

    display_name: str
    """Name as displayed by BambooHR; the key supervisors refer to."""

    department: str = ""
    job_title: str = ""

    supervisor: str = ""
    """Display name of the supervisor, or ``""`` when none is recorded."""

    first_name: str = ""
    last_name: str = ""
    preferred_name: str = ""
    work_email: str = ""
    work_phone: str = ""
    location: str = ""
    division: str = ""
    photo_url: str = ""
    photo_uploaded: bool = False


# ---------------------------------------------------------------------------
# Single-employee record
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class EmployeeDetails:
    """Richer record returned by the single-employee endpoint."""

    id: str
    display_name: str = ""
    first_name: str = ""
    last_name: str = ""
    preferred_name: str = ""
    job_title: str = ""
    work_email: str = ""
    work_phone: str = ""
    mobile_phone: str = ""
    department: str = ""
    division: str = ""
    location: str = ""
    supervisor: str = ""
    hire_date: str = ""
    employee_number: str = ""
    photo_url: str = ""
    photo_uploaded: bool = False


# ---------------------------------------------------------------------------
# Hierarchy
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class HierarchyNode:
    """An employee placed in the reconstructed hierarchy.

    ``parent`` and ``children`` hold positions in the owning
    :class:`~bhr.core.hierarchy.Directory` node list rather than
    references to other nodes.
    """

    employee: Employee

    parent: int | None = None
    """Position of the supervisor's node, or ``None`` for a root."""

    children: list[int] = field(default_factory=list)
    """Positions of direct reports, in directory order."""

    @property
    def is_root(self) -> bool:
        return self.parent is None
