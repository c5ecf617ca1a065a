"""Pure predicates selecting which employees take part in a query.

Every pattern is a case-insensitive regular expression searched
anywhere in the target field.  Patterns are compiled up front so that
a malformed one is reported before any data is fetched.

Two predicates are provided:

1. **Record filter** — department and title, used by the directory.
2. **Name filter** — display name, used by the employee lookup.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from bhr.core.models import Employee
from bhr.exceptions import InvalidPatternError

RecordFilter = Callable[[Employee], bool]
"""Predicate deciding whether an employee passes the active filter."""


def _compile(pattern: str, kind: str) -> re.Pattern[str]:
    """Compile *pattern* case-insensitively or raise :class:`InvalidPatternError`."""
    try:
        return re.compile(pattern, re.IGNORECASE)
    except re.error as exc:
        raise InvalidPatternError(
            f"Invalid {kind} pattern {pattern!r}: {exc}",
            hint="Patterns are regular expressions; escape special characters with '\\'.",
        ) from exc


def match_all(employee: Employee) -> bool:
    """Filter that accepts every employee."""
    return True


# ---------------------------------------------------------------------------
# 1. Department / title
# ---------------------------------------------------------------------------

def build_record_filter(department: str = "", title: str = "") -> RecordFilter:
    """Return a predicate over department and job title.

    An empty *department* disables filtering entirely, *title* included.
    Otherwise both patterns must match; an empty *title* matches any
    job title.

    Raises
    ------
    InvalidPatternError
        If either pattern fails to compile.
    """
    department_re = _compile(department, "department")
    title_re = _compile(title, "title")

    if department == "":
        return match_all

    def matches(employee: Employee) -> bool:
        return (
            department_re.search(employee.department) is not None
            and title_re.search(employee.job_title) is not None
        )

    return matches


# ---------------------------------------------------------------------------
# 2. Name
# ---------------------------------------------------------------------------

def name_query_to_pattern(query: str) -> str:
    """Turn spaces in *query* into ``.*`` gaps.

    ``"john smith"`` becomes ``"john.*smith"`` so that it also finds
    ``"John Middle Smith"``.
    """
    return query.replace(" ", ".*")


def build_name_filter(query: str) -> RecordFilter:
    """Return a predicate matching display names against *query*.

    An empty query matches every employee.

    Raises
    ------
    InvalidPatternError
        If the derived pattern fails to compile.
    """
    if query == "":
        return match_all

    name_re = _compile(name_query_to_pattern(query), "name")

    def matches(employee: Employee) -> bool:
        return name_re.search(employee.display_name) is not None

    return matches
