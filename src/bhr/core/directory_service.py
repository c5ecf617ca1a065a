"""Core directory service — fetches, filters and renders the org chart.

This is the central service class consumed by the ``directory`` command.
It depends on a :class:`~bhr.core.protocols.DirectoryProvider` injected
at construction time (dependency inversion), keeping the core free of
any HTTP imports.

Guarantees
----------
* Filter patterns are compiled before the provider is called.
* Only :class:`~bhr.exceptions.BhrError` subclasses escape.
* Parsing is deterministic and tolerant of ``null`` fields.
"""

from __future__ import annotations

import logging
from typing import Any

from bhr.core.models import Employee
from bhr.core.protocols import DirectoryProvider
from bhr.core.queries import build_and_render_directory
from bhr.core.record_filter import build_record_filter
from bhr.exceptions import ApiRequestError, BhrError

logger = logging.getLogger(__name__)


def text(value: Any) -> str:
    """Normalise a JSON scalar to ``str``; ``None`` becomes ``""``."""
    return "" if value is None else str(value)


def flag(value: Any) -> bool:
    """Interpret BambooHR's assorted boolean encodings."""
    if isinstance(value, str):
        return value.strip().lower() in ("true", "yes", "1")
    return bool(value)


class DirectoryService:
    """Stateless service over the employee directory.

    Parameters
    ----------
    provider:
        Any object satisfying the :class:`DirectoryProvider` protocol.
    """

    def __init__(self, provider: DirectoryProvider) -> None:
        self._provider: DirectoryProvider = provider

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def list_employees(self) -> list[Employee]:
        """Fetch and parse the whole directory, preserving API order.

        Raises
        ------
        ApiError
            If the provider fails.
        """
        raw = self._fetch()
        employees = [self._parse_employee(entry) for entry in raw]
        logger.debug("Parsed %d directory entries", len(employees))
        return employees

    def render(self, department: str = "", title: str = "") -> str:
        """Render the org chart restricted to *department* and *title*.

        Raises
        ------
        InvalidPatternError
            If a pattern is malformed (raised before any fetch).
        ApiError
            If the provider fails.
        SupervisorCycleError
            If supervisor links among the selected employees loop.
        """
        # Compiled here only to fail before the fetch.
        build_record_filter(department, title)
        return build_and_render_directory(self.list_employees(), department, title)

    # ------------------------------------------------------------------
    # Provider delegation (safe boundary)
    # ------------------------------------------------------------------

    def _fetch(self) -> list[dict[str, Any]]:
        """Call the provider and ensure only our exceptions escape."""
        try:
            return self._provider.fetch_directory()
        except BhrError:
            raise
        except Exception as exc:
            raise ApiRequestError(
                f"Unexpected provider error: {exc}",
            ) from exc

    # ------------------------------------------------------------------
    # Raw-dict → domain-model parser (pure)
    # ------------------------------------------------------------------

    @staticmethod
    def _parse_employee(raw: dict[str, Any]) -> Employee:
        """Convert one directory entry into an :class:`Employee`."""
        return Employee(
            id=text(raw.get("id")),
            display_name=text(raw.get("displayName")),
            department=text(raw.get("department")),
            job_title=text(raw.get("jobTitle")),
            supervisor=text(raw.get("supervisor")),
            first_name=text(raw.get("firstName")),
            last_name=text(raw.get("lastName")),
            preferred_name=text(raw.get("preferredName")),
            work_email=text(raw.get("workEmail")),
            work_phone=text(raw.get("workPhone")),
            location=text(raw.get("location")),
            division=text(raw.get("division")),
            photo_url=text(raw.get("photoUrl")),
            photo_uploaded=flag(raw.get("photoUploaded")),
        )
