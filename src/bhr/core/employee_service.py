"""Core employee service — resolves and describes a single employee.

An employee is chosen by explicit ID, by name, or — when neither is
given — as the owner of the API key.  Name lookup goes through the
directory because the single-employee endpoint only accepts IDs.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from bhr.core.directory_service import DirectoryService, flag, text
from bhr.core.models import EmployeeDetails
from bhr.core.protocols import DirectoryProvider
from bhr.core.queries import find_by_name
from bhr.core.record_filter import build_name_filter
from bhr.core.render import render_employee
from bhr.exceptions import ApiRequestError, BhrError, EmployeeNotFoundError

logger = logging.getLogger(__name__)

CURRENT_USER_ID: str = "0"
"""BambooHR alias for the employee owning the API key."""

PhotoEncoder = Callable[[bytes], str]
"""Turns raw photo bytes into printable text (e.g. a sixel sequence)."""


class EmployeeService:
    """Stateless service over the single-employee endpoint.

    Parameters
    ----------
    provider:
        Any object satisfying the :class:`DirectoryProvider` protocol.
    """

    def __init__(self, provider: DirectoryProvider) -> None:
        self._provider: DirectoryProvider = provider
        self._directory = DirectoryService(provider)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def resolve_id(self, *, employee_id: str | None = None, name: str = "") -> str:
        """Work out which employee ID a request refers to.

        Precedence: *employee_id*, then *name*, then the API key owner.

        Raises
        ------
        InvalidPatternError
            If *name* is not a valid pattern (raised before any fetch).
        EmployeeNotFoundError
            If *name* matches nobody in the directory.
        """
        if employee_id is not None:
            return employee_id
        if not name:
            return CURRENT_USER_ID

        # Reject a malformed name before downloading the directory.
        build_name_filter(name)
        match = find_by_name(self._directory.list_employees(), name)
        if match is None:
            raise EmployeeNotFoundError(
                f"No employee matches {name!r}",
                hint="Spaces match any characters; try a shorter part of the name.",
            )
        logger.debug("Name %r resolved to %s (id %s)", name, match.display_name, match.id)
        return match.id

    def get(self, *, employee_id: str | None = None, name: str = "") -> EmployeeDetails:
        """Fetch the details of the employee selected by *employee_id* / *name*."""
        resolved = self.resolve_id(employee_id=employee_id, name=name)
        return self._parse_details(self._fetch(resolved))

    def photo(self, details: EmployeeDetails) -> bytes | None:
        """Download the profile photo of *details*, if one was uploaded."""
        if not (details.photo_uploaded and details.photo_url):
            logger.debug("No uploaded photo for employee %s", details.id)
            return None
        return self._fetch_photo(details.photo_url)

    def describe(
        self,
        *,
        employee_id: str | None = None,
        name: str = "",
        photo_encoder: PhotoEncoder | None = None,
    ) -> str:
        """Return the rendered detail block for the selected employee.

        When *photo_encoder* is given and the employee has an uploaded
        photo, the encoded photo is appended after the last line.
        """
        details = self.get(employee_id=employee_id, name=name)
        block = render_employee(details)
        if photo_encoder is None:
            return block
        photo = self.photo(details)
        if photo is None:
            return block
        return block + photo_encoder(photo)

    # ------------------------------------------------------------------
    # Provider delegation (safe boundary)
    # ------------------------------------------------------------------

    def _fetch(self, employee_id: str) -> dict[str, Any]:
        """Call the provider and ensure only our exceptions escape."""
        try:
            return self._provider.fetch_employee(employee_id)
        except BhrError:
            raise
        except Exception as exc:
            raise ApiRequestError(
                f"Unexpected provider error: {exc}",
            ) from exc

    def _fetch_photo(self, photo_url: str) -> bytes:
        try:
            return self._provider.fetch_photo(photo_url)
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
    def _parse_details(raw: dict[str, Any]) -> EmployeeDetails:
        """Convert a single-employee payload into :class:`EmployeeDetails`."""
        return EmployeeDetails(
            id=text(raw.get("id")),
            display_name=text(raw.get("displayName")),
            first_name=text(raw.get("firstName")),
            last_name=text(raw.get("lastName")),
            preferred_name=text(raw.get("preferredName")),
            job_title=text(raw.get("jobTitle")),
            work_email=text(raw.get("workEmail")),
            work_phone=text(raw.get("workPhone")),
            mobile_phone=text(raw.get("mobilePhone")),
            department=text(raw.get("department")),
            division=text(raw.get("division")),
            location=text(raw.get("location")),
            supervisor=text(raw.get("supervisor")),
            hire_date=text(raw.get("hireDate")),
            employee_number=text(raw.get("employeeNumber")),
            photo_url=text(raw.get("photoUrl")),
            photo_uploaded=flag(raw.get("photoUploaded")),
        )
