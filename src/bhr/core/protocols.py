"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from typing import Any, Protocol


class DirectoryProvider(Protocol):
    """Contract for employee data backends.

    Any object that implements these methods with the correct signatures
    satisfies this protocol structurally (no explicit inheritance
    required).  Implementations must map all backend-specific exceptions
    to :class:`~bhr.exceptions.BhrError` subclasses.
    """

    def fetch_directory(self) -> list[dict[str, Any]]:
        """Return every directory entry as a raw dict, in API order.

        Each dict is expected to carry at least ``"id"``,
        ``"displayName"``, ``"department"``, ``"jobTitle"`` and
        ``"supervisor"``.  The list is complete; there is no paging.

        Raises
        ------
        ApiError
            When the directory cannot be retrieved or decoded.
        """
        ...  # pragma: no cover

    def fetch_employee(self, employee_id: str) -> dict[str, Any]:
        """Return the raw field dict for a single employee.

        ``"0"`` designates the owner of the API key.

        Raises
        ------
        ApiError
            When the employee cannot be retrieved or decoded.
        """
        ...  # pragma: no cover

    def fetch_photo(self, photo_url: str) -> bytes:
        """Return the raw image bytes of a profile photo.

        *photo_url* is the ``photoUrl`` field of an employee; the provider
        may swap it for a larger rendition of the same photo.

        Raises
        ------
        ApiError
            When the photo cannot be downloaded.
        """
        ...  # pragma: no cover
