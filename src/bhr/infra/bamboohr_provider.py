"""requests-backed implementation of :class:`~bhr.core.protocols.DirectoryProvider`.

This module is the **only** place in the codebase that talks HTTP.
All ``requests`` exceptions are caught here and re-raised as typed
:class:`~bhr.exceptions.ApiError` subclasses — nothing raw escapes the
infrastructure boundary.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import requests

from bhr.config import Settings
from bhr.exceptions import ApiRequestError, ApiResponseError, AuthenticationError
from bhr.version import __version__

logger = logging.getLogger(__name__)

API_ROOT: str = "https://api.bamboohr.com/api/gateway.php"
USER_AGENT: str = f"bhr/{__version__}"

EMPLOYEE_FIELDS: tuple[str, ...] = (
    "id",
    "displayName",
    "firstName",
    "lastName",
    "preferredName",
    "jobTitle",
    "workEmail",
    "workPhone",
    "mobilePhone",
    "department",
    "division",
    "location",
    "supervisor",
    "hireDate",
    "employeeNumber",
    "photoUrl",
    "photoUploaded",
)
"""Fields requested from the single-employee endpoint."""


class BambooHRProvider:
    """Concrete :class:`DirectoryProvider` backed by the BambooHR REST API.

    Usage::

        with BambooHRProvider(load_settings()) as provider:
            entries = provider.fetch_directory()

    A *session* may be injected (tests, connection reuse); it is then
    left open by :meth:`close`.
    """

    def __init__(
        self,
        settings: Settings,
        session: requests.Session | None = None,
    ) -> None:
        self._settings: Settings = settings
        self._base_url: str = f"{API_ROOT}/{settings.company}/v1"
        self._owns_session: bool = session is None
        self._session: requests.Session = session if session is not None else requests.Session()
        self._session.auth = (settings.api_key, "x")
        self._session.headers.update(
            {"Accept": "application/json", "User-Agent": USER_AGENT},
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> BambooHRProvider:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def fetch_directory(self) -> list[dict[str, Any]]:
        """Return the ``employees`` array of the directory endpoint.

        Raises
        ------
        ApiResponseError
            When the payload has no ``employees`` list of objects.
        """
        payload = self._get_json("/employees/directory")
        employees = payload.get("employees") if isinstance(payload, dict) else None
        if not isinstance(employees, list) or not all(
            isinstance(entry, dict) for entry in employees
        ):
            raise ApiResponseError(
                "Directory response has no list of employees.",
                hint="The directory may be disabled for this API key's company.",
            )
        logger.debug("Fetched %d directory entries", len(employees))
        return list(employees)

    def fetch_employee(self, employee_id: str) -> dict[str, Any]:
        """Return the requested fields of employee *employee_id*.

        Raises
        ------
        ApiResponseError
            When the payload is not a JSON object.
        """
        payload = self._get_json(
            f"/employees/{employee_id}",
            params={"fields": ",".join(EMPLOYEE_FIELDS)},
        )
        if not isinstance(payload, dict):
            raise ApiResponseError(
                f"Employee {employee_id} response is not a JSON object.",
            )
        return payload

    def fetch_photo(self, photo_url: str) -> bytes:
        """Download the larger rendition of the photo at *photo_url*.

        BambooHR serves several sizes; ``-1.jpg`` names the thumbnail and
        ``-2.jpg`` the next size up.
        """
        response = self._get(photo_url.replace("-1.jpg", "-2.jpg"))
        logger.debug("Fetched %d photo bytes", len(response.content))
        return response.content

    # ------------------------------------------------------------------
    # HTTP plumbing
    # ------------------------------------------------------------------

    def _get_json(self, path: str, params: dict[str, str] | None = None) -> Any:
        """GET *path* under the API root and decode the JSON body."""
        response = self._get(f"{self._base_url}{path}", params)
        try:
            return response.json()
        except ValueError as exc:
            raise ApiResponseError(
                f"BambooHR returned a non-JSON body for {path}.",
            ) from exc

    def _get(self, url: str, params: dict[str, str] | None = None) -> requests.Response:
        """GET *url*, mapping transport failures and error statuses."""
        logger.debug("GET %s", url)

        try:
            response = self._session.get(url, params=params, timeout=self._settings.timeout)
        except requests.exceptions.Timeout as exc:
            raise ApiRequestError(
                f"Request to BambooHR timed out after {self._settings.timeout:g}s.",
                hint="Raise BAMBOOHR_TIMEOUT or check your network.",
            ) from exc
        except requests.exceptions.RequestException as exc:
            raise ApiRequestError(f"Could not reach BambooHR: {exc}") from exc

        self._raise_for_status(response)
        return response

    @staticmethod
    def _raise_for_status(response: requests.Response) -> None:
        """Translate HTTP error statuses into domain exceptions."""
        status = response.status_code
        if status in (401, 403):
            raise AuthenticationError(
                f"BambooHR rejected the API key (HTTP {status}).",
                hint="Check BAMBOOHR_API_KEY and BAMBOOHR_COMPANY.",
            )
        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as exc:
            raise ApiRequestError(
                f"BambooHR request failed: HTTP {status} {response.reason}",
            ) from exc
