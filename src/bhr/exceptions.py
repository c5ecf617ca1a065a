"""Custom exception hierarchy for bhr.

All exceptions that cross layer boundaries must inherit from
:class:`BhrError`.  Raw third-party exceptions (e.g. from requests)
must NEVER propagate beyond the infrastructure layer — they must be
caught and re-raised as a typed subclass defined here.

Hierarchy
---------
BhrError
├── ConfigurationError
├── InvalidPatternError
├── EmployeeNotFoundError
├── SupervisorCycleError
├── ApiError
│   ├── ApiRequestError
│   ├── AuthenticationError
│   └── ApiResponseError
├── ImageError
└── EnvironmentError
"""

from __future__ import annotations


class BhrError(Exception):
    """Base exception for all bhr errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Configuration ---------------------------------------------------------

class ConfigurationError(BhrError):
    """Raised when a required setting is missing or malformed."""


# --- Filtering / lookup ----------------------------------------------------

class InvalidPatternError(BhrError):
    """Raised when a department, title or name pattern does not compile."""


class EmployeeNotFoundError(BhrError):
    """Raised when a name lookup matches no employee."""


# --- Hierarchy -------------------------------------------------------------

class SupervisorCycleError(BhrError):
    """Raised when supervisor references loop back on themselves."""

    def __init__(
        self,
        names: list[str],
        *,
        hint: str | None = None,
    ) -> None:
        super().__init__(
            "Supervisor cycle detected: " + " -> ".join([*names, names[0]]),
            hint=hint,
        )
        self.names: list[str] = names
        """Display names of the employees forming the cycle, in link order."""


# --- Remote API ------------------------------------------------------------

class ApiError(BhrError):
    """Base class for failures talking to the BambooHR API."""


class ApiRequestError(ApiError):
    """Raised on network failures, timeouts and non-2xx responses."""


class AuthenticationError(ApiError):
    """Raised when the API rejects the configured key (HTTP 401/403)."""


class ApiResponseError(ApiError):
    """Raised when the API returns a body that cannot be interpreted."""


# --- Profile photos --------------------------------------------------------

class ImageError(BhrError):
    """Raised when a profile photo cannot be decoded or encoded as sixel."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(BhrError):
    """Raised when a required runtime dependency is not available."""
