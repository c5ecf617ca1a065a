"""Runtime settings read from the process environment.

The API key and company subdomain are required; the HTTP timeout is
optional.  Settings are loaded once per command by the CLI layer and
handed to the infrastructure provider.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from bhr.exceptions import ConfigurationError

API_KEY_ENV: str = "BAMBOOHR_API_KEY"
COMPANY_ENV: str = "BAMBOOHR_COMPANY"
TIMEOUT_ENV: str = "BAMBOOHR_TIMEOUT"

DEFAULT_TIMEOUT: float = 10.0
"""Seconds before an HTTP request to BambooHR is abandoned."""


@dataclass(frozen=True, slots=True)
class Settings:
    """Connection settings for the BambooHR API."""

    api_key: str
    """Secret API key, sent as the HTTP basic-auth user name."""

    company: str
    """Company subdomain used in the API gateway URL."""

    timeout: float = DEFAULT_TIMEOUT
    """Per-request timeout in seconds."""


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from *environ* (defaults to ``os.environ``).

    Raises
    ------
    ConfigurationError
        When a required variable is unset or blank, or the timeout is
        not a positive number.
    """
    env = os.environ if environ is None else environ

    api_key = _require(env, API_KEY_ENV, "Create an API key in BambooHR and export it.")
    company = _require(
        env,
        COMPANY_ENV,
        "Use the subdomain of your BambooHR URL, e.g. 'acme' for acme.bamboohr.com.",
    )
    return Settings(api_key=api_key, company=company, timeout=_timeout(env))


def _require(env: Mapping[str, str], name: str, hint: str) -> str:
    value = env.get(name, "").strip()
    if not value:
        raise ConfigurationError(f"{name} not set", hint=hint)
    return value


def _timeout(env: Mapping[str, str]) -> float:
    raw = env.get(TIMEOUT_ENV, "").strip()
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigurationError(
            f"{TIMEOUT_ENV} must be a number of seconds, got {raw!r}",
        ) from exc
    if value <= 0:
        raise ConfigurationError(f"{TIMEOUT_ENV} must be positive, got {raw!r}")
    return value
