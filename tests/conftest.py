"""Shared pytest fixtures and configuration for the bhr test suite.

Guidelines
----------
* No internet access in any test.
* HTTP is mocked at the ``requests.Session`` boundary.
* Core tests must be pure — no side effects.
* Tests must not depend on the caller's environment variables.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from bhr.config import API_KEY_ENV, COMPANY_ENV, TIMEOUT_ENV


@pytest.fixture(autouse=True)
def _clean_bamboohr_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (API_KEY_ENV, COMPANY_ENV, TIMEOUT_ENV):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_bhr_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger("bhr")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
