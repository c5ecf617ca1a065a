"""Tests for DirectoryService (core/directory_service.py).

The :class:`DirectoryProvider` dependency is **mocked** — no internet
access.  These tests verify:

* Raw-dict → domain-model parsing, including ``null`` fields
* Pattern validation before any fetch
* Exception mapping (provider errors → our hierarchy)
* End-to-end rendering of a realistic directory payload
"""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest

from bhr.core.directory_service import DirectoryService, flag, text
from bhr.core.models import Employee
from bhr.exceptions import (
    ApiRequestError,
    AuthenticationError,
    InvalidPatternError,
    SupervisorCycleError,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _fake_provider(entries: list[dict[str, Any]] | Exception) -> MagicMock:
    """Return a mock DirectoryProvider.

    If *entries* is a list, ``fetch_directory`` returns it.
    If *entries* is an exception, ``fetch_directory`` raises it.
    """
    provider = MagicMock()
    if isinstance(entries, Exception):
        provider.fetch_directory.side_effect = entries
    else:
        provider.fetch_directory.return_value = entries
    return provider


def _raw_entry(
    name: str,
    supervisor: str | None = "",
    *,
    id: str = "1",
    department: str | None = "Engineering",
    title: str | None = "Engineer",
) -> dict[str, Any]:
    """Factory for a directory entry matching the BambooHR payload shape."""
    return {
        "id": id,
        "displayName": name,
        "firstName": name.split()[0],
        "lastName": name.split()[-1],
        "preferredName": None,
        "gender": "Female",
        "jobTitle": title,
        "workPhone": None,
        "workEmail": f"{name.split()[0].lower()}@example.com",
        "department": department,
        "location": "Sydney",
        "division": None,
        "linkedIn": None,
        "supervisor": supervisor,
        "photoUploaded": True,
        "photoUrl": "https://example.com/photo-1.jpg",
        "canUploadPhoto": 1,
    }


# ---------------------------------------------------------------------------
# Scalar helpers
# ---------------------------------------------------------------------------

class TestScalarHelpers:
    def test_text_none_is_empty(self) -> None:
        assert text(None) == ""

    def test_text_stringifies_numbers(self) -> None:
        assert text(123) == "123"

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [(True, True), (False, False), ("true", True), ("false", False),
         ("Yes", True), ("", False), (None, False), (1, True), (0, False)],
    )
    def test_flag(self, raw: object, expected: bool) -> None:
        assert flag(raw) is expected


# ---------------------------------------------------------------------------
# list_employees — parsing
# ---------------------------------------------------------------------------

class TestListEmployees:
    def test_parses_all_fields(self) -> None:
        svc = DirectoryService(_fake_provider([
            _raw_entry("Ada Lovelace", "Charles Babbage", id="7"),
        ]))
        [emp] = svc.list_employees()
        assert emp == Employee(
            id="7",
            display_name="Ada Lovelace",
            department="Engineering",
            job_title="Engineer",
            supervisor="Charles Babbage",
            first_name="Ada",
            last_name="Lovelace",
            preferred_name="",
            work_email="ada@example.com",
            work_phone="",
            location="Sydney",
            division="",
            photo_url="https://example.com/photo-1.jpg",
            photo_uploaded=True,
        )

    def test_null_fields_become_empty(self) -> None:
        svc = DirectoryService(_fake_provider([
            _raw_entry("Ada Lovelace", None, department=None, title=None),
        ]))
        [emp] = svc.list_employees()
        assert emp.supervisor == ""
        assert emp.department == ""
        assert emp.job_title == ""

    def test_numeric_id_becomes_string(self) -> None:
        entry = _raw_entry("Ada Lovelace")
        entry["id"] = 7
        [emp] = DirectoryService(_fake_provider([entry])).list_employees()
        assert emp.id == "7"

    def test_missing_keys_tolerated(self) -> None:
        [emp] = DirectoryService(_fake_provider([{"id": "1"}])).list_employees()
        assert emp.display_name == ""
        assert emp.photo_uploaded is False

    def test_order_preserved(self) -> None:
        svc = DirectoryService(_fake_provider([
            _raw_entry("Zed Zulu", id="1"),
            _raw_entry("Amy Alpha", id="2"),
        ]))
        assert [e.display_name for e in svc.list_employees()] == ["Zed Zulu", "Amy Alpha"]


# ---------------------------------------------------------------------------
# list_employees — exception mapping
# ---------------------------------------------------------------------------

class TestProviderExceptions:
    def test_provider_bhr_error_propagates(self) -> None:
        svc = DirectoryService(_fake_provider(AuthenticationError("denied")))
        with pytest.raises(AuthenticationError, match="denied"):
            svc.list_employees()

    def test_provider_unexpected_error_wrapped(self) -> None:
        svc = DirectoryService(_fake_provider(RuntimeError("boom")))
        with pytest.raises(ApiRequestError, match="Unexpected"):
            svc.list_employees()


# ---------------------------------------------------------------------------
# render
# ---------------------------------------------------------------------------

class TestRender:
    def test_renders_hierarchy(self) -> None:
        svc = DirectoryService(_fake_provider([
            _raw_entry("Grace Hopper", "Ada Lovelace", id="2"),
            _raw_entry("Ada Lovelace", "", id="1", title="CTO"),
            _raw_entry("Sam Seller", "", id="3", department="Sales", title="Rep"),
        ]))
        assert svc.render() == (
            "\n"
            "[ Engineering ]\n"
            "Ada Lovelace (CTO)\n"
            "  Grace Hopper (Engineer)\n"
            "\n"
            "[ Sales ]\n"
            "Sam Seller (Rep)\n"
        )

    def test_department_filter(self) -> None:
        svc = DirectoryService(_fake_provider([
            _raw_entry("Ada Lovelace", "", id="1"),
            _raw_entry("Sam Seller", "", id="3", department="Sales", title="Rep"),
        ]))
        output = svc.render(department="sales")
        assert "Sam Seller" in output
        assert "Ada Lovelace" not in output

    def test_invalid_pattern_fails_before_fetch(self) -> None:
        provider = _fake_provider([])
        svc = DirectoryService(provider)
        with pytest.raises(InvalidPatternError):
            svc.render(department="(")
        provider.fetch_directory.assert_not_called()

    def test_invalid_title_fails_before_fetch(self) -> None:
        provider = _fake_provider([])
        with pytest.raises(InvalidPatternError):
            DirectoryService(provider).render(department="Eng", title="[")
        provider.fetch_directory.assert_not_called()

    def test_cycle_is_reported(self) -> None:
        svc = DirectoryService(_fake_provider([
            _raw_entry("Ada Lovelace", "Grace Hopper", id="1"),
            _raw_entry("Grace Hopper", "Ada Lovelace", id="2"),
        ]))
        with pytest.raises(SupervisorCycleError):
            svc.render()

    def test_empty_directory(self) -> None:
        assert DirectoryService(_fake_provider([])).render() == ""

    def test_delegates_to_core_query(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[tuple[list[Employee], str, str]] = []

        def fake_query(employees: list[Employee], department: str, title: str) -> str:
            calls.append((employees, department, title))
            return "rendered"

        monkeypatch.setattr(
            "bhr.core.directory_service.build_and_render_directory", fake_query,
        )
        svc = DirectoryService(_fake_provider([_raw_entry("Ada Lovelace", "", id="1")]))
        assert svc.render("eng", "cto") == "rendered"
        [(employees, department, title)] = calls
        assert [e.display_name for e in employees] == ["Ada Lovelace"]
        assert (department, title) == ("eng", "cto")
