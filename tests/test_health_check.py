"""Tests for archloom.model.health_check."""

from __future__ import annotations

import dataclasses

import pytest

from archloom.model import ErrorCode, HttpHealthCheck, Ok, ValidationError, create_health_check
from archloom.model.health_check import is_absolute_url


class TestIsAbsoluteUrl:
    @pytest.mark.parametrize(
        "url",
        ["http://localhost", "http://localhost:8080", "https://example.com/health?x=1"],
    )
    def test_valid(self, url: str) -> None:
        assert is_absolute_url(url)

    @pytest.mark.parametrize(
        "url",
        ["localhost", "localhost:8080", "file:///health", "/health", "http://", "http://[::1"],
    )
    def test_invalid(self, url: str) -> None:
        assert not is_absolute_url(url)


class TestCreateHealthCheck:
    def test_defaults(self) -> None:
        result = create_health_check("Test", "http://localhost:8080")
        assert isinstance(result, Ok)
        assert result.value == HttpHealthCheck("Test", "http://localhost:8080", 60, 0)

    def test_zero_values_allowed(self) -> None:
        check = create_health_check("Test", "http://localhost", 0, 0).unwrap()
        assert (check.interval, check.timeout) == (0, 0)

    def test_invalid_url_message_uses_input(self) -> None:
        result = create_health_check("Test", "not a url")
        assert not result.ok
        with pytest.raises(ValidationError, match=r"^not a url is not a valid URL\.$"):
            result.unwrap()

    @pytest.mark.parametrize(
        ("args", "code"),
        [
            ((None, None, -1, -1), ErrorCode.BLANK_NAME),
            (("n", None, -1, -1), ErrorCode.BLANK_URL),
            (("n", "x", -1, -1), ErrorCode.INVALID_URL),
            (("n", "http://x", -1, -1), ErrorCode.NEGATIVE_INTERVAL),
            (("n", "http://x", 1, -1), ErrorCode.NEGATIVE_TIMEOUT),
        ],
    )
    def test_validation_order(self, args: tuple[object, ...], code: ErrorCode) -> None:
        result = create_health_check(*args)  # type: ignore[arg-type]
        assert not result.ok
        assert result.error.code is code  # type: ignore[union-attr]


class TestHeaders:
    def test_add_header(self) -> None:
        check = HttpHealthCheck("Web", "http://localhost")
        check.add_header("Authorization", "Bearer token")
        check.add_header("X-Empty", None)
        assert check.headers == {"Authorization": "Bearer token", "X-Empty": ""}

    @pytest.mark.parametrize("name", [None, "", "  "])
    def test_blank_header_name(self, name: str | None) -> None:
        check = HttpHealthCheck("Web", "http://localhost")
        with pytest.raises(ValidationError, match="The header name must not be null or empty"):
            check.add_header(name, "value")
        assert check.headers == {}

    def test_headers_not_shared(self) -> None:
        first = HttpHealthCheck("a", "http://a")
        second = HttpHealthCheck("b", "http://b")
        first.add_header("X", "1")
        assert second.headers == {}


class TestImmutability:
    @pytest.mark.parametrize(
        ("field_name", "value"),
        [("name", ""), ("url", "localhost"), ("interval", -5), ("timeout", -1)],
    )
    def test_fields_cannot_be_reassigned(self, field_name: str, value: object) -> None:
        check = create_health_check("Web", "http://localhost").unwrap()
        with pytest.raises(dataclasses.FrozenInstanceError):
            setattr(check, field_name, value)
        assert check == HttpHealthCheck("Web", "http://localhost", 60, 0)

    def test_headers_still_added_on_frozen_check(self) -> None:
        check = create_health_check("Web", "http://localhost").unwrap()
        check.add_header("Accept", "application/json")
        assert check.headers == {"Accept": "application/json"}
