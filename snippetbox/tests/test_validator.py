import re

import pytest

from snippetbox.shared.validator import (
    EMAIL_RX,
    Validator,
    matches,
    max_chars,
    min_chars,
    not_blank,
    permitted_value,
)


def test_fresh_validator_is_valid() -> None:
    assert Validator().is_valid() is True


def test_first_field_error_wins() -> None:
    validator = Validator()
    validator.add_field_error("title", "first")
    validator.add_field_error("title", "second")

    assert validator.field_errors == {"title": "first"}
    assert validator.is_valid() is False


def test_non_field_errors_invalidate() -> None:
    validator = Validator()
    validator.add_non_field_error("Email or password is incorrect")

    assert validator.is_valid() is False
    assert validator.non_field_errors == ["Email or password is incorrect"]


def test_check_field_records_only_failures() -> None:
    validator = Validator()
    validator.check_field(True, "a", "never")
    validator.check_field(False, "b", "broken")

    assert validator.field_errors == {"b": "broken"}


@pytest.mark.parametrize(
    ("value", "expected"),
    [("", False), ("   ", False), ("\t\n", False), ("x", True), (" x ", True)],
)
def test_not_blank(value: str, expected: bool) -> None:
    assert not_blank(value) is expected


def test_char_limits_count_code_points() -> None:
    assert max_chars("é" * 100, 100) is True
    assert max_chars("é" * 101, 100) is False
    assert min_chars("パスワード123", 8) is True
    assert min_chars("short", 8) is False


@pytest.mark.parametrize(
    "email",
    ["alice@example.com", "bob.smith+tag@mail.example.co.uk", "x@y"],
)
def test_email_pattern_accepts(email: str) -> None:
    assert matches(email, EMAIL_RX) is True


@pytest.mark.parametrize(
    "email",
    ["", "alice", "alice@", "@example.com", "alice@-example.com", "alice@example.com\nmore"],
)
def test_email_pattern_rejects(email: str) -> None:
    assert matches(email, EMAIL_RX) is False


def test_matches_requires_the_whole_value() -> None:
    assert matches("abc123", re.compile(r"[a-z]+")) is False
    assert matches("abc", r"[a-z]+") is True


def test_permitted_value() -> None:
    assert permitted_value(7, 1, 7, 365) is True
    assert permitted_value(30, 1, 7, 365) is False
    assert permitted_value("7", 1, 7, 365) is False
