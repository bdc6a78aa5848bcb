# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Rule checking primitives shared by every form."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

EMAIL_RX = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@[a-zA-Z0-9]"
    r"(?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)


@dataclass(slots=True)
class Validator:
    """Collects field and non-field errors for a single form submission."""

    field_errors: dict[str, str] = field(default_factory=dict)
    non_field_errors: list[str] = field(default_factory=list)

    def is_valid(self) -> bool:
        return not self.field_errors and not self.non_field_errors

    def add_field_error(self, key: str, message: str) -> None:
        # first error per field wins
        self.field_errors.setdefault(key, message)

    def add_non_field_error(self, message: str) -> None:
        self.non_field_errors.append(message)

    def check_field(self, ok: bool, key: str, message: str) -> None:
        if not ok:
            self.add_field_error(key, message)


def not_blank(value: str) -> bool:
    return value.strip() != ""


def max_chars(value: str, n: int) -> bool:
    # str length is measured in code points
    return len(value) <= n


def min_chars(value: str, n: int) -> bool:
    return len(value) >= n


def matches(value: str, rx: re.Pattern[str] | str) -> bool:
    pattern = re.compile(rx) if isinstance(rx, str) else rx
    return pattern.fullmatch(value) is not None


def permitted_value(value: Any, *permitted: Any) -> bool:
    return value in permitted


__all__ = [
    "EMAIL_RX",
    "Validator",
    "matches",
    "max_chars",
    "min_chars",
    "not_blank",
    "permitted_value",
]
