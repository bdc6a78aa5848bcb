# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from snippetbox.shared.validator import EMAIL_RX, matches, min_chars, not_blank

from .base import BLANK_MESSAGE, Form

MIN_PASSWORD_CHARS = 8
INVALID_EMAIL_MESSAGE = "This field must be a valid email address"
DUPLICATE_EMAIL_MESSAGE = "Email address is already in use"
INVALID_CREDENTIALS_MESSAGE = "Email or password is incorrect"


class UserSignupForm(Form):
    name: str = ""
    email: str = ""
    password: str = ""

    def run_checks(self) -> None:
        self.check_field(not_blank(self.name), "name", BLANK_MESSAGE)
        self.check_field(not_blank(self.email), "email", BLANK_MESSAGE)
        self.check_field(matches(self.email, EMAIL_RX), "email", INVALID_EMAIL_MESSAGE)
        self.check_field(not_blank(self.password), "password", BLANK_MESSAGE)
        self.check_field(
            min_chars(self.password, MIN_PASSWORD_CHARS),
            "password",
            f"This field must be at least {MIN_PASSWORD_CHARS} characters long",
        )


class UserLoginForm(Form):
    email: str = ""
    password: str = ""

    def run_checks(self) -> None:
        self.check_field(not_blank(self.email), "email", BLANK_MESSAGE)
        self.check_field(matches(self.email, EMAIL_RX), "email", INVALID_EMAIL_MESSAGE)
        self.check_field(not_blank(self.password), "password", BLANK_MESSAGE)
