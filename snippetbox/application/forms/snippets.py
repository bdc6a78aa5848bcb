# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from snippetbox.domain.snippets.entities import MAX_TITLE_CHARS, PERMITTED_EXPIRY_DAYS
from snippetbox.shared.validator import max_chars, not_blank, permitted_value

from .base import BLANK_MESSAGE, Form


class SnippetCreateForm(Form):
    title: str = ""
    content: str = ""
    expires: int = 0

    def run_checks(self) -> None:
        self.check_field(not_blank(self.title), "title", BLANK_MESSAGE)
        self.check_field(
            max_chars(self.title, MAX_TITLE_CHARS),
            "title",
            f"This field cannot be more than {MAX_TITLE_CHARS} characters long",
        )
        self.check_field(not_blank(self.content), "content", BLANK_MESSAGE)
        self.check_field(
            permitted_value(self.expires, *PERMITTED_EXPIRY_DAYS),
            "expires",
            "This field must equal 1, 7 or 365",
        )
