# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, PrivateAttr

from snippetbox.shared.validator import Validator

BLANK_MESSAGE = "This field cannot be blank"


class Form(BaseModel):
    """Typed form values plus the validator that judges them.

    Validation calls made on the form are forwarded to its own
    :class:`Validator`, so handlers can write ``form.check_field(...)``.
    """

    model_config = ConfigDict(extra="ignore")

    _validator: Validator = PrivateAttr(default_factory=Validator)

    @property
    def field_errors(self) -> dict[str, str]:
        return self._validator.field_errors

    @property
    def non_field_errors(self) -> list[str]:
        return self._validator.non_field_errors

    def check_field(self, ok: bool, key: str, message: str) -> None:
        self._validator.check_field(ok, key, message)

    def add_field_error(self, key: str, message: str) -> None:
        self._validator.add_field_error(key, message)

    def add_non_field_error(self, message: str) -> None:
        self._validator.add_non_field_error(message)

    def is_valid(self) -> bool:
        return self._validator.is_valid()

    def run_checks(self) -> None:
        """Apply the form's rule set. Every rule runs; errors accumulate."""
