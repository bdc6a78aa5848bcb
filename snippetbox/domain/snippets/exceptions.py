# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from snippetbox.shared.errors.base import DomainError


class SnippetNotFoundError(DomainError):
    code = "snippet_not_found"
    status = HTTPStatus.NOT_FOUND

    def __init__(self, snippet_id: int) -> None:
        super().__init__(context={"snippet_id": snippet_id})
