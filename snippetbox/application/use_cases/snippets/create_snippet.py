# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from snippetbox.application.forms.snippets import SnippetCreateForm
from snippetbox.domain.snippets.repositories import SnippetRepository


class CreateSnippetUseCase:
    def __init__(self, *, snippets: SnippetRepository) -> None:
        self._snippets = snippets

    def execute(self, form: SnippetCreateForm) -> int:
        if not form.is_valid():
            raise ValueError("refusing to insert a snippet from an invalid form")
        return self._snippets.insert(form.title, form.content, form.expires)
