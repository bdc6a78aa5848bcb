# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from snippetbox.domain.snippets.entities import MAX_SNIPPET_ID, Snippet
from snippetbox.domain.snippets.exceptions import SnippetNotFoundError
from snippetbox.domain.snippets.repositories import SnippetRepository


class GetSnippetUseCase:
    def __init__(self, *, snippets: SnippetRepository) -> None:
        self._snippets = snippets

    def execute(self, snippet_id: int) -> Snippet:
        if not 1 <= snippet_id <= MAX_SNIPPET_ID:
            raise SnippetNotFoundError(snippet_id)
        return self._snippets.get(snippet_id)
