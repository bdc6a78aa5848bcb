# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from snippetbox.domain.snippets.entities import LATEST_LIMIT, Snippet
from snippetbox.domain.snippets.repositories import SnippetRepository


class LatestSnippetsUseCase:
    def __init__(self, *, snippets: SnippetRepository, limit: int = LATEST_LIMIT) -> None:
        self._snippets = snippets
        self._limit = limit

    def execute(self) -> Sequence[Snippet]:
        return self._snippets.latest(self._limit)
