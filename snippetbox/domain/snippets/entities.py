# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from snippetbox.domain.exceptions import InvariantViolation

PERMITTED_EXPIRY_DAYS: tuple[int, ...] = (1, 7, 365)
MAX_TITLE_CHARS = 100
LATEST_LIMIT = 10
# largest id the storage layer can hold
MAX_SNIPPET_ID = 2**63 - 1


@dataclass(slots=True, frozen=True)
class Snippet:
    """A short text that stops being visible once ``expires`` has passed."""

    id: int
    title: str
    content: str
    created: datetime
    expires: datetime

    def __post_init__(self) -> None:
        if self.id < 1:
            raise InvariantViolation("snippet id must be positive", field="id")
        if self.expires <= self.created:
            raise InvariantViolation("expiry must be after creation", field="expires")

    def is_live(self, now: datetime | None = None) -> bool:
        return self.expires > (now or datetime.now(UTC))
