# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:

    id: int
    name: str
    email: str
    hashed_password: str = field(repr=False)
    created: datetime


@dataclass(slots=True, frozen=True)
class Viewer:
    """Authentication state of the request being handled."""

    user_id: int | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None


ANONYMOUS = Viewer()
