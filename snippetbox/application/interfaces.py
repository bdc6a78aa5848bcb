# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any, Protocol

AUTHENTICATED_USER_ID = "authenticated_user_id"
FLASH = "flash"


class SessionStore(Protocol):
    """Per-request view of the server-side session."""

    def get(self, key: str, default: Any = None) -> Any: ...

    def put(self, key: str, value: Any) -> None: ...

    def pop_once(self, key: str) -> Any: ...

    def exists(self, key: str) -> bool: ...

    def remove(self, key: str) -> None: ...

    def renew_token(self) -> None: ...
