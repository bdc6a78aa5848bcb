# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Use-case for ending an authenticated session."""

from __future__ import annotations

from snippetbox.application.interfaces import AUTHENTICATED_USER_ID, FLASH, SessionStore

LOGGED_OUT_MESSAGE = "You've been logged out successfully!"


class LogoutUserUseCase:
    def __init__(self, *, sessions: SessionStore) -> None:
        self._sessions = sessions

    def execute(self) -> None:
        self._sessions.renew_token()
        self._sessions.remove(AUTHENTICATED_USER_ID)
        self._sessions.put(FLASH, LOGGED_OUT_MESSAGE)
