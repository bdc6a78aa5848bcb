# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any, cast

from flask import session

from snippetbox.application.interfaces import SessionStore

from .interface import ServerSideSession


def _current() -> ServerSideSession:
    return cast(ServerSideSession, session)


class FlaskSessionStore(SessionStore):
    """Reads and writes the session attached to the request being handled."""

    def get(self, key: str, default: Any = None) -> Any:
        return _current().get(key, default)

    def put(self, key: str, value: Any) -> None:
        _current()[key] = value

    def pop_once(self, key: str) -> Any:
        return _current().pop(key, None)

    def exists(self, key: str) -> bool:
        return key in _current()

    def remove(self, key: str) -> None:
        _current().pop(key, None)

    def renew_token(self) -> None:
        current = _current()
        current.rotate = True
        current.modified = True

    def destroy(self) -> None:
        current = _current()
        current.clear()
        current.destroyed = True
