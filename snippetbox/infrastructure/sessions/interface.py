# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Server-side sessions: the cookie carries an opaque token, data stays in the database."""

from __future__ import annotations

import secrets
from datetime import UTC, datetime, timedelta
from typing import Any

from flask import Flask, Request, Response
from flask.sessions import SessionInterface, SessionMixin
from werkzeug.datastructures import CallbackDict

from snippetbox.shared.logging import logger

from .repository import SqlAlchemySessionRepository


class ServerSideSession(CallbackDict, SessionMixin):
    def __init__(
        self,
        initial: dict[str, Any] | None = None,
        token: str | None = None,
        new: bool = False,
    ) -> None:
        def on_update(session: ServerSideSession) -> None:
            session.modified = True

        super().__init__(initial, on_update)
        self.token = token
        self.new = new
        self.modified = False
        self.rotate = False
        self.destroyed = False


class SqlAlchemySessionInterface(SessionInterface):
    session_class = ServerSideSession

    def __init__(self, repository: SqlAlchemySessionRepository, *, lifetime: timedelta) -> None:
        self._repository = repository
        self._lifetime = lifetime

    @staticmethod
    def _new_token() -> str:
        return secrets.token_urlsafe(32)

    def open_session(self, app: Flask, request: Request) -> ServerSideSession:
        token = request.cookies.get(self.get_cookie_name(app))
        if token:
            data = self._repository.find(token)
            if data is not None:
                return self.session_class(data, token=token)
        return self.session_class(new=True)

    def save_session(self, app: Flask, session: SessionMixin, response: Response) -> None:
        assert isinstance(session, ServerSideSession)
        name = self.get_cookie_name(app)
        domain = self.get_cookie_domain(app)
        path = self.get_cookie_path(app)

        if session.destroyed or (not session and session.modified):
            if session.token:
                self._repository.delete(session.token)
                response.delete_cookie(name, domain=domain, path=path)
            return

        if not session.modified:
            return

        if session.rotate and session.token:
            self._repository.delete(session.token)
            logger.debug("session: token renewed")
            session.token = None
        if session.token is None:
            session.token = self._new_token()

        expiry = datetime.now(UTC) + self._lifetime
        self._repository.commit(session.token, dict(session), expiry)
        response.set_cookie(
            name,
            session.token,
            expires=expiry,
            httponly=self.get_cookie_httponly(app),
            secure=self.get_cookie_secure(app),
            samesite=self.get_cookie_samesite(app),
            domain=domain,
            path=path,
        )
        response.vary.add("Cookie")
