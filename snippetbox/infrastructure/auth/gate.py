# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from http import HTTPStatus

from flask import make_response, redirect, request

from snippetbox.application.interfaces import AUTHENTICATED_USER_ID, SessionStore
from snippetbox.domain.users.entities import ANONYMOUS, Viewer
from snippetbox.domain.users.repositories import UserRepository
from snippetbox.shared.logging import logger

LOGIN_PATH = "/user/login"


class AuthGate:
    """Decides per request whether the caller is a known, existing user.

    Views wrapped by :meth:`identify` or :meth:`require_authentication`
    receive the resolved :class:`Viewer` as the ``viewer`` keyword argument.
    """

    def __init__(
        self,
        *,
        sessions: SessionStore,
        users: UserRepository,
        login_path: str = LOGIN_PATH,
    ) -> None:
        self._sessions = sessions
        self._users = users
        self._login_path = login_path

    def resolve(self) -> Viewer:
        user_id = self._sessions.get(AUTHENTICATED_USER_ID)
        if not isinstance(user_id, int) or isinstance(user_id, bool) or user_id == 0:
            return ANONYMOUS

        if not self._users.exists(user_id):
            # stale id from a removed account
            logger.debug(f"auth.resolve: session user_id={user_id} no longer exists")
            return ANONYMOUS

        return Viewer(user_id=user_id)

    def identify(self, view: Callable) -> Callable:
        @wraps(view)
        def inner(*args, **kwargs):
            kwargs["viewer"] = self.resolve()
            return view(*args, **kwargs)

        return inner

    def require_authentication(self, view: Callable) -> Callable:
        @wraps(view)
        def inner(*args, **kwargs):
            viewer = self.resolve()
            if not viewer.is_authenticated:
                logger.info(f"auth.gate: anonymous {request.method} {request.path} -> login")
                return redirect(self._login_path, code=HTTPStatus.SEE_OTHER)

            kwargs["viewer"] = viewer
            response = make_response(view(*args, **kwargs))
            response.headers.add("Cache-Control", "no-store")
            return response

        return inner
