# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime
from http import HTTPStatus

from flask import Response, redirect

from snippetbox.application.interfaces import FLASH, SessionStore
from snippetbox.domain.users.entities import Viewer
from snippetbox.interfaces.http.rendering import PageRenderer, TemplateData
from snippetbox.shared.middleware.csrf import csrf_token


class PageController:
    def __init__(self, *, renderer: PageRenderer, sessions: SessionStore) -> None:
        self._renderer = renderer
        self._sessions = sessions

    def _template_data(self, viewer: Viewer) -> TemplateData:
        return TemplateData(
            current_year=datetime.now(UTC).year,
            flash=self._sessions.pop_once(FLASH),
            is_authenticated=viewer.is_authenticated,
            csrf_token=csrf_token(),
        )

    def _render(
        self, page: str, data: TemplateData, status: HTTPStatus = HTTPStatus.OK
    ) -> Response:
        return self._renderer.render(page, data, status)

    def _flash_and_redirect(self, message: str, location: str) -> Response:
        self._sessions.put(FLASH, message)
        return redirect(location, code=HTTPStatus.SEE_OTHER)
