# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, request

from snippetbox.application.forms import SnippetCreateForm, process
from snippetbox.application.interfaces import SessionStore
from snippetbox.application.use_cases.snippets.create_snippet import CreateSnippetUseCase
from snippetbox.application.use_cases.snippets.get_snippet import GetSnippetUseCase
from snippetbox.application.use_cases.snippets.latest_snippets import LatestSnippetsUseCase
from snippetbox.domain.users.entities import Viewer
from snippetbox.infrastructure.auth import AuthGate
from snippetbox.interfaces.http.rendering import PageRenderer
from snippetbox.shared.logging import logger

from .base import PageController

DEFAULT_EXPIRES_DAYS = 365
CREATED_MESSAGE = "Snippet successfully created!"


class SnippetsController(PageController):
    def __init__(
        self,
        *,
        renderer: PageRenderer,
        sessions: SessionStore,
        gate: AuthGate,
        latest_use_case: LatestSnippetsUseCase,
        get_use_case: GetSnippetUseCase,
        create_use_case: CreateSnippetUseCase,
    ) -> None:
        super().__init__(renderer=renderer, sessions=sessions)
        self._gate = gate
        self._latest_use_case = latest_use_case
        self._get_use_case = get_use_case
        self._create_use_case = create_use_case

    def home(self, viewer: Viewer) -> Response:
        data = self._template_data(viewer)
        data.snippets = self._latest_use_case.execute()
        return self._render("home.html", data)

    def view(self, snippet_id: int, viewer: Viewer) -> Response:
        snippet = self._get_use_case.execute(snippet_id)
        data = self._template_data(viewer)
        data.snippet = snippet
        return self._render("view.html", data)

    def create_form(self, viewer: Viewer) -> Response:
        data = self._template_data(viewer)
        data.form = SnippetCreateForm(expires=DEFAULT_EXPIRES_DAYS)
        return self._render("create.html", data)

    def create(self, viewer: Viewer) -> Response:
        form = process(request.form, SnippetCreateForm)
        if not form.is_valid():
            logger.info(f"snippet.create: invalid fields={sorted(form.field_errors)}")
            data = self._template_data(viewer)
            data.form = form
            return self._render("create.html", data, HTTPStatus.UNPROCESSABLE_ENTITY)

        snippet_id = self._create_use_case.execute(form)
        logger.info(f"snippet.create: ok (user_id={viewer.user_id}, snippet_id={snippet_id})")
        return self._flash_and_redirect(CREATED_MESSAGE, f"/snippet/view/{snippet_id}")

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("snippets", __name__)
        bp.add_url_rule("/", view_func=self._gate.identify(self.home), methods=["GET"])
        bp.add_url_rule(
            "/snippet/view/<int:snippet_id>",
            view_func=self._gate.identify(self.view),
            methods=["GET"],
        )
        bp.add_url_rule(
            "/snippet/create",
            endpoint="create_form",
            view_func=self._gate.require_authentication(self.create_form),
            methods=["GET"],
        )
        bp.add_url_rule(
            "/snippet/create",
            endpoint="create",
            view_func=self._gate.require_authentication(self.create),
            methods=["POST"],
        )
        return bp
