# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, redirect, request

from snippetbox.application.forms import (
    DUPLICATE_EMAIL_MESSAGE,
    INVALID_CREDENTIALS_MESSAGE,
    UserLoginForm,
    UserSignupForm,
    process,
)
from snippetbox.application.interfaces import AUTHENTICATED_USER_ID, SessionStore
from snippetbox.application.use_cases.users.login_user import LoginUserUseCase
from snippetbox.application.use_cases.users.logout_user import LogoutUserUseCase
from snippetbox.application.use_cases.users.register_user import RegisterUserUseCase
from snippetbox.domain.users.entities import Viewer
from snippetbox.domain.users.exceptions import DuplicateEmailError, InvalidCredentialsError
from snippetbox.infrastructure.auth import LOGIN_PATH, AuthGate
from snippetbox.interfaces.http.rendering import PageRenderer
from snippetbox.shared.logging import logger

from .base import PageController

SIGNUP_MESSAGE = "Your signup was successful. Please log in."
AFTER_LOGIN_PATH = "/snippet/create"


class UsersController(PageController):
    def __init__(
        self,
        *,
        renderer: PageRenderer,
        sessions: SessionStore,
        gate: AuthGate,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        logout_use_case: LogoutUserUseCase,
    ) -> None:
        super().__init__(renderer=renderer, sessions=sessions)
        self._gate = gate
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._logout_use_case = logout_use_case

    def _redisplay(
        self, page: str, form: UserSignupForm | UserLoginForm, viewer: Viewer
    ) -> Response:
        form.password = ""
        data = self._template_data(viewer)
        data.form = form
        return self._render(page, data, HTTPStatus.UNPROCESSABLE_ENTITY)

    def signup_form(self, viewer: Viewer) -> Response:
        data = self._template_data(viewer)
        data.form = UserSignupForm()
        return self._render("signup.html", data)

    def signup(self, viewer: Viewer) -> Response:
        form = process(request.form, UserSignupForm)
        if not form.is_valid():
            return self._redisplay("signup.html", form, viewer)

        try:
            user_id = self._register_use_case.execute(form.name, form.email, form.password)
        except DuplicateEmailError:
            logger.info("auth.signup: duplicate email")
            form.add_field_error("email", DUPLICATE_EMAIL_MESSAGE)
            return self._redisplay("signup.html", form, viewer)

        logger.info(f"auth.signup: ok user_id={user_id}")
        return self._flash_and_redirect(SIGNUP_MESSAGE, LOGIN_PATH)

    def login_form(self, viewer: Viewer) -> Response:
        data = self._template_data(viewer)
        data.form = UserLoginForm()
        return self._render("login.html", data)

    def login(self, viewer: Viewer) -> Response:
        form = process(request.form, UserLoginForm)
        if not form.is_valid():
            return self._redisplay("login.html", form, viewer)

        try:
            user_id = self._login_use_case.execute(form.email, form.password)
        except InvalidCredentialsError:
            logger.warning(f"auth.login: invalid credentials email={form.email}")
            form.add_non_field_error(INVALID_CREDENTIALS_MESSAGE)
            return self._redisplay("login.html", form, viewer)

        # privilege change: issue a fresh session token
        self._sessions.renew_token()
        self._sessions.put(AUTHENTICATED_USER_ID, user_id)
        logger.info(f"auth.login: ok user_id={user_id}")
        return redirect(AFTER_LOGIN_PATH, code=HTTPStatus.SEE_OTHER)

    def logout(self, viewer: Viewer) -> Response:
        self._logout_use_case.execute()
        logger.info(f"auth.logout: ok user_id={viewer.user_id}")
        return redirect("/", code=HTTPStatus.SEE_OTHER)

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("users", __name__, url_prefix="/user")
        bp.add_url_rule(
            "/signup", endpoint="signup_form",
            view_func=self._gate.identify(self.signup_form), methods=["GET"],
        )
        bp.add_url_rule(
            "/signup", endpoint="signup",
            view_func=self._gate.identify(self.signup), methods=["POST"],
        )
        bp.add_url_rule(
            "/login", endpoint="login_form",
            view_func=self._gate.identify(self.login_form), methods=["GET"],
        )
        bp.add_url_rule(
            "/login", endpoint="login",
            view_func=self._gate.identify(self.login), methods=["POST"],
        )
        bp.add_url_rule(
            "/logout", endpoint="logout",
            view_func=self._gate.require_authentication(self.logout), methods=["POST"],
        )
        return bp
