# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Application dependency container."""

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from snippetbox.application.services.password_hashing import WerkzeugPasswordHasher
from snippetbox.application.use_cases.snippets.create_snippet import CreateSnippetUseCase
from snippetbox.application.use_cases.snippets.get_snippet import GetSnippetUseCase
from snippetbox.application.use_cases.snippets.latest_snippets import LatestSnippetsUseCase
from snippetbox.application.use_cases.users.login_user import LoginUserUseCase
from snippetbox.application.use_cases.users.logout_user import LogoutUserUseCase
from snippetbox.application.use_cases.users.register_user import RegisterUserUseCase
from snippetbox.infrastructure.auth import AuthGate
from snippetbox.infrastructure.db import build_engine, build_session_factory
from snippetbox.infrastructure.repositories.snippets import SqlAlchemySnippetRepository
from snippetbox.infrastructure.repositories.users import SqlAlchemyUserRepository
from snippetbox.infrastructure.sessions import (
    FlaskSessionStore,
    SqlAlchemySessionInterface,
    SqlAlchemySessionRepository,
)
from snippetbox.interfaces.http.controllers.misc_controller import MiscController
from snippetbox.interfaces.http.controllers.snippets_controller import SnippetsController
from snippetbox.interfaces.http.controllers.users_controller import UsersController
from snippetbox.interfaces.http.rendering import PageRenderer, default_template_config
from snippetbox.shared.config import AppConfig


class Container:
    def __init__(self, config: AppConfig) -> None:
        self.config = config

    @cached_property
    def engine(self) -> Engine:
        return build_engine(self.config.database)

    @cached_property
    def session_factory(self) -> sessionmaker[Session]:
        return build_session_factory(self.engine)

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(self.config.password_hash_method)

    @cached_property
    def snippet_repository(self) -> SqlAlchemySnippetRepository:
        return SqlAlchemySnippetRepository(self.session_factory)

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.session_factory)

    @cached_property
    def session_interface(self) -> SqlAlchemySessionInterface:
        return SqlAlchemySessionInterface(
            SqlAlchemySessionRepository(self.session_factory),
            lifetime=timedelta(seconds=self.config.session.lifetime),
        )

    @cached_property
    def session_store(self) -> FlaskSessionStore:
        return FlaskSessionStore()

    @cached_property
    def renderer(self) -> PageRenderer:
        return PageRenderer(default_template_config())

    @cached_property
    def auth_gate(self) -> AuthGate:
        return AuthGate(sessions=self.session_store, users=self.user_repository)

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def logout_user_use_case(self) -> LogoutUserUseCase:
        return LogoutUserUseCase(sessions=self.session_store)

    @cached_property
    def users_controller(self) -> UsersController:
        return UsersController(
            renderer=self.renderer,
            sessions=self.session_store,
            gate=self.auth_gate,
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            logout_use_case=self.logout_user_use_case,
        )

    @cached_property
    def snippets_controller(self) -> SnippetsController:
        return SnippetsController(
            renderer=self.renderer,
            sessions=self.session_store,
            gate=self.auth_gate,
            latest_use_case=LatestSnippetsUseCase(snippets=self.snippet_repository),
            get_use_case=GetSnippetUseCase(snippets=self.snippet_repository),
            create_use_case=CreateSnippetUseCase(snippets=self.snippet_repository),
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController()
