from __future__ import annotations

import re
from collections.abc import Iterator
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from snippetbox.app import create_app
from snippetbox.container import Container
from snippetbox.infrastructure.db import init_db
from snippetbox.shared.config import AppConfig, DatabaseConfig

CSRF_RX = re.compile(r'name="csrf_token" value="([^"]+)"')


@pytest.fixture()
def config(tmp_path: Path) -> AppConfig:
    return AppConfig(
        APP_ENV="testing",
        SECRET_KEY="test-secret",
        # fast hashing keeps the suite quick
        PASSWORD_HASH_METHOD="pbkdf2:sha256:1000",
        database=DatabaseConfig(DATABASE_URL=f"sqlite:///{tmp_path / 'snippetbox.db'}"),
    )


@pytest.fixture()
def container(config: AppConfig) -> Iterator[Container]:
    container = Container(config)
    init_db(container.engine)
    yield container
    container.engine.dispose()


@pytest.fixture()
def app(config: AppConfig, container: Container) -> Flask:
    app = create_app(config, container)
    app.config.update(TESTING=True)
    return app


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()


def extract_csrf_token(html: str) -> str:
    match = CSRF_RX.search(html)
    assert match is not None, "page has no csrf_token field"
    return match.group(1)


def csrf_for(client: FlaskClient, path: str) -> str:
    response = client.get(path)
    return extract_csrf_token(response.get_data(as_text=True))


def signup(client: FlaskClient, name: str, email: str, password: str):
    token = csrf_for(client, "/user/signup")
    return client.post(
        "/user/signup",
        data={"name": name, "email": email, "password": password, "csrf_token": token},
    )


def login(client: FlaskClient, email: str, password: str):
    token = csrf_for(client, "/user/login")
    return client.post(
        "/user/login",
        data={"email": email, "password": password, "csrf_token": token},
    )
