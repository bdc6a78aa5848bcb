# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime
from http import HTTPStatus
from typing import Any

from flask import Flask, Response, current_app
from jinja2 import TemplateNotFound

from snippetbox.application.forms import Form
from snippetbox.domain.snippets.entities import Snippet
from snippetbox.shared.errors import PageNotFoundError


def human_date(value: datetime | None) -> str:
    if value is None:
        return ""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).strftime("%d %b %Y at %H:%M")


@dataclass(slots=True, frozen=True)
class TemplateConfig:
    """Functions made available to every page template."""

    filters: Mapping[str, Callable[..., Any]] = field(default_factory=dict)


def default_template_config() -> TemplateConfig:
    return TemplateConfig(filters={"human_date": human_date})


@dataclass(slots=True)
class TemplateData:
    current_year: int
    flash: str | None = None
    is_authenticated: bool = False
    csrf_token: str = ""
    snippet: Snippet | None = None
    snippets: Sequence[Snippet] = ()
    form: Form | None = None


class PageRenderer:
    def __init__(self, config: TemplateConfig, *, pages_dir: str = "pages") -> None:
        self._config = config
        self._pages_dir = pages_dir

    def init_app(self, app: Flask) -> None:
        app.jinja_env.filters.update(self._config.filters)

    def render(
        self,
        page: str,
        data: TemplateData,
        status: HTTPStatus = HTTPStatus.OK,
    ) -> Response:
        env = current_app.jinja_env
        try:
            template = env.get_template(f"{self._pages_dir}/{page}")
        except TemplateNotFound as exc:
            raise PageNotFoundError(page) from exc

        # render fully before committing to a status code
        body = template.render(data=data)
        return Response(body, status=status, mimetype="text/html")
