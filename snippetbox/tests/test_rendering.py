from datetime import UTC, datetime, timedelta, timezone

import pytest
from flask import Flask

from snippetbox.interfaces.http.rendering import (
    PageRenderer,
    TemplateData,
    default_template_config,
    human_date,
)
from snippetbox.shared.errors import PageNotFoundError


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (datetime(2024, 3, 17, 10, 15, tzinfo=UTC), "17 Mar 2024 at 10:15"),
        (datetime(2024, 3, 17, 10, 15, tzinfo=timezone(timedelta(hours=1))), "17 Mar 2024 at 09:15"),
        (datetime(2024, 3, 17, 10, 15), "17 Mar 2024 at 10:15"),
        (None, ""),
    ],
)
def test_human_date(value: datetime | None, expected: str) -> None:
    assert human_date(value) == expected


def test_renders_known_page(app: Flask) -> None:
    renderer = PageRenderer(default_template_config())
    with app.test_request_context("/"):
        response = renderer.render("home.html", TemplateData(current_year=2024))

    body = response.get_data(as_text=True)
    assert response.status_code == 200
    assert response.mimetype == "text/html"
    assert "Powered by Flask in 2024" in body


def test_unknown_page_raises(app: Flask) -> None:
    renderer = PageRenderer(default_template_config())
    with app.test_request_context("/"):
        with pytest.raises(PageNotFoundError):
            renderer.render("missing.html", TemplateData(current_year=2024))


def test_unknown_page_becomes_server_error(app: Flask) -> None:
    renderer = PageRenderer(default_template_config())

    @app.get("/broken")
    def broken():
        return renderer.render("missing.html", TemplateData(current_year=2024))

    response = app.test_client().get("/broken")

    assert response.status_code == 500
    assert response.get_data(as_text=True) == "Internal Server Error\n"
