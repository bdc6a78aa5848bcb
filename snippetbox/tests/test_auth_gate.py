from flask import Flask

from snippetbox.application.interfaces import AUTHENTICATED_USER_ID
from snippetbox.container import Container
from snippetbox.domain.users.entities import ANONYMOUS, Viewer


def test_resolve_without_session_value_is_anonymous(app: Flask, container: Container) -> None:
    with app.test_request_context("/"):
        assert container.auth_gate.resolve() == ANONYMOUS


def test_resolve_known_user(app: Flask, container: Container) -> None:
    user_id = container.user_repository.add("Alice", "alice@example.com", "h")
    with app.test_request_context("/"):
        container.session_store.put(AUTHENTICATED_USER_ID, user_id)
        assert container.auth_gate.resolve() == Viewer(user_id=user_id)


def test_resolve_stale_user_is_anonymous(app: Flask, container: Container) -> None:
    with app.test_request_context("/"):
        container.session_store.put(AUTHENTICATED_USER_ID, 42)
        assert container.auth_gate.resolve().is_authenticated is False


def test_resolve_ignores_non_integer_values(app: Flask, container: Container) -> None:
    container.user_repository.add("Alice", "alice@example.com", "h")
    with app.test_request_context("/"):
        for value in ("1", True, 0, None):
            container.session_store.put(AUTHENTICATED_USER_ID, value)
            assert container.auth_gate.resolve() == ANONYMOUS


def test_require_authentication_redirects_anonymous(app: Flask, container: Container) -> None:
    calls = []

    @container.auth_gate.require_authentication
    def view(viewer):
        calls.append(viewer)
        return "secret"

    with app.test_request_context("/snippet/create"):
        response = view()

    assert response.status_code == 303
    assert response.headers["Location"] == "/user/login"
    assert calls == []


def test_require_authentication_marks_response_uncacheable(
    app: Flask, container: Container
) -> None:
    user_id = container.user_repository.add("Alice", "alice@example.com", "h")

    @container.auth_gate.require_authentication
    def view(viewer):
        return f"hello {viewer.user_id}"

    with app.test_request_context("/snippet/create"):
        container.session_store.put(AUTHENTICATED_USER_ID, user_id)
        response = view()

    assert response.status_code == 200
    assert response.get_data(as_text=True) == f"hello {user_id}"
    assert response.headers["Cache-Control"] == "no-store"
