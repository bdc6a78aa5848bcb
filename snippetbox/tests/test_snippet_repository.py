from datetime import UTC, datetime, timedelta

import pytest
from sqlalchemy import update

from snippetbox.container import Container
from snippetbox.domain.snippets.exceptions import SnippetNotFoundError
from snippetbox.infrastructure.db import session_scope
from snippetbox.infrastructure.db.models import SnippetRow


def _expire(container: Container, snippet_id: int) -> None:
    with session_scope(container.session_factory) as session:
        session.execute(
            update(SnippetRow)
            .where(SnippetRow.id == snippet_id)
            .values(expires=datetime.now(UTC) - timedelta(seconds=1))
        )


def test_insert_then_get(container: Container) -> None:
    repo = container.snippet_repository
    before = datetime.now(UTC)

    snippet_id = repo.insert("O snail", "Climb Mount Fuji,\nBut slowly, slowly!", 7)
    snippet = repo.get(snippet_id)

    assert snippet.id == snippet_id
    assert snippet.title == "O snail"
    assert snippet.content == "Climb Mount Fuji,\nBut slowly, slowly!"
    assert snippet.created >= before - timedelta(seconds=1)
    assert snippet.expires - snippet.created == timedelta(days=7)


def test_ids_increase(container: Container) -> None:
    repo = container.snippet_repository
    first = repo.insert("a", "a", 1)
    second = repo.insert("b", "b", 1)

    assert second > first >= 1


def test_get_missing_raises_not_found(container: Container) -> None:
    with pytest.raises(SnippetNotFoundError):
        container.snippet_repository.get(999)


def test_expired_snippet_is_not_found(container: Container) -> None:
    repo = container.snippet_repository
    snippet_id = repo.insert("gone", "soon", 1)
    _expire(container, snippet_id)

    with pytest.raises(SnippetNotFoundError):
        repo.get(snippet_id)
    assert repo.latest() == []


def test_latest_returns_ten_newest_live(container: Container) -> None:
    repo = container.snippet_repository
    ids = [repo.insert(f"snippet {n}", "body", 365) for n in range(15)]
    _expire(container, ids[-1])

    latest = repo.latest()

    assert [s.id for s in latest] == list(reversed(ids[-11:-1]))


def test_latest_on_empty_table(container: Container) -> None:
    assert container.snippet_repository.latest() == []
