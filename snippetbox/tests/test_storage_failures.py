from datetime import UTC, datetime, timedelta

import pytest

from snippetbox.container import Container
from snippetbox.infrastructure.db import Base
from snippetbox.infrastructure.sessions import SqlAlchemySessionRepository
from snippetbox.shared.errors import StorageUnavailableError


@pytest.fixture()
def broken(container: Container) -> Container:
    Base.metadata.drop_all(container.engine)
    return container


def test_snippet_operations_report_unavailable_storage(broken: Container) -> None:
    repo = broken.snippet_repository

    with pytest.raises(StorageUnavailableError) as exc_info:
        repo.insert("t", "c", 7)
    assert exc_info.value.status == 500
    assert exc_info.value.context == {"operation": "snippets.insert"}

    with pytest.raises(StorageUnavailableError):
        repo.get(1)
    with pytest.raises(StorageUnavailableError):
        repo.latest()


def test_user_operations_report_unavailable_storage(broken: Container) -> None:
    repo = broken.user_repository

    with pytest.raises(StorageUnavailableError):
        repo.add("Alice", "alice@example.com", "h")
    with pytest.raises(StorageUnavailableError):
        repo.find_by_email("alice@example.com")
    with pytest.raises(StorageUnavailableError):
        repo.exists(1)


def test_session_operations_report_unavailable_storage(broken: Container) -> None:
    repo = SqlAlchemySessionRepository(broken.session_factory)

    with pytest.raises(StorageUnavailableError):
        repo.find("tok")
    with pytest.raises(StorageUnavailableError):
        repo.commit("tok", {}, datetime.now(UTC) + timedelta(hours=1))
    with pytest.raises(StorageUnavailableError):
        repo.delete("tok")
