from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

import pytest

from snippetbox.application.forms import SnippetCreateForm
from snippetbox.application.interfaces import AUTHENTICATED_USER_ID, FLASH, SessionStore
from snippetbox.application.use_cases.snippets.create_snippet import CreateSnippetUseCase
from snippetbox.application.use_cases.snippets.get_snippet import GetSnippetUseCase
from snippetbox.application.use_cases.users.login_user import LoginUserUseCase
from snippetbox.application.use_cases.users.logout_user import (
    LOGGED_OUT_MESSAGE,
    LogoutUserUseCase,
)
from snippetbox.application.use_cases.users.register_user import RegisterUserUseCase
from snippetbox.domain.snippets.exceptions import SnippetNotFoundError
from snippetbox.domain.users.entities import User
from snippetbox.domain.users.exceptions import DuplicateEmailError, InvalidCredentialsError
from snippetbox.domain.users.repositories import PasswordHasher, UserRepository


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._seq = 1

    def add(self, name: str, email: str, hashed_password: str) -> int:
        if email in self._users:
            raise DuplicateEmailError()
        user = User(
            id=self._seq,
            name=name,
            email=email,
            hashed_password=hashed_password,
            created=datetime.now(UTC),
        )
        self._seq += 1
        self._users[email] = user
        return user.id

    def find_by_email(self, email: str) -> User | None:
        return self._users.get(email)

    def exists(self, user_id: int) -> bool:
        return any(user.id == user_id for user in self._users.values())


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


class DictSessionStore(SessionStore):
    def __init__(self) -> None:
        self.data: dict[str, Any] = {}
        self.renewed = 0

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def put(self, key: str, value: Any) -> None:
        self.data[key] = value

    def pop_once(self, key: str) -> Any:
        return self.data.pop(key, None)

    def exists(self, key: str) -> bool:
        return key in self.data

    def remove(self, key: str) -> None:
        self.data.pop(key, None)

    def renew_token(self) -> None:
        self.renewed += 1


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


def test_register_user_stores_hash_not_password(users: InMemoryUserRepository) -> None:
    use_case = RegisterUserUseCase(users=users, password_hasher=DeterministicHasher())

    user_id = use_case.execute("Alice", "alice@example.com", "pa$$word")

    user = users.find_by_email("alice@example.com")
    assert user is not None
    assert user.id == user_id
    assert user.hashed_password == "hashed:pa$$word"


def test_register_user_duplicate_raises(users: InMemoryUserRepository) -> None:
    use_case = RegisterUserUseCase(users=users, password_hasher=DeterministicHasher())
    use_case.execute("Alice", "alice@example.com", "pa$$word")

    with pytest.raises(DuplicateEmailError):
        use_case.execute("Other", "alice@example.com", "different")


def test_login_user_success(users: InMemoryUserRepository) -> None:
    register = RegisterUserUseCase(users=users, password_hasher=DeterministicHasher())
    user_id = register.execute("Alice", "alice@example.com", "pa$$word")

    login = LoginUserUseCase(users=users, password_hasher=DeterministicHasher())
    assert login.execute("alice@example.com", "pa$$word") == user_id


@pytest.mark.parametrize(
    ("email", "password"),
    [("alice@example.com", "wrong-password"), ("nobody@example.com", "pa$$word")],
)
def test_login_failures_are_indistinguishable(
    users: InMemoryUserRepository, email: str, password: str
) -> None:
    RegisterUserUseCase(users=users, password_hasher=DeterministicHasher()).execute(
        "Alice", "alice@example.com", "pa$$word"
    )
    login = LoginUserUseCase(users=users, password_hasher=DeterministicHasher())

    with pytest.raises(InvalidCredentialsError) as exc_info:
        login.execute(email, password)

    assert exc_info.value.code == "invalid_credentials"
    assert exc_info.value.context is None


def test_logout_renews_token_and_flashes() -> None:
    sessions = DictSessionStore()
    sessions.put(AUTHENTICATED_USER_ID, 1)

    LogoutUserUseCase(sessions=sessions).execute()

    assert sessions.renewed == 1
    assert sessions.exists(AUTHENTICATED_USER_ID) is False
    assert sessions.get(FLASH) == LOGGED_OUT_MESSAGE


class RecordingSnippetRepository:
    def __init__(self) -> None:
        self.inserted: list[tuple[str, str, int]] = []

    def insert(self, title: str, content: str, expires_days: int) -> int:
        self.inserted.append((title, content, expires_days))
        return len(self.inserted)

    def get(self, snippet_id: int):
        raise SnippetNotFoundError(snippet_id)

    def latest(self, limit: int = 10):
        return []


def test_create_snippet_refuses_invalid_form() -> None:
    snippets = RecordingSnippetRepository()
    form = SnippetCreateForm(title="", content="c", expires=7)
    form.run_checks()

    with pytest.raises(ValueError):
        CreateSnippetUseCase(snippets=snippets).execute(form)
    assert snippets.inserted == []


def test_create_snippet_inserts_valid_form() -> None:
    snippets = RecordingSnippetRepository()
    form = SnippetCreateForm(title="t", content="c", expires=7)
    form.run_checks()

    assert CreateSnippetUseCase(snippets=snippets).execute(form) == 1
    assert snippets.inserted == [("t", "c", 7)]


@pytest.mark.parametrize("snippet_id", [0, -1, 2**63, 10**20])
def test_get_snippet_rejects_out_of_range_ids(snippet_id: int) -> None:
    class UnreachableSnippetRepository(RecordingSnippetRepository):
        def get(self, snippet_id: int):
            raise AssertionError("storage must not be queried")

    with pytest.raises(SnippetNotFoundError):
        GetSnippetUseCase(snippets=UnreachableSnippetRepository()).execute(snippet_id)
