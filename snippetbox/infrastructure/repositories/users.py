# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import exists, insert, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from snippetbox.domain.users.entities import User
from snippetbox.domain.users.exceptions import DuplicateEmailError
from snippetbox.domain.users.repositories import UserRepository
from snippetbox.infrastructure.db.models import UserRow, as_utc
from snippetbox.infrastructure.db.session import SessionFactory, session_scope
from snippetbox.shared.errors import StorageUnavailableError
from snippetbox.shared.logging import logger

# Dialects able to report a unique conflict on a named column as a result
# instead of an exception.
_CONFLICT_AWARE_INSERTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: SessionFactory):
        self._session_factory = session_factory

    def add(self, name: str, email: str, hashed_password: str) -> int:
        values = {
            "name": name,
            "email": email,
            "hashed_password": hashed_password.encode("utf-8"),
            "created": datetime.now(UTC),
        }
        try:
            with session_scope(self._session_factory) as session:
                user_id = self._insert(session, values)
        except SQLAlchemyError as exc:
            raise StorageUnavailableError("users.add") from exc

        if user_id is None:
            logger.info("users.add: email conflict")
            raise DuplicateEmailError()
        return user_id

    @staticmethod
    def _insert(session: Session, values: dict[str, object]) -> int | None:
        dialect = session.get_bind().dialect.name
        conflict_insert = _CONFLICT_AWARE_INSERTS.get(dialect)
        if conflict_insert is not None:
            stmt = (
                conflict_insert(UserRow)
                .values(**values)
                .on_conflict_do_nothing(index_elements=[UserRow.email])
                .returning(UserRow.id)
            )
            return session.execute(stmt).scalar_one_or_none()

        # other engines raise; confirm the conflict is on email before mapping it
        try:
            with session.begin_nested():
                result = session.execute(insert(UserRow).values(**values))
        except IntegrityError:
            if session.execute(select(exists().where(UserRow.email == values["email"]))).scalar():
                return None
            raise
        return int(result.inserted_primary_key[0])

    def find_by_email(self, email: str) -> User | None:
        try:
            with session_scope(self._session_factory) as session:
                row = session.execute(
                    select(UserRow).where(UserRow.email == email)
                ).scalar_one_or_none()
                if row is None:
                    return None
                return User(
                    id=row.id,
                    name=row.name,
                    email=row.email,
                    hashed_password=row.hashed_password.decode("utf-8"),
                    created=as_utc(row.created),
                )
        except SQLAlchemyError as exc:
            raise StorageUnavailableError("users.find_by_email") from exc

    def exists(self, user_id: int) -> bool:
        try:
            with session_scope(self._session_factory) as session:
                return bool(session.execute(select(exists().where(UserRow.id == user_id))).scalar())
        except SQLAlchemyError as exc:
            raise StorageUnavailableError("users.exists") from exc
