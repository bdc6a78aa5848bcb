# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError

from snippetbox.infrastructure.db.models import SessionRow, as_utc
from snippetbox.infrastructure.db.session import SessionFactory, session_scope
from snippetbox.shared.errors import StorageUnavailableError


class SqlAlchemySessionRepository:
    """Token → session data rows, ignoring anything past its expiry."""

    def __init__(self, session_factory: SessionFactory):
        self._session_factory = session_factory

    def find(self, token: str) -> dict[str, Any] | None:
        now = datetime.now(UTC)
        try:
            with session_scope(self._session_factory) as session:
                row = session.get(SessionRow, token)
                if row is None:
                    return None
                if as_utc(row.expiry) <= now:
                    session.delete(row)
                    return None
                return dict(row.data or {})
        except SQLAlchemyError as exc:
            raise StorageUnavailableError("sessions.find") from exc

    def commit(self, token: str, data: dict[str, Any], expiry: datetime) -> None:
        try:
            with session_scope(self._session_factory) as session:
                row = session.get(SessionRow, token)
                if row is None:
                    session.add(SessionRow(token=token, data=data, expiry=expiry))
                else:
                    row.data = data
                    row.expiry = expiry
        except SQLAlchemyError as exc:
            raise StorageUnavailableError("sessions.commit") from exc

    def delete(self, token: str) -> None:
        try:
            with session_scope(self._session_factory) as session:
                session.execute(delete(SessionRow).where(SessionRow.token == token))
        except SQLAlchemyError as exc:
            raise StorageUnavailableError("sessions.delete") from exc
