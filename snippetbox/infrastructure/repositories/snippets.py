# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime, timedelta

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from snippetbox.domain.snippets.entities import LATEST_LIMIT, Snippet
from snippetbox.domain.snippets.exceptions import SnippetNotFoundError
from snippetbox.domain.snippets.repositories import SnippetRepository
from snippetbox.infrastructure.db.models import SnippetRow, as_utc
from snippetbox.infrastructure.db.session import SessionFactory, session_scope
from snippetbox.shared.errors import StorageUnavailableError


def _to_domain(row: SnippetRow) -> Snippet:
    return Snippet(
        id=row.id,
        title=row.title,
        content=row.content,
        created=as_utc(row.created),
        expires=as_utc(row.expires),
    )


class SqlAlchemySnippetRepository(SnippetRepository):
    def __init__(self, session_factory: SessionFactory):
        self._session_factory = session_factory

    def insert(self, title: str, content: str, expires_days: int) -> int:
        created = datetime.now(UTC)
        row = SnippetRow(
            title=title,
            content=content,
            created=created,
            expires=created + timedelta(days=expires_days),
        )
        try:
            with session_scope(self._session_factory) as session:
                session.add(row)
                session.flush()
                return row.id
        except SQLAlchemyError as exc:
            raise StorageUnavailableError("snippets.insert") from exc

    def get(self, snippet_id: int) -> Snippet:
        stmt = select(SnippetRow).where(
            SnippetRow.id == snippet_id,
            SnippetRow.expires > datetime.now(UTC),
        )
        try:
            with session_scope(self._session_factory) as session:
                row = session.execute(stmt).scalar_one_or_none()
                if row is None:
                    raise SnippetNotFoundError(snippet_id)
                return _to_domain(row)
        except SQLAlchemyError as exc:
            raise StorageUnavailableError("snippets.get") from exc

    def latest(self, limit: int = LATEST_LIMIT) -> Sequence[Snippet]:
        stmt = (
            select(SnippetRow)
            .where(SnippetRow.expires > datetime.now(UTC))
            .order_by(SnippetRow.id.desc())
            .limit(limit)
        )
        try:
            with session_scope(self._session_factory) as session:
                return [_to_domain(row) for row in session.execute(stmt).scalars()]
        except SQLAlchemyError as exc:
            raise StorageUnavailableError("snippets.latest") from exc
