# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .interface import ServerSideSession, SqlAlchemySessionInterface
from .repository import SqlAlchemySessionRepository
from .store import FlaskSessionStore

__all__ = [
    "FlaskSessionStore",
    "ServerSideSession",
    "SqlAlchemySessionInterface",
    "SqlAlchemySessionRepository",
]
