# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .exceptions import InvariantViolation
from .snippets.entities import LATEST_LIMIT, MAX_TITLE_CHARS, PERMITTED_EXPIRY_DAYS, Snippet
from .snippets.exceptions import SnippetNotFoundError
from .users.entities import ANONYMOUS, User, Viewer
from .users.exceptions import DuplicateEmailError, InvalidCredentialsError

__all__ = [
    "ANONYMOUS",
    "DuplicateEmailError",
    "InvalidCredentialsError",
    "InvariantViolation",
    "LATEST_LIMIT",
    "MAX_TITLE_CHARS",
    "PERMITTED_EXPIRY_DAYS",
    "Snippet",
    "SnippetNotFoundError",
    "User",
    "Viewer",
]
