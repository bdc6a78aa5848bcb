# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .base import BLANK_MESSAGE, Form
from .decoder import decode, process
from .snippets import SnippetCreateForm
from .users import (
    DUPLICATE_EMAIL_MESSAGE,
    INVALID_CREDENTIALS_MESSAGE,
    UserLoginForm,
    UserSignupForm,
)

__all__ = [
    "BLANK_MESSAGE",
    "DUPLICATE_EMAIL_MESSAGE",
    "Form",
    "INVALID_CREDENTIALS_MESSAGE",
    "SnippetCreateForm",
    "UserLoginForm",
    "UserSignupForm",
    "decode",
    "process",
]
