# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .interfaces import AUTHENTICATED_USER_ID, FLASH, SessionStore

__all__ = [
    "AUTHENTICATED_USER_ID",
    "FLASH",
    "SessionStore",
]
