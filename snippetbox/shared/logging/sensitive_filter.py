# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
from typing import Any

_REDACTED = "***REDACTED***"

SENSITIVE_PATTERNS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"(secret[_-]?key\s*[:=]\s*['\"]?)([a-zA-Z0-9_\-]{8,})(['\"]?)", re.IGNORECASE),
     rf"\1{_REDACTED}\3"),

    # Session and CSRF tokens
    (re.compile(r"((?:csrf[_-]?)?token\s*[:=]\s*['\"]?)([a-zA-Z0-9_\-\.]{20,})(['\"]?)"),
     rf"\1{_REDACTED}\3"),
    (re.compile(r"(session\s*=\s*)([a-zA-Z0-9_\-]{20,})"), rf"\1{_REDACTED}"),
    (re.compile(r"(cookie\s*:\s*['\"]?)([^'\"]{10,})(['\"]?)", re.IGNORECASE), rf"\1{_REDACTED}\3"),

    # Plain passwords and werkzeug password hashes
    (re.compile(r"(password\s*[:=]\s*['\"]?)([^'\"\s,)]+)(['\"]?)", re.IGNORECASE),
     rf"\1{_REDACTED}\3"),
    (re.compile(r"\b(scrypt|pbkdf2)(:[\w:]+)\$[^\s$]+\$[0-9a-f]+"), rf"\1\2${_REDACTED}"),

    # Database URLs with credentials
    (re.compile(r"(postgres(?:ql)?|mysql|mariadb)(\+\w+)?://([^:/]+):([^@]+)@"),
     rf"\1\2://\3:{_REDACTED}@"),

    # Email addresses keep only the domain
    (re.compile(r"([a-zA-Z0-9._%+-]+)@([a-zA-Z0-9.-]+\.[a-zA-Z]{2,})"), r"***@\2"),
]


def sanitize_message(message: str) -> str:
    for pattern, replacement in SENSITIVE_PATTERNS:
        message = pattern.sub(replacement, message)
    return message


def sanitize_record(record: dict[str, Any]) -> bool:
    """Loguru filter: scrubs the message in place and never drops the record."""
    if "message" in record:
        record["message"] = sanitize_message(record["message"])
    return True
