# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, cast


@dataclass(slots=True)
class AppError(Exception):
    code: str
    status: HTTPStatus
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.code)


class DomainError(AppError):
    def __init__(
        self,
        *,
        code: str | None = None,
        status: HTTPStatus | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_code = code or cast(str, getattr(self, "code", "domain_error"))
        resolved_status = status or cast(
            HTTPStatus, getattr(self, "status", HTTPStatus.BAD_REQUEST)
        )
        super().__init__(code=resolved_code, status=resolved_status, context=context)


class InfrastructureError(AppError):
    def __init__(
        self,
        code: str = "infrastructure_error",
        *,
        status: HTTPStatus | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_status = status or HTTPStatus.INTERNAL_SERVER_ERROR
        super().__init__(code=code, status=resolved_status, context=context)


class StorageUnavailableError(InfrastructureError):
    def __init__(self, operation: str) -> None:
        super().__init__(code="storage_unavailable", context={"operation": operation})


class PageNotFoundError(InfrastructureError):
    def __init__(self, page: str) -> None:
        super().__init__(code="page_not_found", context={"page": page})


class MalformedFormError(AppError):
    def __init__(self, *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(
            code="malformed_form",
            status=HTTPStatus.BAD_REQUEST,
            context=context,
        )


class CsrfError(AppError):
    def __init__(self) -> None:
        super().__init__(code="csrf", status=HTTPStatus.BAD_REQUEST)


class InvalidDecodeTargetError(TypeError):
    """Raised when a form decode is asked to fill something that is not a form.

    This is a bug in the calling code, not bad input, so it deliberately does
    not derive from :class:`AppError` and is never rendered as a client error.
    """

    def __init__(self, target: object) -> None:
        super().__init__(f"invalid decode target: {target!r}")
        self.target = target
