# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .base import (
    AppError,
    CsrfError,
    DomainError,
    InfrastructureError,
    InvalidDecodeTargetError,
    MalformedFormError,
    PageNotFoundError,
    StorageUnavailableError,
)
from .http import handle_app_error, register_error_handler, status_response

__all__ = [
    "AppError",
    "CsrfError",
    "DomainError",
    "InfrastructureError",
    "InvalidDecodeTargetError",
    "MalformedFormError",
    "PageNotFoundError",
    "StorageUnavailableError",
    "handle_app_error",
    "register_error_handler",
    "status_response",
]
