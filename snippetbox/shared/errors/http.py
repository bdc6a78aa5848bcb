# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, request
from werkzeug.exceptions import HTTPException

from snippetbox.shared.logging import logger

from .base import AppError


def _client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.remote_addr or "unknown"


def status_response(status: HTTPStatus | int) -> Response:
    """Plain-text response carrying nothing but the status phrase."""

    status = HTTPStatus(status)
    response = Response(f"{status.phrase}\n", status=status, mimetype="text/plain")
    response.headers["X-Content-Type-Options"] = "nosniff"
    return response


def handle_app_error(error: AppError) -> Response:
    if error.status >= HTTPStatus.INTERNAL_SERVER_ERROR:
        logger.opt(exception=error).error(
            f"Server error {error.code} on {request.method} {request.path} "
            f"from {_client_ip()}, context={dict(error.context or {})}"
        )
    else:
        logger.warning(
            f"Handled application error {error.code} on {request.method} {request.path}"
        )
    return status_response(error.status)


def register_error_handler(
    app: Flask, *, default_status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR
) -> None:
    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        return handle_app_error(exc)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        if exc.code is None:
            return exc
        return status_response(exc.code)

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        logger.opt(exception=exc).error(
            f"Unhandled exception: {type(exc).__name__} on {request.method} {request.path} "
            f"from {_client_ip()}"
        )
        response = status_response(default_status)
        response.headers["Connection"] = "close"
        return response
