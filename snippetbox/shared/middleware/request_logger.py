# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
import time

from flask import Flask, g, request

from snippetbox.shared.logging import clear_correlation_id, logger, set_correlation_id


def _get_client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()

    return request.remote_addr or "unknown"


def configure_request_logging(app: Flask, *, debug_mode: bool = False) -> None:
    @app.before_request
    def _before_request() -> None:
        set_correlation_id(request.headers.get("X-Request-ID") or secrets.token_urlsafe(8))
        g.request_start_time = time.perf_counter()

        if debug_mode:
            logger.info(
                f"Request started: {request.environ.get('SERVER_PROTOCOL', '-')} "
                f"{request.method} {request.full_path} from {_get_client_ip()}"
            )

    @app.after_request
    def _after_request(response):
        start_time = g.get("request_start_time", time.perf_counter())
        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"{_get_client_ip()} - {request.method} {request.path} "
            f"-> {response.status_code} in {duration_ms:.1f} ms"
        )
        return response

    @app.teardown_request
    def _teardown_request(_exc: Exception | None) -> None:
        clear_correlation_id()


__all__ = ["configure_request_logging"]
