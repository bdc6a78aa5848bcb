# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets

from flask import Flask, g, request

from snippetbox.shared.config import SecurityConfig
from snippetbox.shared.errors import CsrfError
from snippetbox.shared.logging import logger

SAFE_METHODS: tuple[str, ...] = ("GET", "HEAD", "OPTIONS", "TRACE")
CSRF_COOKIE = "csrf_token"
CSRF_FIELD = "csrf_token"


def csrf_token() -> str:
    """Token to embed in forms rendered for the current request."""

    token = g.get("_csrf_token")
    if token is None:
        token = request.cookies.get(CSRF_COOKIE, "") or secrets.token_urlsafe(32)
        g._csrf_token = token
    return token


def configure_csrf(app: Flask, security: SecurityConfig) -> None:
    if not security.enable_csrf:
        return

    @app.before_request
    def _verify_csrf() -> None:
        if request.method in SAFE_METHODS:
            return
        submitted = (request.form.get(CSRF_FIELD) or request.headers.get("X-CSRF-Token") or "").strip()
        cookie = (request.cookies.get(CSRF_COOKIE) or "").strip()
        if not submitted or not cookie or not secrets.compare_digest(submitted, cookie):
            logger.warning(f"csrf: rejected {request.method} {request.path}")
            raise CsrfError()

    @app.after_request
    def _ensure_csrf_cookie(resp):
        token = g.get("_csrf_token")
        if token and request.cookies.get(CSRF_COOKIE) != token:
            resp.set_cookie(
                CSRF_COOKIE,
                token,
                httponly=True,
                samesite=security.cookie_samesite,
                secure=security.cookie_secure,
                path="/",
            )
        return resp


__all__ = ["CSRF_FIELD", "configure_csrf", "csrf_token"]
