# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask

from snippetbox.shared.config import SecurityConfig

CONTENT_SECURITY_POLICY = (
    "default-src 'self'; style-src 'self' fonts.googleapis.com; font-src fonts.gstatic.com"
)


def configure_secure_headers(app: Flask, security: SecurityConfig) -> None:
    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("Content-Security-Policy", CONTENT_SECURITY_POLICY)
        resp.headers.setdefault("Referrer-Policy", "origin-when-cross-origin")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("X-Frame-Options", "deny")
        resp.headers.setdefault("X-XSS-Protection", "0")

        if security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains",
            )

        return resp


__all__ = ["configure_secure_headers"]
