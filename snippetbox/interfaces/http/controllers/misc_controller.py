# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response


class MiscController:
    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/ping", view_func=self.ping, methods=["GET"])
        return bp

    def ping(self) -> Response:
        return Response("OK", mimetype="text/plain")
