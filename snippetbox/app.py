# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pathlib import Path

from flask import Flask

from snippetbox.container import Container
from snippetbox.infrastructure.db import init_db
from snippetbox.shared.config import AppConfig, load_config
from snippetbox.shared.logging import logger, setup_logging
from snippetbox.shared.middleware.csrf import configure_csrf
from snippetbox.shared.middleware.error_handler import configure_error_handling
from snippetbox.shared.middleware.request_logger import configure_request_logging
from snippetbox.shared.middleware.secure_headers import configure_secure_headers

UI_DIR = Path(__file__).resolve().parent / "ui"


def create_app(config: AppConfig | None = None, container: Container | None = None) -> Flask:
    config = config or load_config()
    container = container or Container(config)

    setup_logging(
        "DEBUG" if config.debug_logging else config.log_level,
        log_file=config.log_file,
    )
    init_db(container.engine)

    app = Flask(
        __name__,
        template_folder=str(UI_DIR / "html"),
        static_folder=str(UI_DIR / "static"),
    )
    app.config.update(
        # read by Flask extensions and itsdangerous helpers, not by the session layer
        SECRET_KEY=config.secret_key,
        SESSION_COOKIE_NAME=config.session.cookie_name,
        SESSION_COOKIE_SECURE=config.security.cookie_secure,
        SESSION_COOKIE_SAMESITE=config.security.cookie_samesite,
        SESSION_COOKIE_HTTPONLY=True,
    )
    app.session_interface = container.session_interface
    app.extensions["snippetbox.container"] = container

    configure_error_handling(app)
    configure_request_logging(app, debug_mode=config.debug_logging)
    configure_secure_headers(app, config.security)
    configure_csrf(app, config.security)
    container.renderer.init_app(app)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.snippets_controller.as_blueprint())
    app.register_blueprint(container.users_controller.as_blueprint())

    logger.info("Flask app initialized")
    return app


def main() -> None:
    config = load_config()
    app = create_app(config)
    logger.info(f"Starting server on {config.host}:{config.port}")
    app.run(host=config.host, port=config.port, debug=False)


if __name__ == "__main__":
    main()
