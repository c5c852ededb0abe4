# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask

from geeks_api.container import Container, container as default_container
from geeks_api.interfaces.http.controllers.misc_controller import MiscController
from geeks_api.shared.logging import logger, setup_logging
from geeks_api.shared.middleware.error_handler import configure_error_handling
from geeks_api.shared.middleware.request_logger import configure_request_logging


def create_app(container: Container | None = None) -> Flask:
    container = container or default_container
    config = container.config
    setup_logging(
        level="DEBUG" if config.debug_logging else config.log_level,
        log_file=config.log_file,
    )

    app = Flask(__name__)
    configure_error_handling(app, container.api_exception_handler, config)
    configure_request_logging(app, config)

    app.register_blueprint(MiscController(i18n=config.i18n).as_blueprint())
    app.register_blueprint(container.geeks_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        return resp

    logger.info(
        f"Flask app initialized: {len(container.error_code_resolver.mappers)} exception mappers, "
        f"locales={config.i18n.supported_locales}"
    )
    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=5000, debug=True)
