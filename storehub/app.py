# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from flask import Flask
from flask_cors import CORS
from werkzeug.middleware.proxy_fix import ProxyFix

from storehub.infrastructure.container import Container
from storehub.shared.config import AppConfig, load_config
from storehub.shared.logging import logger, setup_logging
from storehub.shared.middleware.csrf import configure_csrf
from storehub.shared.middleware.error_handler import configure_error_handling
from storehub.shared.middleware.request_logger import configure_request_logging


def _add_security_headers(app: Flask, config: AppConfig) -> None:
    @app.after_request
    def _headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")

        resp.headers.setdefault("Referrer-Policy", "no-referrer")

        resp.headers.setdefault("X-Content-Type-Options", "nosniff")

        resp.headers.setdefault("Cross-Origin-Resource-Policy", "same-origin")
        resp.headers.setdefault("Cross-Origin-Opener-Policy", "same-origin")

        resp.headers.setdefault(
            "Permissions-Policy",
            "geolocation=(), microphone=(), camera=(), payment=(), usb=()",
        )

        resp.headers.setdefault("X-Permitted-Cross-Domain-Policies", "none")

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )

        return resp


def create_app(
    config: AppConfig | None = None,
    *,
    container: Container | None = None,
) -> Flask:
    config = config or load_config()
    container = container or Container(config)
    setup_logging(config.log_level, config.log_file)

    app = Flask(__name__)
    app.config.update(SECRET_KEY=config.secret_key)
    app.extensions["storehub.container"] = container
    if config.security.trusted_proxies:
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=config.security.trusted_proxies)  # type: ignore[method-assign]

    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_csrf(app, config.security)
    configure_request_logging(app, debug_mode=config.debug_logging)
    _add_security_headers(app, config)

    cors_kwargs: dict[str, object] = {
        "resources": {r"/api/*": {"origins": config.security.allowed_origins}}
    }
    if any(o != "*" for o in config.security.allowed_origins):
        cors_kwargs["supports_credentials"] = True
    CORS(app, **cors_kwargs)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.users_controller.as_blueprint())

    logger.info(f"Flask app initialized env={config.app_env} store={config.user_store}")
    return app


def main() -> None:
    config = load_config()
    app = create_app(config)
    app.run(host=config.host, port=config.port, debug=config.debug_logging)


if __name__ == "__main__":
    main()
