"""
Router bootstrap.

Wires a Flask application as the request router:
- CORS layer built from an explicit CORSPolicy
- WSGI middleware chain (proxy headers, access log)
- JSON error envelopes, including the not-found fallback
- a no-content /favicon.ico route
"""

from functools import partial

from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix

from .config import CORSPolicy
from .extensions import cors
from .utils.access_log import AccessLogMiddleware
from .utils.error_handler import register_error_handlers
from .utils.response import response_no_content

# Outermost first
DEFAULT_MIDDLEWARE = (
    partial(ProxyFix, x_for=1, x_proto=1),
    AccessLogMiddleware,
)


def normalize_base_path(base_path: str | None) -> str:
    """Return ``""`` or a path with a leading slash and no trailing slash."""
    base_path = (base_path or "").strip().strip("/")
    return f"/{base_path}" if base_path else ""


def compose_middleware(wsgi_app, middlewares):
    for middleware in reversed(middlewares):
        wsgi_app = middleware(wsgi_app)
    return wsgi_app


def favicon():
    return response_no_content()


def init_router(app: Flask, cors_policy: CORSPolicy, middlewares=DEFAULT_MIDDLEWARE) -> Flask:
    """Turn ``app`` into the service router.

    Must be called once per application, before it serves requests.
    """
    cors.init_app(
        app,
        allow_headers=list(cors_policy.headers),
        origins=list(cors_policy.origins),
        methods=list(cors_policy.methods),
    )

    app.wsgi_app = compose_middleware(app.wsgi_app, middlewares)

    register_error_handlers(app)

    app.add_url_rule("/favicon.ico", "favicon", favicon, methods=["GET"])

    app.extensions["router"] = {
        "cors_policy": cors_policy,
        "base_path": normalize_base_path(app.config.get("ROUTER_BASE_PATH")),
    }
    return app


def register_blueprint(app: Flask, blueprint, url_prefix: str = "") -> None:
    """Mount ``blueprint`` below the router base path."""
    prefix = app.extensions["router"]["base_path"] + normalize_base_path(url_prefix)
    app.register_blueprint(blueprint, url_prefix=prefix or None)
