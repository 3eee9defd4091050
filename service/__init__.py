# service/__init__.py

from flask import Flask

from service.config import Config, CORSPolicy
from service.router import init_router, register_blueprint
from service.routes.core_routes import core_bp
from service.utils.logger import configure_logging


def create_app(config_object=Config, cors_policy: CORSPolicy | None = None) -> Flask:
    app = Flask(__name__)

    # Load configuration
    app.config.from_object(config_object)

    # Envelope keys keep their declared order
    app.json.sort_keys = False

    if not app.testing:
        configure_logging(app.config["LOG_LEVEL"])

    # Router, CORS and middleware
    init_router(app, cors_policy or CORSPolicy.from_config(app.config))

    # Register blueprints
    register_blueprint(app, core_bp)

    return app
