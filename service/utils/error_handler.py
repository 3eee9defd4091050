from flask import request
from werkzeug.exceptions import HTTPException

from ..schemas.envelope import error_envelope
from .access_log import ACCESS_LOG, request_uri
from .logger import log
from .response import (
    response_bad_request,
    response_internal_error,
    response_not_found,
    response_unauthorized,
    response_write,
)


def not_found():
    message = f"not found method {request.method} at URI {request_uri(request.environ)}"
    log("warn", ACCESS_LOG, message)
    return response_not_found(message)


def register_error_handlers(app):
    @app.errorhandler(400)
    def bad_request(e):
        return response_bad_request(e.description or "")

    @app.errorhandler(401)
    def unauthorized(e):
        return response_unauthorized()

    # An unmatched method on a known path is still an unmatched route
    @app.errorhandler(404)
    @app.errorhandler(405)
    def route_not_found(e):
        return not_found()

    @app.errorhandler(500)
    def server_error(e):
        return response_internal_error()

    # Any other HTTP error keeps its status but gets a JSON envelope
    @app.errorhandler(HTTPException)
    def http_error(e):
        return response_write(e.code, error_envelope(e.code, e.name, e.description or e.name))
