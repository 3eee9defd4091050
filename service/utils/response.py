from flask import current_app, jsonify

from ..schemas.envelope import error_envelope, success_envelope
from .access_log import ACCESS_LOG
from .logger import log

# Default error detail for 401 responses, kept as clients already match on it
UNAUTHORIZED_ERROR = "Unaothorized"
AUTHENTICATE_REALM = 'Basic realm="Authorization Required"'


def response_write(code: int, data):
    """Serialize ``data`` as the JSON body of a response with status ``code``.

    The body is rendered in full before the response is returned, so a
    payload that cannot be serialized raises here instead of producing a
    half-written response.
    """
    response = jsonify(data)
    response.status_code = code
    return response


def response_success(message: str = ""):
    return response_write(200, success_envelope(200, message or "Success"))


def response_created():
    return response_write(201, success_envelope(201, "Created"))


def response_updated():
    return response_write(200, success_envelope(200, "Updated"))


def response_no_content():
    response = current_app.response_class(status=204)
    del response.headers["Content-Type"]
    return response


def response_not_found(message: str = ""):
    return response_write(404, error_envelope(404, "Not Found", message or "Not Found"))


def response_bad_request(message: str = ""):
    message = message or "Bad Request"
    log("error", ACCESS_LOG, message.lower())
    return response_write(400, error_envelope(400, "Bad Request", message))


def response_internal_error(message: str = ""):
    message = message or "Internal Server Error"
    log("error", ACCESS_LOG, message.lower())
    return response_write(500, error_envelope(500, "Internal Server Error", message))


def response_unauthorized():
    return response_write(401, error_envelope(401, "Unauthorized", UNAUTHORIZED_ERROR))


def response_authenticate():
    response = response_unauthorized()
    response.headers["WWW-Authenticate"] = AUTHENTICATE_REALM
    return response


def health_check():
    return response_success("")
