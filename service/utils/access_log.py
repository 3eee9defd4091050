from .logger import log

ACCESS_LOG = "http-access"
FAVICON_URI = "/favicon.ico"


def request_uri(environ) -> str:
    """Return the request target as sent by the client, query string included.

    Falls back to rebuilding it from the decoded path when the server does
    not pass the raw target along.
    """
    uri = environ.get("REQUEST_URI") or environ.get("RAW_URI")
    if uri:
        return uri

    path = environ.get("SCRIPT_NAME", "") + environ.get("PATH_INFO", "")
    query = environ.get("QUERY_STRING", "")
    return f"{path}?{query}" if query else path


class AccessLogMiddleware:
    """WSGI middleware logging method and URI of each request before dispatch.

    Requests for ``/favicon.ico`` are not logged.
    """

    def __init__(self, wsgi_app):
        self.wsgi_app = wsgi_app

    def __call__(self, environ, start_response):
        uri = request_uri(environ)
        if uri != FAVICON_URI:
            log("info", ACCESS_LOG, f"access method {environ.get('REQUEST_METHOD', '')} at URI {uri}")
        return self.wsgi_app(environ, start_response)
