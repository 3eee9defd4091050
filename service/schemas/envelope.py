def success_envelope(code: int, message: str) -> dict:
    return {
        "status": True,
        "code": code,
        "message": message,
    }


def error_envelope(code: int, message: str, error: str) -> dict:
    return {
        "status": False,
        "code": code,
        "message": message,
        "error": error,
    }
