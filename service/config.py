import os
from dataclasses import dataclass


def _env_list(key: str, default: str) -> list[str]:
    value = os.getenv(key) or default
    return [item.strip() for item in value.split(",") if item.strip()]


class Config:
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Prefix for every blueprint mounted through router.register_blueprint
    ROUTER_BASE_PATH = os.getenv("ROUTER_BASE_PATH", "")

    CORS_ALLOWED_HEADERS = _env_list("CORS_ALLOWED_HEADERS", "X-Requested-With,Content-Type,Authorization")
    CORS_ALLOWED_ORIGINS = _env_list("CORS_ALLOWED_ORIGINS", "*")
    CORS_ALLOWED_METHODS = _env_list("CORS_ALLOWED_METHODS", "GET,POST,PUT,PATCH,DELETE,OPTIONS,HEAD")

    SERVER_HOST = os.getenv("SERVER_HOST", "0.0.0.0")
    SERVER_PORT = int(os.getenv("SERVER_PORT", 5000))


class TestingConfig(Config):
    TESTING = True


@dataclass(frozen=True)
class CORSPolicy:
    """Allowed cross-origin headers, origins and methods for one router."""

    headers: tuple[str, ...]
    origins: tuple[str, ...]
    methods: tuple[str, ...]

    @classmethod
    def from_config(cls, config) -> "CORSPolicy":
        return cls(
            headers=tuple(config.get("CORS_ALLOWED_HEADERS") or ()),
            origins=tuple(config.get("CORS_ALLOWED_ORIGINS") or ()),
            methods=tuple(m.upper() for m in config.get("CORS_ALLOWED_METHODS") or ()),
        )
