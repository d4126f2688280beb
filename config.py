"""Environment-driven configuration for pomo and pomo-server."""

import os
from dataclasses import dataclass
from typing import Optional

import dotenv

from errors import ConfigurationError

dotenv.load_dotenv()

DEFAULT_BASE_URL = "http://localhost:8080"
DEFAULT_DB_URL = "sqlite:///./pomo.db"
DEFAULT_PORT = 8080


def normalize_db_url(url: str) -> str:
    # SQLAlchemy only accepts the postgresql:// scheme
    if url.startswith("postgres://"):
        return "postgresql://" + url[len("postgres://"):]
    return url


def _env_number(key: str, default, cast):
    raw = os.getenv(key) or str(default)
    try:
        return cast(raw)
    except ValueError as e:
        raise ConfigurationError(f"Incorrect argument: {key}={raw} is not a number") from e


def get_db_url() -> str:
    return normalize_db_url(os.getenv("DB_URL") or DEFAULT_DB_URL)


def get_server_host() -> str:
    return os.getenv("HOST", "0.0.0.0")


def get_server_port() -> int:
    return _env_number("PORT", DEFAULT_PORT, int)


@dataclass(frozen=True)
class ClientConfig:
    """Settings for a single CLI invocation, passed to every command handler."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = 10.0
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    name_only: bool = False

    @classmethod
    def from_env(cls, **overrides) -> "ClientConfig":
        base_url = (os.getenv("BASE_URL") or DEFAULT_BASE_URL).rstrip("/")
        timeout = _env_number("POMO_HTTP_TIMEOUT", 10.0, float)
        return cls(base_url=base_url, timeout=timeout, **overrides)
