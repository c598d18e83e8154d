"""
Environment-driven configuration.

`Settings.from_env()` is called once by the app factory (or a script) and the
result is passed explicitly to whatever needs it.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

HMAC_ALGORITHMS = ("HS256", "HS384", "HS512")

DEFAULT_JWT_SECRET = "dev-change-this-secret"
DEFAULT_ALLOWED_ORIGINS = (
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)


def _env_str(environ: Mapping[str, str], name: str, default: str) -> str:
    return environ.get(name, "").strip() or default


def _env_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(environ: Mapping[str, str], name: str, default: float) -> float:
    raw = environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_list(environ: Mapping[str, str], name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    raw = environ.get(name, "").strip()
    if not raw:
        return default
    return tuple(item.strip() for item in raw.split(",") if item.strip())


@dataclass(frozen=True)
class Settings:
    database_url: str = ""
    jwt_secret: str = DEFAULT_JWT_SECRET
    jwt_algorithm: str = "HS256"
    db_pool_min_size: int = 1
    db_pool_max_size: int = 10
    db_command_timeout: float = 30.0
    log_level: str = "INFO"
    allowed_origins: tuple[str, ...] = field(default=DEFAULT_ALLOWED_ORIGINS)

    def __post_init__(self) -> None:
        if self.jwt_algorithm not in HMAC_ALGORITHMS:
            raise ValueError(
                f"JWT_ALG must be one of {', '.join(HMAC_ALGORITHMS)}; got {self.jwt_algorithm!r}."
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        return cls(
            database_url=env.get("DATABASE_URL", "").strip(),
            jwt_secret=_env_str(env, "JWT_SECRET", DEFAULT_JWT_SECRET),
            jwt_algorithm=_env_str(env, "JWT_ALG", "HS256").upper(),
            db_pool_min_size=_env_int(env, "DB_POOL_MIN_SIZE", 1),
            db_pool_max_size=_env_int(env, "DB_POOL_MAX_SIZE", 10),
            db_command_timeout=_env_float(env, "DB_COMMAND_TIMEOUT", 30.0),
            log_level=_env_str(env, "LOG_LEVEL", "INFO").upper(),
            allowed_origins=_env_list(env, "CORS_ALLOWED_ORIGINS", DEFAULT_ALLOWED_ORIGINS),
        )
