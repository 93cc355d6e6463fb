from __future__ import annotations

from dataclasses import dataclass
import os


DEFAULT_CORS_ORIGINS = ("http://127.0.0.1:3000", "http://localhost:3000")
_FALSE_VALUES = {"0", "false", "no"}


@dataclass(frozen=True)
class Settings:
    environment: str
    app_name: str
    host: str
    port: int
    mecab_args: str = ""
    cors_origins: tuple[str, ...] = DEFAULT_CORS_ORIGINS
    analysis_timeout_seconds: float = 10.0
    suggestion_limit: int | None = None
    log_level: str = "INFO"
    tokenizer_enabled: bool = True


def _optional_positive_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    value = int(raw)
    if value < 1:
        raise ValueError(f"{name} must be >= 1, got {value}")
    return value


def load_settings() -> Settings:
    raw_cors_origins = os.getenv("MORPHOKEY_CORS_ORIGINS", "")
    parsed_cors_origins = tuple(
        origin.strip()
        for origin in raw_cors_origins.split(",")
        if origin.strip()
    )
    return Settings(
        environment=os.getenv("MORPHOKEY_ENV", "development"),
        app_name=os.getenv("MORPHOKEY_APP_NAME", "morphokey-backend"),
        host=os.getenv("MORPHOKEY_HOST", "127.0.0.1"),
        port=int(os.getenv("MORPHOKEY_PORT", "8000")),
        mecab_args=os.getenv("MORPHOKEY_MECAB_ARGS", ""),
        cors_origins=parsed_cors_origins or DEFAULT_CORS_ORIGINS,
        analysis_timeout_seconds=float(os.getenv("MORPHOKEY_ANALYSIS_TIMEOUT", "10.0")),
        suggestion_limit=_optional_positive_int("MORPHOKEY_SUGGESTION_LIMIT"),
        log_level=os.getenv("MORPHOKEY_LOG_LEVEL", "INFO").upper(),
        tokenizer_enabled=os.getenv("MORPHOKEY_TOKENIZER_ENABLED", "1").lower()
        not in _FALSE_VALUES,
    )
