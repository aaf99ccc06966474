import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv(override=True)


def _env_bool(name: str, default: bool = False) -> bool:
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    return raw_value.strip().lower() in {"1", "true", "yes", "y", "on"}


@dataclass(frozen=True)
class Settings:
    database_url: str = os.getenv(
        "OBSERVER_DATABASE_URL", os.getenv("DATABASE_URL", "")
    ).strip()
    host: str = os.getenv("OBSERVER_HOST", os.getenv("OPENSHIFT_NODEJS_IP", "127.0.0.1"))
    port: int = int(os.getenv("OBSERVER_PORT", os.getenv("OPENSHIFT_NODEJS_PORT", "8080")))
    token_max_attempts: int = int(os.getenv("OBSERVER_TOKEN_MAX_ATTEMPTS", "1000"))
    log_level: str = os.getenv("OBSERVER_LOG_LEVEL", "INFO").strip().upper()
    sql_echo: bool = _env_bool("OBSERVER_SQL_ECHO", False)


settings = Settings()
