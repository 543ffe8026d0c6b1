from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path


@dataclass(frozen=True)
class Settings:
    api_auth_enabled: bool = True
    api_auth_username: str = "analyst"
    api_auth_password: str = "change-me"
    jwt_secret_key: str = "change-me-in-env"
    jwt_signing_method: str = "HS256"
    jwt_access_token_ttl_seconds: int = 3600
    jwt_issuer: str = "jwtkit"


def _strip_wrapping_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
        return value[1:-1]
    return value


def _load_dotenv_if_present() -> None:
    env_paths = [
        Path.cwd() / ".env",
        Path(__file__).resolve().parents[3] / ".env",
    ]
    for env_path in env_paths:
        if not env_path.exists():
            continue
        for raw_line in env_path.read_text(encoding="utf-8").splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, value = line.split("=", 1)
            key = key.strip()
            value = _strip_wrapping_quotes(value.strip())
            if key:
                os.environ.setdefault(key, value)
        break


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    return default


def get_settings() -> Settings:
    _load_dotenv_if_present()
    return Settings(
        api_auth_enabled=_env_bool("API_AUTH_ENABLED", True),
        api_auth_username=os.getenv("API_AUTH_USERNAME", "analyst"),
        api_auth_password=os.getenv("API_AUTH_PASSWORD", "change-me"),
        jwt_secret_key=os.getenv("JWT_SECRET_KEY", "change-me-in-env"),
        jwt_signing_method=os.getenv("JWT_SIGNING_METHOD", "HS256").strip().upper(),
        jwt_access_token_ttl_seconds=int(os.getenv("JWT_ACCESS_TOKEN_TTL_SECONDS", "3600")),
        jwt_issuer=os.getenv("JWT_ISSUER", "jwtkit"),
    )


get_settings = lru_cache(maxsize=1)(get_settings)


def clear_settings_cache() -> None:
    get_settings.cache_clear()  # type: ignore[attr-defined]
