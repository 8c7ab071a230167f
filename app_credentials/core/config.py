from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


@dataclass(frozen=True)
class Settings:
    app_base_url: str
    app_id: str
    app_login_timeout_seconds: float


def get_settings() -> Settings:
    return Settings(
        app_base_url=_env("APP_BASE_URL", "https://services.cloud.mongodb.com"),
        app_id=_env("APP_ID", ""),
        app_login_timeout_seconds=float(_env("APP_LOGIN_TIMEOUT_SECONDS", "10")),
    )
