from __future__ import annotations

from functools import lru_cache

from fastapi import HTTPException

from app_credentials.application.use_cases.build_credential import BuildCredentialUseCase
from app_credentials.application.use_cases.login_with_credential import LoginWithCredentialUseCase
from app_credentials.core.config import get_settings
from app_credentials.infrastructure.clients.app_login_client import (
    AppLoginClient,
    AppLoginClientSettings,
)


@lru_cache(maxsize=1)
def _get_app_login_client() -> AppLoginClient:
    settings = get_settings()
    if not settings.app_id:
        raise HTTPException(status_code=500, detail="APP_ID is required.")
    return AppLoginClient(
        AppLoginClientSettings(
            base_url=settings.app_base_url,
            app_id=settings.app_id,
            timeout_seconds=settings.app_login_timeout_seconds,
        )
    )


def get_build_credential_use_case() -> BuildCredentialUseCase:
    return BuildCredentialUseCase()


def get_login_with_credential_use_case() -> LoginWithCredentialUseCase:
    return LoginWithCredentialUseCase(app_login_port=_get_app_login_client())
