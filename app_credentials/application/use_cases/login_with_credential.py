from __future__ import annotations

import logging

from app_credentials.application.dto.credentials import (
    AppLoginRequest,
    LoginWithCredentialInput,
    LoginWithCredentialOutput,
)
from app_credentials.application.ports.app_login_port import AppLoginPort


logger = logging.getLogger(__name__)


class LoginWithCredentialUseCase:
    def __init__(self, *, app_login_port: AppLoginPort):
        self._app_login_port = app_login_port

    def execute(self, command: LoginWithCredentialInput) -> LoginWithCredentialOutput:
        credential = command.credential
        provider = credential.provider_as_string()
        request = AppLoginRequest(provider=provider, body=credential.serialize())

        logger.info("login_with_credential: submitting provider=%s", provider)
        result = self._app_login_port.login(request=request)
        logger.info(
            "login_with_credential: logged_in provider=%s user_id=%s",
            provider,
            result.user_id,
        )

        return LoginWithCredentialOutput(
            provider=provider,
            user_id=result.user_id,
            access_token=result.access_token,
            refresh_token=result.refresh_token,
            device_id=result.device_id,
        )
