from __future__ import annotations

import logging

import pytest

from app_credentials.application.dto.credentials import (
    AppLoginRequest,
    AppLoginResult,
    LoginWithCredentialInput,
)
from app_credentials.application.use_cases.login_with_credential import LoginWithCredentialUseCase
from app_credentials.domain.entities.credential import Credential
from app_credentials.domain.entities.tagged_token import AuthCode
from app_credentials.domain.exceptions import SerializationFailureError


class FakeAppLoginPort:
    def __init__(self):
        self.requests: list[AppLoginRequest] = []

    def login(self, *, request: AppLoginRequest) -> AppLoginResult:
        self.requests.append(request)
        return AppLoginResult(
            user_id="user-1",
            access_token="access-1",
            refresh_token="refresh-1",
            device_id="device-1",
        )


class BrokenDocument:
    def to_json(self) -> str:
        raise ValueError("invalid document")


def test_execute_submits_identifier_and_serialized_payload():
    port = FakeAppLoginPort()
    use_case = LoginWithCredentialUseCase(app_login_port=port)

    output = use_case.execute(
        LoginWithCredentialInput(credential=Credential.google(AuthCode("abc")))
    )

    assert port.requests == [AppLoginRequest(provider="oauth2-google", body='{"authCode":"abc"}')]
    assert output.provider == "oauth2-google"
    assert output.user_id == "user-1"
    assert output.access_token == "access-1"
    assert output.refresh_token == "refresh-1"
    assert output.device_id == "device-1"


def test_execute_propagates_serialization_failure_without_calling_port():
    port = FakeAppLoginPort()
    use_case = LoginWithCredentialUseCase(app_login_port=port)

    with pytest.raises(SerializationFailureError):
        use_case.execute(LoginWithCredentialInput(credential=Credential.function(BrokenDocument())))

    assert port.requests == []


def test_execute_never_logs_payload(caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.INFO, logger="app_credentials.application.use_cases.login_with_credential")
    use_case = LoginWithCredentialUseCase(app_login_port=FakeAppLoginPort())

    use_case.execute(
        LoginWithCredentialInput(credential=Credential.username_password("alice", "top-secret"))
    )

    assert "local-userpass" in caplog.text
    assert "top-secret" not in caplog.text
