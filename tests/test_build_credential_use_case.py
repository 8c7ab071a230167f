from __future__ import annotations

import pytest

from app_credentials.application.dto.credentials import CredentialInput
from app_credentials.application.use_cases.build_credential import BuildCredentialUseCase
from app_credentials.domain.entities.auth_provider import AuthProvider
from app_credentials.domain.exceptions import InvalidCredentialInputError


@pytest.fixture
def use_case() -> BuildCredentialUseCase:
    return BuildCredentialUseCase()


@pytest.mark.parametrize(
    ("command", "provider", "payload"),
    [
        (CredentialInput(kind="anonymous"), AuthProvider.ANONYMOUS, "{}"),
        (CredentialInput(kind="facebook", token="fb"), AuthProvider.FACEBOOK, '{"accessToken":"fb"}'),
        (CredentialInput(kind="apple", token="ap"), AuthProvider.APPLE, '{"id_token":"ap"}'),
        (CredentialInput(kind="google_auth_code", token="c"), AuthProvider.GOOGLE, '{"authCode":"c"}'),
        (CredentialInput(kind="google_id_token", token="i"), AuthProvider.GOOGLE, '{"id_token":"i"}'),
        (CredentialInput(kind="custom", token="jwt"), AuthProvider.CUSTOM, '{"token":"jwt"}'),
        (
            CredentialInput(kind="username_password", username="alice", password="pw"),
            AuthProvider.USERNAME_PASSWORD,
            '{"username":"alice","password":"pw"}',
        ),
        (CredentialInput(kind="function", payload='{"a":1}'), AuthProvider.FUNCTION, '{"a":1}'),
        (CredentialInput(kind="function", payload={"a": 1}), AuthProvider.FUNCTION, '{"a":1}'),
        (CredentialInput(kind="user_api_key", api_key="uk"), AuthProvider.USER_API_KEY, '{"key":"uk"}'),
        (CredentialInput(kind="server_api_key", api_key="sk"), AuthProvider.SERVER_API_KEY, '{"key":"sk"}'),
    ],
)
def test_execute_builds_credential_for_each_kind(
    use_case: BuildCredentialUseCase,
    command: CredentialInput,
    provider: AuthProvider,
    payload: str,
):
    credential = use_case.execute(command)

    assert credential.provider is provider
    assert credential.serialize() == payload


@pytest.mark.parametrize(
    "command",
    [
        CredentialInput(kind="facebook"),
        CredentialInput(kind="google_id_token", token=""),
        CredentialInput(kind="username_password", username="alice"),
        CredentialInput(kind="username_password", password="pw"),
        CredentialInput(kind="function"),
        CredentialInput(kind="function", payload=["not", "a", "document"]),  # type: ignore[arg-type]
        CredentialInput(kind="server_api_key", token="wrong-field"),
        CredentialInput(kind="custom", token=123),  # type: ignore[arg-type]
        CredentialInput(kind="twitter", token="t"),  # type: ignore[arg-type]
    ],
)
def test_execute_rejects_invalid_input(use_case: BuildCredentialUseCase, command: CredentialInput):
    with pytest.raises(InvalidCredentialInputError):
        use_case.execute(command)
