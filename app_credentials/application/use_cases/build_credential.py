from __future__ import annotations

from collections.abc import Mapping

from app_credentials.application.dto.credentials import CredentialInput
from app_credentials.domain.entities.credential import Credential
from app_credentials.domain.entities.tagged_token import AuthCode, IdToken
from app_credentials.domain.exceptions import InvalidCredentialInputError


class BuildCredentialUseCase:
    def execute(self, command: CredentialInput) -> Credential:
        kind = command.kind
        if kind == "anonymous":
            return Credential.anonymous()
        if kind == "facebook":
            return Credential.facebook(_required(command.token, "token"))
        if kind == "apple":
            return Credential.apple(_required(command.token, "token"))
        if kind == "google_auth_code":
            return Credential.google(AuthCode(_required(command.token, "token")))
        if kind == "google_id_token":
            return Credential.google(IdToken(_required(command.token, "token")))
        if kind == "custom":
            return Credential.custom(_required(command.token, "token"))
        if kind == "username_password":
            return Credential.username_password(
                _required(command.username, "username"),
                _required(command.password, "password"),
            )
        if kind == "function":
            return _function_credential(command.payload)
        if kind == "user_api_key":
            return Credential.user_api_key(_required(command.api_key, "api_key"))
        if kind == "server_api_key":
            return Credential.server_api_key(_required(command.api_key, "api_key"))
        raise InvalidCredentialInputError(f"Unsupported credential kind: {kind!r}.")


def _required(value: str | None, field_name: str) -> str:
    if value is None:
        raise InvalidCredentialInputError(f"{field_name} is required.")
    if not isinstance(value, str):
        raise InvalidCredentialInputError(f"{field_name} must be a string.")
    return value


def _function_credential(payload: object) -> Credential:
    if payload is None:
        raise InvalidCredentialInputError("payload is required.")
    if isinstance(payload, (str, Mapping)):
        return Credential.function(payload)
    raise InvalidCredentialInputError("payload must be a JSON string or an object.")
