from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar, Union, get_args, overload

from app_credentials.domain.entities.auth_provider import AuthProvider, identifier_of
from app_credentials.domain.entities.document import Document, JsonDocument
from app_credentials.domain.entities.tagged_token import AuthCode, IdToken
from app_credentials.domain.exceptions import InvalidCredentialInputError
from app_credentials.domain.services.payload_json import render_document, render_fields


_API_KEY_PROVIDERS = (AuthProvider.USER_API_KEY, AuthProvider.SERVER_API_KEY)


def _require_text(value: object, *, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidCredentialInputError(f"{field_name} must be a non-empty string.")
    return value


def _require_password(value: object) -> str:
    if not isinstance(value, str) or not value:
        raise InvalidCredentialInputError("password must be a non-empty string.")
    return value


def _require_token(value: object, token_type: type, *, field_name: str) -> None:
    if type(value) is not token_type:
        raise InvalidCredentialInputError(
            f"{field_name} must be {token_type.__name__}, got {type(value).__name__}."
        )
    _require_text(value.value, field_name=field_name)


def _snapshot_document(document: object) -> Document:
    if isinstance(document, JsonDocument):
        try:
            return copy.deepcopy(document)
        except Exception as exc:
            raise InvalidCredentialInputError(f"Function payload could not be copied: {exc}") from exc

    if not isinstance(document, Mapping):
        raise InvalidCredentialInputError(
            f"Function payload must be a JSON string or a document, got {type(document).__name__}."
        )
    non_text_keys = [key for key in document if not isinstance(key, str)]
    if non_text_keys:
        raise InvalidCredentialInputError(f"Function payload keys must be strings, got {non_text_keys[0]!r}.")
    try:
        return copy.deepcopy(dict(document))
    except Exception as exc:
        raise InvalidCredentialInputError(f"Function payload could not be copied: {exc}") from exc


@dataclass(frozen=True)
class AnonymousPayload:
    provider: ClassVar[AuthProvider] = AuthProvider.ANONYMOUS

    def to_json(self) -> str:
        return render_fields({})


@dataclass(frozen=True)
class FacebookPayload:
    provider: ClassVar[AuthProvider] = AuthProvider.FACEBOOK

    access_token: str = field(repr=False)

    def __post_init__(self) -> None:
        _require_text(self.access_token, field_name="access_token")

    def to_json(self) -> str:
        return render_fields({"accessToken": self.access_token})


@dataclass(frozen=True)
class AppleIdTokenPayload:
    provider: ClassVar[AuthProvider] = AuthProvider.APPLE

    id_token: str = field(repr=False)

    def __post_init__(self) -> None:
        _require_text(self.id_token, field_name="id_token")

    def to_json(self) -> str:
        return render_fields({"id_token": self.id_token})


@dataclass(frozen=True)
class GoogleAuthCodePayload:
    provider: ClassVar[AuthProvider] = AuthProvider.GOOGLE

    auth_code: AuthCode = field(repr=False)

    def __post_init__(self) -> None:
        _require_token(self.auth_code, AuthCode, field_name="auth_code")

    def to_json(self) -> str:
        return render_fields({"authCode": self.auth_code.value})


@dataclass(frozen=True)
class GoogleIdTokenPayload:
    provider: ClassVar[AuthProvider] = AuthProvider.GOOGLE

    id_token: IdToken = field(repr=False)

    def __post_init__(self) -> None:
        _require_token(self.id_token, IdToken, field_name="id_token")

    def to_json(self) -> str:
        return render_fields({"id_token": self.id_token.value})


@dataclass(frozen=True)
class CustomTokenPayload:
    provider: ClassVar[AuthProvider] = AuthProvider.CUSTOM

    token: str = field(repr=False)

    def __post_init__(self) -> None:
        _require_text(self.token, field_name="token")

    def to_json(self) -> str:
        return render_fields({"token": self.token})


@dataclass(frozen=True)
class UsernamePasswordPayload:
    provider: ClassVar[AuthProvider] = AuthProvider.USERNAME_PASSWORD

    username: str
    password: str = field(repr=False)

    def __post_init__(self) -> None:
        _require_text(self.username, field_name="username")
        _require_password(self.password)

    def to_json(self) -> str:
        return render_fields({"username": self.username, "password": self.password})


@dataclass(frozen=True)
class FunctionDocumentPayload:
    provider: ClassVar[AuthProvider] = AuthProvider.FUNCTION

    document: Document = field(repr=False)

    # Compares by value; unhashable like the dicts it holds.
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        # The caller keeps no handle on the stored document.
        object.__setattr__(self, "document", _snapshot_document(self.document))

    def to_json(self) -> str:
        return render_document(self.document)


@dataclass(frozen=True)
class FunctionJsonPayload:
    provider: ClassVar[AuthProvider] = AuthProvider.FUNCTION

    serialized: str = field(repr=False)

    def __post_init__(self) -> None:
        _require_text(self.serialized, field_name="payload")

    def to_json(self) -> str:
        return self.serialized


@dataclass(frozen=True)
class ApiKeyPayload:
    provider: AuthProvider
    key: str = field(repr=False)

    def __post_init__(self) -> None:
        if self.provider not in _API_KEY_PROVIDERS:
            raise InvalidCredentialInputError(
                f"API key payload can't be issued for provider {getattr(self.provider, 'name', self.provider)}."
            )
        _require_text(self.key, field_name="api_key")

    def to_json(self) -> str:
        return render_fields({"key": self.key})


CredentialPayload = Union[
    AnonymousPayload,
    FacebookPayload,
    AppleIdTokenPayload,
    GoogleAuthCodePayload,
    GoogleIdTokenPayload,
    CustomTokenPayload,
    UsernamePasswordPayload,
    FunctionDocumentPayload,
    FunctionJsonPayload,
    ApiKeyPayload,
]

_PAYLOAD_TYPES = get_args(CredentialPayload)


@dataclass(frozen=True)
class Credential:
    """Opaque login credential for one identity provider.

    Build it through one of the named factories; the payload is only rendered
    when :meth:`serialize` is called. Each payload variant validates and copies
    its own inputs, so a credential can be copied or serialized any number of
    times with the same result.
    """

    payload: CredentialPayload

    def __post_init__(self) -> None:
        if not isinstance(self.payload, _PAYLOAD_TYPES):
            raise InvalidCredentialInputError(
                f"Unsupported credential payload: {type(self.payload).__name__}."
            )

    @property
    def provider(self) -> AuthProvider:
        return self.payload.provider

    def provider_as_string(self) -> str:
        return identifier_of(self.provider)

    def serialize(self) -> str:
        return self.payload.to_json()

    @classmethod
    def anonymous(cls) -> Credential:
        return cls(AnonymousPayload())

    @classmethod
    def facebook(cls, access_token: str) -> Credential:
        return cls(FacebookPayload(access_token=access_token))

    @classmethod
    def apple(cls, id_token: str) -> Credential:
        return cls(AppleIdTokenPayload(id_token=id_token))

    @overload
    @classmethod
    def google(cls, token: AuthCode) -> Credential:
        ...

    @overload
    @classmethod
    def google(cls, token: IdToken) -> Credential:
        ...

    @classmethod
    def google(cls, token: AuthCode | IdToken) -> Credential:
        if isinstance(token, AuthCode):
            return cls(GoogleAuthCodePayload(auth_code=token))
        if isinstance(token, IdToken):
            return cls(GoogleIdTokenPayload(id_token=token))
        raise InvalidCredentialInputError(
            f"Google login requires an AuthCode or IdToken, got {type(token).__name__}."
        )

    @classmethod
    def custom(cls, token: str) -> Credential:
        return cls(CustomTokenPayload(token=token))

    @classmethod
    def username_password(cls, username: str, password: str) -> Credential:
        return cls(UsernamePasswordPayload(username=username, password=password))

    @overload
    @classmethod
    def function(cls, payload: str) -> Credential:
        ...

    @overload
    @classmethod
    def function(cls, payload: Document) -> Credential:
        ...

    @classmethod
    def function(cls, payload: str | Document) -> Credential:
        # Pre-serialized JSON is passed through untouched and never parsed here.
        if isinstance(payload, str):
            return cls(FunctionJsonPayload(serialized=payload))
        return cls(FunctionDocumentPayload(document=payload))

    @classmethod
    def user_api_key(cls, api_key: str) -> Credential:
        return cls(ApiKeyPayload(provider=AuthProvider.USER_API_KEY, key=api_key))

    @classmethod
    def server_api_key(cls, api_key: str) -> Credential:
        return cls(ApiKeyPayload(provider=AuthProvider.SERVER_API_KEY, key=api_key))
