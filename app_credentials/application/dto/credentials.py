from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Mapping

from app_credentials.domain.entities.credential import Credential


CredentialKind = Literal[
    "anonymous",
    "facebook",
    "apple",
    "google_auth_code",
    "google_id_token",
    "custom",
    "username_password",
    "function",
    "user_api_key",
    "server_api_key",
]


@dataclass(frozen=True)
class CredentialInput:
    kind: CredentialKind
    token: str | None = field(default=None, repr=False)
    username: str | None = None
    password: str | None = field(default=None, repr=False)
    api_key: str | None = field(default=None, repr=False)
    payload: str | Mapping[str, Any] | None = field(default=None, repr=False)


@dataclass(frozen=True)
class AppLoginRequest:
    provider: str
    body: str = field(repr=False)


@dataclass(frozen=True)
class AppLoginResult:
    user_id: str
    access_token: str = field(repr=False)
    refresh_token: str | None = field(default=None, repr=False)
    device_id: str | None = None


@dataclass(frozen=True)
class LoginWithCredentialInput:
    credential: Credential


@dataclass(frozen=True)
class LoginWithCredentialOutput:
    provider: str
    user_id: str
    access_token: str = field(repr=False)
    refresh_token: str | None = field(default=None, repr=False)
    device_id: str | None = None
