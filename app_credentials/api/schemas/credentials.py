from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from app_credentials.application.dto.credentials import CredentialKind


class CredentialRequest(BaseModel):
    kind: CredentialKind
    token: str | None = Field(default=None, max_length=8192)
    username: str | None = Field(default=None, max_length=255)
    password: str | None = Field(default=None, max_length=256)
    api_key: str | None = Field(default=None, max_length=1024)
    payload: str | dict[str, Any] | None = None


class ProviderResponse(BaseModel):
    name: str
    identifier: str


class ProvidersResponse(BaseModel):
    providers: list[ProviderResponse]


class CredentialPreviewResponse(BaseModel):
    provider: str
    identifier: str


class LoginResponse(BaseModel):
    provider: str
    user_id: str
    access_token: str
    token_type: str = "bearer"
    refresh_token: str | None = None
    device_id: str | None = None
