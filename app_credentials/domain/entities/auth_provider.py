from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from app_credentials.domain.exceptions import UnknownProviderError


class AuthProvider(Enum):
    ANONYMOUS = "anonymous"
    FACEBOOK = "facebook"
    GOOGLE = "google"
    APPLE = "apple"
    CUSTOM = "custom"
    USERNAME_PASSWORD = "username_password"
    FUNCTION = "function"
    USER_API_KEY = "user_api_key"
    SERVER_API_KEY = "server_api_key"


# Wire names used by the login endpoint: .../auth/providers/<identifier>/login
PROVIDER_IDENTIFIERS: Mapping[AuthProvider, str] = MappingProxyType(
    {
        AuthProvider.ANONYMOUS: "anon-user",
        AuthProvider.FACEBOOK: "oauth2-facebook",
        AuthProvider.GOOGLE: "oauth2-google",
        AuthProvider.APPLE: "oauth2-apple",
        AuthProvider.CUSTOM: "custom-token",
        AuthProvider.USERNAME_PASSWORD: "local-userpass",
        AuthProvider.FUNCTION: "custom-function",
        AuthProvider.USER_API_KEY: "api-key",
        AuthProvider.SERVER_API_KEY: "server-api-key",
    }
)


def _build_reverse_index(identifiers: Mapping[AuthProvider, str]) -> Mapping[str, AuthProvider]:
    missing = [provider.name for provider in AuthProvider if provider not in identifiers]
    if missing:
        raise RuntimeError(f"Auth providers without identifier: {', '.join(missing)}.")

    reverse: dict[str, AuthProvider] = {}
    for provider, identifier in identifiers.items():
        if not identifier:
            raise RuntimeError(f"Auth provider {provider.name} has an empty identifier.")
        if identifier in reverse:
            raise RuntimeError(
                f"Identifier '{identifier}' shared by {reverse[identifier].name} and {provider.name}."
            )
        reverse[identifier] = provider
    return MappingProxyType(reverse)


_PROVIDERS_BY_IDENTIFIER = _build_reverse_index(PROVIDER_IDENTIFIERS)


def identifier_of(provider: AuthProvider) -> str:
    return PROVIDER_IDENTIFIERS[provider]


def provider_of(identifier: str) -> AuthProvider:
    provider = _PROVIDERS_BY_IDENTIFIER.get(identifier) if isinstance(identifier, str) else None
    if provider is None:
        raise UnknownProviderError(f"Unknown auth provider identifier: {identifier!r}.")
    return provider


def all_providers() -> tuple[AuthProvider, ...]:
    return tuple(AuthProvider)
