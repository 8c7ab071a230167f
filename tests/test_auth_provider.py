from __future__ import annotations

import pytest

from app_credentials.domain.entities.auth_provider import (
    PROVIDER_IDENTIFIERS,
    AuthProvider,
    _build_reverse_index,
    all_providers,
    identifier_of,
    provider_of,
)
from app_credentials.domain.exceptions import UnknownProviderError


def test_identifier_of_is_total_and_non_empty():
    for provider in AuthProvider:
        assert identifier_of(provider)


def test_identifiers_are_unique():
    identifiers = [identifier_of(provider) for provider in AuthProvider]
    assert len(set(identifiers)) == len(identifiers)


@pytest.mark.parametrize("provider", list(AuthProvider))
def test_provider_of_inverts_identifier_of(provider: AuthProvider):
    assert provider_of(identifier_of(provider)) is provider


def test_known_wire_identifiers():
    assert identifier_of(AuthProvider.ANONYMOUS) == "anon-user"
    assert identifier_of(AuthProvider.USERNAME_PASSWORD) == "local-userpass"
    assert identifier_of(AuthProvider.GOOGLE) == "oauth2-google"
    assert identifier_of(AuthProvider.FUNCTION) == "custom-function"
    assert identifier_of(AuthProvider.USER_API_KEY) == "api-key"
    assert identifier_of(AuthProvider.SERVER_API_KEY) == "server-api-key"


@pytest.mark.parametrize("identifier", ["", "oauth2-twitter", "ANON-USER", None, 1])
def test_provider_of_rejects_unknown_identifiers(identifier):
    with pytest.raises(UnknownProviderError):
        provider_of(identifier)


def test_registry_table_is_read_only():
    with pytest.raises(TypeError):
        PROVIDER_IDENTIFIERS[AuthProvider.CUSTOM] = "jwt"  # type: ignore[index]


def test_reverse_index_rejects_missing_provider():
    partial = {provider: identifier_of(provider) for provider in AuthProvider if provider is not AuthProvider.APPLE}

    with pytest.raises(RuntimeError) as exc:
        _build_reverse_index(partial)
    assert "APPLE" in str(exc.value)


def test_reverse_index_rejects_shared_identifier():
    clashing = dict(PROVIDER_IDENTIFIERS)
    clashing[AuthProvider.SERVER_API_KEY] = "api-key"

    with pytest.raises(RuntimeError) as exc:
        _build_reverse_index(clashing)
    assert "api-key" in str(exc.value)


def test_all_providers_keeps_declaration_order():
    providers = all_providers()
    assert providers[0] is AuthProvider.ANONYMOUS
    assert providers[-1] is AuthProvider.SERVER_API_KEY
    assert len(providers) == 9
