from __future__ import annotations


class DomainError(Exception):
    """Base for domain errors."""


class InvalidCredentialInputError(DomainError):
    """Credential inputs are empty or structurally invalid."""


class UnknownProviderError(DomainError):
    """Identifier does not belong to any known auth provider."""


class SerializationFailureError(DomainError):
    """Credential payload could not be rendered as JSON."""
