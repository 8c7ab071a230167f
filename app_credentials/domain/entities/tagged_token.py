from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TaggedToken:
    """Opaque string whose meaning is carried by its class.

    Tokens of different classes never compare equal, so an authorization code
    can't be mistaken for an id token even when both hold the same text.
    """

    value: str = field(repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"{type(self).__name__} requires a str, got {type(self.value).__name__}.")


@dataclass(frozen=True)
class AuthCode(TaggedToken):
    pass


@dataclass(frozen=True)
class IdToken(TaggedToken):
    pass
