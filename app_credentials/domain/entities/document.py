from __future__ import annotations

from typing import Any, Mapping, Protocol, Union, runtime_checkable


@runtime_checkable
class JsonDocument(Protocol):
    """Pre-built document able to render itself as canonical JSON."""

    def to_json(self) -> str:
        ...


Document = Union[JsonDocument, Mapping[str, Any]]
