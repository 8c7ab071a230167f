from __future__ import annotations

import json
from typing import Mapping

from app_credentials.domain.entities.document import Document, JsonDocument
from app_credentials.domain.exceptions import SerializationFailureError


def render_fields(fields: Mapping[str, str]) -> str:
    return json.dumps(dict(fields), separators=(",", ":"), ensure_ascii=False)


def render_document(document: Document) -> str:
    if isinstance(document, JsonDocument):
        try:
            rendered = document.to_json()
        except Exception as exc:
            raise SerializationFailureError(f"Document could not be rendered as JSON: {exc}") from exc
        if not isinstance(rendered, str):
            raise SerializationFailureError(
                f"Document rendered {type(rendered).__name__} instead of a JSON string."
            )
        return rendered

    try:
        return json.dumps(document, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise SerializationFailureError(f"Document could not be rendered as JSON: {exc}") from exc
