"""Application feature flags – override payload codecs.

Two string forms are supported for the channel that carries overrides
across reloads:

* query form, as used in a URL parameter: ``"a=true,b=false,c"``
  (a bare key means ``true``; keys are percent-escaped, so ``,`` and
  ``=`` inside a key survive a round trip);
* JSON form, as used in session storage: ``{"a": true, "b": false}``.

Decoders return the raw mapping. :func:`sanitize_overrides` then keeps
only well-formed entries, so one bad entry never spoils the rest.
"""
from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote, unquote

from devflags.kernel.errors import OverridePayloadError
from devflags.observability.logging import get_logger

logger = get_logger(__name__)

_BOOL_WORDS = {"true": True, "false": False}


def encode_query(overrides: Mapping[str, bool]) -> str:
    return ",".join(
        f"{quote(key, safe='')}={str(value).lower()}" for key, value in sorted(overrides.items())
    )


def decode_query(text: str) -> dict[str, Any]:
    raw: dict[str, Any] = {}
    for item in text.split(","):
        item = item.strip()
        if not item:
            continue
        key, sep, value = item.partition("=")
        key = unquote(key.strip())
        if not sep:
            raw[key] = True
            continue
        value = value.strip()
        raw[key] = _BOOL_WORDS.get(value.lower(), value)
    return raw


def encode_json(overrides: Mapping[str, bool]) -> str:
    return json.dumps(dict(overrides), sort_keys=True)


def decode_json(text: str) -> dict[str, Any]:
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise OverridePayloadError(
            f"Override payload is not valid JSON: {exc.msg}", payload_type="json", cause=exc
        ) from exc
    except RecursionError as exc:
        raise OverridePayloadError(
            "Override payload is nested too deeply", payload_type="json", cause=exc
        ) from exc
    if not isinstance(document, dict):
        raise OverridePayloadError(
            f"Override payload must be a JSON object, got {type(document).__name__}",
            payload_type="json",
        )
    return document


def sanitize_overrides(raw: Mapping[Any, Any]) -> dict[str, bool]:
    """Keep entries with a non-empty string key and a boolean value."""
    clean: dict[str, bool] = {}
    for key, value in raw.items():
        if isinstance(key, str) and key and isinstance(value, bool):
            clean[key] = value
        else:
            logger.warning("flag_override_dropped", flag=key, value=repr(value))
    return clean


DECODERS = {"query": decode_query, "json": decode_json}

__all__ = [
    "DECODERS",
    "decode_json",
    "decode_query",
    "encode_json",
    "encode_query",
    "sanitize_overrides",
]
