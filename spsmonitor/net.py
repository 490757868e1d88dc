"""Fetching JSON documents from the simulator's HTTP endpoints."""

from __future__ import annotations

import http.client
import json
import urllib.error
import urllib.request
from typing import Any

_TIMEOUT = 10.0
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class FetchError(Exception):
    """Raised when a remote document cannot be fetched or decoded."""


def fetch_json(url: str) -> Any:
    """GET a URL and decode its JSON body.

    Returns None when the server answers with a status other than 200.
    """
    try:
        with urllib.request.urlopen(url, timeout=_TIMEOUT) as response:
            if response.status != 200:
                return None
            body = response.read()
    except urllib.error.HTTPError as exc:
        exc.close()
        return None
    except (OSError, ValueError, http.client.HTTPException) as exc:
        raise FetchError(f"Get {url!r}: {exc}") from exc
    try:
        return json.loads(body)
    except ValueError as exc:
        raise FetchError(f"invalid JSON from {url}: {exc}") from exc


def _records(payload: Any) -> list[dict]:
    """Return the objects of a JSON array; null stands for an empty array."""
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise ValueError("expected a JSON array")
    records = []
    for item in payload:
        if item is None:
            records.append({})
        elif isinstance(item, dict):
            records.append(item)
        else:
            raise ValueError(f"expected a JSON object, got {item!r}")
    return records


def _str_field(item: dict, key: str) -> str:
    value = item.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string, got {value!r}")
    return value


def _int_field(item: dict, key: str) -> int:
    value = item.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {key!r} must be an integer, got {value!r}")
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"field {key!r} is out of range: {value!r}")
    return value