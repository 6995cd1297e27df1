"""
afrihome/payloads.py

Encoding for the list-valued listing fields (features, images).

Both fields are persisted and transmitted as a JSON array serialized to text,
e.g. '["Pool", "Garden"]'. Decoding is forgiving: a missing, malformed or
non-list payload decodes to an empty list so a bad row never breaks a page.
"""

from __future__ import annotations

import json
from typing import Any, FrozenSet, Iterable, List, Optional


def encode_string_list(values: Optional[Iterable[str]]) -> Optional[str]:
    """Serialize a list of strings to its stored text form (None stays None)."""
    if values is None:
        return None
    return json.dumps(list(values))


def decode_string_list(payload: Optional[str]) -> List[str]:
    """Decode a stored payload into a list of strings; never raises."""
    if not payload:
        return []
    try:
        decoded = json.loads(payload)
    except (json.JSONDecodeError, TypeError):
        return []
    if not isinstance(decoded, list):
        return []
    return [str(item) for item in decoded if item is not None]


def decode_tag_set(payload: Optional[str]) -> FrozenSet[str]:
    return frozenset(decode_string_list(payload))


def normalize_list_payload(value: Any) -> Optional[str]:
    """
    Accept either an already-encoded payload or a native list of strings and
    return the encoded text form. Used by input schemas.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (set, frozenset)):
        value = sorted(value, key=str)
    if not isinstance(value, (list, tuple)):
        raise ValueError("must be a list of strings or a JSON-encoded array")
    if not all(isinstance(item, str) for item in value):
        raise ValueError("must contain only strings")
    return encode_string_list(value)
