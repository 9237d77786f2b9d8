"""
Encoding for structured columns stored as JSON text.

Amenities, image lists, lifestyle preferences and comparison id lists are
kept as TEXT. Writes go through ``encode_*`` and reads through ``decode_*``;
an absent, empty or unreadable value always decodes to an empty container.
"""
import json
import logging
from typing import Any, Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)


def _loads(raw: Optional[str]) -> Any:
    if raw is None or raw == "":
        return None
    if not isinstance(raw, str):
        # Some drivers hand back already-decoded JSON
        return raw
    try:
        return json.loads(raw)
    except (TypeError, ValueError):
        logger.warning(f"Discarding undecodable JSON column value: {raw[:80]!r}")
        return None


def encode_list(values: Optional[Iterable[Any]]) -> str:
    return json.dumps(list(values or []))


def encode_string_set(values: Optional[Iterable[str]]) -> str:
    """Encode a set of strings, keeping first-seen order and dropping duplicates."""
    seen = []
    for value in values or []:
        if value not in seen:
            seen.append(value)
    return json.dumps(seen)


def encode_map(values: Optional[Dict[str, Any]]) -> str:
    return json.dumps(dict(values or {}), sort_keys=True)


def decode_list(raw: Optional[str]) -> List[Any]:
    value = _loads(raw)
    return list(value) if isinstance(value, list) else []


def decode_map(raw: Optional[str]) -> Dict[str, Any]:
    value = _loads(raw)
    return dict(value) if isinstance(value, dict) else {}


def decode_string_list(raw: Optional[str]) -> List[str]:
    """Decode a list of strings (amenities, image paths); non-string items are dropped."""
    values = decode_list(raw)
    strings = [value for value in values if isinstance(value, str)]
    if len(strings) != len(values):
        logger.warning(f"Dropped {len(values) - len(strings)} non-string item(s) from list column")
    return strings
