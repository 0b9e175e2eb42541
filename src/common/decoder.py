from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from .config import DEFAULT_LIST_KEY, FieldKeys
from .models import Location


logger = logging.getLogger(__name__)

RawResponse = Union[bytes, str]


class ShapeError(RuntimeError):
    """Body is not JSON, or the list field is absent or not an array."""


class ElementError(RuntimeError):
    """A single list element lacks a required string field."""


# --------------- Generic JSON value access ---------------
# Any value `json.loads` can produce
JSONValue = Union[Dict[str, Any], List[Any], str, int, float, bool, None]


def get_field(value: JSONValue, key: str) -> Optional[JSONValue]:
    """Return `value[key]` when `value` is a JSON object holding `key`, else None."""
    if isinstance(value, dict):
        return value.get(key)
    return None


def get_str(value: JSONValue, key: str) -> Optional[str]:
    v = get_field(value, key)
    return v if isinstance(v, str) else None


def get_list(value: JSONValue, key: str) -> Optional[List[JSONValue]]:
    v = get_field(value, key)
    return v if isinstance(v, list) else None


# --------------- Decoding ---------------
def _parse(raw: RawResponse) -> JSONValue:
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = bytes(raw).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ShapeError("Response body is not valid UTF-8") from exc
    try:
        return json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise ShapeError(f"Response body is not valid JSON: {exc}") from exc
    except RecursionError as exc:
        raise ShapeError("Response body is nested too deeply to parse") from exc


def _to_location(element: JSONValue, keys: FieldKeys) -> Location:
    if not isinstance(element, dict):
        raise ElementError(f"Element is {type(element).__name__}, not an object")
    fields: Dict[str, Optional[str]] = {
        "name": get_str(element, keys.name),
        "description": get_str(element, keys.description),
        "location": get_str(element, keys.location),
    }
    missing = [k for k, v in fields.items() if v is None]
    if missing:
        raise ElementError(f"Missing or non-string fields: {', '.join(missing)}")
    try:
        return Location(**fields)
    except ValidationError as ve:
        raise ElementError(str(ve)) from ve


def decode_strict(
    raw: RawResponse,
    list_key: str = DEFAULT_LIST_KEY,
    field_keys: Optional[FieldKeys] = None,
) -> List[Location]:
    """
    Decode `raw` into locations, raising `ShapeError` on top-level problems.

    Invalid elements are still dropped; only the envelope is strict.
    """
    keys = field_keys or FieldKeys()
    payload = _parse(raw)
    if not isinstance(payload, dict):
        raise ShapeError(f"Top-level JSON is {type(payload).__name__}, not an object")
    if list_key not in payload:
        raise ShapeError(f"Key {list_key!r} missing in payload")
    elements = get_list(payload, list_key)
    if elements is None:
        raise ShapeError(f"Key {list_key!r} is not an array")

    items: List[Location] = []
    for idx, element in enumerate(elements):
        try:
            items.append(_to_location(element, keys))
        except ElementError as ee:
            logger.debug("Dropping element %d: %s", idx, ee)
    return items


def decode(
    raw: RawResponse,
    list_key: str = DEFAULT_LIST_KEY,
    field_keys: Optional[FieldKeys] = None,
) -> List[Location]:
    """
    Decode `raw` into an ordered list of `Location`.

    Any envelope problem (bad JSON, missing or non-array `list_key`) yields an
    empty list; elements failing validation are skipped. Never raises.
    """
    try:
        return decode_strict(raw, list_key, field_keys)
    except ShapeError as se:
        logger.warning("Unusable response, treating as empty: %s", se)
        return []


__all__ = [
    "ElementError",
    "JSONValue",
    "ShapeError",
    "decode",
    "decode_strict",
    "get_field",
    "get_list",
    "get_str",
]
