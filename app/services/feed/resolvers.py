"""Field resolvers for loosely-shaped Jupiter payloads.

Each resolver reads a raw JSON-decoded record, tries an ordered list of
candidate keys and falls back to a default. None of them raise on bad input.
"""

import math
from collections.abc import Iterable, Mapping
from datetime import UTC, datetime
from typing import Any

from app.core.time import isoformat_utc
from app.schemas.feed import ContentKind

UNKNOWN_AUTHOR = "unknown"
DEFAULT_DECIMALS = 9
_EPOCH_MILLIS_THRESHOLD = 1e12


def _as_float(value: Any) -> float | None:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except OverflowError:
        return None
    return number if math.isfinite(number) else None


def first_text(raw: Mapping[str, Any], keys: Iterable[str], default: str | None = None) -> str | None:
    for key in keys:
        value = raw.get(key)
        if isinstance(value, str) and value.strip():
            return value
    return default


def first_identifier(raw: Mapping[str, Any], keys: Iterable[str]) -> str | None:
    for key in keys:
        value = raw.get(key)
        if isinstance(value, str) and value.strip():
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
    return None


def resolve_mint(raw: Mapping[str, Any]) -> str | None:
    mint = first_text(raw, ("mint",))
    return mint.strip() if mint else None


def resolve_author(value: Any) -> str:
    if isinstance(value, Mapping):
        return first_text(value, ("username",), UNKNOWN_AUTHOR)
    if isinstance(value, str) and value.strip():
        return value
    return UNKNOWN_AUTHOR


def resolve_kind(raw: Mapping[str, Any]) -> ContentKind:
    value = first_text(raw, ("contentType", "type"))
    if value is None:
        return ContentKind.text
    try:
        return ContentKind(value.strip().lower())
    except ValueError:
        return ContentKind.text


def resolve_decimals(raw: Mapping[str, Any]) -> int:
    value = raw.get("decimals")
    if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
        return value
    return DEFAULT_DECIMALS


def resolve_number(raw: Mapping[str, Any], key: str) -> float | None:
    return _as_float(raw.get(key))


def resolve_count(raw: Mapping[str, Any], key: str) -> int | None:
    number = _as_float(raw.get(key))
    if number is not None and number >= 0 and number.is_integer():
        return int(number)
    return None


def resolve_tags(raw: Mapping[str, Any]) -> list[str] | None:
    value = raw.get("tags")
    if not isinstance(value, list):
        return None
    return [tag for tag in value if isinstance(tag, str) and tag.strip()]


def resolve_citations(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    citations: list[str] = []
    for entry in value:
        if isinstance(entry, str) and entry.strip():
            citations.append(entry)
        elif isinstance(entry, Mapping):
            url = first_text(entry, ("url",))
            if url:
                citations.append(url)
    return citations


def resolve_timestamp(raw: Mapping[str, Any], keys: Iterable[str], now: str) -> str:
    for key in keys:
        value = raw.get(key)
        if isinstance(value, str) and value.strip():
            return value
        number = _as_float(value)
        if number is not None:
            seconds = number / 1000 if number > _EPOCH_MILLIS_THRESHOLD else number
            try:
                return isoformat_utc(datetime.fromtimestamp(seconds, UTC))
            except (OverflowError, OSError, ValueError):
                continue
    return now
