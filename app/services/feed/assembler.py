import logging
from collections.abc import Mapping, Sequence
from typing import Any

from app.core.observability import FEED_RECORDS
from app.core.time import isoformat_utc, now_utc
from app.schemas.feed import ContentRecord, FeedPage, TokenMetadata
from app.services.feed.content import extract_content
from app.services.feed.resolvers import resolve_mint
from app.services.feed.tokens import extract_token_metadata, register_token
from app.utils.hashing import ContentIdFactory

logger = logging.getLogger(__name__)

PAGE_SIZE = 50
ALL_TYPES = "all"


def normalize_type_filter(type_filter: str | None) -> str | None:
    if type_filter is None:
        return None
    value = type_filter.strip().lower()
    if not value or value == ALL_TYPES:
        return None
    return value


def filter_records(records: list[ContentRecord], type_filter: str | None) -> list[ContentRecord]:
    wanted = normalize_type_filter(type_filter)
    if wanted is None:
        return records
    return [record for record in records if record.kind.value == wanted]


def paginate(records: list[ContentRecord], page: int) -> tuple[list[ContentRecord], bool]:
    page = max(page, 1)
    start = (page - 1) * PAGE_SIZE
    end = page * PAGE_SIZE
    return records[start:end], end < len(records)


def assemble(raw_items: Sequence[Any], page: int = 1, type_filter: str | None = None) -> FeedPage:
    """Build one feed page from the raw cooking-tokens items.

    Items are processed in payload order: token metadata first (earliest
    mint wins), then content records, filtered by kind before they are
    merged. The token index and fallback ids are scoped to this call.
    """
    now = isoformat_utc(now_utc())
    ids = ContentIdFactory()
    tokens: dict[str, TokenMetadata] = {}
    merged: list[ContentRecord] = []

    for item in raw_items:
        if not isinstance(item, Mapping):
            continue
        mint = resolve_mint(item)
        if not mint:
            continue

        metadata = extract_token_metadata(item)
        if metadata is not None:
            register_token(tokens, metadata)

        merged.extend(filter_records(extract_content(mint, item, ids, now), type_filter))

    records, has_more = paginate(merged, page)
    for record in records:
        FEED_RECORDS.labels(record.kind.value).inc()

    logger.debug(
        "Assembled feed page=%s type=%s records=%s total=%s tokens=%s",
        page,
        type_filter,
        len(records),
        len(merged),
        len(tokens),
    )
    return FeedPage(records=records, has_more=has_more, tokens=tokens)
