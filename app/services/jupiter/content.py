"""Jupiter VRFD content endpoints.

Fetches the cooking-tokens listing and per-mint content, then hands the raw
items to the feed normalizer.
"""

import logging
from collections.abc import Mapping
from typing import Any

from app.core.time import isoformat_utc, now_utc
from app.schemas.feed import ContentRecord, FeedPage
from app.services.feed.assembler import assemble
from app.services.feed.content import extract_content
from app.services.feed.resolvers import resolve_mint
from app.services.jupiter.client import jupiter_fetch
from app.utils.hashing import ContentIdFactory

logger = logging.getLogger(__name__)

COOKING_ENDPOINT = "/tokens/v2/content/cooking"
CONTENT_ENDPOINT = "/tokens/v2/content"


def normalize_cooking_payload(payload: Any) -> list[Any]:
    if isinstance(payload, list):
        return payload
    if isinstance(payload, Mapping) and isinstance(payload.get("data"), list):
        return payload["data"]
    return []


async def get_cooking_tokens() -> list[Any]:
    payload = await jupiter_fetch(COOKING_ENDPOINT)
    items = normalize_cooking_payload(payload)
    logger.info("Fetched %s cooking tokens", len(items))
    return items


async def get_content_feed(page: int = 1, type_filter: str | None = None) -> FeedPage:
    items = await get_cooking_tokens()
    return assemble(items, page=page, type_filter=type_filter)


async def get_token_content(mints: list[str]) -> list[ContentRecord]:
    if not mints:
        return []

    payload = await jupiter_fetch(CONTENT_ENDPOINT, params={"mints": ",".join(mints)})
    now = isoformat_utc(now_utc())
    ids = ContentIdFactory()
    records: list[ContentRecord] = []
    for item in normalize_cooking_payload(payload):
        if not isinstance(item, Mapping):
            continue
        mint = resolve_mint(item)
        if mint:
            records.extend(extract_content(mint, item, ids, now))
    return records
