from collections.abc import Mapping
from typing import Any

from app.schemas.feed import TokenMetadata
from app.services.feed.resolvers import (
    first_text,
    resolve_count,
    resolve_decimals,
    resolve_mint,
    resolve_number,
    resolve_tags,
)

NAME_FALLBACK_LENGTH = 8
SYMBOL_FALLBACK_LENGTH = 4


def extract_token_metadata(item: Mapping[str, Any]) -> TokenMetadata | None:
    mint = resolve_mint(item)
    if not mint:
        return None

    return TokenMetadata(
        mint=mint,
        name=first_text(item, ("name", "symbol"), mint[:NAME_FALLBACK_LENGTH]),
        symbol=first_text(item, ("symbol",), mint[:SYMBOL_FALLBACK_LENGTH]),
        decimals=resolve_decimals(item),
        logo_uri=first_text(item, ("logoURI", "icon", "image")),
        tags=resolve_tags(item),
        organic_score=resolve_number(item, "organicScore"),
        market_cap=resolve_number(item, "marketCap"),
        holders=resolve_count(item, "holders"),
    )


def register_token(index: dict[str, TokenMetadata], metadata: TokenMetadata) -> bool:
    """Add ``metadata`` to ``index`` unless its mint is already known.

    Returns True when the entry was inserted. Earlier entries always win.
    """
    if metadata.mint in index:
        return False
    index[metadata.mint] = metadata
    return True
