from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field


class ContentKind(str, Enum):
    text = "text"
    tweet = "tweet"
    summary = "summary"
    news = "news"


class TokenMetadata(BaseModel):
    mint: str
    name: str
    symbol: str
    decimals: int = Field(default=9, ge=0)
    logo_uri: str | None = Field(default=None, alias="logoURI")
    tags: list[str] | None = None
    organic_score: float | None = Field(default=None, alias="organicScore")
    market_cap: float | None = Field(default=None, alias="marketCap")
    holders: int | None = None

    model_config = {"populate_by_name": True}


class ContentRecord(BaseModel):
    id: str
    mint: str
    kind: ContentKind
    body: str = Field(min_length=1)
    author: str = "unknown"
    source_url: str | None = Field(default=None, alias="sourceUrl")
    citations: list[str] = Field(default_factory=list)
    status: Literal["approved"] = "approved"
    created_at: str = Field(alias="createdAt")
    updated_at: str = Field(alias="updatedAt")

    model_config = {"populate_by_name": True}


class FeedPage(BaseModel):
    records: list[ContentRecord] = Field(default_factory=list)
    has_more: bool = False
    tokens: dict[str, TokenMetadata] = Field(default_factory=dict)
