from typing import Any

from app.schemas.feed import FeedPage


def success_response(data: Any, meta: dict | None = None) -> dict:
    return {
        "data": data,
        "error": None,
        "meta": meta or {},
    }


def feed_response(page: FeedPage) -> dict:
    return {
        "data": [record.model_dump(mode="json", by_alias=True, exclude_none=True) for record in page.records],
        "hasMore": page.has_more,
        "tokensMap": {
            mint: metadata.model_dump(mode="json", by_alias=True, exclude_none=True)
            for mint, metadata in page.tokens.items()
        },
    }


def error_response(code: str, message: str, trace_id: str, status: int = 400, details: dict | None = None) -> tuple[dict, int]:
    return (
        {
            "data": None,
            "error": {
                "code": code,
                "message": message,
                "trace_id": trace_id,
                "details": details or {},
            },
            "meta": {},
        },
        status,
    )
