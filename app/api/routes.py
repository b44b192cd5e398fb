import logging
import re

from fastapi import APIRouter, Query, Request
from starlette.responses import JSONResponse

from app.core.responses import error_response, feed_response, success_response
from app.services.jupiter.client import JupiterAPIError
from app.services.jupiter.content import get_content_feed, get_token_content

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["content"])

FETCH_FAILED_MESSAGE = "Failed to fetch content"
LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_page(value: str | None) -> int:
    # "2abc" reads as 2, like a leading-integer parse; anything else is page 1
    match = LEADING_INT.match(value or "")
    if not match:
        return 1
    return max(int(match.group(1)), 1)


def parse_mints(value: str | None) -> list[str]:
    if not value:
        return []
    return [mint.strip() for mint in value.split(",") if mint.strip()]


def _fetch_failed(request: Request, exc: Exception) -> JSONResponse:
    status_code = exc.status_code if isinstance(exc, JupiterAPIError) else None
    payload, status = error_response(
        code="UPSTREAM_ERROR",
        message=FETCH_FAILED_MESSAGE,
        trace_id=getattr(request.state, "trace_id", "missing-trace-id"),
        status=500,
        details={"upstream_status": status_code} if status_code else None,
    )
    return JSONResponse(payload, status_code=status)


@router.get("/content")
async def content_feed(
    request: Request,
    page: str | None = Query(default=None),
    type: str = Query(default="all"),
):
    try:
        feed = await get_content_feed(parse_page(page), type)
        return feed_response(feed)
    except Exception as exc:  # noqa: BLE001
        logger.exception("Content feed failed")
        return _fetch_failed(request, exc)


@router.get("/content/tokens")
async def token_content(request: Request, mints: str | None = Query(default=None)):
    try:
        records = await get_token_content(parse_mints(mints))
        data = [record.model_dump(mode="json", by_alias=True, exclude_none=True) for record in records]
    except Exception as exc:  # noqa: BLE001
        logger.exception("Token content failed")
        return _fetch_failed(request, exc)
    return success_response(data, meta={"count": len(data)})
