from time import perf_counter
from typing import Any

import httpx

from app.core.config import get_settings
from app.core.observability import UPSTREAM_COUNT, UPSTREAM_LATENCY

API_KEY_HEADER = "x-api-key"


class JupiterAPIError(RuntimeError):
    def __init__(self, message: str, status_code: int | None = None, body: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


async def jupiter_fetch(
    endpoint: str,
    params: dict | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Any:
    """GET ``endpoint`` from the Jupiter API and return the decoded JSON body."""
    settings = get_settings()
    headers = {
        API_KEY_HEADER: settings.jupiter_api_key or "",
        "Content-Type": "application/json",
    }
    started = perf_counter()
    try:
        async with httpx.AsyncClient(
            base_url=settings.jupiter_api_base_url,
            timeout=settings.jupiter_http_timeout_seconds,
            transport=transport,
        ) as client:
            response = await client.get(endpoint, params=params, headers=headers)
        response.raise_for_status()
        payload = response.json()
    except httpx.HTTPStatusError as exc:
        status = exc.response.status_code
        UPSTREAM_COUNT.labels(endpoint, str(status)).inc()
        body = exc.response.text or exc.response.reason_phrase
        raise JupiterAPIError(f"Jupiter API error ({status}): {body}", status, body) from exc
    except httpx.HTTPError as exc:
        UPSTREAM_COUNT.labels(endpoint, "transport_error").inc()
        raise JupiterAPIError(f"Jupiter API request failed: {exc}") from exc
    except ValueError as exc:
        UPSTREAM_COUNT.labels(endpoint, "invalid_json").inc()
        raise JupiterAPIError(f"Jupiter API returned invalid JSON: {exc}") from exc
    finally:
        UPSTREAM_LATENCY.labels(endpoint).observe(perf_counter() - started)

    UPSTREAM_COUNT.labels(endpoint, str(response.status_code)).inc()
    return payload
