import logging
from contextlib import asynccontextmanager
from time import perf_counter
from uuid import uuid4

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import JSONResponse, Response

from app.api.routes import router as api_router
from app.core.config import get_settings
from app.core.logging import configure_logging
from app.core.observability import REQUEST_COUNT, REQUEST_LATENCY
from app.core.responses import error_response

logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    if settings.observability_enabled:
        FastAPIInstrumentor.instrument_app(app)
    yield


app = FastAPI(title=settings.app_name, lifespan=lifespan)
app.include_router(api_router)


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    trace_id = request.headers.get("X-Trace-Id", str(uuid4()))
    request.state.trace_id = trace_id

    start = perf_counter()
    response = await call_next(request)
    elapsed = perf_counter() - start

    path = request.url.path
    REQUEST_COUNT.labels(request.method, path, str(response.status_code)).inc()
    REQUEST_LATENCY.labels(request.method, path).observe(elapsed)
    response.headers["X-Trace-Id"] = trace_id
    return response


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    payload, status = error_response(
        code="HTTP_ERROR",
        message=str(exc.detail),
        trace_id=getattr(request.state, "trace_id", "missing-trace-id"),
        status=exc.status_code,
    )
    return JSONResponse(payload, status_code=status)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    trace_id = getattr(request.state, "trace_id", None) or request.headers.get("X-Trace-Id", str(uuid4()))
    logger.exception("Unhandled error trace_id=%s", trace_id)
    payload, status = error_response(
        code="INTERNAL_ERROR",
        message="Internal server error",
        trace_id=trace_id,
        status=500,
    )
    return JSONResponse(payload, status_code=status, headers={"X-Trace-Id": trace_id})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    payload, status = error_response(
        code="VALIDATION_ERROR",
        message="Request validation failed",
        trace_id=getattr(request.state, "trace_id", "missing-trace-id"),
        status=422,
        details={"errors": exc.errors()},
    )
    return JSONResponse(payload, status_code=status)


@app.get("/healthz")
def healthz() -> dict:
    return {"status": "ok"}


@app.get("/metrics")
def metrics() -> Response:
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
