import logging
from time import perf_counter
from uuid import uuid4

from fastapi import FastAPI, Request

from jwtkit.api import get_token_service, router
from jwtkit.core.logging import configure_logging

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="jwtkit token service",
    version="0.1.0",
    description="Issues and validates compact signed access tokens.",
)
app.include_router(router)


@app.middleware("http")
async def auth_audit_middleware(request: Request, call_next):
    """Log one audit line per request with the auth outcome recorded by the routes."""
    request_id = request.headers.get("x-request-id") or uuid4().hex[:12]
    request.state.request_id = request_id
    started = perf_counter()
    response = await call_next(request)
    elapsed_ms = (perf_counter() - started) * 1000.0
    response.headers["X-Request-ID"] = request_id

    subject = getattr(request.state, "auth_subject", None)
    rejection = getattr(request.state, "auth_rejection", None)
    if rejection is not None:
        logger.warning(
            "auth.rejected id=%s path=%s kind=%s status=%s",
            request_id,
            request.url.path,
            rejection,
            response.status_code,
        )
    else:
        logger.info(
            "auth.request id=%s path=%s subject=%s status=%s duration_ms=%.2f",
            request_id,
            request.url.path,
            subject or "-",
            response.status_code,
            elapsed_ms,
        )
    return response


__all__ = ["app", "get_token_service"]
