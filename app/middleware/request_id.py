from __future__ import annotations

import time
import uuid
from collections.abc import Callable

import sentry_sdk
import structlog
from fastapi import Request, Response

REQUEST_ID_HEADER = "X-Request-ID"

logger = structlog.get_logger(__name__)


def _log_access(request: Request, rid: str, status: int, start_ns: int, **extra) -> None:
    duration_ms = (time.perf_counter_ns() - start_ns) / 1_000_000.0
    log = logger.error if status >= 500 else logger.info
    log(
        "http_request",
        request_id=rid,
        path=request.url.path,
        method=request.method,
        status=status,
        duration_ms=round(duration_ms, 3),
        client_ip=(request.client.host if request.client else None) or "-",
        **extra,
    )


async def request_id_middleware(request: Request, call_next: Callable) -> Response:
    """Propagate X-Request-ID and emit one structured access log per request.

    The id (inbound header or a fresh UUID4) is bound to structlog contextvars
    for the duration of the request, so service logs carry it too.
    """
    rid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
    structlog.contextvars.bind_contextvars(
        request_id=rid, path=request.url.path, method=request.method
    )
    sentry_sdk.set_tag("request_id", rid)

    start_ns = time.perf_counter_ns()
    try:
        response = await call_next(request)
    except Exception:
        _log_access(request, rid, 500, start_ns, exc_info=True)
        raise
    else:
        _log_access(request, rid, response.status_code, start_ns)
        response.headers[REQUEST_ID_HEADER] = rid
        return response
    finally:
        structlog.contextvars.clear_contextvars()
