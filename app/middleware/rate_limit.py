from __future__ import annotations

import os
from collections.abc import Callable
from typing import TypedDict

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from limits import parse as parse_limit
from limits.storage import MemoryStorage
from limits.strategies import MovingWindowRateLimiter


class RateLimitInfo(TypedDict, total=False):
    method: str
    ip: str
    limit: str


# Per-process memory storage; limits are per instance, not cluster-wide.
_storage = MemoryStorage()
_rate = MovingWindowRateLimiter(_storage)

_READ_METHODS = frozenset({"GET", "HEAD"})
_WRITE_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})


def _client_ip(request: Request) -> str:
    # First hop of X-Forwarded-For, else the ASGI peer
    xff = request.headers.get("x-forwarded-for")
    if xff:
        return xff.split(",")[0].strip()
    if request.client and request.client.host:
        return request.client.host
    return "local"


def _enabled() -> bool:
    # On unless TESTING; RATE_LIMIT_ENABLED=1 forces it on.
    if os.getenv("RATE_LIMIT_ENABLED", "").lower() in {"1", "true", "yes"}:
        return True
    return not os.getenv("TESTING")


def _limit_for_method(method: str) -> str | None:
    m = method.upper()
    if m in _READ_METHODS:
        return os.getenv("RATE_LIMIT_READ", "60/minute")
    if m in _WRITE_METHODS:
        return os.getenv("RATE_LIMIT_WRITE", "30/minute")
    # OPTIONS (CORS preflight) is never limited
    return None


async def rate_limit_middleware(request: Request, call_next: Callable) -> Response:
    if not _enabled():
        return await call_next(request)

    limit_str = _limit_for_method(request.method)
    if not limit_str:
        return await call_next(request)

    ip = _client_ip(request)
    if not _rate.hit(parse_limit(limit_str), f"ip:{ip}|m:{request.method.upper()}"):
        info: RateLimitInfo = {"method": request.method.upper(), "ip": ip, "limit": limit_str}
        return JSONResponse(
            status_code=429,
            content={
                "error": {
                    "code": "rate_limited",
                    "message": "Too Many Requests",
                    "detail": info,
                }
            },
        )

    response = await call_next(request)
    response.headers.setdefault("X-RateLimit-Limit", limit_str)
    return response


def reset_rate_limits() -> None:
    _storage.reset()
