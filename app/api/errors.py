import structlog
from fastapi import HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core import exceptions as domain_exceptions

logger = structlog.get_logger(__name__)


def _http_exception_handler(_: Request, exc: HTTPException) -> JSONResponse:
    # Normalize to a consistent JSON body
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def _validation_exception_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    # Field-level detail: [{"loc": [...], "msg": ..., "type": ...}, ...]
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
    return JSONResponse(status_code=422, content={"detail": jsonable_encoder(errors)})


def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    # Hide internal details by default
    logger.error("unhandled_exception", path=request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


def _domain_error_handler(status_code: int, default_detail: str, headers: dict | None = None):
    def _handler(_: Request, exc: domain_exceptions.DomainError) -> JSONResponse:
        detail = str(exc) or default_detail
        return JSONResponse(status_code=status_code, content={"detail": detail}, headers=headers)

    return _handler


def install(app) -> None:
    # Register centralized exception handlers
    app.add_exception_handler(HTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(
        domain_exceptions.NotFoundError, _domain_error_handler(404, "Not Found")
    )
    app.add_exception_handler(
        domain_exceptions.ValidationError, _domain_error_handler(400, "Bad Request")
    )
    # Kept at 400 for compatibility: constraint violations and storage faults
    # both surfaced as Bad Request. The message never carries driver text.
    app.add_exception_handler(
        domain_exceptions.StorageError, _domain_error_handler(400, "Bad Request")
    )
    app.add_exception_handler(
        domain_exceptions.AuthenticationError,
        _domain_error_handler(401, "Unauthorized", headers={"WWW-Authenticate": "Bearer"}),
    )
    app.add_exception_handler(
        domain_exceptions.AuthorizationError, _domain_error_handler(403, "Forbidden")
    )
    app.add_exception_handler(Exception, _unhandled_exception_handler)
