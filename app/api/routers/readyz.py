from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.api.deps import get_health_service
from app.core.exceptions import StorageError
from app.core.startup import is_migration_completed, last_migration_error
from app.schemas.common import OkResponse
from app.services.health import HealthService

router = APIRouter(prefix="/readyz", tags=["health"])


def _unavailable(code: str, message: str, detail: str | None = None) -> JSONResponse:
    payload: dict = {"error": {"code": code, "message": message}}
    if detail:
        payload["error"]["detail"] = detail
    return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=payload)


@router.get(
    "",
    response_model=OkResponse,
    summary="Readiness probe",
    description="503 until migrations have run, then SELECT 1 against the database.",
)
async def readyz(svc: HealthService = Depends(get_health_service)):
    if not is_migration_completed():
        return _unavailable(
            "migrations_pending",
            "Database migrations have not completed",
            last_migration_error(),
        )
    try:
        return await svc.ok()
    except StorageError:
        return _unavailable("database_unavailable", "Database is not reachable")
