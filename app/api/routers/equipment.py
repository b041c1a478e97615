"""Catalog and registration endpoints under /equipment.

Static segments (/type, /brand, /user) are declared before /{equipment_id}
so they are not captured by the integer path parameter.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path, status

from app.api.deps import get_equipment_service, get_user_equipment_service
from app.api.security import AuthenticatedUser, require_permissions
from app.core.exceptions import NotFoundError
from app.core.permissions import (
    EQUIPMENT_DELETE,
    EQUIPMENT_READ,
    EQUIPMENT_TYPE_READ,
    EQUIPMENT_UPDATE,
    USER_EQUIPMENT_CREATE,
    USER_EQUIPMENT_DELETE,
    USER_EQUIPMENT_READ,
)
from app.dto import (
    BrandDTO,
    EquipmentDTO,
    EquipmentTypeDTO,
    UserEquipmentDetailDTO,
    UserEquipmentDTO,
)
from app.schemas.common import DeletedCountResponse, ErrorResponse
from app.schemas.equipment import (
    BrandCreateRequest,
    EquipmentCreateRequest,
    EquipmentTypeCreateRequest,
    UserEquipmentCreateRequest,
)
from app.services.equipments import EquipmentService
from app.services.user_equipments import UserEquipmentService

router = APIRouter(prefix="/equipment", tags=["equipment"])

_AUTH_ERRORS = {401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}}
_BAD_REQUEST = {400: {"model": ErrorResponse}}
_NOT_FOUND = {404: {"model": ErrorResponse}}


# --- equipment types ---


@router.post(
    "/type",
    response_model=EquipmentTypeDTO,
    status_code=status.HTTP_201_CREATED,
    responses=_BAD_REQUEST,
    summary="Add a new equipment type",
)
async def add_equipment_type(
    payload: EquipmentTypeCreateRequest,
    svc: EquipmentService = Depends(get_equipment_service),
):
    return await svc.add_equipment_type(payload)


@router.get(
    "/type",
    response_model=list[EquipmentTypeDTO],
    responses=_AUTH_ERRORS,
    summary="Get all equipment types",
)
async def get_all_equipment_types(
    _: AuthenticatedUser = Depends(require_permissions(EQUIPMENT_TYPE_READ)),
    svc: EquipmentService = Depends(get_equipment_service),
):
    return await svc.get_equipment_types()


# --- brands ---


@router.post(
    "/brand",
    response_model=BrandDTO,
    status_code=status.HTTP_201_CREATED,
    responses=_BAD_REQUEST,
    summary="Add a new brand",
)
async def add_brand(
    payload: BrandCreateRequest,
    svc: EquipmentService = Depends(get_equipment_service),
):
    return await svc.add_brand(payload)


@router.get("/brand", response_model=list[BrandDTO], summary="Get all brands")
async def get_all_brands(svc: EquipmentService = Depends(get_equipment_service)):
    return await svc.get_all_brands()


# --- user equipment (owner always comes from the token) ---


@router.post(
    "/user",
    response_model=UserEquipmentDTO,
    status_code=status.HTTP_201_CREATED,
    responses={**_AUTH_ERRORS, **_BAD_REQUEST},
    summary="Register equipment owned by the caller",
)
async def add_user_equipment(
    payload: UserEquipmentCreateRequest,
    user: AuthenticatedUser = Depends(require_permissions(USER_EQUIPMENT_CREATE)),
    svc: UserEquipmentService = Depends(get_user_equipment_service),
):
    return await svc.add_user_equipment(user.uid, payload)


@router.get(
    "/user",
    response_model=list[UserEquipmentDetailDTO],
    responses=_AUTH_ERRORS,
    summary="List the caller's registrations with equipment and brand names",
)
async def get_all_user_equipment(
    user: AuthenticatedUser = Depends(require_permissions(USER_EQUIPMENT_READ)),
    svc: UserEquipmentService = Depends(get_user_equipment_service),
):
    return await svc.get_all_user_equipments(user.uid)


@router.delete(
    "/user/{equipment_id}",
    response_model=DeletedCountResponse,
    responses=_AUTH_ERRORS,
    summary="Delete the caller's registrations of one equipment",
)
async def delete_user_equipment(
    equipment_id: int = Path(..., ge=1),
    user: AuthenticatedUser = Depends(require_permissions(USER_EQUIPMENT_DELETE)),
    svc: UserEquipmentService = Depends(get_user_equipment_service),
):
    deleted = await svc.delete_user_equipment(user.uid, equipment_id)
    return DeletedCountResponse(deleted=deleted)


# --- equipment ---


@router.post(
    "",
    response_model=EquipmentDTO,
    status_code=status.HTTP_201_CREATED,
    responses=_BAD_REQUEST,
    summary="Add a new equipment",
)
async def add_equipment(
    payload: EquipmentCreateRequest,
    svc: EquipmentService = Depends(get_equipment_service),
):
    return await svc.add_equipment(payload)


@router.get(
    "",
    response_model=list[EquipmentDTO],
    responses=_AUTH_ERRORS,
    summary="Get all equipment",
)
async def get_all_equipment(
    _: AuthenticatedUser = Depends(require_permissions(EQUIPMENT_READ)),
    svc: EquipmentService = Depends(get_equipment_service),
):
    return await svc.get_all_equipments()


@router.get(
    "/{equipment_id}",
    response_model=EquipmentDTO,
    responses={**_AUTH_ERRORS, **_NOT_FOUND},
    summary="Get equipment by id",
)
async def get_equipment_by_id(
    equipment_id: int = Path(..., ge=1),
    _: AuthenticatedUser = Depends(require_permissions(EQUIPMENT_READ)),
    svc: EquipmentService = Depends(get_equipment_service),
):
    item = await svc.get_equipment_by_id(equipment_id)
    if item is None:
        raise NotFoundError(f"equipment {equipment_id} not found")
    return item


@router.put(
    "/{equipment_id}",
    response_model=EquipmentDTO,
    responses={**_AUTH_ERRORS, **_NOT_FOUND, **_BAD_REQUEST},
    summary="Update equipment by id",
)
async def update_equipment(
    payload: EquipmentCreateRequest,
    equipment_id: int = Path(..., ge=1),
    _: AuthenticatedUser = Depends(require_permissions(EQUIPMENT_UPDATE)),
    svc: EquipmentService = Depends(get_equipment_service),
):
    return await svc.update_equipment(equipment_id, payload)


@router.delete(
    "/{equipment_id}",
    response_model=EquipmentDTO,
    responses={**_AUTH_ERRORS, **_NOT_FOUND},
    summary="Delete equipment by id",
)
async def delete_equipment(
    equipment_id: int = Path(..., ge=1),
    _: AuthenticatedUser = Depends(require_permissions(EQUIPMENT_DELETE)),
    svc: EquipmentService = Depends(get_equipment_service),
):
    return await svc.delete_equipment(equipment_id)
