"""Registrations owned by the authenticated caller."""

from __future__ import annotations

from collections.abc import Callable

import structlog

from app.core.exceptions import ValidationError
from app.dto import UserEquipmentDetailDTO, UserEquipmentDTO
from app.infra.unit_of_work import UnitOfWork
from app.schemas.equipment import UserEquipmentCreateRequest

UnitOfWorkFactory = Callable[[], UnitOfWork]

logger = structlog.get_logger(__name__)


def _check_owner(owner_id: int) -> int:
    if isinstance(owner_id, bool) or not isinstance(owner_id, int) or owner_id <= 0:
        raise ValidationError("owner id must be a positive integer")
    return owner_id


class UserEquipmentService:
    """Every method takes ``owner_id`` from the auth context, never the payload."""

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    async def add_user_equipment(
        self, owner_id: int, payload: UserEquipmentCreateRequest
    ) -> UserEquipmentDTO:
        values = payload.model_dump(exclude={"user_id"})
        values["user_id"] = _check_owner(owner_id)
        async with self._uow_factory() as uow:
            row = await uow.user_equipments.add(values)
        logger.info(
            "user_equipment_created",
            user_equipment_id=row.id,
            user_id=owner_id,
            equipment_id=row.equipment_id,
        )
        return UserEquipmentDTO.model_validate(row)

    async def get_all_user_equipments(self, owner_id: int) -> list[UserEquipmentDetailDTO]:
        async with self._uow_factory() as uow:
            rows = await uow.user_equipments.list_for_owner(_check_owner(owner_id))
        return [UserEquipmentDetailDTO.model_validate(r) for r in rows]

    async def delete_user_equipment(self, owner_id: int, equipment_id: int) -> int:
        async with self._uow_factory() as uow:
            deleted = await uow.user_equipments.delete_for_owner(
                _check_owner(owner_id), equipment_id
            )
        logger.info(
            "user_equipment_deleted",
            user_id=owner_id,
            equipment_id=equipment_id,
            deleted=deleted,
        )
        return deleted
