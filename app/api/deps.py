"""API dependency helpers and service providers."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app import db
from app.infra.unit_of_work import SqlAlchemyUnitOfWork
from app.services.equipments import EquipmentService
from app.services.health import HealthService
from app.services.user_equipments import UserEquipmentService

__all__ = [
    "get_session_factory",
    "get_equipment_service",
    "get_user_equipment_service",
    "get_health_service",
]


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    # Resolved per request so configure_engine() and test overrides take effect.
    return db.SessionLocal


# --- Service providers for DI ---


def get_equipment_service(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> EquipmentService:
    return EquipmentService(lambda: SqlAlchemyUnitOfWork(session_factory))


def get_user_equipment_service(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> UserEquipmentService:
    return UserEquipmentService(lambda: SqlAlchemyUnitOfWork(session_factory))


def get_health_service(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> HealthService:
    return HealthService(session_factory)
