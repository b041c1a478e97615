"""SQLAlchemy implementations of repository interfaces."""

from .catalog import SqlAlchemyBrandRepository, SqlAlchemyEquipmentTypeRepository
from .equipment import SqlAlchemyEquipmentRepository
from .user_equipment import SqlAlchemyUserEquipmentRepository

__all__ = [
    "SqlAlchemyBrandRepository",
    "SqlAlchemyEquipmentRepository",
    "SqlAlchemyEquipmentTypeRepository",
    "SqlAlchemyUserEquipmentRepository",
]
