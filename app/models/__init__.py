# モジュール読み込み用（Alembicがモデルを見つけるために必要）
# app/models/__init__.py
from .base import Base
from .brand import Brand
from .equipment import Equipment
from .equipment_type import EquipmentType
from .role import Role
from .user_equipment import UserEquipment

__all__ = [
    "Base",
    "Brand",
    "Equipment",
    "EquipmentType",
    "Role",
    "UserEquipment",
]
