"""Public DTO exports for FastAPI response models."""

from .equipment import BrandDTO, EquipmentDTO, EquipmentTypeDTO
from .user_equipment import UserEquipmentDetailDTO, UserEquipmentDTO

__all__ = [
    "BrandDTO",
    "EquipmentDTO",
    "EquipmentTypeDTO",
    "UserEquipmentDTO",
    "UserEquipmentDetailDTO",
]
