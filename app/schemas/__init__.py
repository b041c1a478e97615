from .common import DeletedCountResponse, ErrorResponse, OkResponse
from .equipment import (
    BrandCreateRequest,
    EquipmentCreateRequest,
    EquipmentTypeCreateRequest,
    UserEquipmentCreateRequest,
)

__all__ = [
    "BrandCreateRequest",
    "DeletedCountResponse",
    "EquipmentCreateRequest",
    "EquipmentTypeCreateRequest",
    "ErrorResponse",
    "OkResponse",
    "UserEquipmentCreateRequest",
]
