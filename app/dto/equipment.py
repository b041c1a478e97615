"""DTOs for catalog resources exposed via the public API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class BrandDTO(BaseModel):
    id: int = Field(description="Brand ID")
    name: str

    model_config = ConfigDict(from_attributes=True)


class EquipmentTypeDTO(BaseModel):
    id: int = Field(description="Equipment type ID")
    type: str

    model_config = ConfigDict(from_attributes=True)


class EquipmentDTO(BaseModel):
    id: int = Field(description="Equipment ID")
    name: str = Field(description="Display name")
    brand_id: int
    equipment_type_id: int
    model: str | None = None
    description: str | None = None

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 7,
                "name": "Tiller",
                "brand_id": 1,
                "equipment_type_id": 2,
                "model": "RT-125",
                "description": None,
            }
        },
    )
