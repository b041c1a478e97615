"""Request payloads for the /equipment endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

_NAME = {"min_length": 1, "max_length": 255}


class _Payload(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")


class EquipmentCreateRequest(_Payload):
    """Full equipment record; also used for PUT (full-row replace)."""

    name: str = Field(description="Equipment display name", **_NAME)
    brand_id: int = Field(gt=0, description="brand.id")
    equipment_type_id: int = Field(gt=0, description="equipment_type.id")
    model: str | None = Field(default=None, max_length=255, description="Model code")
    description: str | None = Field(default=None, description="Free text")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Tiller",
                "brand_id": 1,
                "equipment_type_id": 2,
                "model": "RT-125",
                "description": "Rotary tiller, 1.25 m",
            }
        },
    )


class EquipmentTypeCreateRequest(_Payload):
    type: str = Field(description="Type name", **_NAME)


class BrandCreateRequest(_Payload):
    name: str = Field(description="Brand name", **_NAME)


class UserEquipmentCreateRequest(_Payload):
    # Accepted for compatibility; always replaced by the caller's uid.
    user_id: int | None = Field(default=None, description="Ignored, taken from the token")
    equipment_id: int = Field(gt=0, description="equipment.id")
    equipment_reg_number: str = Field(description="Registration number", **_NAME)
    equipment_reg_year: str = Field(description="Registration year", **_NAME)
    equipment_reg_location: str = Field(description="Registration RTO / location", **_NAME)
    state: str = Field(**_NAME)
    district: str = Field(**_NAME)
    equipment_details: str = Field(min_length=1, description="Free text")
    equipment_image: str = Field(min_length=1, description="Image URL or storage key")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "equipment_id": 7,
                "equipment_reg_number": "KA01AB1234",
                "equipment_reg_year": "2020",
                "equipment_reg_location": "Pune",
                "state": "MH",
                "district": "Pune",
                "equipment_details": "35 HP, single owner",
                "equipment_image": "https://cdn.example.com/u/42/tiller.jpg",
            }
        },
    )
