"""DTOs for user-owned equipment registrations."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class UserEquipmentDTO(BaseModel):
    id: int
    user_id: int = Field(description="Owner uid")
    equipment_id: int
    equipment_reg_number: str
    equipment_reg_year: str
    equipment_reg_location: str
    state: str
    district: str
    equipment_details: str
    equipment_image: str

    model_config = ConfigDict(from_attributes=True)


class UserEquipmentDetailDTO(UserEquipmentDTO):
    """Registration enriched with catalog data for the owner's listing."""

    name: str = Field(description="Equipment display name")
    brand_name: str = Field(description="Brand name")
