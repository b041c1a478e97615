from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Integer, String, Text

from app.models.base import Base


class UserEquipment(Base):
    """One registered physical unit of catalog equipment owned by one user."""

    __tablename__ = "user_equipment"

    id = Column(Integer, primary_key=True)
    # External identity (auth token uid); no FK, users live outside this schema
    user_id = Column(Integer, nullable=False, index=True)
    equipment_id = Column(
        Integer, ForeignKey("equipment.id", ondelete="CASCADE"), nullable=False
    )
    equipment_reg_number = Column(String(255), nullable=False)
    equipment_reg_year = Column(String(255), nullable=False)
    equipment_reg_location = Column(String(255), nullable=False)
    state = Column(String(255), nullable=False)
    district = Column(String(255), nullable=False)
    equipment_details = Column(Text, nullable=False)
    equipment_image = Column(Text, nullable=False)

    # (user_id, equipment_id) is not unique: one user may own
    # several units of the same catalog model.
