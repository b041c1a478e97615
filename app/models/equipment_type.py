from sqlalchemy import Column, Integer, String

from app.models.base import Base


class EquipmentType(Base):
    __tablename__ = "equipment_type"

    id = Column(Integer, primary_key=True)
    type = Column(String(255), nullable=False)  # tractor | tiller | harvester ...
