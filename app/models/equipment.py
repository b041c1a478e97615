from sqlalchemy import Column, ForeignKey, Integer, String, Text

from app.models.base import Base


class Equipment(Base):
    __tablename__ = "equipment"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    brand_id = Column(Integer, ForeignKey("brand.id"), nullable=False)
    equipment_type_id = Column(Integer, ForeignKey("equipment_type.id"), nullable=False)
    model = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
