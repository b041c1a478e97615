from sqlalchemy import Column, Integer, String

from app.models.base import Base


class Brand(Base):
    __tablename__ = "brand"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)  # 例: Mahindra
