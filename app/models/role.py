from sqlalchemy import Column, Integer, String, UniqueConstraint

from app.models.base import Base


class Role(Base):
    __tablename__ = "roles"
    __table_args__ = (UniqueConstraint("role", name="uq_roles_role"),)

    id = Column(Integer, primary_key=True)
    role = Column(String(255), nullable=False)
