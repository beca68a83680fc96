"""User Model"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from utilbill.models.base import BaseModel, CreatedAtMixin
from utilbill.models.enums import UserRole


class User(BaseModel, CreatedAtMixin):
    """Account that owns meters. Email is stored lowercase."""
    __tablename__ = "users"

    user_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=True)
    role = Column(String(20), nullable=False, default=UserRole.USER.value, server_default=UserRole.USER.value)

    meters = relationship("Meter", back_populates="user", passive_deletes=True)

    def __repr__(self) -> str:
        return f"<User {self.email} ({self.role})>"
