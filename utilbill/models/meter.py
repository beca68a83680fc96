"""Meter Model"""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from utilbill.models.base import BaseModel, CreatedAtMixin


class Meter(BaseModel, CreatedAtMixin):
    """Consumption device owned by one user and tied to one utility"""
    __tablename__ = "meters"

    meter_id = Column(Integer, primary_key=True, autoincrement=True)
    meter_number = Column(String(100), nullable=False, unique=True)
    user_id = Column(Integer, ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False, index=True)
    utility_id = Column(Integer, ForeignKey("utilities.utility_id"), nullable=False, index=True)

    user = relationship("User", back_populates="meters")
    utility = relationship("Utility", back_populates="meters")
    bills = relationship("Bill", back_populates="meter", passive_deletes=True)

    def __repr__(self) -> str:
        return f"<Meter {self.meter_number}>"
