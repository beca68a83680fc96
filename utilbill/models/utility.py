"""Utility Model"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from utilbill.models.base import BaseModel


class Utility(BaseModel):
    """Utility type (water, electricity, gas) measured by meters"""
    __tablename__ = "utilities"

    utility_id = Column(Integer, primary_key=True, autoincrement=True)
    utility_name = Column(String(100), nullable=False, unique=True)

    meters = relationship("Meter", back_populates="utility")

    def __repr__(self) -> str:
        return f"<Utility {self.utility_name}>"
