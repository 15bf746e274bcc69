"""
Mechanic model for database.
"""
from sqlalchemy import Column, Integer, CHAR
from mechanic_shop.database import Base


class Mechanic(Base):
    """Mechanic database model."""

    __tablename__ = "mechanic"

    id = Column(Integer, primary_key=True, index=True, autoincrement=False)
    fname = Column(CHAR(32), nullable=False)
    lname = Column(CHAR(32), nullable=False)
    experience = Column(Integer, nullable=False)  # years, expected 0-99
