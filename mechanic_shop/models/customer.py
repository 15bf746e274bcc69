"""
Customer model for database.
"""
from sqlalchemy import Column, Integer, CHAR
from mechanic_shop.database import Base


class Customer(Base):
    """Customer database model."""

    __tablename__ = "customer"

    id = Column(Integer, primary_key=True, index=True, autoincrement=False)
    fname = Column(CHAR(32), nullable=False)
    lname = Column(CHAR(32), nullable=False)
    phone = Column(CHAR(13), nullable=False)
    address = Column(CHAR(256), nullable=False)
