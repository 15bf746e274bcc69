"""
Car and ownership models for database.
"""
from sqlalchemy import Column, Integer, String, ForeignKey
from mechanic_shop.database import Base


class Car(Base):
    """Car database model. The VIN is entered by the user."""

    __tablename__ = "car"

    vin = Column(String(16), primary_key=True, index=True)
    make = Column(String(32), nullable=False)
    model = Column(String(32), nullable=False)
    year = Column(Integer, nullable=False)  # expected >= 1970


class Owns(Base):
    """Links a customer to a car; a customer may own many cars and the reverse."""

    __tablename__ = "owns"

    ownership_id = Column(Integer, primary_key=True, autoincrement=False)
    customer_id = Column(Integer, ForeignKey("customer.id"), nullable=False, index=True)
    car_vin = Column(String(16), ForeignKey("car.vin"), nullable=False, index=True)
