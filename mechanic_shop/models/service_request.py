"""
Service request models for database.

A request is open until a closed_request row references it; there is no
status column.
"""
from sqlalchemy import Column, Integer, String, Text, Date, ForeignKey
from mechanic_shop.database import Base


class ServiceRequest(Base):
    """Service request database model."""

    __tablename__ = "service_request"

    rid = Column(Integer, primary_key=True, index=True, autoincrement=False)
    customer_id = Column(Integer, ForeignKey("customer.id"), nullable=False)
    car_vin = Column(String(16), ForeignKey("car.vin"), nullable=False)
    date = Column(Date, nullable=False)
    odometer = Column(Integer, nullable=False)
    complain = Column(Text)


class ClosedRequest(Base):
    """Closed (billed) service request database model."""

    __tablename__ = "closed_request"

    wid = Column(Integer, primary_key=True, index=True, autoincrement=False)
    # Not unique: at most one row per request is checked before insert.
    rid = Column(Integer, ForeignKey("service_request.rid"), nullable=False, index=True)
    mid = Column(Integer, ForeignKey("mechanic.id"), nullable=False)
    date = Column(Date, nullable=False)
    comment = Column(Text)
    bill = Column(Integer, nullable=False)
