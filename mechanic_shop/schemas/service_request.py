"""
Pydantic schemas for service requests and their closing.
"""
import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ServiceRequestCreate(BaseModel):
    """Schema for opening a service request."""
    customer_id: int
    car_vin: str
    date: datetime.date
    odometer: int
    complain: Optional[str] = None


class ClosedRequestCreate(BaseModel):
    """Schema for closing a service request."""
    rid: int
    mid: int
    date: datetime.date
    comment: Optional[str] = None
    bill: int


class TopCarsQuery(BaseModel):
    """Parameters of the most-serviced-cars report."""
    k: int = Field(gt=0)
