"""
Pydantic schemas for Car.
"""
from pydantic import BaseModel


class CarCreate(BaseModel):
    """Schema for creating a car."""
    vin: str
    make: str
    model: str
    year: int
