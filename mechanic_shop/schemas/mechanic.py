"""
Pydantic schemas for Mechanic.
"""
from pydantic import BaseModel


class MechanicCreate(BaseModel):
    """Schema for creating a mechanic."""
    fname: str
    lname: str
    # Expected 0-99; only the integer parse is enforced.
    experience: int
