"""
Pydantic schemas for Customer.
"""
from pydantic import BaseModel


class CustomerCreate(BaseModel):
    """Schema for creating a customer. Phone format is not checked."""
    fname: str
    lname: str
    phone: str
    address: str
