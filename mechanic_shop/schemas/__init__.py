"""
Pydantic schemas for request validation.
"""
from pydantic import TypeAdapter

from mechanic_shop.schemas.customer import CustomerCreate
from mechanic_shop.schemas.mechanic import MechanicCreate
from mechanic_shop.schemas.car import CarCreate
from mechanic_shop.schemas.service_request import (
    ServiceRequestCreate,
    ClosedRequestCreate,
    TopCarsQuery,
)

_int_adapter = TypeAdapter(int)


def parse_int(raw: str) -> int:
    """Parse one integer typed at the terminal; raises pydantic.ValidationError."""
    return _int_adapter.validate_python(raw)


__all__ = [
    "CustomerCreate",
    "MechanicCreate",
    "CarCreate",
    "ServiceRequestCreate",
    "ClosedRequestCreate",
    "TopCarsQuery",
    "parse_int",
]
