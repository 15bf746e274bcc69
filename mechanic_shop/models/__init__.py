"""
SQLAlchemy database models.
"""
from mechanic_shop.models.customer import Customer
from mechanic_shop.models.mechanic import Mechanic
from mechanic_shop.models.car import Car, Owns
from mechanic_shop.models.service_request import ServiceRequest, ClosedRequest

__all__ = ["Customer", "Mechanic", "Car", "Owns", "ServiceRequest", "ClosedRequest"]
