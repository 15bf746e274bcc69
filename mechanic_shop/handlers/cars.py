"""
Car handlers.
"""
import logging

from sqlalchemy import insert, select

from mechanic_shop.database import StoreGateway
from mechanic_shop.handlers.base import shop_handler, show_rows
from mechanic_shop.models.car import Car
from mechanic_shop.schemas.car import CarCreate

logger = logging.getLogger(__name__)


@shop_handler
def add_car(gateway: StoreGateway, terminal):
    """
    Create a new car. The VIN is the key, so no id is allocated.
    """
    car = CarCreate(
        vin=terminal.prompt("Enter VIN: "),
        make=terminal.prompt("Enter make: "),
        model=terminal.prompt("Enter model: "),
        year=terminal.prompt("Enter year: "),
    )

    gateway.execute(insert(Car).values(**car.model_dump()))
    logger.info("Added car %s", car.vin)

    show_rows(gateway, terminal, select(Car).where(Car.vin == car.vin))
    return car.vin
