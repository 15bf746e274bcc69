"""
Mechanic handlers.
"""
import logging

from sqlalchemy import insert, select

from mechanic_shop.allocator import next_id
from mechanic_shop.database import StoreGateway
from mechanic_shop.handlers.base import shop_handler, show_rows
from mechanic_shop.models.mechanic import Mechanic
from mechanic_shop.schemas.mechanic import MechanicCreate

logger = logging.getLogger(__name__)


@shop_handler
def add_mechanic(gateway: StoreGateway, terminal):
    """
    Create a new mechanic.
    """
    mechanic = MechanicCreate(
        fname=terminal.prompt("Enter first name: "),
        lname=terminal.prompt("Enter last name: "),
        experience=terminal.prompt("Enter years experience: "),
    )

    with gateway.transaction():
        mechanic_id = next_id(gateway, Mechanic, "id")
        gateway.execute(insert(Mechanic).values(id=mechanic_id, **mechanic.model_dump()))
    logger.info("Added mechanic %d", mechanic_id)

    show_rows(gateway, terminal, select(Mechanic).where(Mechanic.id == mechanic_id))
    return mechanic_id
