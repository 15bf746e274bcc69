"""
Customer handlers.
"""
import logging

from sqlalchemy import insert, select

from mechanic_shop.allocator import next_id
from mechanic_shop.database import StoreGateway
from mechanic_shop.handlers.base import shop_handler, show_rows
from mechanic_shop.models.customer import Customer
from mechanic_shop.schemas.customer import CustomerCreate

logger = logging.getLogger(__name__)


@shop_handler
def add_customer(gateway: StoreGateway, terminal):
    """
    Create a new customer.
    """
    customer = CustomerCreate(
        fname=terminal.prompt("Enter first name: "),
        lname=terminal.prompt("Enter last name: "),
        phone=terminal.prompt("Enter phone number: "),
        address=terminal.prompt("Enter address: "),
    )

    with gateway.transaction():
        customer_id = next_id(gateway, Customer, "id")
        gateway.execute(insert(Customer).values(id=customer_id, **customer.model_dump()))
    logger.info("Added customer %d", customer_id)

    show_rows(gateway, terminal, select(Customer).where(Customer.id == customer_id))
    return customer_id
