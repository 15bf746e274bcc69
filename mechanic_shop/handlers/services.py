"""
Service request handlers: opening a request and closing it with a bill.
"""
import logging
from datetime import date
from typing import Callable

from sqlalchemy import insert, select

from mechanic_shop.allocator import next_id
from mechanic_shop.database import StoreGateway
from mechanic_shop.handlers.base import exists, shop_handler, show_rows
from mechanic_shop.models.mechanic import Mechanic
from mechanic_shop.models.service_request import ClosedRequest, ServiceRequest
from mechanic_shop.schemas import parse_int
from mechanic_shop.schemas.service_request import ClosedRequestCreate, ServiceRequestCreate

logger = logging.getLogger(__name__)

INVALID_MECHANIC = "Invalid mechanic ID"
UNKNOWN_REQUEST = "Service request does not exist with that ID"
ALREADY_CLOSED = "Service request with that ID has already been closed"


@shop_handler
def insert_service_request(gateway: StoreGateway, terminal, today: Callable[[], date] = date.today):
    """
    Open a service request for a customer's car, dated today.
    """
    customer_id = parse_int(terminal.prompt("Enter customer ID: "))
    car_vin = terminal.prompt("Enter car VIN: ")
    request_date = today()
    request = ServiceRequestCreate(
        customer_id=customer_id,
        car_vin=car_vin,
        date=request_date,
        odometer=terminal.prompt("Enter mileage: "),
        complain=terminal.prompt("Enter complaint: "),
    )

    with gateway.transaction():
        rid = next_id(gateway, ServiceRequest, "rid")
        gateway.execute(insert(ServiceRequest).values(rid=rid, **request.model_dump()))
    logger.info("Opened service request %d for car %s", rid, request.car_vin)

    terminal.show(f"Service request ID: {rid}")
    show_rows(gateway, terminal, select(ServiceRequest).where(ServiceRequest.rid == rid))
    return rid


@shop_handler
def close_service_request(gateway: StoreGateway, terminal, today: Callable[[], date] = date.today):
    """
    Close an open service request.

    The mechanic and the request must exist and the request must not be
    closed yet; otherwise a message is shown and nothing is written.
    """
    mid = parse_int(terminal.prompt("Enter mechanic ID: "))
    if not exists(gateway, select(Mechanic.id).where(Mechanic.id == mid)):
        terminal.show(INVALID_MECHANIC)
        return None

    rid = parse_int(terminal.prompt("Enter service request ID: "))
    if not exists(gateway, select(ServiceRequest.rid).where(ServiceRequest.rid == rid)):
        terminal.show(UNKNOWN_REQUEST)
        return None
    if exists(gateway, select(ClosedRequest.wid).where(ClosedRequest.rid == rid)):
        terminal.show(ALREADY_CLOSED)
        return None

    close_date = today()
    closing = ClosedRequestCreate(
        rid=rid,
        mid=mid,
        date=close_date,
        bill=terminal.prompt("Enter bill amount: "),
        comment=terminal.prompt("Enter any comments: "),
    )

    with gateway.transaction():
        wid = next_id(gateway, ClosedRequest, "wid")
        gateway.execute(insert(ClosedRequest).values(wid=wid, **closing.model_dump()))
    logger.info("Closed service request %d as %d (mechanic %d, bill %d)", rid, wid, mid, closing.bill)

    terminal.show(f"Closed request ID: {wid}")
    show_rows(gateway, terminal, select(ClosedRequest).where(ClosedRequest.wid == wid))
    return wid
