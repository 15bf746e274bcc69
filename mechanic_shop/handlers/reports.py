"""
Reporting handlers.

Each report pairs a statement builder with a handler that runs it, prints
the row count and then one block of text per row.
"""
from sqlalchemy import Select, desc, func, select

from mechanic_shop.database import StoreGateway
from mechanic_shop.handlers.base import cell, shop_handler
from mechanic_shop.models import Car, ClosedRequest, Customer, Owns, ServiceRequest
from mechanic_shop.schemas import parse_int
from mechanic_shop.schemas.service_request import TopCarsQuery

BILL_LIMIT = 100
CAR_COUNT_LIMIT = 20
YEAR_LIMIT = 1995
ODOMETER_LIMIT = 50000


def customers_with_small_bill_query() -> Select:
    """Customers with a closed request billed under 100, by first name."""
    return (
        select(Customer.fname, Customer.lname, ClosedRequest.bill)
        .join(ServiceRequest, ServiceRequest.customer_id == Customer.id)
        .join(ClosedRequest, ClosedRequest.rid == ServiceRequest.rid)
        .where(ClosedRequest.bill < BILL_LIMIT)
        .order_by(Customer.fname)
    )


def customers_with_many_cars_query() -> Select:
    """Customers owning more than 20 cars."""
    car_count = func.count(Car.vin)
    return (
        select(Customer.fname, Customer.lname, car_count.label("cars"))
        .join(Owns, Owns.customer_id == Customer.id)
        .join(Car, Car.vin == Owns.car_vin)
        .group_by(Customer.id, Customer.fname, Customer.lname)
        .having(car_count > CAR_COUNT_LIMIT)
        .order_by(Customer.id)
    )


def old_low_mileage_cars_query() -> Select:
    """Distinct cars built before 1995 with a request at 50000 miles or less."""
    return (
        select(Car.vin, Car.make, Car.model, Car.year)
        .distinct()
        .join(ServiceRequest, ServiceRequest.car_vin == Car.vin)
        .where(Car.year < YEAR_LIMIT, ServiceRequest.odometer <= ODOMETER_LIMIT)
        .order_by(Car.year, Car.vin)
    )


def most_serviced_cars_query(k: int) -> Select:
    """The k cars with the most service requests; ties go to the lower VIN."""
    request_count = func.count(ServiceRequest.rid)
    return (
        select(Car.make, Car.model, Car.year, request_count.label("requests"))
        .join(ServiceRequest, ServiceRequest.car_vin == Car.vin)
        .group_by(Car.vin, Car.make, Car.model, Car.year)
        .order_by(desc(request_count), Car.vin)
        .limit(k)
    )


def customers_by_total_bill_query() -> Select:
    """Customers ranked by the sum of their bills, largest first."""
    total_bill = func.sum(ClosedRequest.bill)
    return (
        select(Customer.fname, Customer.lname, total_bill.label("total_bill"))
        .join(ServiceRequest, ServiceRequest.customer_id == Customer.id)
        .join(ClosedRequest, ClosedRequest.rid == ServiceRequest.rid)
        .group_by(Customer.id, Customer.fname, Customer.lname)
        .order_by(desc(total_bill), Customer.id)
    )


def _name(row) -> str:
    return f"{cell(row[0])} {cell(row[1])}"


@shop_handler
def list_customers_with_bill_less_than_100(gateway: StoreGateway, terminal):
    rows = gateway.query_rows(customers_with_small_bill_query())
    terminal.show(f"Total customers with bill less than {BILL_LIMIT}: {len(rows)}")
    for row in rows:
        terminal.show(f"\nName: {_name(row)}\nBill: {cell(row[2])}")
    return rows


@shop_handler
def list_customers_with_more_than_20_cars(gateway: StoreGateway, terminal):
    rows = gateway.query_rows(customers_with_many_cars_query())
    terminal.show(f"Total customers owning more than {CAR_COUNT_LIMIT} cars: {len(rows)}")
    for row in rows:
        terminal.show(f"\nName: {_name(row)}\nNumber of cars: {cell(row[2])}")
    return rows


@shop_handler
def list_cars_before_1995_with_50000_miles(gateway: StoreGateway, terminal):
    rows = gateway.query_rows(old_low_mileage_cars_query())
    terminal.show(
        f"Total cars made before {YEAR_LIMIT} with less than or equal to "
        f"{ODOMETER_LIMIT} miles: {len(rows)}"
    )
    for row in rows:
        terminal.show(f"\nMake: {cell(row[1])} Model: {cell(row[2])} Year: {cell(row[3])}")
    return rows


@shop_handler
def list_k_cars_with_the_most_services(gateway: StoreGateway, terminal):
    """
    Ask for k and list the k most serviced cars.
    """
    query = TopCarsQuery(k=parse_int(terminal.prompt("Enter k value (k > 0): ")))
    rows = gateway.query_rows(most_serviced_cars_query(query.k))
    terminal.show(f"Total cars listed: {len(rows)}")
    for position, row in enumerate(rows, start=1):
        terminal.show(
            f"\nPos: {position}\nMake: {cell(row[0])}\nModel: {cell(row[1])}\n"
            f"Year: {cell(row[2])}\nCount: {cell(row[3])}"
        )
    return rows


@shop_handler
def list_customers_in_descending_order_of_total_bill(gateway: StoreGateway, terminal):
    rows = gateway.query_rows(customers_by_total_bill_query())
    terminal.show(f"Total customers with closed requests: {len(rows)}")
    for row in rows:
        terminal.show(f"\nName: {_name(row)}\nTotal bill: {cell(row[2])}")
    return rows
