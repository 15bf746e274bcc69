"""
Menu handlers. Each takes the store gateway and the terminal.
"""
from mechanic_shop.handlers.customers import add_customer
from mechanic_shop.handlers.mechanics import add_mechanic
from mechanic_shop.handlers.cars import add_car
from mechanic_shop.handlers.services import insert_service_request, close_service_request
from mechanic_shop.handlers.reports import (
    list_customers_with_bill_less_than_100,
    list_customers_with_more_than_20_cars,
    list_cars_before_1995_with_50000_miles,
    list_k_cars_with_the_most_services,
    list_customers_in_descending_order_of_total_bill,
)

__all__ = [
    "add_customer",
    "add_mechanic",
    "add_car",
    "insert_service_request",
    "close_service_request",
    "list_customers_with_bill_less_than_100",
    "list_customers_with_more_than_20_cars",
    "list_cars_before_1995_with_50000_miles",
    "list_k_cars_with_the_most_services",
    "list_customers_in_descending_order_of_total_bill",
]
