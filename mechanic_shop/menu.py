"""
Main menu loop.
"""
import logging

from mechanic_shop import handlers
from mechanic_shop.database import StoreGateway

logger = logging.getLogger(__name__)

MENU_ITEMS = (
    ("AddCustomer", handlers.add_customer),
    ("AddMechanic", handlers.add_mechanic),
    ("AddCar", handlers.add_car),
    ("InsertServiceRequest", handlers.insert_service_request),
    ("CloseServiceRequest", handlers.close_service_request),
    ("ListCustomersWithBillLessThan100", handlers.list_customers_with_bill_less_than_100),
    ("ListCustomersWithMoreThan20Cars", handlers.list_customers_with_more_than_20_cars),
    ("ListCarsBefore1995With50000Milles", handlers.list_cars_before_1995_with_50000_miles),
    ("ListKCarsWithTheMostServices", handlers.list_k_cars_with_the_most_services),
    ("ListCustomersInDescendingOrderOfTheirTotalBill",
     handlers.list_customers_in_descending_order_of_total_bill),
)
EXIT_CHOICE = len(MENU_ITEMS) + 1


def render_menu(terminal) -> None:
    lines = ["MAIN MENU", "---------"]
    lines.extend(f"{number}. {label}" for number, (label, _) in enumerate(MENU_ITEMS, start=1))
    lines.append(f"{EXIT_CHOICE}. < EXIT")
    terminal.show("\n".join(lines))


def read_choice(terminal) -> int:
    """Prompt until an integer is entered."""
    while True:
        raw = terminal.prompt("Please make your choice: ")
        try:
            return int(raw)
        except ValueError:
            terminal.show("Your input is invalid!")


def run(gateway: StoreGateway, terminal) -> None:
    """Render the menu and dispatch choices until EXIT or end of input."""
    while True:
        render_menu(terminal)
        try:
            choice = read_choice(terminal)
            if choice == EXIT_CHOICE:
                return
            if not 1 <= choice <= len(MENU_ITEMS):
                terminal.show("Unknown option")
                continue
            label, handler = MENU_ITEMS[choice - 1]
            logger.debug("Dispatching %s", label)
            handler(gateway, terminal)
        except EOFError:
            logger.info("End of input, leaving the menu")
            return
