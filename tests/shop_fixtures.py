"""
Shared fixtures: an in-memory store and a scripted terminal.
"""
from datetime import date

from sqlalchemy import insert

from mechanic_shop.config import Settings
from mechanic_shop.database import StoreGateway
from mechanic_shop.models import Car, ClosedRequest, Customer, Mechanic, Owns, ServiceRequest

MEMORY_URL = "sqlite+pysqlite:///:memory:"
TODAY = date(2024, 3, 15)


def make_gateway():
    """Gateway over a fresh in-memory SQLite database with the shop schema."""
    gateway = StoreGateway.connect(Settings(database_url=MEMORY_URL))
    gateway.create_schema()
    return gateway


def fixed_today():
    return TODAY


class ScriptedTerminal:
    """Answers prompts from a list and records everything shown."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.prompts = []
        self.output = []

    def prompt(self, label):
        self.prompts.append(label)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def show(self, text=""):
        self.output.append(text)

    @property
    def text(self):
        return "\n".join(self.output)


def add_customer_row(gateway, id, fname="Jane", lname="Doe", phone="555-1212", address="1 Main St"):
    gateway.execute(insert(Customer).values(id=id, fname=fname, lname=lname, phone=phone, address=address))


def add_mechanic_row(gateway, id, fname="Sam", lname="Wrench", experience=10):
    gateway.execute(insert(Mechanic).values(id=id, fname=fname, lname=lname, experience=experience))


def add_car_row(gateway, vin, make="Honda", model="Civic", year=2010):
    gateway.execute(insert(Car).values(vin=vin, make=make, model=model, year=year))


def add_ownership_row(gateway, ownership_id, customer_id, car_vin):
    gateway.execute(insert(Owns).values(ownership_id=ownership_id, customer_id=customer_id, car_vin=car_vin))


def add_request_row(gateway, rid, customer_id, car_vin, odometer=10000, complain="noise"):
    gateway.execute(insert(ServiceRequest).values(
        rid=rid, customer_id=customer_id, car_vin=car_vin, date=TODAY, odometer=odometer, complain=complain,
    ))


def add_closed_row(gateway, wid, rid, mid, bill, comment="done"):
    gateway.execute(insert(ClosedRequest).values(
        wid=wid, rid=rid, mid=mid, date=TODAY, comment=comment, bill=bill,
    ))
