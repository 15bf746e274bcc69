import unittest

from pydantic import ValidationError
from sqlalchemy import insert, null, select, text

from mechanic_shop.config import Settings
from mechanic_shop.database import (
    NO_SEQUENCE_VALUE,
    DriverUnavailableError,
    StoreConnectionError,
    StoreError,
    StoreGateway,
)
from mechanic_shop.models import Mechanic

from shop_fixtures import add_mechanic_row, make_gateway


class TestStoreGateway(unittest.TestCase):

    def setUp(self):
        self.gateway = make_gateway()

    def tearDown(self):
        self.gateway.close()

    def test_query_rows_returns_text_values(self):
        """Every value comes back as a string"""
        add_mechanic_row(self.gateway, 4, fname="Ana", lname="Ruiz", experience=12)
        rows = self.gateway.query_rows(select(Mechanic.id, Mechanic.fname, Mechanic.experience))
        self.assertEqual(rows, [["4", "Ana", "12"]])

    def test_query_rows_empty_result(self):
        """No matching rows gives an empty list"""
        self.assertEqual(self.gateway.query_rows(select(Mechanic).where(Mechanic.id == 1)), [])

    def test_query_rows_keeps_null(self):
        rows = self.gateway.query_rows(select(null()))
        self.assertEqual(rows, [[None]])

    def test_query_table_returns_column_names(self):
        add_mechanic_row(self.gateway, 1)
        columns, rows = self.gateway.query_table(select(Mechanic))
        self.assertEqual(columns, ["id", "fname", "lname", "experience"])
        self.assertEqual(len(rows), 1)

    def test_constraint_violation_raises_store_error(self):
        """Duplicate primary key is reported as StoreError"""
        add_mechanic_row(self.gateway, 1)
        with self.assertRaises(StoreError):
            add_mechanic_row(self.gateway, 1)

    def test_malformed_statement_raises_store_error(self):
        with self.assertRaises(StoreError):
            self.gateway.query_rows(text("SELEC nothing"))
        with self.assertRaises(StoreError):
            self.gateway.execute(text("INSERT INTO no_such_table VALUES (1)"))

    def test_unbindable_value_raises_store_error(self):
        """An integer wider than the column is reported as StoreError"""
        huge = 10 ** 25
        with self.assertRaises(StoreError):
            self.gateway.query_rows(select(Mechanic).where(Mechanic.id == huge))
        with self.assertRaises(StoreError):
            self.gateway.execute(insert(Mechanic).values(id=huge, fname="a", lname="b", experience=1))
        self.assertEqual(self.gateway.query_rows(select(Mechanic.id)), [])

    def test_transaction_rolls_back_on_error(self):
        """A failing statement undoes the earlier statements of the same transaction"""
        with self.assertRaises(StoreError):
            with self.gateway.transaction():
                add_mechanic_row(self.gateway, 1)
                add_mechanic_row(self.gateway, 1)
        self.assertEqual(self.gateway.query_rows(select(Mechanic.id)), [])

    def test_transaction_commits(self):
        with self.gateway.transaction():
            add_mechanic_row(self.gateway, 1)
            add_mechanic_row(self.gateway, 2)
        self.assertEqual(self.gateway.query_rows(select(Mechanic.id).order_by(Mechanic.id)), [["1"], ["2"]])

    def test_sequence_without_values_returns_sentinel(self):
        self.assertEqual(self.gateway.current_sequence_value("mechanic"), NO_SEQUENCE_VALUE)

    def test_sequence_value_after_insert(self):
        self.gateway.execute(text("CREATE TABLE ticket (id INTEGER PRIMARY KEY AUTOINCREMENT, note TEXT)"))
        self.gateway.execute(text("INSERT INTO ticket (note) VALUES ('a')"))
        self.gateway.execute(text("INSERT INTO ticket (note) VALUES ('b')"))
        self.assertEqual(self.gateway.current_sequence_value("ticket"), 2)

    def test_close_is_idempotent(self):
        """Closing twice releases the connection once and raises nothing"""
        self.gateway.close()
        self.gateway.close()
        self.assertTrue(self.gateway.closed)

    def test_closed_gateway_rejects_statements(self):
        self.gateway.close()
        with self.assertRaises(StoreError):
            self.gateway.query_rows(select(Mechanic))
        with self.assertRaises(StoreError):
            self.gateway.execute(insert(Mechanic).values(id=1, fname="a", lname="b", experience=1))


class TestStoreConnection(unittest.TestCase):

    def test_unreachable_store(self):
        settings = Settings(database_url="sqlite+pysqlite:////nonexistent-dir/shop.db")
        with self.assertRaises(StoreConnectionError):
            StoreGateway.connect(settings)

    def test_unknown_driver(self):
        settings = Settings(database_url="nosuchdb://user@localhost/shop")
        with self.assertRaises(DriverUnavailableError):
            StoreGateway.connect(settings)

    def test_url_from_parts(self):
        settings = Settings(
            database_url=None,
            db_host="db.local",
            db_port=5433,
            db_name="shop",
            db_user="clerk",
            db_password="secret",
        )
        url = settings.sqlalchemy_url
        self.assertEqual(url.drivername, "postgresql+psycopg2")
        self.assertEqual((url.host, url.port, url.database, url.username), ("db.local", 5433, "shop", "clerk"))
        self.assertNotIn("secret", url.render_as_string(hide_password=True))

    def test_log_level_is_case_insensitive(self):
        self.assertEqual(Settings(log_level="debug").log_level, "DEBUG")

    def test_unknown_log_level_is_rejected(self):
        with self.assertRaises(ValidationError):
            Settings(log_level="verbose")


if __name__ == "__main__":
    unittest.main()
