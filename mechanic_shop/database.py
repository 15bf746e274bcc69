"""
Store gateway: the single connection to the relational backend.

Every statement handed to the gateway is a SQLAlchemy Core construct with
bound parameters, so values typed at the terminal never end up spliced into
SQL text.
"""
import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional, Tuple

from sqlalchemy import create_engine, func, select, text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import DBAPIError, NoSuchModuleError, SQLAlchemyError
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql.expression import Executable

from mechanic_shop.config import Settings, get_settings

logger = logging.getLogger(__name__)

Base = declarative_base()

# Returned by current_sequence_value() when the sequence has no value yet.
NO_SEQUENCE_VALUE = -1

Row = List[Optional[str]]


class StoreError(Exception):
    """A statement could not be run against the store."""


class StoreConnectionError(StoreError):
    """The store could not be reached at startup."""


class DriverUnavailableError(StoreConnectionError):
    """The SQLAlchemy dialect or its DB-API driver is not installed."""


def _error_text(exc: Exception) -> str:
    return str(exc.orig if isinstance(exc, DBAPIError) else exc)


def _as_text(value) -> Optional[str]:
    if value is None:
        return None
    return str(value)


class StoreGateway:
    """Owns one live connection for the lifetime of the process."""

    def __init__(self, engine: Engine, connection: Connection):
        self._engine = engine
        self._connection: Optional[Connection] = connection

    @classmethod
    def connect(cls, settings: Optional[Settings] = None) -> "StoreGateway":
        """Open the connection described by ``settings``."""
        settings = settings or get_settings()
        try:
            url = settings.sqlalchemy_url
            engine = create_engine(url, echo=settings.sql_echo)
        except (ImportError, NoSuchModuleError) as exc:
            raise DriverUnavailableError(f"database driver not available: {exc}") from exc
        except SQLAlchemyError as exc:
            raise StoreConnectionError(str(exc)) from exc

        try:
            connection = engine.connect()
        except SQLAlchemyError as exc:
            engine.dispose()
            raise StoreConnectionError(str(exc)) from exc

        logger.info("Connected to %s", url.render_as_string(hide_password=True))
        return cls(engine, connection)

    @property
    def closed(self) -> bool:
        return self._connection is None

    @property
    def dialect_name(self) -> str:
        return self._engine.dialect.name

    def _require_connection(self) -> Connection:
        if self._connection is None:
            raise StoreError("store connection is closed")
        return self._connection

    @contextmanager
    def transaction(self) -> Iterator[Connection]:
        """
        Group statements into one transaction.

        Nested use joins the transaction already in progress; the outermost
        block commits, or rolls back when an exception escapes it.
        """
        connection = self._require_connection()
        if connection.in_transaction():
            yield connection
            return
        with connection.begin():
            yield connection

    def execute(self, statement: Executable) -> None:
        """
        Run a write statement; nothing is returned.

        Values the driver cannot bind, such as an integer wider than the
        column, are raised as StoreError like any other statement failure.
        """
        try:
            with self.transaction() as connection:
                connection.execute(statement)
        except (SQLAlchemyError, OverflowError) as exc:
            logger.debug("Statement failed: %s", statement, exc_info=True)
            raise StoreError(_error_text(exc)) from exc

    def query_table(self, statement: Executable) -> Tuple[List[str], List[Row]]:
        """Run a read statement and return its column names and text rows."""
        try:
            with self.transaction() as connection:
                result = connection.execute(statement)
                columns = list(result.keys())
                rows = [[_as_text(value) for value in row] for row in result]
        except (SQLAlchemyError, OverflowError) as exc:
            logger.debug("Query failed: %s", statement, exc_info=True)
            raise StoreError(_error_text(exc)) from exc
        return columns, rows

    def query_rows(self, statement: Executable) -> List[Row]:
        """Run a read statement; every value comes back as text (NULL stays None)."""
        _, rows = self.query_table(statement)
        return rows

    def current_sequence_value(self, name: str) -> int:
        """
        Last value produced by the named sequence.

        PostgreSQL answers through ``currval()``; SQLite keeps AUTOINCREMENT
        counters in ``sqlite_sequence``, keyed by table name. Returns
        NO_SEQUENCE_VALUE when the sequence has produced nothing yet.
        """
        connection = self._require_connection()
        dialect = self.dialect_name
        if dialect == "postgresql":
            statement = select(func.currval(name))
        elif dialect == "sqlite":
            statement = text("SELECT seq FROM sqlite_sequence WHERE name = :name").bindparams(name=name)
        else:
            raise StoreError(f"sequences are not supported on {dialect}")

        # currval() before nextval() is an error that aborts the enclosing
        # transaction on PostgreSQL, so probe inside a savepoint there.
        if dialect == "postgresql" and connection.in_transaction():
            scope = connection.begin_nested()
        else:
            scope = self.transaction()
        try:
            with scope:
                value = connection.execute(statement).scalar()
        except DBAPIError:
            return NO_SEQUENCE_VALUE
        if value is None:
            return NO_SEQUENCE_VALUE
        return int(value)

    def create_schema(self) -> None:
        """Create every mapped table that does not exist yet."""
        # Importing the models registers their tables on Base.metadata.
        import mechanic_shop.models  # noqa: F401

        try:
            with self.transaction() as connection:
                Base.metadata.create_all(connection)
        except SQLAlchemyError as exc:
            raise StoreError(str(exc)) from exc

    def close(self) -> None:
        """Release the connection. Safe to call more than once."""
        connection, self._connection = self._connection, None
        if connection is None:
            return
        try:
            connection.close()
            self._engine.dispose()
        except SQLAlchemyError:
            logger.debug("Error while closing the store connection", exc_info=True)
        else:
            logger.info("Store connection closed")
