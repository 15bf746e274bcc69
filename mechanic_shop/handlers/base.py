"""
Shared plumbing for menu handlers.
"""
import functools
import logging
from typing import Optional, Sequence

from pydantic import ValidationError
from sqlalchemy.sql.expression import Executable

from mechanic_shop.database import Row, StoreError, StoreGateway

logger = logging.getLogger(__name__)


def shop_handler(func):
    """
    Run a handler with the menu's error boundary.

    Store failures and unparsable input are logged and the handler returns
    None; anything else unexpected is logged with its traceback. The menu
    loop carries on either way. End of input still propagates so the menu
    can exit.
    """
    @functools.wraps(func)
    def wrapper(gateway: StoreGateway, terminal, *args, **kwargs):
        try:
            return func(gateway, terminal, *args, **kwargs)
        except ValidationError as exc:
            problems = "; ".join(error["msg"] for error in exc.errors())
            logger.error("%s: invalid input: %s", func.__name__, problems)
        except StoreError as exc:
            logger.error("%s failed: %s", func.__name__, exc)
        except ValueError as exc:
            logger.error("%s failed: %s", func.__name__, exc)
        except EOFError:
            raise
        except Exception:
            logger.exception("%s failed unexpectedly", func.__name__)
        return None

    return wrapper


def cell(value: Optional[str]) -> str:
    """Display form of one text value; CHAR columns come back blank-padded."""
    return "" if value is None else value.strip()


def format_table(columns: Sequence[str], rows: Sequence[Row]) -> str:
    """Header line of column names, then one tab-separated line per row."""
    lines = ["\t".join(columns)]
    lines.extend("\t".join(cell(value) for value in row) for row in rows)
    return "\n".join(lines)


def show_rows(gateway: StoreGateway, terminal, statement: Executable) -> int:
    """Print the result of ``statement`` with a header; returns the row count."""
    columns, rows = gateway.query_table(statement)
    if rows:
        terminal.show(format_table(columns, rows))
    return len(rows)


def exists(gateway: StoreGateway, statement: Executable) -> bool:
    return bool(gateway.query_rows(statement.limit(1)))
