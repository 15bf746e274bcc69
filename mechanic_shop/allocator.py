"""
Identifier allocation for tables whose ids are assigned by the client.
"""
from sqlalchemy import func, select

from mechanic_shop.database import StoreGateway


def next_id(gateway: StoreGateway, model, column: str = "id") -> int:
    """
    Return MAX(column) + 1 over the model's table.

    An empty table has no maximum and yields 1. A maximum that does not parse
    as an integer raises ValueError. Call inside gateway.transaction() together
    with the insert that uses the id.
    """
    rows = gateway.query_rows(select(func.max(getattr(model, column))))
    current = rows[0][0] if rows else None
    if current is None:
        return 1
    return int(current) + 1
