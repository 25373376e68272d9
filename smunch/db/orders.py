# smunch/db/orders.py

from smunch.errors import NotFoundError
from smunch.schemas import Order

from . import database   # always go through the module so we see the live pool


# ------------------------------------------------------------
# ORDER READ FUNCTIONS
# ------------------------------------------------------------

async def get_full_order_by_id_or_throw(order_id: int) -> Order:
    """Load an order with its line items, or raise NotFoundError."""
    async with database.pool.acquire() as conn:
        order = await conn.fetchrow(
            "SELECT * FROM orders WHERE order_id=$1", order_id
        )
        if not order:
            raise NotFoundError(
                f"Order with ID {order_id} does not exist", code="NOT_FOUND_ORDER"
            )

        items = await conn.fetch("""
            SELECT oi.quantity, oi.price_cents, m.name AS menu_item_name
            FROM order_items oi
            LEFT JOIN menu_items m ON m.menu_item_id=oi.menu_item_id
            WHERE oi.order_id=$1
            ORDER BY oi.order_item_id
        """, order_id)

        data = dict(order)
        data["items"] = [dict(i) for i in items]
        return Order(**data)
