import asyncio
from datetime import datetime, timezone

import pytest

from smunch.db import database, orders, users
from smunch.errors import NotFoundError


class FakeConn:
    def __init__(self, rows, many):
        self.rows = rows
        self.many = many
        self.queries = []

    async def fetchrow(self, sql, *args):
        self.queries.append((sql, args))
        return self.rows.get(args[0])

    async def fetch(self, sql, *args):
        self.queries.append((sql, args))
        return self.many


class FakePool:
    def __init__(self, conn):
        self.conn = conn

    def acquire(self):
        pool = self

        class Ctx:
            async def __aenter__(self):
                return pool.conn

            async def __aexit__(self, *exc):
                return False
        return Ctx()


ORDER_ROW = {
    "order_id": 42,
    "customer_id": 7,
    "status": "pending",
    "total_amount_cents": 550,
    "delivery_fee_cents": 100,
    "delivery_time": datetime(2025, 1, 3, 4, 0, tzinfo=timezone.utc),
    "building": "SCIS",
    "room_type": "SR",
    "room_number": "2-2",
    "created_at": datetime(2025, 1, 2, tzinfo=timezone.utc),
}


@pytest.fixture
def conn(monkeypatch):
    conn = FakeConn(
        rows={42: ORDER_ROW, 7: {"email": "rachel@smu.edu.sg"}},
        many=[
            {"quantity": 1, "price_cents": 250, "menu_item_name": "Coffee"},
            {"quantity": 2, "price_cents": 150, "menu_item_name": "Toast"},
        ],
    )
    monkeypatch.setattr(database, "pool", FakePool(conn))
    return conn


def test_full_order_includes_items(conn):
    order = asyncio.run(orders.get_full_order_by_id_or_throw(42))

    assert order.order_id == 42
    assert order.payment_reference is None
    assert [(i.menu_item_name, i.quantity) for i in order.items] == [("Coffee", 1), ("Toast", 2)]


def test_missing_order_raises(conn):
    with pytest.raises(NotFoundError) as err:
        asyncio.run(orders.get_full_order_by_id_or_throw(99))
    assert err.value.code == "NOT_FOUND_ORDER"


def test_user_lookup_selects_requested_fields(conn):
    user = asyncio.run(users.get_user_by_id_or_throw(7, "email"))

    assert user == {"email": "rachel@smu.edu.sg"}
    assert conn.queries[-1][0].startswith("SELECT email FROM users")


def test_missing_user_raises(conn):
    with pytest.raises(NotFoundError) as err:
        asyncio.run(users.get_user_by_id_or_throw(8))
    assert err.value.code == "NOT_FOUND_USER"


def test_parse_fields():
    assert users.parse_fields("email, name") == ["email", "name"]
    with pytest.raises(ValueError):
        users.parse_fields("email; DROP TABLE users")
    with pytest.raises(ValueError):
        users.parse_fields(" , ")
