import os
from datetime import datetime, timezone

# Required config must exist before smunch.config is imported
os.environ.setdefault("PAYNOW_NUMBER", "96773374")
os.environ.setdefault("SMUNCH_EMAIL", "smunch.dev@example.com")
os.environ.setdefault("MAIL_API_KEY", "test-key")
os.environ.setdefault("MAIL_API_URL", "https://mail.example.com/emails")

import pytest

from smunch.schemas import Order, OrderItem


@pytest.fixture
def order():
    return Order(
        order_id=42,
        customer_id=7,
        total_amount_cents=550,
        delivery_fee_cents=100,
        delivery_time=datetime(2025, 1, 3, 4, 0, tzinfo=timezone.utc),
        building="SCIS",
        room_type="SR",
        room_number="2-2",
        items=[
            OrderItem(menu_item_name="Coffee", quantity=1, price_cents=250),
            OrderItem(menu_item_name="Toast", quantity=2, price_cents=150),
        ],
    )
