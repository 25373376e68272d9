# smunch/schemas.py
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel


class OrderItem(BaseModel):
    menu_item_name: Optional[str] = None
    quantity: int
    price_cents: int  # unit price


class Order(BaseModel):
    order_id: int
    customer_id: int
    status: Optional[str] = None
    total_amount_cents: int
    delivery_fee_cents: int = 0
    delivery_time: datetime
    building: str
    room_type: str
    room_number: str
    items: List[OrderItem] = []
    # Attached in memory during confirmation, never persisted
    payment_reference: Optional[str] = None


class PaymentInstructions(BaseModel):
    qr_code_data_url: str
    payment_reference: str
    paynow_number: str
    expires_at: datetime
