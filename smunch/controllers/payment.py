# smunch/controllers/payment.py
import json
import logging

from fastapi import APIRouter, Depends, Path
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from smunch.dependencies import (
    get_order_loader,
    get_payment_verifier,
    get_qr_generator,
    get_receipt_sender,
    get_user_loader,
)
from smunch.emails import format_cents
from smunch.errors import NotFoundError
from smunch.payments import generate_payment_reference
from smunch.verification import PaymentVerifier

log = logging.getLogger(__name__)

router = APIRouter(tags=["Payments"])


# ============================================================
# ✅ CONFIRM PAYMENT + RECEIPT
# ============================================================
@router.post(
    "/api/payment/confirm/{order_id}",
    responses={
        202: {"description": "Payment not yet verified"},
        404: {"description": "Order or user email not found"},
    },
)
async def confirm_payment_and_send_receipt(
    order_id: int = Path(..., gt=0),
    load_order=Depends(get_order_loader),
    load_user=Depends(get_user_loader),
    send_receipt=Depends(get_receipt_sender),
    verifier: PaymentVerifier = Depends(get_payment_verifier),
):
    """Confirm payment for an order and email the customer a receipt."""
    order = await load_order(order_id)
    log.debug(f"Order {order.order_id} items: {json.dumps([i.model_dump() for i in order.items])}")

    order.payment_reference = generate_payment_reference(order.order_id)

    amount = format_cents(order.total_amount_cents)
    if not await verifier.verify(order, amount):
        return JSONResponse(
            status_code=202,
            content={
                "message": "Payment not yet verified. Try again later.",
                "verified": False,
            },
        )

    user = await load_user(order.customer_id, "email")
    email = user.get("email")
    if not email:
        raise NotFoundError("User email not found", code="NOT_FOUND_USER")

    await send_receipt(email, order)

    log.info(f"🧾 Receipt for order {order.order_id} sent")
    return {"message": "Receipt email sent successfully"}


# ============================================================
# 📱 PAYMENT INSTRUCTIONS
# ============================================================
@router.get(
    "/api/orders/{order_id}/payment",
    responses={404: {"description": "Order not found"}},
)
async def get_payment_instructions(
    order_id: int = Path(..., gt=0),
    load_order=Depends(get_order_loader),
    generate_qr=Depends(get_qr_generator),
):
    """
    Fresh PayNow QR code, reference and PayNow number for an order.

    The QR is a base64 PNG valid for 10 minutes. The reference is
    `SMUNCH{orderId}`. Use when the customer revisits the payment screen.
    """
    order = await load_order(order_id)

    amount = format_cents(order.total_amount_cents)
    instructions = await run_in_threadpool(
        generate_qr,
        amount=amount,
        order_id=order.order_id,
        customer_id=order.customer_id,
    )

    return {
        "qrCode": instructions.qr_code_data_url,
        "payment_reference": instructions.payment_reference,
        "paynow_number": instructions.paynow_number,
    }
