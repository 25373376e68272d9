# smunch/payments.py
# PayNow (SGQR) payment references + QR codes

import base64
import binascii
import logging
from datetime import datetime, timedelta, timezone
from io import BytesIO
from zoneinfo import ZoneInfo

import qrcode

from smunch import config
from smunch.schemas import PaymentInstructions

log = logging.getLogger(__name__)

SG_TZ = ZoneInfo("Asia/Singapore")
REFERENCE_PREFIX = "SMUNCH"

# PayNow proxy types inside the merchant account template
PROXY_MOBILE = "0"
PROXY_UEN = "2"


def generate_payment_reference(order_id) -> str:
    return f"{REFERENCE_PREFIX}{order_id}"


# ------------------------------------------------------------
# SGQR PAYLOAD
# ------------------------------------------------------------

def _tlv(tag: str, value: str) -> str:
    """EMVCo field: 2-char id, 2-digit length, value."""
    if len(value) > 99:
        raise ValueError(f"SGQR field {tag} too long ({len(value)} chars)")
    return f"{tag}{len(value):02d}{value}"


def crc16_ccitt(data: str) -> str:
    # CRC-16/CCITT-FALSE: poly 0x1021, init 0xFFFF
    return f"{binascii.crc_hqx(data.encode('utf-8'), 0xFFFF):04X}"


def _mobile_proxy(number: str) -> str:
    number = number.replace(" ", "")
    if number.startswith("+"):
        return number
    return f"+65{number}"


def build_paynow_payload(
    amount: str,
    reference: str,
    paynow_number: str,
    expires_at: datetime,
    merchant_name: str = "SMUNCH",
    proxy_type: str = PROXY_MOBILE,
) -> str:
    """
    Build the SGQR string a banking app reads for a PayNow transfer.

    `amount` is already a 2-decimal string. The amount is locked (not
    editable by the payer) and the code stops being accepted after
    `expires_at`, rendered in Singapore time.
    """
    proxy_value = _mobile_proxy(paynow_number) if proxy_type == PROXY_MOBILE else paynow_number
    expiry = expires_at.astimezone(SG_TZ).strftime("%Y%m%d%H%M%S")

    merchant_account = (
        _tlv("00", "SG.PAYNOW")
        + _tlv("01", proxy_type)
        + _tlv("02", proxy_value)
        + _tlv("03", "0")
        + _tlv("04", expiry)
    )

    payload = (
        _tlv("00", "01")               # payload format indicator
        + _tlv("01", "12")             # dynamic QR
        + _tlv("26", merchant_account)
        + _tlv("52", "0000")           # merchant category code
        + _tlv("53", "702")            # SGD
        + _tlv("54", amount)
        + _tlv("58", "SG")
        + _tlv("59", merchant_name[:25])
        + _tlv("60", "Singapore")
        + _tlv("62", _tlv("01", reference))
        + "6304"
    )
    return payload + crc16_ccitt(payload)


# ------------------------------------------------------------
# QR IMAGE
# ------------------------------------------------------------

def render_qr_data_url(data: str) -> str:
    qr = qrcode.QRCode(box_size=10, border=4)
    qr.add_data(data)
    qr.make(fit=True)
    img = qr.make_image(fill_color="black", back_color="white")

    bio = BytesIO()
    img.save(bio, format="PNG")
    encoded = base64.b64encode(bio.getvalue()).decode()
    return f"data:image/png;base64,{encoded}"


def generate_paynow_qr_code_using_sgqr(amount: str, order_id, customer_id, now: datetime = None) -> PaymentInstructions:
    """
    Fresh PayNow QR + reference for an order. Nothing is cached: each call
    produces a new image with its own validity window.
    """
    now = now or datetime.now(timezone.utc)
    expires_at = now + timedelta(minutes=config.QR_VALIDITY_MINUTES)
    reference = generate_payment_reference(order_id)

    payload = build_paynow_payload(
        amount=amount,
        reference=reference,
        paynow_number=config.PAYNOW_NUMBER,
        expires_at=expires_at,
        merchant_name=config.PAYNOW_MERCHANT_NAME,
    )

    log.info(f"📱 PayNow QR generated for order {order_id} (customer {customer_id}), ${amount}")

    return PaymentInstructions(
        qr_code_data_url=render_qr_data_url(payload),
        payment_reference=reference,
        paynow_number=config.PAYNOW_NUMBER,
        expires_at=expires_at,
    )
