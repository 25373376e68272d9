# smunch/dependencies.py
# FastAPI providers for the payment controller's collaborators.
# Tests swap these through app.dependency_overrides.

from smunch import db, mailer, payments
from smunch.verification import AlwaysVerified, PaymentVerifier

_verifier = AlwaysVerified()


def get_order_loader():
    return db.get_full_order_by_id_or_throw


def get_user_loader():
    return db.get_user_by_id_or_throw


def get_receipt_sender():
    return mailer.send_receipt_email


def get_qr_generator():
    return payments.generate_paynow_qr_code_using_sgqr


def get_payment_verifier() -> PaymentVerifier:
    return _verifier
