# smunch/emails/__init__.py

from .layout import (
    EmailDocument,
    EmailFragment,
    wrap_with_email_layout,
    format_cents,
    format_sg_datetime,
)
from .templates import (
    get_test_email_html,
    get_verification_email_html,
    get_receipt_html,
    get_reminder_email_html_one_day_before,
    get_reminder_email_html_final_call,
    get_password_change_html,
    get_reset_password_html,
)

__all__ = [
    "EmailDocument",
    "EmailFragment",
    "wrap_with_email_layout",
    "format_cents",
    "format_sg_datetime",
    "get_test_email_html",
    "get_verification_email_html",
    "get_receipt_html",
    "get_reminder_email_html_one_day_before",
    "get_reminder_email_html_final_call",
    "get_password_change_html",
    "get_reset_password_html",
]
