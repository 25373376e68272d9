# smunch/emails/templates.py
# One builder per outgoing email. Each returns a full EmailDocument.

from smunch.schemas import Order

from .layout import (
    EmailDocument,
    EmailFragment,
    e,
    format_cents,
    format_sg_datetime,
    wrap_with_email_layout,
)

DEFAULT_NAME = "Smunchie"


def _delivery_to(order: Order) -> str:
    return e(f"{order.building} {order.room_type} {order.room_number}")


# ============================================================
# 🛠 INTERNAL
# ============================================================
def get_test_email_html() -> EmailDocument:
    """Fixed email used to check that delivery works end to end."""
    body = """
    <h2>🛠 Internal Email Test</h2>
    <p>Hey Smunchie,</p>
    <p>This email is solely for internal testing purposes.</p>
    <p>If you're seeing this and you're not part of the dev team, please let us know immediately through the Telegram bot. Thanks!</p>
  """
    return wrap_with_email_layout(EmailFragment(body), "SMUNCH Internal Email Test 🛠")


# ============================================================
# 👤 ACCOUNT
# ============================================================
def get_verification_email_html(link: str, account_type: str, name: str = DEFAULT_NAME) -> EmailDocument:
    """
    Account verification email.

    `account_type` is the recipient's role ("User" or "Merchant"); it is
    shown lower-cased. The link is expected to expire after 1 hour.
    """
    body = f"""
    <h2>Welcome to SMUNCH 🎉</h2>
    <p>Hey {e(name)},</p>
    <p>Thanks for signing up! Just one last step: <a href="{e(link)}">click here</a> to verify your {e(account_type.lower())} account.</p>
    <p>This link will expire in 1 hour for your security. If you didn't request this, feel free to ignore this email.</p>
  """
    return wrap_with_email_layout(EmailFragment(body), "Welcome to SMUNCH! Just one more step")


def get_password_change_html(name: str, formatted_date: str, contact_email: str) -> EmailDocument:
    body = f"""
    <h2>Password Change Confirmation 🔐</h2>
    <p>Hey {e(name or DEFAULT_NAME)},</p>
    <p>This is a quick heads-up that your SMUNCH account password was changed on <strong>{e(formatted_date)}</strong>.</p>
    <p>If this was you, no action is needed.</p>
    <p>If this wasn't you, please reach out to us immediately at <a href="mailto:{e(contact_email)}">{e(contact_email)}</a>.</p>
  """
    return wrap_with_email_layout(EmailFragment(body), "Your SMUNCH Password Was Changed 🔐")


def get_reset_password_html(link: str, name: str = DEFAULT_NAME) -> EmailDocument:
    body = f"""
    <h2>Reset Your Password 🔑</h2>
    <p>Hey {e(name)},</p>
    <p>We received a request to reset your SMUNCH password.</p>
    <p><a href="{e(link)}">Click here to reset your password</a>. This link will expire in 15 minutes.</p>
    <p>If you didn't request this, you can safely ignore this email.</p>
  """
    return wrap_with_email_layout(EmailFragment(body), "Reset Your SMUNCH Password 🔑")


# ============================================================
# 🧾 ORDERS
# ============================================================
def _receipt_rows(order: Order) -> str:
    rows = []
    for item in order.items:
        name = item.menu_item_name or "Item"
        price = format_cents(item.price_cents * item.quantity)
        rows.append(
            f'<tr><td>{item.quantity}x {e(name)}</td><td style="text-align:right;">${price}</td></tr>'
        )
    return "".join(rows)


def get_receipt_html(order: Order) -> EmailDocument:
    """
    Payment receipt: order details, one row per line item, the delivery
    fee, then the order total.

    Line totals are unit price x quantity. The total row shows the stored
    `total_amount_cents`, which matches the rows when the order is
    consistent.
    """
    body = f"""
    <h2 style="color: #333;">🎉 Your payment has been received!</h2>
    <p>Hi there! We're excited to let you know that we've received your payment and your order has been confirmed.</p>

    <p><strong>Order ID:</strong> {order.order_id}<br>
       <strong>Payment Reference:</strong> {e(order.payment_reference or "")}<br>
       <strong>Delivery To:</strong> {_delivery_to(order)}<br>
       <strong>Scheduled For:</strong> {format_sg_datetime(order.delivery_time)}</p>

    <h3 style="border-bottom: 1px solid #ddd; padding-bottom: 5px;">Your Receipt</h3>
    <table style="width: 100%; border-collapse: collapse;">
      {_receipt_rows(order)}
      <tr>
        <td>Delivery Fee</td><td style="text-align:right;">${format_cents(order.delivery_fee_cents)}</td>
      </tr>
      <tr style="border-top:1px solid #ccc;">
        <td><strong>Total</strong></td><td style="text-align:right;"><strong>${format_cents(order.total_amount_cents)}</strong></td>
      </tr>
    </table>

    <p style="margin-top: 30px;">We'll deliver your food right to your classroom. 🍱</p>
  """
    return wrap_with_email_layout(EmailFragment(body), "Your SMUNCH Order Has Been Confirmed! 🥪")


def _order_summary(order: Order) -> str:
    return f"""<p><strong>Order ID:</strong> {order.order_id}</p>
    <p><strong>Delivery:</strong> {_delivery_to(order)}<br>
       <strong>Scheduled For:</strong> {format_sg_datetime(order.delivery_time)}</p>"""


def get_reminder_email_html_one_day_before(order: Order, name: str = DEFAULT_NAME) -> EmailDocument:
    """Unpaid order reminder, sent the evening before delivery."""
    body = f"""
    <h2>⏳ Just a reminder!</h2>
    <p>Hey {e(name)},</p>
    <p>We noticed you started a SMUNCH order but haven't completed payment yet.</p>
    {_order_summary(order)}
    <p>To make sure your order gets included in tomorrow's batch, please complete payment soon.</p>
  """
    return wrap_with_email_layout(EmailFragment(body), "⏳ Reminder: Complete Your SMUNCH Order")


def get_reminder_email_html_final_call(order: Order, name: str = DEFAULT_NAME) -> EmailDocument:
    """Last unpaid order reminder, sent 40 minutes before delivery."""
    body = f"""
    <h2>🚨 Final Call: Last Chance to Pay</h2>
    <p>Hey {e(name)},</p>
    <p>Your SMUNCH order is about to be finalized, but payment is still pending.</p>
    {_order_summary(order)}
    <p>Please make payment immediately. If payment isn't received within the next 5 minutes,
       we won't be able to include your order in today's delivery batch.</p>
  """
    return wrap_with_email_layout(EmailFragment(body), "🚨 Final Call: Complete Payment for Your SMUNCH Order")
