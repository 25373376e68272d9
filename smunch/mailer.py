# smunch/mailer.py
import asyncio
import logging
from datetime import datetime

import aiohttp

from smunch import config, emails
from smunch.emails import EmailDocument
from smunch.errors import MailDeliveryError
from smunch.schemas import Order

log = logging.getLogger(__name__)

MAIL_TIMEOUT = aiohttp.ClientTimeout(total=15)


async def send_email(to: str, document: EmailDocument):
    """POST a rendered email to the mail API. Raises MailDeliveryError on failure."""
    payload = {
        "from": config.MAIL_FROM,
        "to": [to],
        "subject": document.subject,
        "html": document.html,
    }
    headers = {
        "Authorization": f"Bearer {config.MAIL_API_KEY}",
        "Content-Type": "application/json",
    }

    try:
        async with aiohttp.ClientSession(timeout=MAIL_TIMEOUT) as session:
            async with session.post(config.MAIL_API_URL, json=payload, headers=headers) as resp:
                if resp.status >= 300:
                    detail = await resp.text()
                    log.error(f"❌ Mail API rejected '{document.subject}' to {to}: {resp.status} {detail}")
                    raise MailDeliveryError(f"Mail API responded with {resp.status}")
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        log.error(f"❌ Mail API unreachable: {e}")
        raise MailDeliveryError(f"Mail API unreachable: {e}") from e

    log.info(f"📧 Sent '{document.subject}' to {to}")


# ------------------------------------------------------------
# ONE HELPER PER EMAIL
# ------------------------------------------------------------

async def send_test_email(email: str):
    await send_email(email, emails.get_test_email_html())


async def send_verification_email(email: str, link: str, account_type: str, name: str = "Smunchie"):
    await send_email(email, emails.get_verification_email_html(link, account_type, name))


async def send_receipt_email(email: str, order: Order):
    await send_email(email, emails.get_receipt_html(order))


async def send_reminder_one_day_before(email: str, order: Order, name: str = "Smunchie"):
    await send_email(email, emails.get_reminder_email_html_one_day_before(order, name))


async def send_reminder_final_call(email: str, order: Order, name: str = "Smunchie"):
    await send_email(email, emails.get_reminder_email_html_final_call(order, name))


async def send_password_change_email(email: str, name: str, changed_at: datetime):
    document = emails.get_password_change_html(
        name=name,
        formatted_date=emails.format_sg_datetime(changed_at),
        contact_email=config.SMUNCH_EMAIL,
    )
    await send_email(email, document)


async def send_reset_password_email(email: str, link: str, name: str = "Smunchie"):
    await send_email(email, emails.get_reset_password_html(link, name))
