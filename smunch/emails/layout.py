# smunch/emails/layout.py
from dataclasses import dataclass
from datetime import datetime, timezone
from html import escape
from zoneinfo import ZoneInfo

BANNER_URL = "https://ik.imagekit.io/SMUNCH/admin/smunch_email_banner.png?updatedAt=1752593887499"
SG_TZ = ZoneInfo("Asia/Singapore")


@dataclass(frozen=True)
class EmailFragment:
    """Email-specific content block. Has no banner and no outer container."""
    html: str


@dataclass(frozen=True)
class EmailDocument:
    """Complete email, only ever produced by `wrap_with_email_layout`."""
    subject: str
    html: str


def wrap_with_email_layout(fragment: EmailFragment, subject: str) -> EmailDocument:
    """
    Wrap an inner content block with the standard SMUNCH layout.

    Every outgoing email gets the same header banner, width, padding and
    sign-off/footer. Templates build an `EmailFragment` and pass it through
    here exactly once.
    """
    if not isinstance(fragment, EmailFragment):
        raise TypeError(f"Expected EmailFragment, got {type(fragment).__name__}")

    html = f"""
    <div style="font-family: Arial, sans-serif; max-width: 600px; margin: auto;">
      <img src="{BANNER_URL}" alt="SMUNCH Banner" style="width: 100%; max-width: 600px; display: block; margin-bottom: 20px;" />

      <div style="padding: 20px;">
        <div style="margin: 0 0 20px 0; line-height: 1.5;">
          {fragment.html}
        </div>

        <p style="margin: 0 0 12px 0;">Regards,<br>The SMUNCH Team 💙</p>
        <p style="font-size: 0.9em; color: #666; margin: 0;">Made for SMU students, by SMU students.</p>
      </div>
    </div>
  """
    return EmailDocument(subject=subject, html=html)


# ------------------------------------------------------------
# FORMATTING HELPERS
# ------------------------------------------------------------

def format_cents(cents: int) -> str:
    return f"{cents / 100:.2f}"


def format_sg_datetime(dt: datetime) -> str:
    """en-SG style, Singapore time: 3/1/2025, 12:00:00 pm"""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    local = dt.astimezone(SG_TZ)

    hour = local.hour % 12 or 12
    meridiem = "am" if local.hour < 12 else "pm"
    return f"{local.day}/{local.month}/{local.year}, {hour}:{local.minute:02d}:{local.second:02d} {meridiem}"


def e(value) -> str:
    return escape(str(value), quote=True)
