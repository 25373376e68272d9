# smunch/config.py

import os
import pathlib

from dotenv import load_dotenv

# ============================================================
# 🔧 LOAD ENV FIRST
# ============================================================
BASE_DIR = pathlib.Path(__file__).resolve().parent.parent
load_dotenv(BASE_DIR / ".env")


def int_env(name: str, default: int) -> int:
    """Integer setting; unset or blank falls back to `default`."""
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}")


# ============================================================
# 🔑 ENV VARS
# ============================================================
DATABASE_URL = os.getenv("DATABASE_URL", "").strip()

PAYNOW_NUMBER = os.getenv("PAYNOW_NUMBER", "").strip()
PAYNOW_MERCHANT_NAME = os.getenv("PAYNOW_MERCHANT_NAME", "SMUNCH").strip()
QR_VALIDITY_MINUTES = int_env("QR_VALIDITY_MINUTES", 10)

# Operator contact address shown in the password change notice
SMUNCH_EMAIL = os.getenv("SMUNCH_EMAIL", "").strip()

MAIL_API_URL = os.getenv("MAIL_API_URL", "https://api.resend.com/emails").strip()
MAIL_API_KEY = os.getenv("MAIL_API_KEY", "").strip()
MAIL_FROM = os.getenv("MAIL_FROM", "").strip() or f"SMUNCH <{SMUNCH_EMAIL}>"

# ============================================================
# ❌ HARD FAIL IF MISSING
# ============================================================
if not PAYNOW_NUMBER:
    raise RuntimeError("PAYNOW_NUMBER missing in .env")

if not SMUNCH_EMAIL:
    raise RuntimeError("SMUNCH_EMAIL missing in .env")

if not MAIL_API_KEY:
    raise RuntimeError("MAIL_API_KEY missing in .env")
