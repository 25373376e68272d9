import asyncio
from datetime import datetime, timezone

import pytest

from smunch import mailer
from smunch.emails import EmailDocument
from smunch.errors import MailDeliveryError


class FakeResponse:
    def __init__(self, status):
        self.status = status

    async def text(self):
        return "boom"

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False


class FakeSession:
    status = 200
    requests = []

    def __init__(self, *args, **kwargs):
        pass

    def post(self, url, json=None, headers=None):
        FakeSession.requests.append({"url": url, "json": json, "headers": headers})
        return FakeResponse(FakeSession.status)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False


@pytest.fixture
def session(monkeypatch):
    FakeSession.status = 200
    FakeSession.requests = []
    monkeypatch.setattr(mailer.aiohttp, "ClientSession", FakeSession)
    return FakeSession


@pytest.fixture
def outbox(monkeypatch):
    sent = []

    async def fake_send(to, document):
        sent.append((to, document))

    monkeypatch.setattr(mailer, "send_email", fake_send)
    return sent


def test_send_email_posts_to_mail_api(session):
    doc = EmailDocument(subject="Hello", html="<p>hi</p>")
    asyncio.run(mailer.send_email("rachel@smu.edu.sg", doc))

    req = session.requests[0]
    assert req["url"] == "https://mail.example.com/emails"
    assert req["headers"]["Authorization"] == "Bearer test-key"
    assert req["json"]["to"] == ["rachel@smu.edu.sg"]
    assert req["json"]["subject"] == "Hello"
    assert req["json"]["html"] == "<p>hi</p>"


def test_send_email_raises_on_rejection(session):
    session.status = 500
    doc = EmailDocument(subject="Hello", html="<p>hi</p>")

    with pytest.raises(MailDeliveryError):
        asyncio.run(mailer.send_email("rachel@smu.edu.sg", doc))


def test_send_email_timeout_is_delivery_error(session, monkeypatch):
    def timed_out(self, url, json=None, headers=None):
        raise asyncio.TimeoutError()

    monkeypatch.setattr(session, "post", timed_out)
    doc = EmailDocument(subject="Hello", html="<p>hi</p>")

    with pytest.raises(MailDeliveryError):
        asyncio.run(mailer.send_email("rachel@smu.edu.sg", doc))


def test_receipt_email(outbox, order):
    order.payment_reference = "SMUNCH42"
    asyncio.run(mailer.send_receipt_email("rachel@smu.edu.sg", order))

    to, doc = outbox[0]
    assert to == "rachel@smu.edu.sg"
    assert doc.subject == "Your SMUNCH Order Has Been Confirmed! 🥪"
    assert "SMUNCH42" in doc.html


def test_password_change_email_uses_configured_contact(outbox):
    changed_at = datetime(2025, 7, 15, 9, 42, 10, tzinfo=timezone.utc)
    asyncio.run(mailer.send_password_change_email("rachel@smu.edu.sg", "Rachel", changed_at))

    _, doc = outbox[0]
    assert "mailto:smunch.dev@example.com" in doc.html
    assert "15/7/2025, 5:42:10 pm" in doc.html


def test_every_helper_sends_one_email(outbox, order):
    asyncio.run(mailer.send_test_email("dev@smunch.sg"))
    asyncio.run(mailer.send_verification_email("a@smu.edu.sg", "https://x.sg/v", "User"))
    asyncio.run(mailer.send_reminder_one_day_before("a@smu.edu.sg", order))
    asyncio.run(mailer.send_reminder_final_call("a@smu.edu.sg", order))
    asyncio.run(mailer.send_reset_password_email("a@smu.edu.sg", "https://x.sg/r"))

    subjects = [doc.subject for _, doc in outbox]
    assert len(subjects) == 5
    assert len(set(subjects)) == 5
