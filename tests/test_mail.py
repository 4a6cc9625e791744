"""Tests for the contact mail relay."""

import smtplib
from unittest.mock import MagicMock, patch

import pytest
from httpx import AsyncClient

from fitness_server.config import load_settings
from fitness_server.core.exceptions import MailDeliveryException
from fitness_server.core.mail import MailService

CONTACT = {
    "name": "Alice",
    "email": "alice@x.com",
    "subject": "Sync issue",
    "message": "My steps stopped syncing yesterday.",
}


@pytest.fixture
def service() -> MailService:
    config = load_settings(
        _env_file=None,
        DATABASE_URL="sqlite+aiosqlite://",
        MAIL_USER="support@fitnessapp.io",
        MAIL_PASSWORD="secret",
        MAIL_HOST="smtp.fitnessapp.io",
    )
    return MailService(config)


def test_build_message(service: MailService):
    """Test the relayed message replies to the sender."""
    msg = service.build_message(**CONTACT)

    assert msg["To"] == "support@fitnessapp.io"
    assert msg["From"] == "support@fitnessapp.io"
    assert msg["Reply-To"] == "alice@x.com"
    assert msg["Subject"] == "Sync issue"
    assert "My steps stopped syncing yesterday." in msg.as_string()


@pytest.mark.asyncio
async def test_send_contact_message(service: MailService):
    """Test the SMTP exchange."""
    with patch("fitness_server.core.mail.smtplib.SMTP") as smtp_cls:
        server = smtp_cls.return_value.__enter__.return_value

        await service.send_contact_message(**CONTACT)

    smtp_cls.assert_called_once_with("smtp.fitnessapp.io", 587, timeout=30)
    server.starttls.assert_called_once()
    server.login.assert_called_once_with("support@fitnessapp.io", "secret")
    server.send_message.assert_called_once()


@pytest.mark.asyncio
async def test_send_contact_message_failure(service: MailService):
    """Test SMTP failures surface as delivery errors."""
    with patch("fitness_server.core.mail.smtplib.SMTP") as smtp_cls:
        server = smtp_cls.return_value.__enter__.return_value
        server.login.side_effect = smtplib.SMTPAuthenticationError(535, b"bad credentials")

        with pytest.raises(MailDeliveryException):
            await service.send_contact_message(**CONTACT)


@pytest.mark.asyncio
class TestSendMailEndpoint:
    """Tests for the relay endpoint."""

    async def test_send_mail(self, client: AsyncClient, mail_service: MagicMock):
        """Test a contact message is handed to the relay."""
        response = await client.post("/send-mail", json=CONTACT)

        assert response.status_code == 200
        assert response.json() == {"message": "Email sent successfully"}
        mail_service.send_contact_message.assert_awaited_once_with(
            "Alice", "alice@x.com", "Sync issue", "My steps stopped syncing yesterday."
        )

    async def test_send_mail_delivery_failure(self, client: AsyncClient, mail_service: MagicMock):
        """Test relay failures map to 502."""
        mail_service.send_contact_message.side_effect = MailDeliveryException()

        response = await client.post("/send-mail", json=CONTACT)

        assert response.status_code == 502
        assert response.json()["error"] == "MailDeliveryException"

    @pytest.mark.parametrize("missing", ["email", "subject", "message"])
    async def test_send_mail_missing_field(
        self, client: AsyncClient, mail_service: MagicMock, missing: str
    ):
        """Test incomplete messages are rejected before relaying."""
        payload = {k: v for k, v in CONTACT.items() if k != missing}

        response = await client.post("/send-mail", json=payload)

        assert response.status_code == 400
        mail_service.send_contact_message.assert_not_awaited()


@pytest.mark.asyncio
async def test_send_contact_message_rejected_header(service: MailService):
    """Test a header the mail generator refuses surfaces as a delivery error."""
    with patch("fitness_server.core.mail.smtplib.SMTP") as smtp_cls:
        server = smtp_cls.return_value.__enter__.return_value
        server.send_message.side_effect = lambda msg: msg.as_string()

        with pytest.raises(MailDeliveryException):
            await service.send_contact_message(
                **{**CONTACT, "subject": "Hi\r\nBcc: someone@x.com"}
            )


@pytest.mark.asyncio
@pytest.mark.parametrize("subject", ["Hi\r\nBcc: x@y.io", "Hi\nBcc: x@y.io", "Hi\rthere"])
async def test_send_mail_rejects_line_breaks_in_subject(
    client: AsyncClient, mail_service: MagicMock, subject: str
):
    """Test a subject cannot smuggle extra headers."""
    response = await client.post("/send-mail", json={**CONTACT, "subject": subject})

    assert response.status_code == 400
    mail_service.send_contact_message.assert_not_awaited()
