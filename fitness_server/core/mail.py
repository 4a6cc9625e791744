"""Outbound email relay over SMTP."""

import smtplib
from email.errors import MessageError
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

import structlog
from fastapi.concurrency import run_in_threadpool

from fitness_server.config import Settings, settings
from fitness_server.core.exceptions import MailDeliveryException

logger = structlog.get_logger()


class MailService:
    """Relays contact messages to the configured inbox."""

    def __init__(self, config: Settings | None = None):
        """Initialize with SMTP settings."""
        config = config or settings
        self.host = config.mail_host
        self.port = config.mail_port
        self.use_tls = config.mail_use_tls
        self.username = config.mail_user
        self.password = config.mail_password
        self.recipient = config.mail_to

    def build_message(self, name: str, email: str, subject: str, message: str) -> MIMEMultipart:
        """Compose the relayed message with the sender as Reply-To."""
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = self.username
        msg["To"] = self.recipient
        msg["Reply-To"] = email
        body = f"From: {name} <{email}>\n\n{message}"
        msg.attach(MIMEText(body, "plain"))
        return msg

    def _send(self, msg: MIMEMultipart) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=30) as server:
            if self.use_tls:
                server.starttls()
            server.login(self.username, self.password)
            server.send_message(msg)

    async def send_contact_message(self, name: str, email: str, subject: str, message: str) -> None:
        """
        Relay a contact message.

        Raises:
            MailDeliveryException: If the SMTP exchange fails
        """
        msg = self.build_message(name, email, subject, message)
        try:
            await run_in_threadpool(self._send, msg)
        except (smtplib.SMTPException, MessageError, OSError) as e:
            logger.error("mail_delivery_failed", recipient=self.recipient, error=str(e))
            raise MailDeliveryException() from e

        logger.info("mail_relayed", recipient=self.recipient, reply_to=email)


def get_mail_service() -> MailService:
    """Dependency for the mail relay."""
    return MailService()
