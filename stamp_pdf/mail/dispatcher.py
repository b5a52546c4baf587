"""
SMTP delivery of outbound order mails.

TLS negotiation and auth are left to aiosmtplib: implicit TLS on port 465,
opportunistic STARTTLS on anything else. Server certificates are not
verified; the shop's mailbox host uses a self-signed chain.
"""

from __future__ import annotations

import logging
from email.message import EmailMessage

import aiosmtplib

from stamp_pdf.config import Settings
from stamp_pdf.mail.message import OutboundMessage

logger = logging.getLogger(__name__)


class DispatchFailure(Exception):
    """The mail could not be handed to the SMTP server."""


def to_email_message(message: OutboundMessage) -> EmailMessage:
    msg = EmailMessage()
    msg["From"] = message.sender
    msg["To"] = message.to
    if message.reply_to:
        msg["Reply-To"] = message.reply_to
    msg["Subject"] = message.subject
    msg.set_content(message.body_text)

    maintype, _, subtype = message.attachment.content_type.partition("/")
    msg.add_attachment(
        message.attachment.content,
        maintype=maintype,
        subtype=subtype,
        filename=message.attachment.filename,
    )
    return msg


class MailDispatcher:
    def __init__(self, settings: Settings):
        self.settings = settings

    async def send(self, message: OutboundMessage) -> None:
        missing = self.settings.missing()
        if missing:
            raise DispatchFailure(f"SMTP not configured, missing: {', '.join(missing)}")

        try:
            await aiosmtplib.send(
                to_email_message(message),
                hostname=self.settings.smtp_host,
                port=self.settings.smtp_port,
                username=self.settings.smtp_user,
                password=self.settings.smtp_password,
                use_tls=self.settings.smtp_implicit_tls,
                validate_certs=False,
            )
        except Exception as e:
            raise DispatchFailure(f"SMTP send failed: {e}") from e

        logger.info("Mail %r sent to %s", message.subject, message.to)
