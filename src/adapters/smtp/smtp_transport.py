"""
SMTP mail transport adapter - Implements MailTransport protocol.

Delivers messages through an SMTP provider (Gmail by default) using
the standard library smtplib client.
"""

import smtplib
import ssl
from email.message import EmailMessage

from src.domain.ports import MailMessage


class SmtpMailTransport:
    """
    Implements MailTransport protocol over SMTP.

    Holds only connection settings and credentials, created once per
    process. Each send opens its own connection, so concurrent sends
    share no socket state. No timeout is set; smtplib's default applies.
    """

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        use_ssl: bool = True,
    ) -> None:
        self._host = host
        self._port = port
        self._username = username
        self._password = password
        self._use_ssl = use_ssl

    def __repr__(self) -> str:
        return f"SmtpMailTransport(host={self._host!r}, port={self._port}, username={self._username!r})"

    def send(self, message: MailMessage) -> None:
        """
        Transmit a message, raising on any SMTP or socket error.

        Args:
            message: Message built by the dispatcher

        Raises:
            smtplib.SMTPException: Authentication failure or provider rejection
            OSError: Connectivity failure
        """
        email_message = self._to_email_message(message)
        context = ssl.create_default_context()

        if self._use_ssl:
            with smtplib.SMTP_SSL(self._host, self._port, context=context) as server:
                server.login(self._username, self._password)
                server.send_message(email_message)
        else:
            with smtplib.SMTP(self._host, self._port) as server:
                server.starttls(context=context)
                server.login(self._username, self._password)
                server.send_message(email_message)

    @staticmethod
    def _to_email_message(message: MailMessage) -> EmailMessage:
        email_message = EmailMessage()
        email_message["From"] = message.sender
        email_message["To"] = message.to
        email_message["Subject"] = message.subject
        email_message.set_content(message.text)
        return email_message
