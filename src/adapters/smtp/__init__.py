"""SMTP adapters - Mail transport implementations."""

from src.config.settings import Settings
from src.domain.ports import MailTransport

from .console import ConsoleMailTransport
from .smtp_transport import SmtpMailTransport


def build_mail_transport(settings: Settings) -> MailTransport:
    """
    Create the process-wide mail transport selected by settings.

    Raises:
        ValueError: If settings.mail_transport names no known adapter
    """
    if settings.mail_transport == "console":
        return ConsoleMailTransport()
    if settings.mail_transport == "smtp":
        return SmtpMailTransport(
            host=settings.smtp_host,
            port=settings.smtp_port,
            username=settings.sender_email,
            password=settings.sender_password.get_secret_value(),
            use_ssl=settings.smtp_use_ssl,
        )
    raise ValueError(f"Unknown mail transport: {settings.mail_transport}")


__all__ = ["ConsoleMailTransport", "SmtpMailTransport", "build_mail_transport"]
