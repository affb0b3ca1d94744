"""
Console mail transport adapter - Implements MailTransport protocol.

This module provides a console-based implementation of the domain's
mail transport port, logging outbound messages for local development.
"""

import logging

from src.domain.ports import MailMessage

logger = logging.getLogger(__name__)


class ConsoleMailTransport:
    """
    Implements MailTransport protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    For demo/development purposes - nothing leaves the process.
    """

    def send(self, message: MailMessage) -> None:
        """
        Log the message at INFO level (simulates mail delivery).

        Args:
            message: Message built by the dispatcher
        """
        logger.info(
            "[MAIL] From: %s To: %s Subject: %s\n%s",
            message.sender,
            message.to,
            message.subject,
            message.text,
        )
