"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the value objects exchanged with infrastructure and
the interface (port) the domain requires for mail delivery. Adapters
implement these protocols.
"""

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True)
class VerificationRequest:
    """
    Transient input of a single dispatch.

    Neither field is validated: malformed addresses are passed through
    to the mail transport and fail there, and the code is an opaque
    display value of any type, rendered with str.format.
    """

    email: Any
    code: Any


@dataclass(frozen=True)
class MailMessage:
    """Outbound message derived from exactly one VerificationRequest."""

    sender: str
    to: str
    subject: str
    text: str


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of a dispatch accepted by the mail transport."""

    success: bool = True


class MailTransport(Protocol):
    """Port interface for mail delivery."""

    def send(self, message: MailMessage) -> None:
        """
        Hand a message to the mail provider.

        Acceptance by the provider is the only guarantee; delivery to the
        recipient mailbox is not confirmed.

        Args:
            message: Fully built message to transmit

        Raises:
            Exception: Any failure (authentication, connectivity,
                provider-side rejection)
        """
        ...
