"""
Verification dispatch domain service.

Converts a verification request into a fixed-format mail message and
hands it to the injected mail transport. One request, one send attempt,
one outcome:

    VerificationRequest -> MailMessage -> MailTransport.send()
        success -> DispatchResult(success=True)
        failure -> DeliveryFailure("Failed to send email")

No retry, no deduplication, no validation of the address or code.
The "expire in 5 minutes" sentence is informational text; expiry is
tracked by whoever generated the code.
"""

import logging
from dataclasses import dataclass

from .exceptions import DeliveryFailure
from .ports import DispatchResult, MailMessage, MailTransport, VerificationRequest

logger = logging.getLogger(__name__)

SUBJECT = "Your CutLine Verification Code"
TEXT_TEMPLATE = "Your CutLine verification code is: {code}\nThis code will expire in 5 minutes."


def build_message(request: VerificationRequest, sender: str) -> MailMessage:
    """Build the verification message for a request, code interpolated verbatim."""
    return MailMessage(
        sender=sender,
        to=request.email,
        subject=SUBJECT,
        text=TEXT_TEMPLATE.format(code=request.code),
    )


@dataclass
class VerificationDispatcher:
    """
    Domain service for verification mail dispatch.

    The transport is shared process-wide and only read here, so one
    dispatcher (or many) can serve concurrent invocations.
    """

    transport: MailTransport
    sender: str

    def dispatch(self, request: VerificationRequest) -> DispatchResult:
        """
        Send the verification email for a request.

        Args:
            request: Recipient address and verification code

        Returns:
            DispatchResult with success=True once the transport accepted
            the message

        Raises:
            DeliveryFailure: If the transport raised for any reason
        """
        message = build_message(request, self.sender)

        try:
            self.transport.send(message)
        except Exception as exc:
            logger.exception("Failed to send email to %s: %s", request.email, exc)
            raise DeliveryFailure() from exc

        logger.info("Email sent to %s", request.email)
        return DispatchResult(success=True)
