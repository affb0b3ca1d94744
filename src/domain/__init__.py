"""
Domain layer - Pure business logic with zero framework imports.

This package contains the verification mail dispatcher. It defines its
own port interface for mail delivery, so the SMTP adapter (or a test
double) is injected rather than imported.
"""

from .exceptions import DeliveryFailure, DispatchError
from .ports import DispatchResult, MailMessage, MailTransport, VerificationRequest
from .verification import SUBJECT, TEXT_TEMPLATE, VerificationDispatcher, build_message

__all__ = [
    "DeliveryFailure",
    "DispatchError",
    "DispatchResult",
    "MailMessage",
    "MailTransport",
    "SUBJECT",
    "TEXT_TEMPLATE",
    "VerificationDispatcher",
    "VerificationRequest",
    "build_message",
]
