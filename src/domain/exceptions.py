"""
Domain exceptions - Semantic error types for verification mail dispatch.

This module defines domain-specific exceptions that communicate
delivery outcomes without leaking infrastructure details.
"""


class DispatchError(Exception):
    """Base class for verification dispatch domain errors."""

    pass


class DeliveryFailure(DispatchError):
    """
    Mail transport failed to accept the message.

    Raised for every underlying cause (auth, network, rejected recipient,
    provider quota). The caller only ever sees the generic message; the
    original exception is kept as ``__cause__`` for operators.
    """

    kind = "internal"
    default_message = "Failed to send email"

    def __init__(self, message: str = default_message) -> None:
        super().__init__(message)
        self.message = message
