"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting the
verification dispatcher and its mail transport into routes.
"""

from fastapi import Request

from src.config.settings import get_settings
from src.domain.ports import MailTransport
from src.domain.verification import VerificationDispatcher


def get_mail_transport(request: Request) -> MailTransport:
    """
    Get mail transport from app state.

    The transport is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.mail_transport


def get_verification_dispatcher(request: Request) -> VerificationDispatcher:
    """
    Create verification dispatcher with injected dependencies.

    Wires the process-wide transport and the configured sender identity.
    """
    settings = get_settings()
    return VerificationDispatcher(
        transport=get_mail_transport(request),
        sender=settings.sender_address,
    )
