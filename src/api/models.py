"""
API request and response models.

Pydantic models for the callable endpoint envelope and OpenAPI schema
generation. Requests arrive as {"data": {...}}; responses leave as
{"result": {...}} or {"error": {"status": ..., "message": ...}}.
"""

from typing import Any

from pydantic import BaseModel, Field


class VerificationData(BaseModel):
    """
    Payload of a verification code request.

    Both fields are passed through as received. A missing address
    becomes an empty recipient, which the mail provider rejects.
    """

    email: Any = Field("", description="Recipient address (passed through unvalidated)")
    code: Any = Field(None, description="Verification code, shown verbatim in the message")


class SendVerificationCodeRequest(BaseModel):
    """Callable request envelope."""

    data: VerificationData


class DispatchResultModel(BaseModel):
    """Dispatch outcome."""

    success: bool


class SendVerificationCodeResponse(BaseModel):
    """Callable success envelope."""

    result: DispatchResultModel


class CallableErrorBody(BaseModel):
    """Error details of a callable failure."""

    status: str
    message: str


class ErrorResponse(BaseModel):
    """Callable error envelope."""

    error: CallableErrorBody
