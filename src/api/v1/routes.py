"""
API v1 routes.

Defines the callable endpoint that sends CutLine verification emails.
"""

from fastapi import APIRouter, Depends

from src.api.dependencies import get_verification_dispatcher
from src.api.errors import internal_error
from src.api.models import (
    DispatchResultModel,
    ErrorResponse,
    SendVerificationCodeRequest,
    SendVerificationCodeResponse,
)
from src.domain.exceptions import DeliveryFailure
from src.domain.ports import VerificationRequest
from src.domain.verification import VerificationDispatcher

router = APIRouter(tags=["v1"])


@router.post(
    "/sendVerificationCode",
    response_model=SendVerificationCodeResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Malformed request envelope"},
        500: {"model": ErrorResponse, "description": "Failed to send email"},
    },
    summary="Send verification code email",
    description="Email the supplied verification code to the supplied address. "
    "Success means the mail provider accepted the message.",
)
def send_verification_code(
    request_data: SendVerificationCodeRequest,
    dispatcher: VerificationDispatcher = Depends(get_verification_dispatcher),
) -> SendVerificationCodeResponse:
    """
    Send a verification code email.

    - **data.email**: Recipient address
    - **data.code**: Verification code, shown verbatim in the message

    Defined without async so the blocking SMTP call runs in the threadpool.
    """
    request = VerificationRequest(email=request_data.data.email, code=request_data.data.code)

    try:
        result = dispatcher.dispatch(request)
    except DeliveryFailure as exc:
        raise internal_error(exc.message) from None

    return SendVerificationCodeResponse(result=DispatchResultModel(success=result.success))
