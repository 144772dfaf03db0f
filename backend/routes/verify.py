from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from models import VerificationRequest, MessageResponse, ErrorResponse, is_present, as_text
from services import EmailService

router = APIRouter(tags=["Verification"])


def get_email_service(request: Request) -> EmailService:
    """Email service built during app start-up."""
    return request.app.state.email_service


def missing_fields_response() -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": "Missing email or code"})


@router.post(
    "/send-verification",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def send_verification(
    body: VerificationRequest,
    email_service: EmailService = Depends(get_email_service),
):
    if not is_present(body.email) or not is_present(body.code):
        return missing_fields_response()

    success, _ = await email_service.send_verification(as_text(body.email), as_text(body.code))

    if not success:
        return JSONResponse(status_code=500, content={"error": "Failed to send verification email"})

    return MessageResponse(message="Verification email sent successfully")
