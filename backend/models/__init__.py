from .requests import VerificationRequest, is_present, as_text
from .responses import MessageResponse, ErrorResponse, HealthResponse
from .mail import MailMessage

__all__ = [
    "VerificationRequest", "is_present", "as_text",
    "MessageResponse", "ErrorResponse", "HealthResponse",
    "MailMessage",
]
