from .email import EmailService, render_verification_html, SUBJECT
from .transports import (
    MailTransport, MailDispatchError,
    SMTPTransport, ResendTransport, ConsoleTransport,
    build_transport,
)

__all__ = [
    "EmailService", "render_verification_html", "SUBJECT",
    "MailTransport", "MailDispatchError",
    "SMTPTransport", "ResendTransport", "ConsoleTransport",
    "build_transport",
]
