import asyncio
import html
from email.utils import formataddr
from typing import Optional

from config import Settings
from models.mail import MailMessage
from .transports import MailTransport


SUBJECT = "Your Apula Verification Code"


def render_verification_html(code: str) -> str:
    # The code is request-supplied; escape it before it reaches the markup.
    safe_code = html.escape(code)
    return f"""
    <div style="font-family: Arial, sans-serif; padding: 20px;">
        <h2 style="color: #A30000;">Apula Email Verification</h2>
        <p>Here's your 6-digit verification code:</p>
        <h1 style="letter-spacing: 5px; color: #A30000;">{safe_code}</h1>
        <p>This code will expire in 10 minutes.</p>
        <p>If you didn't request this, please ignore this email.</p>
    </div>
    """


class EmailService:
    """Renders verification emails and hands them to the configured transport."""

    def __init__(self, transport: MailTransport, settings: Settings):
        self.transport = transport
        self.sender = formataddr((settings.EMAIL_FROM_NAME, settings.EMAIL_USER or ""))
        self.send_timeout = settings.MAIL_SEND_TIMEOUT_SECONDS

    def build_message(self, email: str, code: str) -> MailMessage:
        return MailMessage(
            sender=self.sender,
            to=email,
            subject=SUBJECT,
            html=render_verification_html(code),
        )

    async def send_verification(self, email: str, code: str) -> tuple[bool, Optional[str]]:
        """Send one verification email. Returns (success, error_detail)."""
        message = self.build_message(email, code)

        try:
            await asyncio.wait_for(self.transport.send(message), timeout=self.send_timeout)
        except asyncio.TimeoutError:
            error = f"Send timed out after {self.send_timeout}s"
            print(f"[Mailer] Error sending email: {error}")
            return False, error
        except Exception as e:
            print(f"[Mailer] Error sending email: {type(e).__name__}: {e}")
            return False, str(e)

        print(f"[Mailer] Email sent to {email}")
        return True, None
