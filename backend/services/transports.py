"""Mail transports. Each one delivers a MailMessage or raises MailDispatchError."""

import ssl
from abc import ABC, abstractmethod
from email.errors import MessageError
from email.mime.text import MIMEText
from email.utils import parseaddr
from typing import Optional

import aiosmtplib
import httpx

from config import Settings
from models.mail import MailMessage


class MailDispatchError(Exception):
    """The transport could not deliver the message."""


class MailTransport(ABC):
    name: str = "base"

    @abstractmethod
    async def send(self, message: MailMessage) -> None:
        pass

    async def close(self) -> None:
        pass


class SMTPTransport(MailTransport):
    """
    Authenticated SMTP delivery.

    A fresh connection is opened for every message, so concurrent requests
    never share a session. The session is a coroutine: cancelling the send
    (e.g. on timeout) drops the connection before the message is committed.
    """

    name = "smtp"

    def __init__(
        self,
        host: str,
        port: int,
        username: Optional[str],
        password: Optional[str],
        timeout: float = 30.0,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.timeout = timeout

    def _build_mime(self, message: MailMessage) -> MIMEText:
        msg = MIMEText(message.html, "html", "utf-8")
        msg["Subject"] = message.subject
        msg["From"] = message.sender
        msg["To"] = message.to
        return msg

    def _client(self) -> aiosmtplib.SMTP:
        # 465 is implicit TLS, anything else upgrades with STARTTLS.
        implicit_tls = self.port == 465
        return aiosmtplib.SMTP(
            hostname=self.host,
            port=self.port,
            use_tls=implicit_tls,
            start_tls=not implicit_tls,
            timeout=self.timeout,
            tls_context=ssl.create_default_context(),
        )

    async def send(self, message: MailMessage) -> None:
        smtp = self._client()
        try:
            if "\r" in message.to or "\n" in message.to:
                raise ValueError("line break in recipient address")
            raw = self._build_mime(message).as_string()
            envelope_from = parseaddr(message.sender)[1]

            await smtp.connect()
            if self.username:
                await smtp.login(self.username, self.password or "")
            await smtp.sendmail(envelope_from, [message.to], raw)
            await smtp.quit()
        except (aiosmtplib.SMTPException, OSError, ValueError, MessageError) as e:
            raise MailDispatchError(f"SMTP send to {self.host}:{self.port} failed: {e}") from e
        finally:
            if smtp.is_connected:
                smtp.close()


class ResendTransport(MailTransport):
    """Delivery through the Resend HTTP API over one shared client."""

    name = "resend"
    API_URL = "https://api.resend.com/emails"

    def __init__(self, api_key: Optional[str], client: Optional[httpx.AsyncClient] = None):
        self.api_key = api_key
        self._client = client or httpx.AsyncClient(timeout=10.0)

    async def send(self, message: MailMessage) -> None:
        if not self.api_key:
            raise MailDispatchError("RESEND_API_KEY is not configured")

        try:
            resp = await self._client.post(
                self.API_URL,
                headers={"Authorization": f"Bearer {self.api_key}"},
                json={
                    "from": message.sender,
                    "to": [message.to],
                    "subject": message.subject,
                    "html": message.html,
                },
            )
        except httpx.HTTPError as e:
            raise MailDispatchError(f"Resend request failed: {e}") from e

        if resp.status_code != 200:
            raise MailDispatchError(f"Email failed: {resp.status_code}")

    async def close(self) -> None:
        await self._client.aclose()


class ConsoleTransport(MailTransport):
    """Dev mode: print the message instead of sending it."""

    name = "console"

    async def send(self, message: MailMessage) -> None:
        print(f"\n{'='*50}")
        print(f"  APULA VERIFICATION EMAIL")
        print(f"  From:    {message.sender}")
        print(f"  To:      {message.to}")
        print(f"  Subject: {message.subject}")
        print(f"{'='*50}")
        print(message.html)


def build_transport(settings: Settings) -> MailTransport:
    kind = settings.MAIL_TRANSPORT.lower().strip()

    if kind == "smtp":
        return SMTPTransport(
            host=settings.SMTP_HOST,
            port=settings.SMTP_PORT,
            username=settings.EMAIL_USER,
            password=settings.EMAIL_PASS,
            timeout=settings.SMTP_TIMEOUT_SECONDS,
        )
    if kind == "resend":
        return ResendTransport(api_key=settings.RESEND_API_KEY)
    if kind == "console":
        return ConsoleTransport()

    raise ValueError(f"Unknown MAIL_TRANSPORT: {settings.MAIL_TRANSPORT!r}")
