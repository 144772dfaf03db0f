"""Outbound mail message."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MailMessage:
    sender: str
    to: str
    subject: str
    html: str
