"""Frozen dataclasses for outbound email and client configuration."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from pydantic import SecretStr

from postmarkee.core.base_url import BaseUrl


@dataclass(frozen=True)
class Html:
    """HTML-only body."""

    html: str


@dataclass(frozen=True)
class Text:
    """Plain-text-only body."""

    text: str


@dataclass(frozen=True)
class Both:
    """Body with HTML and plain-text alternatives."""

    html: str
    text: str


EmailBody = Html | Text | Both


def split_body(body: EmailBody) -> tuple[str | None, str | None]:
    """Convert an EmailBody into its ``(html_body, text_body)`` wire pair."""
    match body:
        case Html(html=html):
            return html, None
        case Text(text=text):
            return None, text
        case Both(html=html, text=text):
            return html, text
        case _:
            raise TypeError(f"Expected Html, Text or Both, got {type(body).__name__}")


@dataclass(frozen=True)
class OutboundEmail:
    """A single message to hand to Postmark."""

    recipients: tuple[str, ...]
    subject: str
    body: EmailBody

    def __post_init__(self) -> None:
        if not isinstance(self.recipients, tuple):
            object.__setattr__(self, "recipients", tuple(self.recipients))


@dataclass(frozen=True)
class ClientConfig:
    """Settings consumed once by PostmarkClient.

    ``base_url`` falls back to Postmark's production endpoint when None.
    The server token is kept as a SecretStr so it never shows up in reprs.
    """

    server_token: SecretStr
    base_url: BaseUrl | None = field(default=None)

    def __post_init__(self) -> None:
        if isinstance(self.server_token, str):
            object.__setattr__(self, "server_token", SecretStr(self.server_token))


def recipients_of(addresses: Sequence[str]) -> str:
    """Join recipient addresses the way Postmark's ``To`` field expects."""
    return ",".join(addresses)
