"""Custom exceptions for the Postmark client."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from postmarkee.core.receipts import ErrorReceipt


class PostmarkeeError(Exception):
    """Base exception for all postmarkee errors."""


class UrlError(PostmarkeeError):
    """A base URL was rejected during configuration."""

    def __init__(self, actual: str, reason: str) -> None:
        self.actual = actual
        self.reason = reason
        super().__init__(f"{reason}, was `{actual}`")


class HttpClientError(PostmarkeeError):
    """The request could not be completed or its response body could not be read."""


class PostmarkApiError(PostmarkeeError):
    """Postmark answered with something other than a successful send."""


class UnprocessableEntityError(PostmarkApiError):
    """Postmark rejected the email (HTTP 422) and explained why."""

    def __init__(self, receipt: ErrorReceipt) -> None:
        self.receipt = receipt
        super().__init__(f"received response with error `{receipt}`")


class UnexpectedStatusError(PostmarkApiError):
    """Postmark answered with a status code that carries no documented body."""

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        reason = httpx.codes.get_reason_phrase(status_code)
        status = f"{status_code} {reason}" if reason else str(status_code)
        super().__init__(f"received response with status code `{status}`")


class InboundPayloadError(PostmarkeeError):
    """An inbound webhook payload failed validation."""
