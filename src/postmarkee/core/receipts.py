"""Request and response bodies of Postmark's send-email endpoint.

https://postmarkapp.com/developer/api/email-api#send-a-single-email
"""

from __future__ import annotations

import re
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_pascal

# .NET timestamps carry 7 fractional digits; datetime stops at 6.
_EXCESS_FRACTION = re.compile(r"(\.\d{6})\d+")


class PostmarkModel(BaseModel):
    """Base for Postmark wire models: PascalCase keys, immutable."""

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        frozen=True,
    )


class SendEmailPayload(PostmarkModel):
    sender: str = Field(alias="From")
    to: str
    subject: str
    html_body: str | None = None
    text_body: str | None = None
    message_stream: str | None = None

    def to_wire(self) -> dict[str, Any]:
        """JSON body with absent optional fields omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)


class SendReceipt(PostmarkModel):
    """Successful send: who it went to, when, and Postmark's message id."""

    to: str
    submitted_at: datetime
    message_id: str = Field(alias="MessageID")

    @field_validator("submitted_at", mode="before")
    @classmethod
    def trim_fraction(cls, value: Any) -> Any:
        if isinstance(value, str):
            return _EXCESS_FRACTION.sub(r"\1", value)
        return value

    @field_validator("submitted_at")
    @classmethod
    def normalize_to_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)


class ErrorReceipt(PostmarkModel):
    """Body of a 422 response.

    See https://postmarkapp.com/developer/api/overview#error-codes
    """

    error_code: int = Field(ge=0, le=65535)
    message: str

    def __str__(self) -> str:
        return f"{self.error_code} - {self.message}"
