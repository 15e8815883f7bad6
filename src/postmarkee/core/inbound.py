"""Types for Postmark's inbound webhook.

https://postmarkapp.com/developer/webhooks/inbound-webhook
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import Field, ValidationError

from postmarkee.core.codecs import Base64Bytes, Rfc2822DateTime
from postmarkee.core.exceptions import InboundPayloadError
from postmarkee.core.receipts import PostmarkModel

logger = logging.getLogger(__name__)


class Participant(PostmarkModel):
    email: str
    name: str
    mailbox_hash: str


class Header(PostmarkModel):
    name: str
    value: str


class Attachment(PostmarkModel):
    name: str
    content: Base64Bytes
    content_type: str
    content_length: int


class InboundEmail(PostmarkModel):
    """An email received by a Postmark inbound server.

    ``date`` only keeps the UTC instant, so serializing it back always
    writes a ``+0000`` offset whatever offset the payload carried.
    """

    from_name: str
    message_stream: str
    from_full: Participant
    to_full: list[Participant]
    cc_full: list[Participant]
    bcc_full: list[Participant]
    original_recipient: str
    subject: str
    message_id: str = Field(alias="MessageID")
    reply_to: str
    mailbox_hash: str
    date: Rfc2822DateTime
    text_body: str
    html_body: str
    stripped_text_reply: str
    tag: str
    headers: list[Header]
    attachments: list[Attachment]


def _describe(error: ValidationError) -> str:
    details = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "<root>"
        details.append(f"{location}: {item['msg']}")
    return "; ".join(details)


def parse_inbound_email(payload: str | bytes | Mapping[str, Any]) -> InboundEmail:
    """Parse an inbound webhook body (raw JSON or an already-decoded mapping).

    Raises:
        InboundPayloadError: If the payload is not valid JSON or does not
            match the webhook shape.
    """
    try:
        if isinstance(payload, str | bytes):
            email = InboundEmail.model_validate_json(payload)
        else:
            email = InboundEmail.model_validate(payload)
    except ValidationError as e:
        raise InboundPayloadError(f"Invalid inbound payload: {_describe(e)}") from e

    logger.debug(
        "Parsed inbound email %s with %d attachment(s)",
        email.message_id, len(email.attachments),
    )
    return email


def dump_inbound_email(email: InboundEmail, *, indent: int | None = None) -> str:
    """Serialize an InboundEmail back to webhook JSON."""
    return email.model_dump_json(by_alias=True, indent=indent)
