"""Postmarkee - typed async client for Postmark's email API and inbound webhooks."""

from postmarkee.core.base_url import BaseUrl
from postmarkee.core.exceptions import (
    HttpClientError,
    InboundPayloadError,
    PostmarkApiError,
    PostmarkeeError,
    UnexpectedStatusError,
    UnprocessableEntityError,
    UrlError,
)
from postmarkee.core.inbound import (
    Attachment,
    Header,
    InboundEmail,
    Participant,
    dump_inbound_email,
    parse_inbound_email,
)
from postmarkee.core.models import Both, ClientConfig, EmailBody, Html, OutboundEmail, Text
from postmarkee.core.postmark_client import PostmarkClient
from postmarkee.core.receipts import ErrorReceipt, SendReceipt

__all__ = [
    "Attachment",
    "BaseUrl",
    "Both",
    "ClientConfig",
    "EmailBody",
    "ErrorReceipt",
    "Header",
    "Html",
    "HttpClientError",
    "InboundEmail",
    "InboundPayloadError",
    "OutboundEmail",
    "Participant",
    "PostmarkApiError",
    "PostmarkClient",
    "PostmarkeeError",
    "SendReceipt",
    "Text",
    "UnexpectedStatusError",
    "UnprocessableEntityError",
    "UrlError",
    "dump_inbound_email",
    "parse_inbound_email",
]
