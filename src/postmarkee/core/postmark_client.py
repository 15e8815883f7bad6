"""HTTP client for Postmark's email API.

https://postmarkapp.com/developer/api/email-api
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from postmarkee.core.base_url import BaseUrl
from postmarkee.core.exceptions import (
    HttpClientError,
    UnexpectedStatusError,
    UnprocessableEntityError,
)
from postmarkee.core.models import ClientConfig, OutboundEmail, recipients_of, split_body
from postmarkee.core.receipts import ErrorReceipt, SendEmailPayload, SendReceipt

logger = logging.getLogger(__name__)

SERVER_TOKEN_HEADER = "X-Postmark-Server-Token"

M = TypeVar("M", bound=BaseModel)


def _parse_body(response: httpx.Response, model: type[M]) -> M:
    """Decode a JSON response body into ``model``."""
    try:
        return model.model_validate_json(response.content)
    except ValidationError as e:
        raise HttpClientError(
            f"Malformed {model.__name__} in response with status {response.status_code}: {e}"
        ) from e


class PostmarkClient:
    """Async client for Postmark's send-email endpoint.

    Holds no mutable state after construction, so one instance can serve
    concurrent ``send_email`` calls. Timeouts, cancellation and connection
    handling belong to the underlying ``httpx.AsyncClient``.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        timeout: float | None = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = config.base_url or BaseUrl.default()
        self._http = httpx.AsyncClient(
            headers={
                "content-type": "application/json",
                "accept": "application/json",
                SERVER_TOKEN_HEADER: config.server_token.get_secret_value(),
            },
            timeout=timeout,
            transport=transport,
        )

    @property
    def base_url(self) -> BaseUrl:
        return self._base_url

    async def send_email(
        self,
        sender: str,
        message_stream: str | None,
        email: OutboundEmail,
    ) -> SendReceipt:
        """Send a single email.

        See https://postmarkapp.com/developer/api/email-api#send-a-single-email

        Args:
            sender: Address in Postmark's ``From`` field.
            message_stream: Message stream ID, or None for the server default.
            email: Recipients, subject and body.

        Returns:
            The receipt Postmark returns on HTTP 200.

        Raises:
            UnprocessableEntityError: On HTTP 422, carrying Postmark's ErrorReceipt.
            UnexpectedStatusError: On any other non-200 status.
            HttpClientError: On transport failure or an unreadable 200/422 body.
        """
        url = self._base_url.join("email")
        html_body, text_body = split_body(email.body)
        payload = SendEmailPayload(
            sender=sender,
            to=recipients_of(email.recipients),
            subject=email.subject,
            html_body=html_body,
            text_body=text_body,
            message_stream=message_stream,
        )

        logger.debug("Sending email to %d recipient(s) via %s", len(email.recipients), url)
        try:
            response = await self._http.post(url, json=payload.to_wire())
        except httpx.HTTPError as e:
            raise HttpClientError(f"Failed to send email: {e}") from e

        status_code = response.status_code
        logger.debug("Postmark responded with status %d", status_code)

        if status_code == httpx.codes.OK:
            return _parse_body(response, SendReceipt)
        if status_code == httpx.codes.UNPROCESSABLE_ENTITY:
            raise UnprocessableEntityError(_parse_body(response, ErrorReceipt))
        raise UnexpectedStatusError(status_code)

    async def aclose(self) -> None:
        """Close the underlying HTTP connections."""
        await self._http.aclose()

    async def __aenter__(self) -> PostmarkClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"PostmarkClient(base_url={str(self._base_url)!r})"
