"""Shared fixtures for postmarkee tests."""

from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import pytest

from postmarkee.core.inbound import Attachment, Header, InboundEmail, Participant
from postmarkee.core.models import Both, ClientConfig, OutboundEmail

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to the test fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def inbound_payload_text() -> str:
    """Raw JSON body of a Postmark inbound webhook."""
    return (FIXTURES_DIR / "inbound_payload.json").read_text()


@pytest.fixture
def inbound_payload(inbound_payload_text: str) -> dict[str, Any]:
    """Decoded Postmark inbound webhook body."""
    return json.loads(inbound_payload_text)


@pytest.fixture
def send_receipt_raw() -> dict[str, Any]:
    """Body Postmark returns with HTTP 200."""
    return json.loads((FIXTURES_DIR / "send_receipt.json").read_text())


@pytest.fixture
def error_receipt_raw() -> dict[str, Any]:
    """Body Postmark returns with HTTP 422."""
    return json.loads((FIXTURES_DIR / "error_receipt.json").read_text())


@pytest.fixture
def client_config() -> ClientConfig:
    """Config pointing at the default endpoint with a test token."""
    return ClientConfig(server_token="server-token-123")


@pytest.fixture
def sample_outbound() -> OutboundEmail:
    """A sample outbound email with both bodies."""
    return OutboundEmail(
        recipients=("alice@example.com", "bob@example.com"),
        subject="Quarterly report",
        body=Both(html="<p>Hello</p>", text="Hello"),
    )


@pytest.fixture
def sample_inbound() -> InboundEmail:
    """A sample InboundEmail built in Python rather than parsed."""
    return InboundEmail(
        from_name="Alice",
        message_stream="inbound",
        from_full=Participant(email="alice@example.com", name="Alice", mailbox_hash=""),
        to_full=[
            Participant(email="inbox+hash@example.com", name="Inbox", mailbox_hash="hash"),
        ],
        cc_full=[],
        bcc_full=[],
        original_recipient="inbox+hash@example.com",
        subject="Hello",
        message_id="5f4c8a1e-0000-4000-8000-000000000001",
        reply_to="",
        mailbox_hash="hash",
        date=datetime(2021, 3, 9, 5, 6, 7, tzinfo=UTC),
        text_body="Hi there",
        html_body="<p>Hi there</p>",
        stripped_text_reply="",
        tag="",
        headers=[Header(name="X-Spam-Status", value="No")],
        attachments=[
            Attachment(
                name="blob.bin",
                content=b"\x00\x01\xfe\xffhello",
                content_type="application/octet-stream",
                content_length=9,
            ),
        ],
    )
