"""Tests for the send-email request payload and response receipts."""

from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import Any

import pytest
from pydantic import ValidationError

from postmarkee.core.receipts import ErrorReceipt, SendEmailPayload, SendReceipt


class TestSendEmailPayload:
    def test_pascal_case_keys(self) -> None:
        payload = SendEmailPayload(
            sender="sender@example.com",
            to="a@example.com,b@example.com",
            subject="Hi",
            html_body="<p>Hi</p>",
            text_body="Hi",
            message_stream="outbound",
        )
        assert payload.to_wire() == {
            "From": "sender@example.com",
            "To": "a@example.com,b@example.com",
            "Subject": "Hi",
            "HtmlBody": "<p>Hi</p>",
            "TextBody": "Hi",
            "MessageStream": "outbound",
        }

    def test_omits_absent_optionals(self) -> None:
        payload = SendEmailPayload(sender="s@example.com", to="r@example.com", subject="Hi", text_body="Hi")
        assert payload.to_wire() == {
            "From": "s@example.com",
            "To": "r@example.com",
            "Subject": "Hi",
            "TextBody": "Hi",
        }

    def test_keeps_empty_strings(self) -> None:
        payload = SendEmailPayload(sender="s@example.com", to="r@example.com", subject="", html_body="")
        assert payload.to_wire()["HtmlBody"] == ""
        assert payload.to_wire()["Subject"] == ""


class TestSendReceipt:
    def test_deserialize(self, send_receipt_raw: dict[str, Any]) -> None:
        receipt = SendReceipt.model_validate_json(json.dumps(send_receipt_raw))
        assert receipt == SendReceipt(
            to="receiver@example.com",
            submitted_at=datetime(2014, 2, 17, 12, 25, 1, 417864, tzinfo=UTC),
            message_id="0a129aee-e1cd-480d-b08d-4f48548ff48d",
        )

    def test_submitted_at_is_utc(self, send_receipt_raw: dict[str, Any]) -> None:
        receipt = SendReceipt.model_validate(send_receipt_raw)
        assert receipt.submitted_at.tzinfo == UTC

    def test_message_id_alias(self) -> None:
        receipt = SendReceipt.model_validate(
            {"To": "r@example.com", "SubmittedAt": "2020-01-01T00:00:00Z", "MessageID": "abc"}
        )
        assert receipt.message_id == "abc"

    def test_rejects_message_id_with_regular_casing(self) -> None:
        with pytest.raises(ValidationError):
            SendReceipt.model_validate(
                {"To": "r@example.com", "SubmittedAt": "2020-01-01T00:00:00Z", "MessageId": "abc"}
            )

    def test_frozen(self, send_receipt_raw: dict[str, Any]) -> None:
        receipt = SendReceipt.model_validate(send_receipt_raw)
        with pytest.raises(ValidationError):
            receipt.to = "someone@example.com"  # type: ignore[misc]


class TestErrorReceipt:
    def test_deserialize(self) -> None:
        receipt = ErrorReceipt.model_validate_json('{"ErrorCode": 405, "Message": "details"}')
        assert receipt == ErrorReceipt(error_code=405, message="details")

    def test_str(self) -> None:
        assert str(ErrorReceipt(error_code=300, message="Invalid email request")) == (
            "300 - Invalid email request"
        )

    def test_rejects_out_of_range_code(self) -> None:
        with pytest.raises(ValidationError):
            ErrorReceipt.model_validate({"ErrorCode": -1, "Message": "nope"})

    def test_requires_message(self) -> None:
        with pytest.raises(ValidationError):
            ErrorReceipt.model_validate({"ErrorCode": 300})
