"""Minimal CLI entry point for manual testing of the Postmark client."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from postmarkee.config.settings import PostmarkSettings
from postmarkee.core.inbound import InboundEmail, dump_inbound_email, parse_inbound_email
from postmarkee.core.models import Both, EmailBody, Html, OutboundEmail, Text
from postmarkee.core.postmark_client import PostmarkClient
from postmarkee.core.receipts import SendReceipt


def setup_logging(level: str) -> None:
    """Configure logging with timestamp and module info."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def body_from_args(text: str | None, html: str | None) -> EmailBody:
    """Pick the EmailBody variant matching the --text/--html flags given."""
    if text is not None and html is not None:
        return Both(html=html, text=text)
    if html is not None:
        return Html(html)
    if text is not None:
        return Text(text)
    raise ValueError("at least one of --text or --html is required")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Postmarkee - send email through Postmark and inspect inbound payloads"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # send command
    send_parser = subparsers.add_parser("send", help="Send a single email")
    send_parser.add_argument("--from", dest="sender", required=True, help="Sender address")
    send_parser.add_argument(
        "--to",
        dest="recipients",
        action="append",
        required=True,
        help="Recipient address (repeatable)",
    )
    send_parser.add_argument("--subject", "-s", required=True, help="Subject line")
    send_parser.add_argument("--text", help="Plain text body")
    send_parser.add_argument("--html", help="HTML body")
    send_parser.add_argument(
        "--stream",
        default=None,
        help="Message stream ID (default: from settings)",
    )

    # parse-inbound command
    inbound_parser = subparsers.add_parser(
        "parse-inbound", help="Parse an inbound webhook JSON file"
    )
    inbound_parser.add_argument("path", type=Path, help="Path to the webhook JSON body")
    inbound_parser.add_argument(
        "--dump",
        action="store_true",
        help="Print the re-serialized payload instead of a summary",
    )

    return parser


async def _send(settings: PostmarkSettings, args: argparse.Namespace) -> SendReceipt:
    email = OutboundEmail(
        recipients=tuple(args.recipients),
        subject=args.subject,
        body=body_from_args(args.text, args.html),
    )
    async with PostmarkClient(
        settings.to_client_config(), timeout=settings.timeout_seconds
    ) as client:
        return await client.send_email(
            args.sender, args.stream or settings.message_stream, email
        )


def summarize(email: InboundEmail) -> str:
    """One line per interesting field of an inbound email."""
    lines = [
        f"From:        {email.from_name} <{email.from_full.email}>",
        f"To:          {', '.join(p.email for p in email.to_full)}",
        f"Subject:     {email.subject}",
        f"Date:        {email.date.isoformat()}",
        f"Message ID:  {email.message_id}",
        f"Headers:     {len(email.headers)}",
        f"Attachments: {len(email.attachments)}",
    ]
    for attachment in email.attachments:
        lines.append(
            f"  {attachment.name} ({attachment.content_type}, {len(attachment.content)} bytes)"
        )
    return "\n".join(lines)


def main() -> None:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args()
    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        if args.command == "send":
            settings = PostmarkSettings()
            setup_logging(settings.log_level)
            receipt = asyncio.run(_send(settings, args))
            print(f"Sent to {receipt.to} at {receipt.submitted_at.isoformat()}")
            print(f"Message ID: {receipt.message_id}")

        elif args.command == "parse-inbound":
            setup_logging("INFO")
            email = parse_inbound_email(args.path.read_bytes())
            if args.dump:
                print(dump_inbound_email(email, indent=2))
            else:
                print(summarize(email))

    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        sys.exit(130)
    except Exception as e:
        print(f"\nError: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
