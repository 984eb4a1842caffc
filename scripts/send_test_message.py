#!/usr/bin/env python3
"""Send sample messages to a real webhook.

⚠️  WARNING: This script posts REAL messages to the configured channel!

Sends a plain text message, a message with a fully populated embed and,
if --attach is given, a message carrying that file as an attachment.

Usage:
    # Dry run (print payloads only, no sends)
    python scripts/send_test_message.py --dry-run

    # Send using WEBHOOK_URL from the environment
    python scripts/send_test_message.py

    # Send with a config file and an attachment
    python scripts/send_test_message.py --config config/hookshot.yaml --attach cat.gif

Environment:
    WEBHOOK_URL: Target webhook URL (when --config is not given)
    LOG_LEVEL: Logging level (default: INFO)
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from hookshot.core.config import apply_defaults, validate_config
from hookshot.core.message import (
    Attachment,
    Author,
    Embed,
    Field,
    Footer,
    Image,
    Message,
    message_to_payload,
)
from hookshot.shell.config_loader import create_dispatcher, load_config, load_config_from_env

log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(levelname)s: %(message)s",
)
logger = logging.getLogger(__name__)


ICON_URL = "https://cdn.discordapp.com/emojis/801874189526368256.gif"


def build_sample_messages() -> list[Message]:
    """Build the text-only and embed sample messages."""
    return [
        Message(
            username="Captain'Hook",
            avatar_url=ICON_URL,
            content="This is the content of the message, it's plain text",
        ),
        Message(
            username="Captain'Hook",
            avatar_url=ICON_URL,
            embeds=[Embed(
                description="This is the body of the embed",
                title="This is the title",
                footer=Footer(text="This is the footer", icon_url=ICON_URL),
                color=0xB00B69,
                thumbnail=Image(url=ICON_URL),
                author=Author(name="The author", url=ICON_URL, icon_url=ICON_URL),
                image=Image(url=ICON_URL),
                url=ICON_URL,
                fields=[
                    Field(name="1", value="nana", inline=True),
                    Field(name="2", value="bongo", inline=True),
                    Field(name="3", value="nanabongo"),
                ],
            )],
        ),
    ]


def main() -> int:
    parser = argparse.ArgumentParser(description="Send sample webhook messages")
    parser.add_argument("--config", help="Path to YAML config file")
    parser.add_argument("--attach", type=Path, help="File to send as an attachment")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print payloads without sending",
    )
    args = parser.parse_args()

    config = load_config(args.config) if args.config else load_config_from_env()

    messages = [apply_defaults(m, config) for m in build_sample_messages()]

    if args.dry_run:
        for message in messages:
            print(json.dumps(message_to_payload(message), indent=2))
        if args.attach:
            print(f"[dry-run] Attachment: {args.attach}")
        return 0

    validation = validate_config(config)
    for problem in validation.errors:
        logger.log(
            logging.ERROR if problem.severity == "error" else logging.WARNING,
            "%s: %s",
            problem.field,
            problem.message,
        )
    if not validation.valid:
        return 1

    with create_dispatcher(config) as dispatcher:
        for message in messages:
            dispatcher.set_message(message)
            result = dispatcher.send()
            if not result.success:
                logger.error("Send failed: %s", result.error)
                return 1

        if args.attach:
            with open(args.attach, "rb") as f:
                dispatcher.set_message(apply_defaults(
                    Message(
                        username="nanabongo",
                        attachments=[Attachment(content=f, filename=args.attach.name)],
                    ),
                    config,
                ))
                result = dispatcher.send()
            if not result.success:
                logger.error("Send failed: %s", result.error)
                return 1

    logger.info("All sample messages sent")
    return 0


if __name__ == "__main__":
    sys.exit(main())
