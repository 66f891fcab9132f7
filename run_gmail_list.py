"""CLI entry point: list recent Gmail messages and show the first one."""

import argparse
import logging
import sys

import requests
from dotenv import load_dotenv

from src.gmail import GmailError, MessageClient, TokenExchanger, load_config
from src.logging_config import configure_logging, register_secrets

logger = logging.getLogger("gmail")

SNIPPET_LENGTH = 200


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid count: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError("Message count must be a positive number")
    return number


def main(argv: list[str] | None = None) -> int:
    load_dotenv(".env.local")
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="List Gmail messages and show details of the first"
    )
    parser.add_argument(
        "count",
        nargs="?",
        type=positive_int,
        default=5,
        help="Maximum number of messages to list (default: 5, capped at 50)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set logging level (overrides LOG_LEVEL env var)",
    )
    args = parser.parse_args(argv)
    configure_logging(level_override=args.log_level)

    try:
        cfg = load_config()
        register_secrets(cfg.client_secret, cfg.refresh_token)
        logger.info("Loaded config for: %s", cfg.user_email)

        access_token = TokenExchanger().exchange(cfg)
        register_secrets(access_token)

        client = MessageClient()
        messages = client.list_messages(cfg, access_token, args.count)
        if not messages:
            print("No messages found")
            return 0

        print(f"Found {len(messages)} message(s):\n")
        for msg in messages:
            print(f"id={msg.id} thread={msg.thread_id}")

        first = client.get_message(cfg, access_token, messages[0].id)
    except (GmailError, requests.RequestException) as e:
        logger.error("%s", e)
        return 1

    print("\nMessage Details:")
    print(f"  ID: {first.id}")
    print(f"  Thread ID: {first.thread_id}")
    print(f"  Subject: {first.subject or '(no subject)'}")
    if first.snippet:
        ellipsis = "..." if len(first.snippet) > SNIPPET_LENGTH else ""
        print(f"  Snippet: {first.snippet[:SNIPPET_LENGTH]}{ellipsis}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
