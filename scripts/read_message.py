#!/usr/bin/env python3
"""Print one Gmail message in full: headers, snippet and decoded body.

Run from project root:
    python scripts/read_message.py <message_id>
"""

import argparse
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent

sys.path.insert(0, str(PROJECT_ROOT))
import requests
from dotenv import load_dotenv

from src.gmail import GmailError, MessageClient, TokenExchanger, load_config
from src.logging_config import configure_logging, register_secrets

logger = logging.getLogger("gmail.read_message")

RULE = "=" * 80
THIN_RULE = "-" * 80


def main() -> int:
    load_dotenv(PROJECT_ROOT / ".env.local")
    load_dotenv(PROJECT_ROOT / ".env")

    parser = argparse.ArgumentParser(description="Print a full Gmail message")
    parser.add_argument("message_id", help="Gmail message ID")
    args = parser.parse_args()
    configure_logging()

    try:
        cfg = load_config()
        register_secrets(cfg.client_secret, cfg.refresh_token)

        access_token = TokenExchanger().exchange(cfg)
        register_secrets(access_token)

        message = MessageClient().get_message(cfg, access_token, args.message_id)
    except (GmailError, requests.RequestException) as e:
        logger.error("%s", e)
        return 1

    print(RULE)
    print("FULL MESSAGE DETAILS")
    print(RULE)
    print(f"ID: {message.id}")
    print(f"Thread ID: {message.thread_id}")
    print(f"Subject: {message.subject or 'N/A'}")
    print(f"From: {message.sender or 'N/A'}")
    print(f"To: {message.recipient or 'N/A'}")
    print(f"Date: {message.date or 'N/A'}")
    print(f"Snippet: {message.snippet or 'N/A'}")
    print(f"\n{THIN_RULE}")
    print("MESSAGE BODY:")
    print(THIN_RULE)

    plain, html = message.body_text()
    if plain:
        print(plain)
    elif html:
        print(html)
    else:
        print("(Body text not available in this message)")

    print(f"\n{RULE}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
