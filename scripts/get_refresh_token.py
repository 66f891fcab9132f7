#!/usr/bin/env python3
"""One-time helper to obtain an OAuth2 refresh token for the Gmail client.

Opens a browser for consent, captures the redirect on a local server and
prints the refresh token to add to .env.local.

Usage:
    GOOGLE_CLIENT_ID=... GOOGLE_CLIENT_SECRET=... python scripts/get_refresh_token.py
"""

import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from google_auth_oauthlib.flow import InstalledAppFlow

PROJECT_ROOT = Path(__file__).resolve().parent.parent

SCOPES = ["https://www.googleapis.com/auth/gmail.readonly"]
REDIRECT_PORT = 8080


def build_client_config(client_id: str, client_secret: str) -> dict:
    """Client config in the shape of a downloaded Desktop-app credentials file."""
    return {
        "installed": {
            "client_id": client_id,
            "client_secret": client_secret,
            "auth_uri": "https://accounts.google.com/o/oauth2/auth",
            "token_uri": "https://oauth2.googleapis.com/token",
            "redirect_uris": ["http://localhost"],
        }
    }


def main() -> int:
    load_dotenv(PROJECT_ROOT / ".env.local")

    client_id = os.environ.get("GOOGLE_CLIENT_ID", "").strip()
    client_secret = os.environ.get("GOOGLE_CLIENT_SECRET", "").strip()
    if not client_id or not client_secret:
        print(
            "Error: GOOGLE_CLIENT_ID and GOOGLE_CLIENT_SECRET must be set",
            file=sys.stderr,
        )
        return 1

    flow = InstalledAppFlow.from_client_config(
        build_client_config(client_id, client_secret), SCOPES
    )
    # offline + consent so Google issues a refresh token on every run
    creds = flow.run_local_server(
        port=REDIRECT_PORT,
        access_type="offline",
        prompt="consent",
        authorization_prompt_message="Opening browser for authorization...\n"
        "If the browser doesn't open, go to this URL:\n{url}",
        success_message="Authorization successful. You can close this window.",
    )

    if not creds.refresh_token:
        print(
            "No refresh_token in response. Make sure you granted offline access.",
            file=sys.stderr,
        )
        return 1

    print("\nAdd this to your .env.local file:\n")
    print(f"GOOGLE_REFRESH_TOKEN={creds.refresh_token}")
    print("\nSave this refresh token securely; it grants access to the mailbox.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
