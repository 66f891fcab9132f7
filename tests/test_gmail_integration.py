"""
Live integration test against the real Gmail API.

Run with: GMAIL_LIVE_TEST=1 python -m pytest tests/test_gmail_integration.py -v

Requires GOOGLE_CLIENT_ID, GOOGLE_CLIENT_SECRET, GOOGLE_REFRESH_TOKEN and
GMAIL_USER_EMAIL in the environment or in .env.local.
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from src.gmail import MessageClient, TokenExchanger, load_config

PROJECT_ROOT = Path(__file__).parent.parent

load_dotenv(PROJECT_ROOT / ".env.local")


@pytest.mark.integration
@pytest.mark.skipif(
    os.environ.get("GMAIL_LIVE_TEST") != "1",
    reason="Set GMAIL_LIVE_TEST=1 to run against the live Gmail API",
)
class TestGmailIntegration:
    """Integration tests for the Gmail REST client."""

    def test_token_list_get(self):
        """Exchange a token, list one message and fetch it if present."""
        cfg = load_config()

        token = TokenExchanger().exchange(cfg)
        assert isinstance(token, str) and token

        client = MessageClient()
        messages = client.list_messages(cfg, token, max_messages=1)
        assert isinstance(messages, list)
        assert len(messages) <= 1

        # The test account may be empty
        if messages:
            message = client.get_message(cfg, token, messages[0].id)
            assert message.id == messages[0].id
            assert message.thread_id == messages[0].thread_id
