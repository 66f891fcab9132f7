"""End-to-end test: load config, exchange token, list, then get (HTTP mocked)."""

from unittest.mock import MagicMock

import requests

from src.gmail import MessageClient, TokenExchanger, load_config
from src.gmail.client import API_BASE_URL
from src.gmail.token import TOKEN_URL
from tests.gmail_test_helpers import make_response

ENV = {
    "GOOGLE_CLIENT_ID": "test-client-id",
    "GOOGLE_CLIENT_SECRET": "test-client-secret",
    "GOOGLE_REFRESH_TOKEN": "test-refresh-token",
    "GMAIL_USER_EMAIL": "test@example.com",
}
MESSAGES_URL = f"{API_BASE_URL}/users/test%40example.com/messages"


def _fake_gmail(method: str, url: str, **kwargs):
    """Route requests to canned responses the way the real services would."""
    if method == "POST" and url == TOKEN_URL:
        return make_response(200, {"access_token": "tok", "expires_in": 3599})

    assert kwargs["headers"] == {"Authorization": "Bearer tok"}
    if method == "GET" and url == MESSAGES_URL:
        assert kwargs["params"]["maxResults"] == "5"
        return make_response(
            200,
            {
                "messages": [
                    {"id": "m1", "threadId": "t1"},
                    {"id": "m2", "threadId": "t2"},
                ],
                "resultSizeEstimate": 2,
            },
        )
    if method == "GET" and url == f"{MESSAGES_URL}/m1":
        return make_response(
            200,
            {
                "id": "m1",
                "threadId": "t1",
                "snippet": "Hello there",
                "payload": {"headers": [{"name": "Subject", "value": "Hi"}]},
            },
        )
    return make_response(404, text="not found")


class TestGmailEndToEnd:
    def test_config_token_list_get(self):
        session = MagicMock(spec=requests.Session)
        session.request.side_effect = _fake_gmail

        cfg = load_config(ENV)
        token = TokenExchanger(session=session).exchange(cfg)
        client = MessageClient(session=session)
        summaries = client.list_messages(cfg, token, max_messages=5)
        message = client.get_message(cfg, token, summaries[0].id)

        assert token == "tok"
        assert [s.id for s in summaries] == ["m1", "m2"]
        assert message.id == summaries[0].id
        assert message.thread_id == "t1"
        assert message.subject == "Hi"
        assert session.request.call_count == 3
