"""Gmail REST API client for listing and fetching messages."""

import logging
from typing import Optional
from urllib.parse import quote

import requests

from .config import GmailConfig
from .exceptions import ApiError, MalformedResponseError
from .http import DEFAULT_TIMEOUT, describe_failure, send
from .models import Message, MessageSummary

logger = logging.getLogger(__name__)

API_BASE_URL = "https://gmail.googleapis.com/gmail/v1"

# Hard per-request cap on the list endpoint; larger limits are reduced
MAX_LIST_RESULTS = 50
DEFAULT_LIST_RESULTS = 10


class MessageClient:
    """Lists and fetches messages for the account named in a GmailConfig.

    The client holds no per-account state: the config and access token
    are passed to every call, and each call makes exactly one request.

    Example usage:
        config = load_config()
        token = TokenExchanger().exchange(config)
        client = MessageClient()
        for summary in client.list_messages(config, token, max_messages=5):
            message = client.get_message(config, token, summary.id)
            print(message.subject)
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
        base_url: str = API_BASE_URL,
    ):
        """Initialize the client.

        Args:
            session: HTTP session to send requests with (for testing or
                connection reuse). A fresh session is used per call if None.
            timeout: Request timeout in seconds.
            base_url: Gmail API root, without trailing slash.
        """
        self._session = session
        self._timeout = timeout
        self._base_url = base_url

    def _messages_url(self, config: GmailConfig) -> str:
        return f"{self._base_url}/users/{quote(config.user_email, safe='')}/messages"

    def _get(
        self, url: str, access_token: str, params: dict, action: str
    ) -> requests.Response:
        response = send(
            self._session,
            "GET",
            url,
            self._timeout,
            params=params,
            headers={"Authorization": f"Bearer {access_token}"},
        )
        if not response.ok:
            logger.error(
                "Gmail API error (status=%d): %s", response.status_code, response.reason
            )
            raise ApiError(
                describe_failure(action, response),
                status_code=response.status_code,
                reason=response.reason,
                body=response.text,
            )
        return response

    def list_messages(
        self,
        config: GmailConfig,
        access_token: str,
        max_messages: int = DEFAULT_LIST_RESULTS,
    ) -> list[MessageSummary]:
        """List messages, optionally filtered by intake label and query.

        Only the first page is fetched.

        Args:
            config: Gmail configuration (account and filters)
            access_token: OAuth access token
            max_messages: Maximum number of messages to return (capped at 50)

        Returns:
            Message summaries in the order the API returned them. Empty if
            the response has no messages field.

        Raises:
            ApiError: If the API returns a non-success status
            MalformedResponseError: If the response body is not valid JSON
                or an entry has no id
        """
        max_results = min(max_messages, MAX_LIST_RESULTS)
        params = {"maxResults": str(max_results)}
        if config.intake_label:
            params["labelIds"] = config.intake_label
        if config.query:
            params["q"] = config.query

        logger.debug("Listing up to %d messages", max_results)
        response = self._get(
            self._messages_url(config), access_token, params, "Failed to list messages"
        )
        data = _parse_json(response)
        if not isinstance(data, dict):
            raise MalformedResponseError(
                f"Unexpected list response type: {type(data).__name__}"
            )

        entries = data.get("messages")
        if not entries:
            logger.info("No messages found")
            return []

        summaries = [MessageSummary.from_api(entry) for entry in entries]
        logger.info("Listed %d messages", len(summaries))
        return summaries

    def get_message(
        self, config: GmailConfig, access_token: str, message_id: str
    ) -> Message:
        """Fetch a full message (format=full) by ID.

        Args:
            config: Gmail configuration (account)
            access_token: OAuth access token
            message_id: Gmail message ID

        Returns:
            Message for the specified ID

        Raises:
            ApiError: If the API returns a non-success status (e.g. 404)
            MalformedResponseError: If the response lacks the id field
        """
        url = f"{self._messages_url(config)}/{quote(message_id, safe='')}"

        logger.debug("Fetching message %s", message_id)
        response = self._get(
            url, access_token, {"format": "full"}, "Failed to get message"
        )
        return Message.from_api(_parse_json(response))


def _parse_json(response: requests.Response):
    try:
        return response.json()
    except ValueError as e:
        raise MalformedResponseError(
            f"Gmail API returned a non-JSON response: {response.text}"
        ) from e
