"""OAuth2 refresh token exchange."""

import json
import logging
from typing import Optional

import requests

from .config import GmailConfig
from .exceptions import ExchangeError
from .http import DEFAULT_TIMEOUT, describe_failure, send

logger = logging.getLogger(__name__)

TOKEN_URL = "https://oauth2.googleapis.com/token"


class TokenExchanger:
    """Exchanges a Google OAuth2 refresh token for a short-lived access token.

    Every call to exchange() performs a full round trip to the token
    endpoint. Nothing is cached, so callers must exchange again for each
    session that needs a fresh token.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
        token_url: str = TOKEN_URL,
    ):
        """Initialize the exchanger.

        Args:
            session: HTTP session to send requests with (for testing or
                connection reuse). A fresh session is used per call if None.
            timeout: Request timeout in seconds.
            token_url: OAuth2 token endpoint.
        """
        self._session = session
        self._timeout = timeout
        self._token_url = token_url

    def exchange(self, config: GmailConfig) -> str:
        """Exchange the configured refresh token for an access token.

        Args:
            config: Gmail configuration holding the OAuth credentials

        Returns:
            Access token string

        Raises:
            ExchangeError: If the endpoint rejects the request or the
                response carries no access token
            requests.RequestException: On connection failures or timeouts
        """
        form = {
            "client_id": config.client_id,
            "client_secret": config.client_secret,
            "refresh_token": config.refresh_token,
            "grant_type": "refresh_token",
        }

        logger.debug("Requesting access token from %s", self._token_url)
        response = send(
            self._session,
            "POST",
            self._token_url,
            self._timeout,
            data=form,
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )

        if not response.ok:
            logger.error(
                "Token exchange failed (status=%d): %s",
                response.status_code,
                response.reason,
            )
            raise ExchangeError(
                describe_failure("Failed to fetch access token", response),
                status_code=response.status_code,
                reason=response.reason,
                body=response.text,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ExchangeError(
                f"Token endpoint returned a non-JSON response: {response.text}"
            ) from e

        access_token = data.get("access_token") if isinstance(data, dict) else None
        if not access_token:
            raise ExchangeError(
                f"Access token not found in response: {json.dumps(data)}"
            )

        logger.info("Access token obtained")
        return access_token
