"""Gmail REST client for refresh-token based, single-account access.

Every operation is a stateless, one-shot request: load the config once,
exchange the refresh token, then list and/or fetch messages.

Public API:
    - GmailConfig, load_config: Validated configuration from the environment
    - TokenExchanger: Refresh token -> access token
    - MessageClient: List message summaries and fetch full messages
    - MessageSummary, Message: Response models
    - GmailError: Base exception (ConfigurationError, ExchangeError,
      ApiError, MalformedResponseError)
"""

from .client import MessageClient
from .config import GmailConfig, load_config
from .exceptions import (
    ApiError,
    ConfigurationError,
    ExchangeError,
    GmailError,
    MalformedResponseError,
)
from .models import Message, MessageSummary
from .token import TokenExchanger

__all__ = [
    "GmailConfig",
    "load_config",
    "TokenExchanger",
    "MessageClient",
    "MessageSummary",
    "Message",
    "GmailError",
    "ConfigurationError",
    "ExchangeError",
    "ApiError",
    "MalformedResponseError",
]
