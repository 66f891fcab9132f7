"""Gmail configuration loaded from environment variables."""

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from .exceptions import ConfigurationError

# Required variables, in the order they are reported when missing
REQUIRED_VARS = (
    ("client_id", "GOOGLE_CLIENT_ID"),
    ("client_secret", "GOOGLE_CLIENT_SECRET"),
    ("refresh_token", "GOOGLE_REFRESH_TOKEN"),
    ("user_email", "GMAIL_USER_EMAIL"),
)

OPTIONAL_VARS = (
    ("intake_label", "GMAIL_LABEL_INTAKE"),
    ("processed_label", "GMAIL_LABEL_PROCESSED"),
    ("query", "GMAIL_QUERY"),
)


@dataclass(frozen=True)
class GmailConfig:
    """Validated OAuth credentials and message filters for one Gmail account.

    Attributes:
        client_id: OAuth2 client ID
        client_secret: OAuth2 client secret (hidden from repr)
        refresh_token: OAuth2 refresh token (hidden from repr)
        user_email: Gmail account address the API calls are scoped to
        intake_label: Label ID used to filter listed messages
        processed_label: Label ID for messages that have been handled
        query: Gmail search query used to filter listed messages
    """

    client_id: str
    client_secret: str = field(repr=False)
    refresh_token: str = field(repr=False)
    user_email: str
    intake_label: Optional[str] = None
    processed_label: Optional[str] = None
    query: Optional[str] = None


def load_config(environ: Optional[Mapping[str, str]] = None) -> GmailConfig:
    """Load and validate Gmail configuration from the environment.

    Missing, empty and whitespace-only values are all treated as absent.
    Optional values are passed through verbatim.

    Args:
        environ: Mapping to read variables from. Defaults to os.environ.

    Returns:
        Validated GmailConfig

    Raises:
        ConfigurationError: If any required variable is absent. The error
            lists every missing variable, not just the first.
    """
    env = os.environ if environ is None else environ

    missing = [
        var for _, var in REQUIRED_VARS if not (env.get(var) or "").strip()
    ]
    if missing:
        raise ConfigurationError(missing)

    values = {name: env[var] for name, var in REQUIRED_VARS}
    values.update({name: env.get(var) for name, var in OPTIONAL_VARS})
    return GmailConfig(**values)
