"""Exceptions for the Gmail client module."""


class GmailError(Exception):
    """Base exception for all Gmail client errors."""

    pass


class ConfigurationError(GmailError):
    """Raised when required configuration variables are missing or blank."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(
            f"Missing required environment variables: {', '.join(missing)}"
        )


class ExchangeError(GmailError):
    """Raised when the refresh token cannot be exchanged for an access token.

    status_code, reason and body are set when the token endpoint answered
    with a non-success status. They are None for a success response that
    did not carry a usable access token.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        reason: str | None = None,
        body: str | None = None,
    ):
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(message)


class ApiError(GmailError):
    """Raised when a Gmail API call returns a non-success status."""

    def __init__(self, message: str, status_code: int, reason: str, body: str):
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(message)


class MalformedResponseError(GmailError):
    """Raised when a success response does not have the expected shape."""

    pass
