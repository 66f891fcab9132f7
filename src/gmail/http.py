"""Shared HTTP plumbing for the token and message clients."""

from typing import Any, Optional

import requests

# Seconds to wait for connect and for each read before giving up
DEFAULT_TIMEOUT = 30.0


def send(
    session: Optional[requests.Session],
    method: str,
    url: str,
    timeout: float,
    **kwargs: Any,
) -> requests.Response:
    """Issue a single request, without retries.

    Uses the injected session when given. Otherwise a short-lived session
    is opened for this one call and closed afterwards.

    Raises:
        requests.RequestException: On connection failures or timeouts
    """
    if session is not None:
        return session.request(method, url, timeout=timeout, **kwargs)
    with requests.Session() as owned:
        return owned.request(method, url, timeout=timeout, **kwargs)


def describe_failure(action: str, response: requests.Response) -> str:
    """Format a non-success response for an error message.

    Only the status and the response body are included. The request
    (which carries credentials) never is.
    """
    return (
        f"{action}: {response.status_code} {response.reason}\n"
        f"Response: {response.text}"
    )
