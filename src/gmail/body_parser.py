"""MIME body parsing utilities for Gmail messages."""

import base64
from typing import Optional


def decode_base64(data: str) -> str:
    """Decode Gmail's URL-safe base64 encoded data.

    Gmail uses URL-safe base64 encoding (RFC 4648) which replaces
    '+' with '-' and '/' with '_', and usually omits padding.

    Args:
        data: Base64url encoded string

    Returns:
        Decoded UTF-8 string
    """
    padding = 4 - len(data) % 4
    if padding != 4:
        data += "=" * padding

    decoded_bytes = base64.urlsafe_b64decode(data)
    return decoded_bytes.decode("utf-8", errors="replace")


def find_header(payload: dict, name: str) -> Optional[str]:
    """Return the first header value matching name (case-insensitive)."""
    wanted = name.lower()
    for header in payload.get("headers", []):
        if header.get("name", "").lower() == wanted:
            return header.get("value")
    return None


def extract_body(payload: dict) -> tuple[str, Optional[str]]:
    """Extract plain text and HTML body from a format=full message payload.

    Handles a body directly on the payload as well as (nested)
    multipart structures. The first text/plain and first text/html
    parts win.

    Args:
        payload: Gmail message payload dictionary

    Returns:
        Tuple of (plain_text_body, html_body). Plain text is "" and HTML
        is None when the payload has no such part.
    """
    plain_text = ""
    html_body = None

    def walk(part: dict) -> None:
        nonlocal plain_text, html_body

        mime_type = part.get("mimeType", "")
        body_data = part.get("body", {}).get("data")

        if body_data:
            if mime_type == "text/html":
                if html_body is None:
                    html_body = decode_base64(body_data)
            elif mime_type in ("text/plain", "") and not plain_text:
                plain_text = decode_base64(body_data)

        for child in part.get("parts", []):
            walk(child)

    walk(payload)
    return plain_text, html_body
