"""Message data models for the Gmail client module."""

from dataclasses import dataclass, field
from typing import Any, Optional

from .body_parser import extract_body, find_header
from .exceptions import MalformedResponseError


@dataclass(frozen=True)
class MessageSummary:
    """A message reference as returned by the list endpoint.

    Attributes:
        id: Gmail message ID (unique per message)
        thread_id: Gmail thread ID (shared by messages in same thread)
    """

    id: str
    thread_id: str

    @classmethod
    def from_api(cls, entry: dict[str, Any]) -> "MessageSummary":
        """Build a summary from one entry of the list response."""
        message_id = entry.get("id") if isinstance(entry, dict) else None
        if not message_id:
            raise MalformedResponseError(
                f"Message entry without id in list response: {entry!r}"
            )
        return cls(id=message_id, thread_id=entry.get("threadId", ""))


@dataclass(frozen=True)
class Message:
    """Full message as returned by the get endpoint with format=full.

    Attributes:
        id: Gmail message ID
        thread_id: Gmail thread ID
        label_ids: List of Gmail label IDs
        snippet: Gmail's preview snippet
        history_id: Mailbox history ID at the time of the fetch
        internal_date: Internal timestamp (epoch milliseconds, as a string)
        size_estimate: Estimated size in bytes
        payload: Parsed MIME tree (headers, parts, base64url bodies)
        raw: Base64url encoded RFC 2822 message, only when returned
    """

    id: str
    thread_id: str = ""
    label_ids: list[str] = field(default_factory=list)
    snippet: str = ""
    history_id: Optional[str] = None
    internal_date: Optional[str] = None
    size_estimate: Optional[int] = None
    payload: dict[str, Any] = field(default_factory=dict)
    raw: Optional[str] = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Message":
        """Build a Message from the get endpoint's JSON body.

        Raises:
            MalformedResponseError: If the id field is absent or empty
        """
        if not isinstance(data, dict) or not data.get("id"):
            raise MalformedResponseError(
                "Message response is missing the 'id' field"
            )
        return cls(
            id=data["id"],
            thread_id=data.get("threadId", ""),
            label_ids=list(data.get("labelIds", [])),
            snippet=data.get("snippet", ""),
            history_id=data.get("historyId"),
            internal_date=data.get("internalDate"),
            size_estimate=data.get("sizeEstimate"),
            payload=data.get("payload") or {},
            raw=data.get("raw"),
        )

    def header(self, name: str) -> Optional[str]:
        """Look up a header value by name (case-insensitive)."""
        return find_header(self.payload, name)

    @property
    def subject(self) -> Optional[str]:
        return self.header("Subject")

    @property
    def sender(self) -> Optional[str]:
        return self.header("From")

    @property
    def recipient(self) -> Optional[str]:
        return self.header("To")

    @property
    def date(self) -> Optional[str]:
        return self.header("Date")

    def body_text(self) -> tuple[str, Optional[str]]:
        """Decode the plain text and HTML bodies from the payload."""
        return extract_body(self.payload)
