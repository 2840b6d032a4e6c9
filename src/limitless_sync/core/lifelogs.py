"""Pure lifelog domain types - no I/O dependencies."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class NodeKind(Enum):
    """Kind of a fragment in a lifelog's content tree."""

    HEADING1 = "heading1"
    HEADING2 = "heading2"
    QUOTE = "blockquote"
    OTHER = "other"

    @classmethod
    def from_api(cls, value: str | None) -> "NodeKind":
        for kind in (cls.HEADING1, cls.HEADING2, cls.QUOTE):
            if value == kind.value:
                return kind
        return cls.OTHER


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an ISO 8601 timestamp. Returns None if missing or malformed."""
    if not value or not isinstance(value, str):
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None


@dataclass(frozen=True)
class ContentNode:
    """A typed fragment within a lifelog. Order in the list is significant."""

    kind: NodeKind
    text: str = ""
    speaker_name: str | None = None
    start_time: datetime | None = None

    @classmethod
    def from_api(cls, data: dict) -> "ContentNode":
        """Create ContentNode from a Limitless API content entry."""
        return cls(
            kind=NodeKind.from_api(data.get("type")),
            text=data.get("content") or "",
            speaker_name=data.get("speakerName") or None,
            start_time=parse_timestamp(data.get("startTime")),
        )


@dataclass(frozen=True)
class LogRecord:
    """One retrieved lifelog entry."""

    id: str = ""
    title: str | None = None
    markdown: str | None = None
    contents: list[ContentNode] = field(default_factory=list)
    start_time: datetime | None = None
    end_time: datetime | None = None

    @classmethod
    def from_api(cls, data: dict) -> "LogRecord":
        """Create LogRecord from a Limitless API lifelog object."""
        contents = [
            ContentNode.from_api(node)
            for node in data.get("contents") or []
            if isinstance(node, dict)
        ]
        return cls(
            id=data.get("id") or "",
            title=data.get("title") or None,
            markdown=data.get("markdown") or None,
            contents=contents,
            start_time=parse_timestamp(data.get("startTime")),
            end_time=parse_timestamp(data.get("endTime")),
        )
