"""Markdown rendering for lifelogs - pure functions, no I/O."""

from datetime import datetime, tzinfo

from .lifelogs import ContentNode, LogRecord, NodeKind

DEFAULT_SPEAKER = "Speaker"


def format_timestamp(dt: datetime, tz: tzinfo | None = None) -> str:
    """
    Format a timestamp as MM/DD/YY h:mm AM/PM.

    Naive datetimes are rendered as-is. Aware ones are converted to tz
    when it is given.
    """
    if tz is not None and dt.tzinfo is not None:
        dt = dt.astimezone(tz)
    hour = dt.hour % 12 or 12
    meridiem = "AM" if dt.hour < 12 else "PM"
    return f"{dt:%m/%d/%y} {hour}:{dt:%M} {meridiem}"


def format_quote(node: ContentNode, tz: tzinfo | None = None) -> str:
    """Format a quote node as a bullet line attributed to its speaker."""
    speaker = node.speaker_name or DEFAULT_SPEAKER
    if node.start_time is not None:
        return f"- {speaker} ({format_timestamp(node.start_time, tz)}): {node.text}"
    return f"- {speaker}: {node.text}"


def _section_blocks(title: str, messages: list[str]) -> list[str]:
    return [f"## {title}\n", *messages]


def format_lifelog(record: LogRecord, tz: tzinfo | None = None) -> str:
    """
    Render one lifelog as markdown.

    Pure function - no I/O. The API's own markdown is preferred and only
    has its double line breaks collapsed. Without it, markdown is built
    from the content nodes: quotes are grouped under the heading2 that
    precedes them, and a heading2 with no quotes is dropped.
    """
    if record.markdown:
        return record.markdown.replace("\n\n", "\n")

    blocks: list[str] = []

    if record.title:
        blocks.append(f"# {record.title}\n")

    current_section = ""
    section_messages: list[str] = []

    for node in record.contents:
        match node.kind:
            case NodeKind.HEADING1:
                continue
            case NodeKind.HEADING2:
                if current_section and section_messages:
                    blocks.extend(_section_blocks(current_section, section_messages))
                    blocks.append("")
                current_section = node.text
                section_messages = []
            case NodeKind.QUOTE:
                line = format_quote(node, tz)
                if current_section:
                    section_messages.append(line)
                else:
                    blocks.append(line)
            case _:
                if node.text:
                    blocks.append(node.text)

    if current_section and section_messages:
        blocks.extend(_section_blocks(current_section, section_messages))

    return "\n\n".join(blocks)


def format_day(records: list[LogRecord], tz: tzinfo | None = None) -> str:
    """Render a day's lifelogs as the body of its markdown file."""
    return "\n\n".join(format_lifelog(r, tz) for r in records)
