"""Rate-limit retry policy - pure delay computation, no I/O."""

from dataclasses import dataclass
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime


@dataclass(frozen=True)
class RetryPolicy:
    """How many times to retry a rate-limited request and how long to wait."""

    max_retries: int = 5
    base_delay: float = 1.0

    def backoff(self, attempt: int) -> float:
        """Exponential backoff for the 0-based retry index: 1s, 2s, 4s, ..."""
        return self.base_delay * 2**attempt

    def delay(self, retry_after: str | None, attempt: int, now: datetime | None = None) -> float:
        """
        Seconds to wait before retry number `attempt` (0-based).

        An integer Retry-After header wins, then an HTTP-date one (clamped
        at zero), then exponential backoff.
        """
        if retry_after:
            value = retry_after.strip()
            if value.isascii() and value.isdecimal():
                return float(int(value))

            retry_at = parse_http_date(value)
            if retry_at is not None:
                now = now or datetime.now(timezone.utc)
                return max(0.0, (retry_at - now).total_seconds())

        return self.backoff(attempt)


def parse_http_date(value: str) -> datetime | None:
    """Parse an HTTP-date header value into an aware datetime."""
    try:
        parsed = parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def retry_delay(retry_after: str | None, attempt: int, now: datetime | None = None) -> float:
    """Delay under the default policy."""
    return RetryPolicy().delay(retry_after, attempt, now)
