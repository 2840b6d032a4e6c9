"""Limitless API adapter - HTTP client for lifelog fetching."""

import logging
import time
from datetime import date
from typing import Callable

import requests

from limitless_sync.config import ConfigError
from limitless_sync.core.lifelogs import LogRecord
from limitless_sync.core.retry import RetryPolicy

logger = logging.getLogger(__name__)

API_BASE = "https://api.limitless.ai"
API_VERSION = "v1"
PAGE_LIMIT = 10
REQUEST_TIMEOUT = 60


class FetchError(Exception):
    """Raised when lifelogs cannot be fetched."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class RateLimitExhausted(FetchError):
    """Raised when the API keeps rate limiting past the retry budget."""

    pass


def _field(obj: dict, key: str, kind: type):
    """obj[key] checked against kind; a missing or null value gives kind()."""
    value = obj.get(key)
    if value is None:
        return kind()
    if not isinstance(value, kind):
        raise FetchError(
            f"Invalid response format: '{key}' should be {kind.__name__}, got {type(value).__name__}"
        )
    return value


class LimitlessAPIAdapter:
    """
    Limitless lifelogs API adapter.

    Implements LifelogRepository protocol. Handles pagination and retries
    on rate limiting. No business logic - just I/O.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = API_BASE,
        timezone: str = "UTC",
        page_size: int = PAGE_LIMIT,
        retry_policy: RetryPolicy | None = None,
        timeout: float = REQUEST_TIMEOUT,
        sleep: Callable[[float], None] = time.sleep,
        session: requests.Session | None = None,
    ):
        if not api_key:
            raise ConfigError("Missing Limitless API key. Set API_KEY or LIMITLESS_API_KEY.")
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timezone = timezone
        self.page_size = page_size
        self.retry_policy = retry_policy or RetryPolicy()
        self.timeout = timeout
        self._sleep = sleep
        self._session = session or requests.Session()

    @property
    def lifelogs_url(self) -> str:
        return f"{self.base_url}/{API_VERSION}/lifelogs"

    def _get(self, params: dict) -> requests.Response:
        try:
            return self._session.get(
                self.lifelogs_url,
                headers={"X-API-Key": self.api_key, "Accept": "application/json"},
                params=dict(params),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise FetchError(f"Request to {self.lifelogs_url} failed: {e}") from e

    def _api_request(self, params: dict) -> dict:
        """Make one logical request, retrying only while rate limited."""
        max_retries = self.retry_policy.max_retries

        for attempt in range(max_retries + 1):
            logger.debug(f"GET {self.lifelogs_url} params={params} (attempt {attempt + 1})")
            resp = self._get(params)

            if resp.status_code != 429:
                return self._parse_response(resp)

            if attempt < max_retries:
                wait = self.retry_policy.delay(resp.headers.get("Retry-After"), attempt)
                logger.warning(
                    f"Rate limited (retry {attempt + 1}/{max_retries}); waiting {wait:.1f}s"
                )
                self._sleep(wait)

        raise RateLimitExhausted(f"Still rate limited after {max_retries} retries", status_code=429)

    def _parse_response(self, resp: requests.Response) -> dict:
        if not resp.ok:
            raise FetchError(
                f"Lifelog request failed ({resp.status_code}): {resp.text[:200]}",
                status_code=resp.status_code,
            )

        try:
            data = resp.json()
        except ValueError as e:
            raise FetchError("Invalid response format: body is not JSON") from e

        if not isinstance(data, dict):
            raise FetchError("Invalid response format: expected a JSON object")
        return data

    def fetch_day_raw(self, target_date: date) -> list[dict]:
        """Fetch raw lifelog objects for a date, following pagination cursors."""
        params = {
            "date": target_date.isoformat(),
            "timezone": self.timezone,
            "includeMarkdown": "true",
            "includeHeadings": "true",
            "direction": "asc",
            "limit": str(self.page_size),
        }

        lifelogs: list[dict] = []
        page = 0
        while True:
            data = self._api_request(params)
            page += 1

            batch = _field(_field(data, "data", dict), "lifelogs", list)
            lifelogs.extend(lg for lg in batch if isinstance(lg, dict))

            cursor = _field(_field(_field(data, "meta", dict), "lifelogs", dict), "nextCursor", str)
            logger.debug(f"{target_date}: page {page} had {len(batch)} lifelogs, next cursor {cursor!r}")
            if not cursor:
                break
            params["cursor"] = cursor

        logger.info(f"Fetched {len(lifelogs)} lifelogs for {target_date} in {page} page(s)")
        return lifelogs

    def fetch_day(self, target_date: date) -> list[LogRecord]:
        """Fetch every lifelog for a date, in chronological order."""
        return [LogRecord.from_api(lg) for lg in self.fetch_day_raw(target_date)]
