"""Supabase (PostgREST) connector for the organizations table."""

import logging
import time
from typing import Any, Dict, List, Optional, Sequence

import requests

from .base import BaseConnector, ConnectorError

logger = logging.getLogger(__name__)

RETRYABLE_STATUS = {429, 500, 502, 503, 504}


class SupabaseConnector(BaseConnector):
    """Reads the organizations table through the Supabase REST API."""

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str] = None,
        table: str = "organizations",
        timeout: float = 30.0,
        max_retries: int = 3,
        retry_delays: Sequence[float] = (1, 3, 10),
    ) -> None:
        """Initialize the connector.

        Args:
            base_url: Project URL, e.g. "https://<project>.supabase.co"
            api_key: Anonymous (or service) API key
            table: Table holding the organization rows
            timeout: Request timeout in seconds
            max_retries: Retry attempts after the first failed request
            retry_delays: Seconds to wait before each retry; the last value
                is reused when there are more retries than delays
        """
        if not base_url:
            raise ValueError("Supabase base URL is required")
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.table = table
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_delays = list(retry_delays) or [0]
        self.session = requests.Session()

        headers = {
            "Accept": "application/json",
            "User-Agent": "org-directory/1.0",
        }
        if self.api_key:
            headers["apikey"] = self.api_key
            headers["Authorization"] = f"Bearer {self.api_key}"
        self.session.headers.update(headers)

    @property
    def url(self) -> str:
        return f"{self.base_url}/rest/v1/{self.table}"

    def fetch_raw(self) -> List[Dict[str, Any]]:
        last_exception: Optional[Exception] = None

        for attempt in range(self.max_retries + 1):
            attempt_info = f"attempt {attempt + 1}/{self.max_retries + 1}"
            try:
                response = self.session.get(self.url, params={"select": "*"}, timeout=self.timeout)
            except requests.RequestException as exc:
                last_exception = exc
                logger.warning("Supabase request error on %s: %s: %s", attempt_info, type(exc).__name__, exc)
            else:
                if response.status_code == 200:
                    return self._parse_rows(response)

                last_exception = ConnectorError(
                    f"Supabase error (HTTP {response.status_code}): {response.text}"
                )
                if response.status_code not in RETRYABLE_STATUS:
                    logger.error("Supabase non-retryable error: %s", last_exception)
                    break
                logger.warning("Supabase service error on %s: %s", attempt_info, last_exception)

            if attempt < self.max_retries:
                wait_time = self.retry_delays[min(attempt, len(self.retry_delays) - 1)]
                logger.info("Retrying Supabase request in %s seconds...", wait_time)
                time.sleep(wait_time)
            else:
                logger.error("All %d Supabase attempts failed", self.max_retries + 1)

        if isinstance(last_exception, ConnectorError):
            raise last_exception
        raise ConnectorError(f"Could not fetch {self.table}: {last_exception}") from last_exception

    def _parse_rows(self, response: requests.Response) -> List[Dict[str, Any]]:
        try:
            payload = response.json()
        except ValueError as exc:
            raise ConnectorError(f"Supabase returned invalid JSON: {exc}") from exc
        if not isinstance(payload, list):
            raise ConnectorError("Unexpected Supabase response structure: expected a list of rows")
        logger.debug("Fetched %d rows from %s", len(payload), self.table)
        return payload
