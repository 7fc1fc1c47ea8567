"""Tree source that fetches the hierarchy over HTTP.

Works with any endpoint that returns the JSON dump format described in
finder.sources.parsing, either bare or wrapped as ``{"value": ...}`` the
way WebDriver-style servers answer.
"""

from __future__ import annotations

import logging
import time

import httpx

from finder.models import TreeSourceError
from finder.sources import BaseTreeSource

logger = logging.getLogger("element-finder.sources")

HTTP_TIMEOUT = 10.0  # seconds per request


class HttpTreeSource(BaseTreeSource):
    """Fetches a JSON hierarchy dump with a GET request."""

    def __init__(
        self,
        url: str,
        timeout: float = HTTP_TIMEOUT,
        headers: dict[str, str] | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        super().__init__(source_id=url, source_type="http")
        self.url = url
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout, headers=headers)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpTreeSource:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def fetch(self) -> dict | list[dict]:
        start = time.perf_counter()
        try:
            resp = self._client.get(self.url)
        except httpx.HTTPError as e:
            raise TreeSourceError(f"Cannot fetch hierarchy from {self.url}: {e}") from e

        logger.debug(
            f"[PERF] GET {self.url}: {resp.status_code} in {(time.perf_counter()-start)*1000:.1f}ms"
        )
        if resp.status_code != 200:
            raise TreeSourceError(
                f"Hierarchy endpoint {self.url} returned HTTP {resp.status_code}: {resp.text[:200]}"
            )

        try:
            data = resp.json()
        except ValueError as e:
            raise TreeSourceError(f"Hierarchy endpoint {self.url} returned invalid JSON") from e

        if isinstance(data, dict) and set(data) <= {"value", "sessionId", "status"} and "value" in data:
            data = data["value"]
        return data
