"""Page fetcher.

Downloads a directory-index or package-listing page and returns it parsed with
BeautifulSoup. A single attempt is made per URL; every failure is reported as
`FetchError` so callers only have to handle one failure kind.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx
from bs4 import BeautifulSoup

from .errors import FetchError

logger = logging.getLogger(__name__)

USER_AGENT = "target-matrix/0.1"


class PageFetcher:
    """Fetch HTML pages over HTTP and parse them."""

    def __init__(self, timeout_s: float = 20.0, client: Optional[httpx.Client] = None) -> None:
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=timeout_s,
            follow_redirects=True,
            headers={"User-Agent": USER_AGENT},
        )

    def fetch(self, url: str) -> BeautifulSoup:
        """Return the parsed document at `url`.

        Raises:
            FetchError: on an invalid URL, transport failure or a non-2xx status.
        """
        logger.debug("GET %s", url)
        try:
            resp = self._client.get(url)
            resp.raise_for_status()
            html = resp.text
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.error("Error fetching HTML for %s: %s", url, exc)
            raise FetchError(url, exc) from exc
        return BeautifulSoup(html, "html.parser")

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "PageFetcher":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
