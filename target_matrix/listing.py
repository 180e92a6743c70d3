"""Directory-index parsing.

Release trees are served as index pages where each row's name cell
(`td.n`) holds a link. Sub-directories are the links ending in a slash; file
rows and the parent-directory link are skipped.
"""

from __future__ import annotations

from typing import List

from bs4 import BeautifulSoup

from .fetcher import PageFetcher

ENTRY_SELECTOR = "table tr td.n a"

# Relative self/parent links are navigation, not children.
_NAVIGATION_NAMES = {"", ".", ".."}


def list_subdirectories(page: BeautifulSoup) -> List[str]:
    """Return sub-directory names in page order, trailing slash removed."""
    out: List[str] = []
    for a in page.select(ENTRY_SELECTOR):
        href = a.get("href")
        if not isinstance(href, str) or not href.endswith("/"):
            continue
        name = href[:-1]
        if name in _NAVIGATION_NAMES:
            continue
        out.append(name)
    return out


def fetch_subdirectories(fetcher: PageFetcher, url: str) -> List[str]:
    """Fetch the index page at `url` and list its sub-directories."""
    return list_subdirectories(fetcher.fetch(url))
