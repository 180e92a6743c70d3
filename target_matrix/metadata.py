"""Package-listing heuristics.

Derives `vermagic` and `pkgarch` for a subtarget from its `packages/` page.
The page layout has changed between releases, so three signals are tried in
order of trust:
- the "Packages for architecture: ..." line in the page text (pkgarch)
- kernel package file names, `kernel-<ver>~<hash>[-rN][_<arch>].apk` (vermagic, pkgarch)
- the link to the base package feed, `.../packages/<arch>/base` (pkgarch)

A field set by an earlier tier is never overwritten by a later one. Fields that
no tier can resolve stay empty; that is logged, not raised.
"""

from __future__ import annotations

import logging
import re
from typing import Optional, Tuple

from bs4 import BeautifulSoup

from .fetcher import PageFetcher
from .models import MatrixConfig, PackageMetadata

logger = logging.getLogger(__name__)

ARCH_LABEL_RE = re.compile(r"Packages for architecture:\s+([a-zA-Z0-9_-]+)", flags=re.IGNORECASE)

KERNEL_PREFIX = "kernel-"
KERNEL_FILE_RE = re.compile(r"kernel-.*?~([a-f0-9]+)(?:-r\d+)?(?:_|-)?(.*?)\.(?:apk|ipk)$")

BASE_FEED_TEXT = "base"
PACKAGES_SEGMENT = "packages"


def arch_from_page_text(page: BeautifulSoup) -> Optional[str]:
    """Return the architecture named in the page text, if any."""
    root = page.body or page
    m = ARCH_LABEL_RE.search(root.get_text(" "))
    return m.group(1) if m else None


def parse_kernel_filename(name: str) -> Optional[Tuple[str, str]]:
    """Split a kernel package file name into (hash, trailing arch token).

    The arch token is empty when the file name carries none.
    """
    m = KERNEL_FILE_RE.search(name)
    if not m:
        return None
    return m.group(1), m.group(2)


def arch_from_base_link(page: BeautifulSoup) -> Optional[str]:
    """Return the arch segment of the first link labelled as the base feed."""
    link = next((a for a in page.find_all("a") if BASE_FEED_TEXT in a.get_text()), None)
    if link is None:
        return None
    href = link.get("href")
    if not isinstance(href, str):
        return None
    parts = href.split("/")
    try:
        idx = parts.index(PACKAGES_SEGMENT)
    except ValueError:
        return None
    if idx + 1 >= len(parts) or not parts[idx + 1]:
        return None
    return parts[idx + 1]


def parse_package_page(page: BeautifulSoup) -> PackageMetadata:
    """Apply the three heuristics to a parsed package listing."""
    vermagic = ""
    pkgarch = arch_from_page_text(page) or ""

    for a in page.find_all("a", href=True):
        href = a["href"]
        if not isinstance(href, str) or not href.startswith(KERNEL_PREFIX):
            continue
        parsed = parse_kernel_filename(href)
        if parsed is None:
            continue
        kernel_hash, arch = parsed
        if not vermagic:
            vermagic = kernel_hash
        if not pkgarch and arch:
            pkgarch = arch
        if vermagic and pkgarch:
            break

    if not pkgarch:
        pkgarch = arch_from_base_link(page) or ""

    return PackageMetadata(vermagic=vermagic, pkgarch=pkgarch)


def extract_metadata(fetcher: PageFetcher, config: MatrixConfig, target: str, subtarget: str) -> PackageMetadata:
    """Fetch the package listing of target/subtarget and extract its metadata.

    FetchError from the page download propagates; missing fields do not raise.
    """
    page = fetcher.fetch(config.packages_url(target, subtarget))
    meta = parse_package_page(page)
    if not meta.is_complete:
        missing = [name for name in ("vermagic", "pkgarch") if not getattr(meta, name)]
        logger.warning("No %s found for %s/%s", " or ".join(missing), target, subtarget)
    return meta
