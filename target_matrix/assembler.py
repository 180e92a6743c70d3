"""Job assembly.

Walks targets, then each selected target's subtargets, and builds one
`JobDescriptor` per selected pair in listing order. Fetches are sequential;
any `FetchError` aborts the whole crawl so a partial matrix is never returned.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .fetcher import PageFetcher
from .filters import include_subtarget, include_target, selection_mode
from .listing import fetch_subdirectories
from .metadata import extract_metadata
from .models import JobDescriptor, MatrixConfig

logger = logging.getLogger(__name__)


def build_job_config(config: MatrixConfig, fetcher: Optional[PageFetcher] = None) -> List[JobDescriptor]:
    """Crawl the release tree described by `config` and return the JobConfig.

    Args:
        config: Release version, filters and base URL.
        fetcher: Optional fetcher to reuse; one is created (and closed) otherwise.

    Returns:
        JobDescriptor list in discovery order.
    """
    if fetcher is None:
        with PageFetcher(timeout_s=config.timeout_s) as own_fetcher:
            return build_job_config(config, own_fetcher)

    mode = selection_mode(config.target_filter, config.subtarget_filter)
    logger.info("Building job matrix for %s (%s selection)", config.version, mode)
    if mode == "mixed":
        logger.warning(
            "Only one of the target/subtarget filters was given; no jobs will be selected"
        )

    jobs: List[JobDescriptor] = []
    targets = fetch_subdirectories(fetcher, config.targets_url)
    logger.info("Found %d targets", len(targets))

    for target in targets:
        if not include_target(target, config.target_filter):
            continue

        subtargets = fetch_subdirectories(fetcher, config.target_url(target))
        for subtarget in subtargets:
            if not include_subtarget(target, subtarget, config.target_filter, config.subtarget_filter):
                continue

            meta = extract_metadata(fetcher, config, target, subtarget)
            jobs.append(
                JobDescriptor(
                    tag=config.version,
                    target=target,
                    subtarget=subtarget,
                    vermagic=meta.vermagic,
                    pkgarch=meta.pkgarch,
                )
            )
            logger.info("Added %s/%s (vermagic=%s, pkgarch=%s)", target, subtarget, meta.vermagic, meta.pkgarch)

    logger.info("Assembled %d jobs", len(jobs))
    return jobs
