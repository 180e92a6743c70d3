"""Exceptions raised by the matrix generator.

Missing metadata is not an error: the extractor returns empty fields instead.
"""

from __future__ import annotations


class MatrixError(Exception):
    """Base class for failures that abort a run."""


class ConfigurationError(MatrixError):
    """Required input is missing or unusable."""


class FetchError(MatrixError):
    """A directory or package page could not be loaded."""

    def __init__(self, url: str, cause: BaseException) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"Error fetching HTML for {url}: {cause}")
