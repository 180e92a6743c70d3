"""Utility helpers shared across the package."""

from __future__ import annotations

from typing import FrozenSet, Iterable, Optional, Union


def split_csv(value: Optional[Union[str, Iterable[str]]]) -> FrozenSet[str]:
    """Split a comma-separated string into a set of trimmed, non-empty names.

    Iterables are accepted too, so already-split values pass through unchanged
    apart from trimming.
    """
    if value is None:
        return frozenset()
    parts = value.split(",") if isinstance(value, str) else value
    return frozenset(p.strip() for p in parts if p and p.strip())


def join_url(base: str, *segments: str) -> str:
    """Join path segments onto a base URL, always ending with a slash."""
    path = "/".join(s.strip("/") for s in segments if s)
    return f"{base.rstrip('/')}/{path}/" if path else f"{base.rstrip('/')}/"
