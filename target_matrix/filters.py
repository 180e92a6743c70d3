"""Target/subtarget selection.

Two filter sets drive selection:
- automatic mode: both empty, every pair is built (tag-triggered runs)
- manual mode: both non-empty, only pairs named in both sets are built
- mixed mode: only one set given, nothing is built
"""

from __future__ import annotations

from typing import AbstractSet

from .models import SelectionMode


def selection_mode(target_filter: AbstractSet[str], subtarget_filter: AbstractSet[str]) -> SelectionMode:
    if not target_filter and not subtarget_filter:
        return "automatic"
    if target_filter and subtarget_filter:
        return "manual"
    return "mixed"


def include_target(target: str, target_filter: AbstractSet[str]) -> bool:
    """Whether subtargets of `target` should be enumerated at all."""
    return not target_filter or target in target_filter


def include_subtarget(
    target: str,
    subtarget: str,
    target_filter: AbstractSet[str],
    subtarget_filter: AbstractSet[str],
) -> bool:
    """Whether the (target, subtarget) pair becomes a job."""
    mode = selection_mode(target_filter, subtarget_filter)
    if mode == "automatic":
        return True
    if mode == "manual":
        return target in target_filter and subtarget in subtarget_filter
    return False
