"""Data models for the matrix generator.

A run produces a list of `JobDescriptor` rows (the JobConfig) that a downstream
build matrix consumes one row per job. `MatrixConfig` carries the process inputs
explicitly so the crawl never reads global state.

This file uses Pydantic v2.
"""

from __future__ import annotations

import json
from typing import Any, FrozenSet, Iterable, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigurationError
from .utils import join_url, split_csv

DEFAULT_BASE_URL = "https://downloads.openwrt.org"

SelectionMode = Literal["automatic", "manual", "mixed"]


class PackageMetadata(BaseModel):
    """Identifying fields scraped from a subtarget's package listing.

    Either field may be empty when no heuristic matched.
    """

    vermagic: str = ""
    pkgarch: str = ""

    @property
    def is_complete(self) -> bool:
        return bool(self.vermagic and self.pkgarch)


class JobDescriptor(BaseModel):
    """One build matrix row."""

    model_config = ConfigDict(frozen=True)

    tag: str = Field(..., description="Release version, identical for every row of a run.")
    target: str
    subtarget: str
    vermagic: str = ""
    pkgarch: str = ""


class MatrixConfig(BaseModel):
    """Inputs for a single crawl."""

    model_config = ConfigDict(frozen=True)

    version: str = Field(..., min_length=1, description="Release version, e.g. '24.10.0'.")
    target_filter: FrozenSet[str] = Field(default_factory=frozenset)
    subtarget_filter: FrozenSet[str] = Field(default_factory=frozenset)
    base_url: str = DEFAULT_BASE_URL
    timeout_s: float = Field(default=20.0, gt=0)

    @field_validator("version", mode="before")
    @classmethod
    def _strip_version(cls, v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v

    @field_validator("target_filter", "subtarget_filter", mode="before")
    @classmethod
    def _parse_filter(cls, v: Any) -> FrozenSet[str]:
        return split_csv(v)

    @field_validator("base_url")
    @classmethod
    def _strip_base_url(cls, v: str) -> str:
        return v.rstrip("/")

    @classmethod
    def from_inputs(
        cls,
        version: Optional[str],
        targets: Optional[Union[str, Iterable[str]]] = None,
        subtargets: Optional[Union[str, Iterable[str]]] = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout_s: float = 20.0,
    ) -> "MatrixConfig":
        """Build a config from raw process inputs.

        Raises ConfigurationError when the version is missing or blank, or when
        any other input fails validation.
        """
        if not (version or "").strip():
            raise ConfigurationError("Version argument is required")
        try:
            return cls(
                version=version,
                target_filter=targets,
                subtarget_filter=subtargets,
                base_url=base_url,
                timeout_s=timeout_s,
            )
        except ValidationError as exc:
            raise ConfigurationError(str(exc)) from exc

    @property
    def targets_url(self) -> str:
        return join_url(self.base_url, "releases", self.version, "targets")

    def target_url(self, target: str) -> str:
        return join_url(self.targets_url, target)

    def packages_url(self, target: str, subtarget: str) -> str:
        return join_url(self.targets_url, target, subtarget, "packages")


def dump_job_config(jobs: Iterable[JobDescriptor]) -> str:
    """Serialize the JobConfig as compact single-line JSON."""
    return json.dumps([j.model_dump(mode="json") for j in jobs], separators=(",", ":"), ensure_ascii=False)
