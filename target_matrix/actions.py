"""GitHub Actions workflow-command helpers.

Only the two calls the generator needs: publishing a step output and failing
the step.
"""

from __future__ import annotations

import os
import uuid
from pathlib import Path


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def set_output(name: str, value: str) -> None:
    """Publish a step output.

    Appends to the file named by GITHUB_OUTPUT when it is set; falls back to
    the legacy `::set-output` command on stdout otherwise.
    """
    output_file = os.environ.get("GITHUB_OUTPUT")
    if not output_file:
        print(f"::set-output name={name}::{_escape_data(value)}")
        return

    if "\n" in value or "\r" in value:
        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        entry = f"{name}<<{delimiter}\n{value}\n{delimiter}\n"
    else:
        entry = f"{name}={value}\n"
    with Path(output_file).open("a", encoding="utf-8") as fh:
        fh.write(entry)


def set_failed(message: str) -> int:
    """Report a step failure and return the exit code to use."""
    print(f"::error::{_escape_data(message)}")
    return 1
