"""CLI entry point.

This script crawls a release's target tree and publishes the build matrix as the
`job-config` step output.

Examples:
    python run_matrix.py 24.10.0
    python run_matrix.py 24.10.0 mediatek,ramips filogic,mt7621
    python run_matrix.py 24.10.0 --out matrix.json -v

Positional filters are comma-separated. Give both or neither: with only one of
them, no jobs are selected.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from target_matrix.actions import set_failed, set_output
from target_matrix.assembler import build_job_config
from target_matrix.errors import MatrixError
from target_matrix.models import DEFAULT_BASE_URL, MatrixConfig, dump_job_config

logger = logging.getLogger("target_matrix")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate a build job matrix from a release's targets.")
    p.add_argument("version", nargs="?", default=None, help="Release version, e.g. 24.10.0.")
    p.add_argument("targets", nargs="?", default="", help="Comma-separated target filter (optional).")
    p.add_argument("subtargets", nargs="?", default="", help="Comma-separated subtarget filter (optional).")
    p.add_argument("--base-url", type=str, default=DEFAULT_BASE_URL, help="Download server root.")
    p.add_argument("--timeout", type=float, default=20.0, help="Per-request timeout in seconds.")
    p.add_argument("--out", type=str, default=None, help="Also write the JSON list to this file.")
    p.add_argument("--output-name", type=str, default="job-config", help="Step output name.")
    p.add_argument("-v", "--verbose", action="store_true", help="Log every request.")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    # stdout carries workflow commands, so logs go to stderr.
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = MatrixConfig.from_inputs(
            args.version,
            args.targets,
            args.subtargets,
            base_url=args.base_url,
            timeout_s=args.timeout,
        )
        jobs = build_job_config(config)
    except MatrixError as exc:
        logger.error("%s", exc)
        return set_failed(str(exc))
    except Exception as exc:
        logger.exception("Unexpected failure")
        return set_failed(str(exc) or type(exc).__name__)

    data = dump_job_config(jobs)
    if args.out:
        out_path = Path(args.out).expanduser().resolve()
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(data, encoding="utf-8")
        logger.info("Wrote %d jobs to: %s", len(jobs), out_path)

    set_output(args.output_name, data)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
