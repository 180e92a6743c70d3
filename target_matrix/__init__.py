"""Release target matrix package.

The package is structured the same way end to end:
- `models.py` defines the job schema handed to the build matrix.
- `fetcher.py` and `listing.py` walk the release directory tree.
- `metadata.py` contains the vermagic/pkgarch heuristics.
- `filters.py` decides which (target, subtarget) pairs become jobs.
- `assembler.py` ties it together; `actions.py` and the root `run_matrix.py` script are the host boundary.
"""

from .assembler import build_job_config
from .errors import ConfigurationError, FetchError, MatrixError
from .models import JobDescriptor, MatrixConfig, PackageMetadata, dump_job_config

__all__ = [
    "ConfigurationError",
    "FetchError",
    "JobDescriptor",
    "MatrixConfig",
    "MatrixError",
    "PackageMetadata",
    "build_job_config",
    "dump_job_config",
]
