"""mdlinkcheck API: data model shared by input resolution, config and runs.

Subpackages:
    input   - CLI arguments to targets
    config  - JSON config file and option merging
    checker - link checker boundary and backends
    run     - per-target runs, reporting and the batch loop
"""

from .BatchResult import BatchResult
from .GlobalFlags import GlobalFlags
from .LinkResult import LinkResult
from .LinkStatus import LinkStatus
from .OptionsBag import OptionsBag
from .RunOutcome import RunOutcome
from .SourceKind import SourceKind
from .Target import Target

__all__ = [
    "BatchResult",
    "GlobalFlags",
    "LinkResult",
    "LinkStatus",
    "OptionsBag",
    "RunOutcome",
    "SourceKind",
    "Target",
]
