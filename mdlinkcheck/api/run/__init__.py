"""Per-target runs and the batch loop."""

from .read_document import read_document
from .report_results import report_results
from .run_batch import run_batch
from .run_target import run_target

__all__ = ["read_document", "report_results", "run_batch", "run_target"]
