"""Transfer pipeline: resolve, build, submit."""

from clockify_transfer.config import ProjectRef
from clockify_transfer.transfer.builder import DEFAULT_START_OFFSET_HOURS, build_time_entry
from clockify_transfer.transfer.engine import RowReport, TransferEngine, TransferOutcome, TransferResult
from clockify_transfer.transfer.resolver import ProjectResolver

__all__ = [
    "DEFAULT_START_OFFSET_HOURS",
    "ProjectRef",
    "ProjectResolver",
    "RowReport",
    "TransferEngine",
    "TransferOutcome",
    "TransferResult",
    "build_time_entry",
]
