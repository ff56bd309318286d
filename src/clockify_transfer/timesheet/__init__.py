"""Jira timesheet CSV records."""

from clockify_transfer.timesheet.models import COLUMNS, WORK_DATE_FORMAT, WorkRecord
from clockify_transfer.timesheet.reader import read_records
from clockify_transfer.timesheet.writer import unprocessed_target, write_records

__all__ = [
    "COLUMNS",
    "WORK_DATE_FORMAT",
    "WorkRecord",
    "read_records",
    "unprocessed_target",
    "write_records",
]
