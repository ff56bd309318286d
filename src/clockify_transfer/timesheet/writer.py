"""Write unprocessed records back out as a timesheet CSV."""

import csv
import logging
import sys
from typing import Iterable, TextIO

from clockify_transfer.errors import WriteError
from clockify_transfer.timesheet.models import COLUMNS, WorkRecord
from clockify_transfer.timesheet.reader import STDIN

logger = logging.getLogger(__name__)

UNPROCESSED_SUFFIX = "-unprocessed-issues"


def unprocessed_target(source: str) -> str:
    """Name of the unprocessed issues file for an input source.

    Input read from standard input is written back to standard error ('-').
    """
    if source == STDIN:
        return STDIN
    return f"{source}{UNPROCESSED_SUFFIX}"


def write_records(target: str, records: Iterable[WorkRecord]) -> None:
    """Write records in the same schema the reader accepts.

    Args:
        target: Output path, or '-' for standard error.
        records: Records to write.

    Raises:
        WriteError: If the file cannot be written.
    """
    records = list(records)
    if target == STDIN:
        dump_records(sys.stderr, records)
    else:
        try:
            with open(target, "w", newline="", encoding="utf-8") as f:
                dump_records(f, records)
        except OSError as e:
            raise WriteError(target, e.strerror or str(e)) from e

    logger.info(f"Wrote {len(records)} unprocessed records to {target}")


def dump_records(stream: TextIO, records: Iterable[WorkRecord]) -> None:
    """Serialize records as CSV to an open text stream."""
    writer = csv.DictWriter(stream, fieldnames=COLUMNS)
    writer.writeheader()
    for record in records:
        writer.writerow(record.to_row())
