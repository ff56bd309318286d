"""Read Jira timesheet CSV exports."""

import csv
import logging
import sys
from typing import Iterable, TextIO

from pydantic import ValidationError

from clockify_transfer.errors import MalformedInput
from clockify_transfer.timesheet.models import COLUMNS, WorkRecord

logger = logging.getLogger(__name__)

STDIN = "-"


def read_records(source: str) -> list[WorkRecord]:
    """Read every record from a timesheet CSV.

    Args:
        source: Path to the CSV export, or '-' to read standard input.

    Returns:
        Records in input order.

    Raises:
        MalformedInput: If the source cannot be opened, a column is missing,
            or any row fails to parse. No records are returned in that case.
    """
    if source == STDIN:
        records = parse_records(sys.stdin, source)
    else:
        try:
            with open(source, newline="", encoding="utf-8-sig") as f:
                records = parse_records(f, source)
        except OSError as e:
            raise MalformedInput(source, e.strerror or str(e)) from e

    logger.info(f"Read {len(records)} records from {source}")
    return records


def parse_records(stream: TextIO | Iterable[str], source: str) -> list[WorkRecord]:
    """Parse records from an open text stream."""
    reader = csv.DictReader(stream)
    missing = [column for column in COLUMNS if column not in (reader.fieldnames or [])]
    if missing:
        raise MalformedInput(source, f"missing columns: {', '.join(missing)}")

    records: list[WorkRecord] = []
    for row_number, row in enumerate(reader, 1):
        try:
            values = {column: row.get(column) for column in COLUMNS}
            records.append(WorkRecord.model_validate(values))
        except ValidationError as e:
            error = e.errors()[0]
            column = str(error["loc"][0]) if error["loc"] else None
            raise MalformedInput(source, error["msg"], row=row_number, column=column) from e
    return records
