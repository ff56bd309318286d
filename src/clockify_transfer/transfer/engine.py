"""Transfer engine for submitting timesheet records to Clockify."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

import httpx

from clockify_transfer.clockify.models import ClockifyProject, TimeEntry
from clockify_transfer.config import TransferConfig
from clockify_transfer.errors import ClockifyError, InvalidDuration, RecordSkipped
from clockify_transfer.timesheet.models import WorkRecord
from clockify_transfer.transfer.builder import build_time_entry
from clockify_transfer.transfer.resolver import ProjectResolver

logger = logging.getLogger(__name__)

DRY_RUN_MESSAGE = "dry run"
SUCCESS_MESSAGE = "success"
ERROR_MESSAGE = "error"


class TimeEntryClient(Protocol):
    def list_projects(self, workspace_id: str) -> list[ClockifyProject]: ...

    def create_time_entry(self, workspace_id: str, entry: TimeEntry) -> httpx.Response: ...


class TransferOutcome(str, Enum):
    """Terminal state of a single record."""

    SKIPPED = "skipped"
    DRY_RUN = "dry_run"
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class RowReport:
    """The progress line for one record."""

    record: WorkRecord
    outcome: TransferOutcome
    message: str
    entry: TimeEntry | None = None

    @property
    def columns(self) -> tuple[str, str, str, str]:
        """Record identification shown before the outcome."""
        record = self.record
        return (
            record.issue_key,
            f"// {record.issue_summary}",
            record.work_description,
            f"{record.hours:g}h",
        )

    def __str__(self) -> str:
        return "\t ".join(self.columns) + f"\t ... {self.message}"


@dataclass
class TransferResult:
    """Results from a transfer pass."""

    records: list[WorkRecord] = field(default_factory=list)
    reports: list[RowReport] = field(default_factory=list)
    failed: list[WorkRecord] = field(default_factory=list)

    def count(self, outcome: TransferOutcome) -> int:
        return sum(1 for report in self.reports if report.outcome is outcome)

    @property
    def has_failures(self) -> bool:
        return bool(self.failed)

    def unprocessed(self, failed_only: bool = False) -> list[WorkRecord]:
        """Records to write for a later retry run.

        By default the whole input set is returned as soon as any record
        failed; ``failed_only`` narrows it to the failed records.

        Returns:
            Records to write, empty if nothing failed.
        """
        if not self.failed:
            return []
        if failed_only:
            return list(self.failed)
        return list(self.records)

    def __str__(self) -> str:
        return (
            f"Succeeded: {self.count(TransferOutcome.SUCCESS)}, "
            f"Dry run: {self.count(TransferOutcome.DRY_RUN)}, "
            f"Skipped: {self.count(TransferOutcome.SKIPPED)}, "
            f"Failed: {self.count(TransferOutcome.FAILURE)}"
        )


class TransferEngine:
    """Drives one pass over the timesheet records."""

    def __init__(self, config: TransferConfig, client: TimeEntryClient) -> None:
        """Initialize transfer engine.

        Args:
            config: Application configuration.
            client: Clockify API client.
        """
        self.config = config
        self.client = client
        self.resolver = ProjectResolver(config.project_map, client, config.workspace_id)

    def run(self, records: list[WorkRecord], dry_run: bool = False) -> TransferResult:
        """Transfer records to Clockify, one at a time, in input order.

        Args:
            records: Records read from the timesheet.
            dry_run: If True, resolve and build entries but submit nothing.

        Returns:
            One report per record plus the failed records.
        """
        result = TransferResult(records=list(records))
        mode = "dry run" if dry_run else "transfer"
        logger.info(f"Starting {mode} of {len(records)} records")

        for record in records:
            report = self.process_record(record, dry_run=dry_run)
            result.reports.append(report)
            logger.info(f"{report}")
            if report.outcome is TransferOutcome.FAILURE:
                result.failed.append(record)

        logger.info(f"Transfer complete: {result}")
        return result

    def process_record(self, record: WorkRecord, dry_run: bool = False) -> RowReport:
        """Take a single record to its terminal outcome."""
        try:
            project_id = self.resolver.resolve(record.project_key)
        except RecordSkipped as e:
            logger.warning(f"{record.issue_key}: {e}")
            return RowReport(record, TransferOutcome.SKIPPED, str(e))
        except ClockifyError as e:
            logger.error(f"{record.issue_key}: project lookup failed: {e}")
            return RowReport(record, TransferOutcome.FAILURE, ERROR_MESSAGE)

        try:
            entry = build_time_entry(
                project_id=project_id,
                start=record.work_date,
                hours=record.hours,
                description=record.entry_description,
                start_offset_hours=self.config.start_offset_hours,
            )
        except InvalidDuration as e:
            logger.error(f"{record.issue_key}: {e}")
            return RowReport(record, TransferOutcome.FAILURE, ERROR_MESSAGE)

        if dry_run:
            logger.debug(f"[DRY RUN] Would create entry: {entry.to_api_dict()}")
            return RowReport(record, TransferOutcome.DRY_RUN, DRY_RUN_MESSAGE, entry)

        try:
            response = self.client.create_time_entry(self.config.workspace_id, entry)
        except ClockifyError as e:
            logger.error(f"Failed to create time entry for {record.issue_key}: {e}")
            return RowReport(record, TransferOutcome.FAILURE, ERROR_MESSAGE, entry)

        logger.debug(f"Created time entry for {record.issue_key} ({response.status_code})")
        return RowReport(record, TransferOutcome.SUCCESS, SUCCESS_MESSAGE, entry)
