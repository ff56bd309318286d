"""Exceptions raised by the transfer pipeline."""


class TransferError(Exception):
    """Base class for all clockify-transfer errors."""


class ConfigError(TransferError):
    """Configuration file is missing or invalid."""

    def __init__(self, path: object, reason: str) -> None:
        super().__init__(f"Invalid configuration {path}: {reason}")
        self.path = path
        self.reason = reason


class MalformedInput(TransferError):
    """The input timesheet could not be parsed.

    Args:
        source: Input path, or '-' for standard input.
        reason: Human readable description of the problem.
        row: 1-based data row number, if the problem is tied to a row.
        column: CSV column name, if the problem is tied to a column.
    """

    def __init__(
        self,
        source: str,
        reason: str,
        row: int | None = None,
        column: str | None = None,
    ) -> None:
        location = ""
        if row is not None:
            location = f" at row {row}"
            if column is not None:
                location += f", column '{column}'"
        super().__init__(f"Malformed input {_source_name(source)}{location}: {reason}")
        self.source = source
        self.reason = reason
        self.row = row
        self.column = column


class WriteError(TransferError):
    """The unprocessed issues file could not be written."""

    def __init__(self, target: str, reason: str) -> None:
        name = "<stderr>" if target == "-" else target
        super().__init__(f"Could not write {name}: {reason}")
        self.target = target
        self.reason = reason


class InvalidDuration(TransferError):
    """Hours could not be converted to a time span."""

    def __init__(self, hours: float) -> None:
        super().__init__(f"Invalid duration: {hours}h")
        self.hours = hours


class RecordSkipped(TransferError):
    """A record cannot be mapped to a Clockify project and is skipped."""


class ProjectUnmapped(RecordSkipped):
    """The record's project key has no entry in the project map."""

    def __init__(self, project_key: str) -> None:
        super().__init__(f"Could not map project: {project_key}; skipped.")
        self.project_key = project_key


class ProjectNotFoundRemotely(RecordSkipped):
    """The mapped project name does not exist in the Clockify workspace."""

    def __init__(self, project_key: str, project_name: str) -> None:
        super().__init__(
            f'Could not find Clockify project "{project_name}" for {project_key}; skipped.'
        )
        self.project_key = project_key
        self.project_name = project_name


class ClockifyError(TransferError):
    """A Clockify API call failed."""


class TransportError(ClockifyError):
    """The request never got a response (network failure)."""


class RemoteError(ClockifyError):
    """Clockify answered with a non-2xx status."""

    def __init__(self, status_code: int, message: str = "") -> None:
        detail = f": {message}" if message else ""
        super().__init__(f"Clockify returned HTTP {status_code}{detail}")
        self.status_code = status_code


def _source_name(source: str) -> str:
    return "<stdin>" if source == "-" else source
