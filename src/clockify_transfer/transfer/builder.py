"""Build Clockify time entries from work records."""

from datetime import datetime, timedelta

from clockify_transfer.clockify.models import TimeEntry
from clockify_transfer.errors import InvalidDuration

# Jira exports naive local times while Clockify expects UTC instants.
DEFAULT_START_OFFSET_HOURS = 4.0


def build_time_entry(
    project_id: str,
    start: datetime,
    hours: float,
    description: str,
    start_offset_hours: float = DEFAULT_START_OFFSET_HOURS,
) -> TimeEntry:
    """Build a time entry spanning ``hours`` from the shifted start.

    Args:
        project_id: Clockify project ID.
        start: Work date from the record.
        hours: Duration in hours, fractional hours kept to the microsecond.
        description: Time entry description.
        start_offset_hours: Compensating shift applied to ``start``.

    Returns:
        The time entry.

    Raises:
        InvalidDuration: If the span cannot be represented.
    """
    try:
        shifted = start + timedelta(hours=start_offset_hours)
        end = shifted + timedelta(hours=hours)
    except (OverflowError, ValueError) as e:
        raise InvalidDuration(hours) from e

    return TimeEntry(
        start=shifted,
        end=end,
        project_id=project_id,
        description=description,
    )
