"""Pydantic model for a Jira timesheet export row."""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

WORK_DATE_FORMAT = "%Y-%m-%d %H:%M"

COLUMNS = [
    "Issue Key",
    "Issue summary",
    "Hours",
    "Work date",
    "Project Key",
    "Work Description",
]


class WorkRecord(BaseModel):
    """One row of the timesheet export.

    Work dates carry no timezone in the export; they are tagged as UTC here
    and shifted by the configured start offset when the time entry is built.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    issue_key: str = Field(alias="Issue Key")
    issue_summary: str = Field(alias="Issue summary")
    hours: float = Field(alias="Hours", ge=0)
    work_date: datetime = Field(alias="Work date")
    project_key: str = Field(alias="Project Key")
    work_description: str = Field(alias="Work Description")

    @field_validator("work_date", mode="before")
    @classmethod
    def _parse_work_date(cls, value: Any) -> Any:
        if isinstance(value, str):
            return datetime.strptime(value.strip(), WORK_DATE_FORMAT).replace(tzinfo=timezone.utc)
        if isinstance(value, datetime) and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @property
    def entry_description(self) -> str:
        """Description used for the Clockify time entry."""
        return f"{self.issue_key}: {self.work_description}"

    def to_row(self) -> dict[str, str]:
        """Convert back to a CSV row keyed by column name."""
        return {
            "Issue Key": self.issue_key,
            "Issue summary": self.issue_summary,
            "Hours": repr(self.hours),
            "Work date": self.work_date.strftime(WORK_DATE_FORMAT),
            "Project Key": self.project_key,
            "Work Description": self.work_description,
        }
