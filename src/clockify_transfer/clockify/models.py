"""Pydantic models for the Clockify API."""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def format_timestamp(value: datetime) -> str:
    """Format a datetime as an ISO 8601 UTC timestamp with a 'Z' suffix."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


class ClockifyWorkspace(BaseModel):
    """Clockify workspace model."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str


class ClockifyProject(BaseModel):
    """Clockify project model."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    workspace_id: str | None = Field(default=None, alias="workspaceId")
    archived: bool = False


class TimeEntry(BaseModel):
    """A time entry to be created in Clockify."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    start: datetime
    end: datetime
    project_id: str = Field(alias="projectId")
    description: str

    def to_api_dict(self) -> dict[str, Any]:
        """Convert to API-compatible dictionary.

        Returns:
            Dictionary for API submission.
        """
        return {
            "start": format_timestamp(self.start),
            "end": format_timestamp(self.end),
            "projectId": self.project_id,
            "description": self.description,
        }
