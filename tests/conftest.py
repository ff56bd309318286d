"""Pytest configuration and fixtures."""

import tempfile
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import MagicMock

import httpx
import pytest

from clockify_transfer.clockify import ClockifyClient, ClockifyProject
from clockify_transfer.config import ProjectRef, TransferConfig
from clockify_transfer.timesheet import WorkRecord

SAMPLE_CSV = (
    "Issue Key,Issue summary,Hours,Work date,Project Key,Work Description\n"
    "PROJ-1,Fix bug,2.5,2024-01-01 09:00,PROJ,fixed it\n"
    'PROJ-2,"Review, part 2",0.25,2024-01-02 14:30,PROJ,"reviewed ""edge"" cases"\n'
    "OTHER-7,Planning,1,2024-01-03 08:15,OTHER,sprint planning\n"
)


@pytest.fixture
def temp_config_dir() -> Path:
    """Create a temporary configuration directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_csv_file(temp_config_dir: Path) -> Path:
    """Write a sample timesheet export."""
    path = temp_config_dir / "timesheet.csv"
    path.write_text(SAMPLE_CSV)
    return path


@pytest.fixture
def sample_record() -> WorkRecord:
    """Create a sample work record."""
    return WorkRecord(
        issue_key="PROJ-1",
        issue_summary="Fix bug",
        hours=2.5,
        work_date=datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc),
        project_key="PROJ",
        work_description="fixed it",
    )


def make_record(issue_key: str, project_key: str, hours: float = 1.0) -> WorkRecord:
    """Create a work record with defaults for the fields a test does not care about."""
    return WorkRecord(
        issue_key=issue_key,
        issue_summary=f"Summary of {issue_key}",
        hours=hours,
        work_date=datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc),
        project_key=project_key,
        work_description=f"work on {issue_key}",
    )


@pytest.fixture
def sample_config() -> TransferConfig:
    """Create a config with one ID mapping and one name mapping."""
    return TransferConfig(
        api_key="test_api_key",
        workspace_id="ws_123",
        project_map={
            "PROJ": ProjectRef.direct("id-123"),
            "OTHER": ProjectRef.named("Other Project"),
        },
    )


@pytest.fixture
def sample_clockify_projects() -> list[ClockifyProject]:
    """Projects returned by the workspace listing."""
    return [
        ClockifyProject(id="id-456", name="Other Project", workspaceId="ws_123"),
        ClockifyProject(id="id-789", name="other project", workspaceId="ws_123"),
    ]


@pytest.fixture
def mock_client(sample_clockify_projects: list[ClockifyProject]) -> MagicMock:
    """Create a mock ClockifyClient that accepts every time entry."""
    client = MagicMock(spec=ClockifyClient)
    client.list_projects.return_value = sample_clockify_projects
    client.create_time_entry.return_value = httpx.Response(201, json={"id": "entry_1"})
    return client
