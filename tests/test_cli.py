"""Tests for the command-line interface."""

import logging
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import yaml
from typer.testing import CliRunner

from clockify_transfer import __version__
from clockify_transfer.cli import app
from clockify_transfer.errors import RemoteError
from clockify_transfer.timesheet import COLUMNS, read_records

from conftest import SAMPLE_CSV

runner = CliRunner()


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop the handlers installed by the transfer command."""
    yield
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def config_file(temp_config_dir: Path) -> Path:
    """Write a config with a single ID mapping."""
    path = temp_config_dir / "config.yml"
    path.write_text(
        yaml.safe_dump(
            {
                "api_key": "test_api_key",
                "workspace_id": "ws_123",
                "project_map": {"PROJ": {"id": "id-123"}},
            }
        )
    )
    return path


@pytest.fixture
def fake_client(monkeypatch: pytest.MonkeyPatch, mock_client: MagicMock) -> MagicMock:
    """Replace the Clockify client used by the CLI."""
    factory = MagicMock()
    factory.return_value.__enter__.return_value = mock_client
    monkeypatch.setattr("clockify_transfer.cli.ClockifyClient", factory)
    return mock_client


class TestConfigCommands:
    """Test config-template, config-init and mapping."""

    def test_config_template(self) -> None:
        """Test the template is printed to stdout."""
        result = runner.invoke(app, ["config-template"])

        assert result.exit_code == 0
        assert "#api_key:" in result.stdout
        assert "#project_map: {}" in result.stdout

    def test_config_init(self, temp_config_dir: Path) -> None:
        """Test the template is written and never silently overwritten."""
        path = temp_config_dir / "config.yml"

        first = runner.invoke(app, ["config-init", "--config", str(path)])
        assert first.exit_code == 0
        assert path.exists()

        path.write_text("api_key: keep\n")
        second = runner.invoke(app, ["config-init", "--config", str(path)])
        assert second.exit_code == 1
        assert path.read_text() == "api_key: keep\n"

        forced = runner.invoke(app, ["config-init", "--config", str(path), "--force"])
        assert forced.exit_code == 0
        assert "#api_key:" in path.read_text()

    def test_mapping(self, config_file: Path) -> None:
        """Test the project map is listed."""
        result = runner.invoke(app, ["mapping", "--config", str(config_file)])

        assert result.exit_code == 0
        assert "PROJ" in result.stdout
        assert "id-123" in result.stdout

    def test_mapping_missing_config(self, temp_config_dir: Path) -> None:
        """Test a config error is printed once and recorded in the log file."""
        result = runner.invoke(app, ["mapping", "--config", str(temp_config_dir / "none.yml")])

        assert result.exit_code == 1
        assert result.stdout.count("Error: Invalid configuration") == 1
        log_text = (temp_config_dir / "clockify-transfer.log").read_text()
        assert "Invalid configuration" in log_text

    def test_version(self) -> None:
        """Test the version command."""
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert __version__ in result.stdout


class TestTransferCommand:
    """Test the transfer command."""

    def test_missing_config(self, temp_config_dir: Path, sample_csv_file: Path) -> None:
        """Test a missing config file aborts before any submission."""
        result = runner.invoke(
            app,
            ["transfer", str(sample_csv_file), "--config", str(temp_config_dir / "none.yml")],
        )

        assert result.exit_code == 1

    def test_malformed_input(self, config_file: Path, temp_config_dir: Path, fake_client: MagicMock) -> None:
        """Test a malformed CSV aborts with nothing submitted."""
        path = temp_config_dir / "bad.csv"
        path.write_text("Issue Key,Hours\nPROJ-1,1\n")

        result = runner.invoke(app, ["transfer", str(path), "--config", str(config_file)])

        assert result.exit_code == 1
        fake_client.create_time_entry.assert_not_called()

    def test_dry_run(self, config_file: Path, sample_csv_file: Path, fake_client: MagicMock) -> None:
        """Test a dry run reports every row and writes no unprocessed file."""
        result = runner.invoke(
            app, ["transfer", str(sample_csv_file), "--dry-run", "--config", str(config_file)]
        )

        assert result.exit_code == 0
        assert "DRY RUN" in result.stdout
        assert "dry run" in result.stdout
        fake_client.create_time_entry.assert_not_called()
        assert not Path(f"{sample_csv_file}-unprocessed-issues").exists()

    def test_all_succeed(self, config_file: Path, sample_csv_file: Path, fake_client: MagicMock) -> None:
        """Test no unprocessed file is written when nothing fails."""
        result = runner.invoke(app, ["transfer", str(sample_csv_file), "--config", str(config_file)])

        assert result.exit_code == 0
        assert fake_client.create_time_entry.call_count == 2
        assert not Path(f"{sample_csv_file}-unprocessed-issues").exists()

    def test_failure_writes_unprocessed_file(
        self, config_file: Path, sample_csv_file: Path, fake_client: MagicMock
    ) -> None:
        """Test a failed submission writes the whole input for retry."""
        fake_client.create_time_entry.side_effect = [
            fake_client.create_time_entry.return_value,
            RemoteError(400, "Bad Request"),
        ]

        result = runner.invoke(app, ["transfer", str(sample_csv_file), "--config", str(config_file)])

        assert result.exit_code == 0
        assert "Unprocessed issues written to" in result.stdout
        unprocessed = read_records(f"{sample_csv_file}-unprocessed-issues")
        assert [r.issue_key for r in unprocessed] == ["PROJ-1", "PROJ-2", "OTHER-7"]

    def test_failed_only(self, config_file: Path, sample_csv_file: Path, fake_client: MagicMock) -> None:
        """Test --failed-only writes just the failed rows."""
        fake_client.create_time_entry.side_effect = [
            RemoteError(500),
            fake_client.create_time_entry.return_value,
        ]

        result = runner.invoke(
            app,
            ["transfer", str(sample_csv_file), "--failed-only", "--config", str(config_file)],
        )

        assert result.exit_code == 0
        unprocessed = read_records(f"{sample_csv_file}-unprocessed-issues")
        assert [r.issue_key for r in unprocessed] == ["PROJ-1"]

    def test_one_line_per_row(self, config_file: Path, temp_config_dir: Path, fake_client: MagicMock) -> None:
        """Test long summaries and descriptions never wrap a row onto extra lines."""
        summary = "Implement the quarterly reporting export for finance and the auditors"
        description = "wired up the CSV serializer and exposed it through the backend endpoint"
        path = temp_config_dir / "long.csv"
        path.write_text(
            ",".join(COLUMNS)
            + "\n"
            + f"PROJ-1,{summary},2.5,2024-01-01 09:00,PROJ,{description}\n"
            + f"PROJ-2,{summary},1,2024-01-02 09:00,PROJ,{description}\n"
        )

        result = runner.invoke(app, ["transfer", str(path), "--config", str(config_file)])

        assert result.exit_code == 0
        progress = [line for line in result.stdout.splitlines() if "... " in line]
        assert len(progress) == 2
        for issue_key, line in zip(["PROJ-1", "PROJ-2"], progress):
            assert line.startswith(issue_key)
            assert f"// {summary}" in line
            assert description in line
            assert line.endswith("... success")

    def test_stdin_failures_written_to_stderr(self, config_file: Path, fake_client: MagicMock) -> None:
        """Test '-' reads stdin and writes the unprocessed rows to stderr."""
        fake_client.create_time_entry.side_effect = [
            fake_client.create_time_entry.return_value,
            RemoteError(400, "Bad Request"),
        ]
        header = ",".join(COLUMNS)

        result = runner.invoke(app, ["transfer", "-", "--config", str(config_file)], input=SAMPLE_CSV)

        assert result.exit_code == 0
        assert fake_client.create_time_entry.call_count == 2
        assert "Unprocessed issues written to stderr" in result.stdout
        assert header in result.stderr.splitlines()
        assert header not in result.stdout
        assert "PROJ-1,Fix bug,2.5,2024-01-01 09:00,PROJ,fixed it" in result.stderr.splitlines()
