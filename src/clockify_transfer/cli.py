"""Command-line interface for clockify-transfer."""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from clockify_transfer import __version__
from clockify_transfer.clockify import ClockifyClient
from clockify_transfer.config import TransferConfig, get_config_template, load_config, write_config_template
from clockify_transfer.errors import ClockifyError, TransferError
from clockify_transfer.timesheet import read_records, unprocessed_target, write_records
from clockify_transfer.transfer import TransferEngine, TransferOutcome, TransferResult
from clockify_transfer.utils import get_logger, setup_logging

app = typer.Typer(help="Transfer Jira timesheet exports to Clockify time entries")
console = Console()
logger = get_logger(__name__)

OUTCOME_STYLES = {
    TransferOutcome.SUCCESS: "green",
    TransferOutcome.DRY_RUN: "cyan",
    TransferOutcome.SKIPPED: "yellow",
    TransferOutcome.FAILURE: "red",
}

ConfigOption = typer.Option(
    None,
    "--config",
    "-c",
    help="Config file. Defaults to ~/.config/clockify-transfer/config.yml",
)


def _setup_logging(config_path: Optional[Path], verbose: bool = False) -> None:
    setup_logging(
        log_level=logging.DEBUG if verbose else logging.INFO,
        config_dir=config_path.parent if config_path else None,
        console_level=logging.DEBUG if verbose else logging.WARNING,
    )


def _load_config_or_exit(config_path: Optional[Path]) -> TransferConfig:
    try:
        return load_config(config_path)
    except TransferError as e:
        logger.error(str(e))
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)


def _render_reports(result: TransferResult) -> None:
    """Print exactly one line per record, never wrapped."""
    for report in result.reports:
        style = OUTCOME_STYLES[report.outcome]
        line = escape("\t ".join(report.columns))
        console.print(
            f"{line}\t ... [{style}]{escape(report.message)}[/{style}]",
            soft_wrap=True,
            highlight=False,
        )


def _render_summary(result: TransferResult) -> None:
    table = Table(title="Transfer Results")
    table.add_column("Outcome", style="cyan")
    table.add_column("Count", style="magenta")
    table.add_row("Succeeded", str(result.count(TransferOutcome.SUCCESS)))
    table.add_row("Dry run", str(result.count(TransferOutcome.DRY_RUN)))
    table.add_row("Skipped", str(result.count(TransferOutcome.SKIPPED)))
    table.add_row("Failed", str(result.count(TransferOutcome.FAILURE)))
    console.print(table)


@app.command()
def transfer(
    file: str = typer.Argument(
        ...,
        help="The Jira timesheet CSV export file. Use '-' to read from stdin.",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        "-d",
        help="Output what would happen, but don't actually submit to Clockify.",
    ),
    failed_only: bool = typer.Option(
        False,
        "--failed-only",
        help="Write only the failed rows to the unprocessed issues file instead of the whole input.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging.",
    ),
    config_path: Optional[Path] = ConfigOption,
) -> None:
    """Transfer a Jira timesheet export to Clockify."""
    _setup_logging(config_path, verbose)
    logger.info(f"clockify-transfer v{__version__}")

    config = _load_config_or_exit(config_path)

    try:
        records = read_records(file)

        with ClockifyClient(api_key=config.api_key, base_url=config.api_base_path) as client:
            engine = TransferEngine(config=config, client=client)

            if dry_run:
                console.print("Starting [bold cyan]DRY RUN[/bold cyan] mode...")

            result = engine.run(records, dry_run=dry_run)

        _render_reports(result)
        _render_summary(result)

        unprocessed = result.unprocessed(failed_only=failed_only)
        if unprocessed:
            target = unprocessed_target(file)
            write_records(target, unprocessed)
            location = "stderr" if target == "-" else target
            console.print(
                f"\n[yellow]Some issues failed to transfer. "
                f"Unprocessed issues written to {location}[/yellow]"
            )

    except (TransferError, ValueError) as e:
        logger.error(f"Transfer failed: {e}", exc_info=True)
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)


@app.command("config-template")
def config_template() -> None:
    """Print a config template."""
    typer.echo(get_config_template())


@app.command("config-init")
def config_init(
    config_path: Optional[Path] = ConfigOption,
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing config file."),
) -> None:
    """Write a config template to the config file location."""
    try:
        path = write_config_template(config_path, force=force)
    except FileExistsError as e:
        console.print(f"[yellow]{e}[/yellow]")
        console.print("Use --force to overwrite it.")
        raise typer.Exit(code=1)
    except OSError as e:
        console.print(f"[red]Error: could not write config file: {e}[/red]")
        raise typer.Exit(code=1)

    console.print(f"[green]Config template written to {path}[/green]")
    console.print("Fill in api_key, workspace_id and project_map before transferring.")


@app.command()
def mapping(config_path: Optional[Path] = ConfigOption) -> None:
    """View the Jira project to Clockify project mapping."""
    _setup_logging(config_path)
    config = _load_config_or_exit(config_path)

    if not config.project_map:
        console.print("[yellow]No project mappings configured yet.[/yellow]")
        return

    table = Table(title="Project Mappings")
    table.add_column("Jira Project", style="cyan")
    table.add_column("Clockify Project", style="magenta")
    table.add_column("Lookup", style="yellow")

    for project_key, ref in config.project_map.items():
        table.add_row(project_key, ref.value, "ID" if ref.kind == "id" else "NAME")

    console.print(table)


@app.command()
def workspaces(config_path: Optional[Path] = ConfigOption) -> None:
    """List the Clockify workspaces visible to the configured API key."""
    _setup_logging(config_path)
    config = _load_config_or_exit(config_path)

    try:
        with ClockifyClient(api_key=config.api_key, base_url=config.api_base_path) as client:
            items = client.list_workspaces()
    except (ClockifyError, ValueError) as e:
        console.print(f"[red]Failed to list workspaces: {e}[/red]")
        raise typer.Exit(code=1)

    table = Table(title="Clockify Workspaces")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="magenta")
    for workspace in items:
        table.add_row(workspace.id, workspace.name)
    console.print(table)


@app.command()
def projects(config_path: Optional[Path] = ConfigOption) -> None:
    """List the projects of the configured Clockify workspace."""
    _setup_logging(config_path)
    config = _load_config_or_exit(config_path)

    try:
        with ClockifyClient(api_key=config.api_key, base_url=config.api_base_path) as client:
            items = client.list_projects(config.workspace_id)
    except (ClockifyError, ValueError) as e:
        console.print(f"[red]Failed to list projects: {e}[/red]")
        raise typer.Exit(code=1)

    table = Table(title="Clockify Projects")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="magenta")
    table.add_column("Archived", style="yellow")
    for project in items:
        table.add_row(project.id, project.name, "yes" if project.archived else "")
    console.print(table)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"clockify-transfer v{__version__}")


def main() -> None:
    """Main entry point."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        console.print(f"[red]Unexpected error: {e}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
