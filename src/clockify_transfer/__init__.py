"""Transfer Jira timesheet exports to Clockify time entries."""

__version__ = "0.2.0"
