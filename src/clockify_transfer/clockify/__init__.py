"""Clockify API integration."""

from clockify_transfer.clockify.client import ClockifyClient
from clockify_transfer.clockify.models import ClockifyProject, ClockifyWorkspace, TimeEntry

__all__ = [
    "ClockifyClient",
    "ClockifyProject",
    "ClockifyWorkspace",
    "TimeEntry",
]
