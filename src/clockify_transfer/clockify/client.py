"""Clockify API client."""

import logging
from typing import Any

import httpx

from clockify_transfer.clockify.models import ClockifyProject, ClockifyWorkspace, TimeEntry
from clockify_transfer.errors import RemoteError, TransportError

logger = logging.getLogger(__name__)

PAGE_SIZE = 50


class ClockifyClient:
    """Client for Clockify API.

    Every call raises TransportError when no response arrives and
    RemoteError for any non-2xx response. Nothing is retried.
    """

    BASE_URL = "https://api.clockify.me/api/v1/"

    def __init__(
        self,
        api_key: str,
        base_url: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize Clockify client.

        Args:
            api_key: Clockify API key, sent as X-Api-Key on every request.
            base_url: API base path. Defaults to the public Clockify API.
            transport: Optional httpx transport (used by tests).

        Raises:
            ValueError: If the API key is empty.
        """
        if not api_key:
            raise ValueError("Clockify API key not provided")

        self.api_key = api_key
        self.base_url = base_url or self.BASE_URL
        self.client = httpx.Client(
            base_url=self.base_url,
            headers={"X-Api-Key": self.api_key},
            transport=transport,
        )

    def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """Send a request and map failures onto the client's error types."""
        try:
            response = self.client.request(method, url, **kwargs)
        except httpx.TransportError as e:
            logger.debug(f"{method} {url} failed: {e}")
            raise TransportError(f"{method} {url}: {e}") from e

        if not response.is_success:
            logger.debug(f"{method} {url} returned {response.status_code}: {response.text}")
            raise RemoteError(response.status_code, response.reason_phrase)
        return response

    def list_workspaces(self) -> list[ClockifyWorkspace]:
        """List all workspaces the API key has access to."""
        response = self._request("GET", "workspaces")
        return [ClockifyWorkspace(**item) for item in response.json()]

    def list_projects(self, workspace_id: str) -> list[ClockifyProject]:
        """List all projects in a workspace.

        Args:
            workspace_id: Workspace ID.

        Returns:
            Projects across all result pages.

        Raises:
            TransportError: On network failure.
            RemoteError: On a non-2xx response.
        """
        all_projects: list[ClockifyProject] = []
        page = 1
        while True:
            response = self._request(
                "GET",
                f"workspaces/{workspace_id}/projects",
                params={"page": page, "page-size": PAGE_SIZE},
            )
            data = response.json()
            if not data:
                break
            all_projects.extend(ClockifyProject(**item) for item in data)
            if len(data) < PAGE_SIZE:
                break
            page += 1
        return all_projects

    def create_time_entry(self, workspace_id: str, entry: TimeEntry) -> httpx.Response:
        """Create a time entry.

        Args:
            workspace_id: Workspace ID.
            entry: Time entry to submit.

        Returns:
            The raw 2xx response.

        Raises:
            TransportError: On network failure.
            RemoteError: On a non-2xx response.
        """
        return self._request(
            "POST",
            f"workspaces/{workspace_id}/time-entries",
            json=entry.to_api_dict(),
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self.client.close()

    def __enter__(self) -> "ClockifyClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()
