"""Resolve Jira project keys to Clockify project IDs."""

import logging
from typing import Mapping, Protocol

from clockify_transfer.clockify.models import ClockifyProject
from clockify_transfer.config import ProjectRef
from clockify_transfer.errors import ProjectNotFoundRemotely, ProjectUnmapped

logger = logging.getLogger(__name__)


class ProjectLister(Protocol):
    def list_projects(self, workspace_id: str) -> list[ClockifyProject]: ...


class ProjectResolver:
    """Looks up the Clockify project for a record's project key."""

    def __init__(
        self,
        project_map: Mapping[str, ProjectRef],
        client: ProjectLister,
        workspace_id: str,
    ) -> None:
        """Initialize project resolver.

        Args:
            project_map: Jira project key to project reference.
            client: Client used to list workspace projects for name lookups.
            workspace_id: Clockify workspace ID.
        """
        self.project_map = project_map
        self.client = client
        self.workspace_id = workspace_id

    def resolve(self, project_key: str) -> str:
        """Resolve a Jira project key to a Clockify project ID.

        Name references are looked up against the workspace's project list on
        every call; the first exact, case-sensitive name match wins.

        Args:
            project_key: Jira project key from the record.

        Returns:
            Clockify project ID.

        Raises:
            ProjectUnmapped: If the key has no entry in the project map.
            ProjectNotFoundRemotely: If no workspace project has the mapped name.
            ClockifyError: If listing the workspace projects fails.
        """
        ref = self.project_map.get(project_key)
        if ref is None:
            raise ProjectUnmapped(project_key)

        if ref.kind == "id":
            return ref.value

        projects = self.client.list_projects(self.workspace_id)
        for project in projects:
            if project.name == ref.value:
                logger.debug(f"Resolved {project_key} -> {project.name} ({project.id})")
                return project.id

        raise ProjectNotFoundRemotely(project_key, ref.value)
