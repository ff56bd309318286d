"""Configuration management for clockify-transfer."""

import logging
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from clockify_transfer.errors import ConfigError
from clockify_transfer.utils.storage import StorageManager

logger = logging.getLogger(__name__)

DEFAULT_API_BASE_PATH = "https://api.clockify.me/api/v1/"


class ProjectRef(BaseModel):
    """A project map value: a Clockify project ID or a project name.

    In YAML a value is written as ``{id: ...}``, ``{name: ...}`` or a bare
    string, which is taken as a project name.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["id", "name"]
    value: str

    @model_validator(mode="before")
    @classmethod
    def _from_config_value(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"kind": "name", "value": data}
        if isinstance(data, dict) and "kind" not in data:
            keys = set(data) & {"id", "name"}
            if len(keys) != 1 or len(data) != 1:
                raise ValueError("project reference needs exactly one of 'id' or 'name'")
            kind = keys.pop()
            return {"kind": kind, "value": data[kind]}
        return data

    @classmethod
    def direct(cls, project_id: str) -> "ProjectRef":
        return cls(kind="id", value=project_id)

    @classmethod
    def named(cls, name: str) -> "ProjectRef":
        return cls(kind="name", value=name)


class TransferConfig(BaseModel):
    """Settings consumed by the transfer pipeline."""

    model_config = ConfigDict(extra="forbid")

    api_base_path: str = Field(
        default=DEFAULT_API_BASE_PATH,
        description="The Clockify API base path, with a trailing slash.",
    )
    api_key: str = Field(description="Your Clockify API key.")
    workspace_id: str = Field(description="Your Clockify Workspace ID.")
    project_map: dict[str, ProjectRef] = Field(
        default_factory=dict,
        description=(
            "A mapping of Jira Project Key to Clockify projects.\n"
            "\n"
            "A plain value is a Clockify project name, looked up in the workspace.\n"
            "Use {id: ...} to give a Clockify project ID directly.\n"
            "\n"
            "Example:\n"
            "\n"
            "project_map:\n"
            "  PROJ: Project Name Goes Here\n"
            "  ANOTHER: {id: 61eeee2d576a3b100a7ed74d}"
        ),
    )
    start_offset_hours: float = Field(
        default=4.0,
        description=(
            "Hours added to every Jira work date before it is sent to Clockify.\n"
            "\n"
            "Jira exports local times without a timezone while Clockify expects UTC."
        ),
    )


def load_config(config_path: Path | None = None) -> TransferConfig:
    """Load and validate the config file.

    Args:
        config_path: Config file path. Defaults to the XDG location.

    Returns:
        Validated configuration.

    Raises:
        ConfigError: If the file is missing, unreadable or invalid.
    """
    storage = StorageManager(config_path)
    path = storage.config_file

    if not storage.exists():
        raise ConfigError(path, "file not found (run 'clockify-transfer config-init')")

    try:
        data = storage.load_config()
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(path, str(e)) from e

    if not isinstance(data, dict):
        raise ConfigError(path, "expected a YAML mapping at the top level")

    try:
        config = TransferConfig.model_validate(data)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        raise ConfigError(path, problems) from e

    logger.debug(f"Loaded config from {path} ({len(config.project_map)} project mappings)")
    return config


def get_config_template() -> str:
    """Render a commented YAML template of every config key."""
    blocks = []
    for name, field in TransferConfig.model_fields.items():
        lines = [f"# {line}".rstrip() for line in (field.description or "").splitlines()]
        lines.append("#")
        if field.is_required():
            lines.append("# Required! This value must be specified.")
            lines.append(f"#{name}:")
        else:
            default = field.get_default(call_default_factory=True)
            lines.append(f"# Default value: {_yaml_scalar(default)}")
            lines.append(f"#{name}: {_yaml_scalar(default)}")
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks) + "\n"


def write_config_template(config_path: Path | None = None, force: bool = False) -> Path:
    """Write the config template to disk.

    Args:
        config_path: Config file path. Defaults to the XDG location.
        force: Overwrite an existing file.

    Returns:
        The path written.

    Raises:
        FileExistsError: If the file exists and ``force`` is not set.
    """
    storage = StorageManager(config_path)
    if storage.exists() and not force:
        raise FileExistsError(f"Config file already exists: {storage.config_file}")

    storage.write_text(get_config_template())
    logger.info(f"Wrote config template to {storage.config_file}")
    return storage.config_file


def _yaml_scalar(value: Any) -> str:
    return yaml.safe_dump(value, default_flow_style=True).strip().removesuffix("...").strip()
