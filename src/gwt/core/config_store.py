"""Project configuration stored as YAML at the project root.

Example `git-worktree-config.yaml`:

    repositoryUrl: git@github.com:acme/app.git
    mainBranch: main
    createdAt: '2024-05-01T12:00:00+00:00'
    hooks:
      postAdd:
        - npm install
        - "# echo 'disabled hook'"

The file is created by `gwt init` and afterwards only edited by hand. Keys
this module does not know about are kept and written back unchanged.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

import yaml

from gwt.core.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "git-worktree-config.yaml"

HookType = Literal["postInit", "postAdd", "postRemove", "postSwitch"]
HOOK_TYPES: tuple[HookType, ...] = ("postInit", "postAdd", "postRemove", "postSwitch")


@dataclass(frozen=True)
class ProjectHooks:
    """Hook command lists keyed by lifecycle point; None means not configured."""

    post_init: list[str] | None = None
    post_add: list[str] | None = None
    post_remove: list[str] | None = None
    post_switch: list[str] | None = None

    def commands_for(self, hook_type: str) -> list[str] | None:
        if hook_type == "postInit":
            return self.post_init
        if hook_type == "postAdd":
            return self.post_add
        if hook_type == "postRemove":
            return self.post_remove
        if hook_type == "postSwitch":
            return self.post_switch
        return None

    @staticmethod
    def disabled_examples() -> "ProjectHooks":
        """Hooks written by `gwt init`: one commented-out example per hook type."""
        return ProjectHooks(
            post_init=["# echo 'Initialized git worktree project'"],
            post_add=["# npm install"],
            post_remove=["# echo 'Removed worktree for branch ${branchName}'"],
            post_switch=["# echo 'Switched to branch ${branchName}'"],
        )


@dataclass(frozen=True)
class ProjectConfig:
    """In-memory representation of `git-worktree-config.yaml`."""

    repository_url: str
    main_branch: str
    created_at: str
    hooks: ProjectHooks | None = None
    extra: dict[str, Any] = field(default_factory=dict)


def _parse_hook_list(raw: Any, hook_type: str) -> list[str] | None:
    if raw is None:
        return None
    if not isinstance(raw, list):
        raise ConfigError(f"hooks.{hook_type} must be a list of commands")
    return [str(item) for item in raw]


def _parse_hooks(raw: Any) -> ProjectHooks | None:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise ConfigError("hooks must be a mapping of hook type to command list")
    return ProjectHooks(
        post_init=_parse_hook_list(raw.get("postInit"), "postInit"),
        post_add=_parse_hook_list(raw.get("postAdd"), "postAdd"),
        post_remove=_parse_hook_list(raw.get("postRemove"), "postRemove"),
        post_switch=_parse_hook_list(raw.get("postSwitch"), "postSwitch"),
    )


def parse_config(text: str) -> ProjectConfig:
    """Parse YAML text into a ProjectConfig.

    Raises:
        ConfigError: If the text is not valid YAML or not a mapping
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse YAML config: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("Config file must contain a YAML mapping")

    known = {"repositoryUrl", "mainBranch", "createdAt", "hooks"}
    created_at = data.get("createdAt", "")
    # PyYAML turns unquoted timestamps into datetime objects
    if hasattr(created_at, "isoformat"):
        created_at = created_at.isoformat()

    return ProjectConfig(
        repository_url=str(data.get("repositoryUrl", "")),
        main_branch=str(data.get("mainBranch", "")),
        created_at=str(created_at),
        hooks=_parse_hooks(data.get("hooks")),
        extra={key: value for key, value in data.items() if key not in known},
    )


def load_config(path: Path) -> ProjectConfig:
    """Load and parse the config file at path.

    Raises:
        ConfigError: If the file cannot be read or parsed
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Failed to read config file {path}: {e}") from e
    return parse_config(text)


def _hooks_to_dict(hooks: ProjectHooks) -> dict[str, list[str]]:
    data: dict[str, list[str]] = {}
    for hook_type in HOOK_TYPES:
        commands = hooks.commands_for(hook_type)
        if commands is not None:
            data[hook_type] = list(commands)
    return data


def save_config(path: Path, config: ProjectConfig) -> None:
    """Write config to path as YAML, keeping field order stable."""
    data: dict[str, Any] = {
        "repositoryUrl": config.repository_url,
        "mainBranch": config.main_branch,
        "createdAt": config.created_at,
    }
    if config.hooks is not None:
        data["hooks"] = _hooks_to_dict(config.hooks)
    data.update(config.extra)

    content = yaml.safe_dump(data, sort_keys=False, default_flow_style=False, allow_unicode=True)
    path.write_text(content, encoding="utf-8")
    logger.debug("Wrote config to %s", path)


def find_config_dir(start: Path) -> Path | None:
    """Walk up from start to the filesystem root looking for the config file.

    Returns:
        The first directory containing CONFIG_FILENAME, or None
    """
    for directory in [start, *start.parents]:
        if (directory / CONFIG_FILENAME).is_file():
            return directory
    return None


def find_config(start: Path) -> tuple[Path, ProjectConfig] | None:
    """Find and load the nearest config at or above start.

    Returns:
        (config_path, config), or None when no config file exists

    Raises:
        ConfigError: If a config file exists but cannot be parsed
    """
    config_dir = find_config_dir(start)
    if config_dir is None:
        return None
    config_path = config_dir / CONFIG_FILENAME
    return config_path, load_config(config_path)
