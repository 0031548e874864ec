"""Project configuration management for changelog-gen.

Handles the .changelogrc.yaml file in the working directory:
- load_config: parse and validate the file into a ChangelogConfig
- write_default_config: create the file from the default template
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


CONFIG_FILENAME = ".changelogrc.yaml"

DEFAULT_CONFIG_TEMPLATE = """# Changelog Generator Configuration

# Your project information
project:
  name: "My Project"
  version: "1.0.0"

# Git repository settings
git:
  repository_path: "."
  default_branch: "main"

# Output settings
output:
  format: "markdown"
  filename: "CHANGELOG.md"

# AI settings (used by 'changelog generate --ai')
ai:
  enabled: false
  provider: "claude"
  model: ""

# Categories for changes (informational, classification uses built-in rules)
categories:
  - breaking
  - features
  - fixes
  - documentation
"""


class ConfigError(Exception):
    """Raised when the project configuration cannot be loaded."""

    pass


class ProjectSettings(BaseModel):
    """The project section."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str = "My Project"
    version: str = "1.0.0"


class GitSettings(BaseModel):
    """The git section."""

    repository_path: str = "."
    default_branch: str = "main"


class OutputSettings(BaseModel):
    """The output section."""

    format: str = "markdown"
    filename: str = "CHANGELOG.md"


class AISettings(BaseModel):
    """The ai section."""

    enabled: bool = False
    provider: str = "claude"
    model: str = ""

    @field_validator("provider", "model", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        """Treat empty YAML values as empty strings."""
        return "" if v is None else v


class ChangelogConfig(BaseModel):
    """Validated contents of .changelogrc.yaml.

    Attributes:
        project: Project name and version shown in the changelog header.
        git: Repository location.
        output: Output format and default filename.
        ai: Enhancement settings.
        categories: Category names. Displayed by 'show' only.
    """

    project: ProjectSettings = Field(default_factory=ProjectSettings)
    git: GitSettings = Field(default_factory=GitSettings)
    output: OutputSettings = Field(default_factory=OutputSettings)
    ai: AISettings = Field(default_factory=AISettings)
    categories: list[str] = Field(default_factory=list)

    @field_validator("project", "git", "output", "ai", mode="before")
    @classmethod
    def empty_section_uses_defaults(cls, v: Any) -> Any:
        """An empty section (``project:`` with no keys) parses as None."""
        return {} if v is None else v

    @field_validator("categories", mode="before")
    @classmethod
    def empty_categories(cls, v: Any) -> Any:
        """Allow ``categories:`` with no items."""
        return [] if v is None else v


def get_config_path(directory: Path | None = None) -> Path:
    """Get the path to the config file.

    Args:
        directory: Directory holding the config. Defaults to the current directory.

    Returns:
        Path to .changelogrc.yaml.
    """
    return (directory or Path.cwd()) / CONFIG_FILENAME


def config_exists(path: Path | None = None) -> bool:
    """Check whether the config file exists."""
    return (path or get_config_path()).exists()


def load_config(path: Path | None = None) -> ChangelogConfig:
    """Load and validate the project configuration.

    Args:
        path: Path to the config file. Defaults to ./.changelogrc.yaml.

    Returns:
        The validated configuration.

    Raises:
        ConfigError: If the file is missing, unreadable, not valid YAML, or
            does not match the expected schema.
    """
    config_file = path or get_config_path()

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {config_file}")
    except OSError as e:
        raise ConfigError(f"Failed to read config file {config_file}: {e}")
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse config {config_file}: {e}")

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Failed to parse config {config_file}: expected a mapping at the top level")

    try:
        return ChangelogConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {config_file}:\n{e}")


def write_default_config(path: Path | None = None) -> Path:
    """Write the default configuration template, replacing any existing file.

    Args:
        path: Destination path. Defaults to ./.changelogrc.yaml.

    Returns:
        The path that was written.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_file = path or get_config_path()

    try:
        config_file.write_text(DEFAULT_CONFIG_TEMPLATE, encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Failed to write config file: {e}")

    return config_file
