# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""plugsmith configuration schema using Pydantic.

Configuration Priority
----------------------
Settings are loaded from multiple sources with the following priority (highest to lowest):
1. CLI arguments (passed to GeneratorConfig constructor)
2. Environment variables (PLUGSMITH_* prefix)
3. Project config file (plugsmith.yaml), merged over the user config file
   (~/.plugsmith/config.yaml)
4. Built-in defaults (Field defaults in GeneratorConfig)

Path Resolution
---------------
CLI paths are resolved to CWD in load_config() before GeneratorConfig is
created; relative paths from YAML/env/defaults resolve to the project
directory (where plugsmith.yaml lives, or CWD when there is none).
"""

import os
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from plugsmith._internal.io.yaml import deep_merge, load_yaml

PROJECT_CONFIG_FILE = "plugsmith.yaml"
USER_CONFIG_FILE = Path.home() / ".plugsmith" / "config.yaml"


def _find_project_config() -> Path | None:
    """Find project configuration file with upward directory walk.

    Search order:
    1. If PLUGSMITH_PROJECT_DIR is set, check that directory only
    2. Otherwise, walk up from CWD to find plugsmith.yaml

    Returns:
        Path to config file, or None if not found
    """
    if project_dir_override := os.environ.get("PLUGSMITH_PROJECT_DIR"):
        candidate = Path(project_dir_override).resolve() / PROJECT_CONFIG_FILE
        return candidate if candidate.exists() else None

    current = Path.cwd().resolve()
    while current != current.parent:
        candidate = current / PROJECT_CONFIG_FILE
        if candidate.exists():
            return candidate
        current = current.parent

    return None


class YamlSettingsSource(PydanticBaseSettingsSource):
    """Custom settings source for the user and project YAML files."""

    def __init__(self, settings_cls: type[BaseSettings], project_file: Path | None = None):
        super().__init__(settings_cls)
        self.yaml_files = []
        self.project_file_used = None

        if USER_CONFIG_FILE.exists():
            self.yaml_files.append(USER_CONFIG_FILE)

        if project_file is None:
            project_file = _find_project_config()
        if project_file is not None and project_file.is_file():
            self.yaml_files.append(project_file)
            self.project_file_used = project_file

        self._data = self._load_and_merge_yaml_files()

    def _load_and_merge_yaml_files(self) -> dict[str, Any]:
        """Load and merge YAML configuration files, later files winning.

        Raises:
            yaml.YAMLError: If any config file has syntax errors
        """
        merged_data = {}
        for yaml_file in self.yaml_files:
            merged_data = deep_merge(merged_data, load_yaml(yaml_file, what="config file", expand_env=True))
        return merged_data

    def get_field_value(self, field_name: str, field_info: Any) -> tuple[Any, str, bool]:
        """Get field value from YAML source."""
        if field_name in self._data:
            return self._data[field_name], field_name, True
        return None, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all settings from YAML files."""
        data = self._data.copy()
        if self.project_file_used:
            data["project_file"] = self.project_file_used
        return data


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["quiet", "normal", "verbose", "debug"] = Field(
        default="normal", description="Console verbosity level: quiet | normal | verbose | debug"
    )

    model_config = ConfigDict(extra="forbid")


class GeneratorConfig(BaseSettings):
    """Configuration schema with hierarchical priority.

    Priority order (highest to lowest):
    1. CLI arguments (passed to constructor)
    2. Environment variables (PLUGSMITH_* prefix)
    3. Project/user config (plugsmith.yaml, ~/.plugsmith/config.yaml)
    4. Built-in defaults
    """

    output_dir: Path = Field(
        default=Path("generated"), description="Root directory for generated factory modules"
    )
    services_manifest: str = Field(
        default="plugsmith-services.json",
        description="File name of the service manifest written under output_dir",
    )
    strict: bool = Field(
        default=True,
        description="Exit with an error status when any factory could not be generated",
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging configuration",
    )
    project_file: Path | None = Field(
        default=None, description="Project config file that was loaded (set automatically)"
    )

    model_config = SettingsConfigDict(
        env_prefix="PLUGSMITH_",
        env_nested_delimiter="__",
        validate_assignment=True,
        extra="forbid",
        case_sensitive=False,
        env_file=None,  # Config files are handled by YamlSettingsSource
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources.

        Priority order (first source wins):
        1. Init settings (CLI/constructor args) - paths already resolved to CWD
        2. Environment variables (PLUGSMITH_*)
        3. YAML files (custom source)
        """
        project_file = init_settings().get("project_file")

        return (
            init_settings,
            env_settings,
            YamlSettingsSource(settings_cls, project_file=project_file),
        )

    def model_post_init(self, __context: Any) -> None:
        """Resolve output_dir against the project directory."""
        if not self.output_dir.is_absolute():
            self.output_dir = (self.project_dir / self.output_dir).resolve()

    @property
    def project_dir(self) -> Path:
        """Directory holding the project config file, or CWD without one."""
        if self.project_file is not None:
            return Path(self.project_file).resolve().parent
        return Path.cwd().resolve()

    @property
    def services_manifest_path(self) -> Path:
        return self.output_dir / self.services_manifest
