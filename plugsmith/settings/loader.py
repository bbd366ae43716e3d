# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Configuration loading and management for plugsmith."""

from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError
from rich.console import Console

from .schema import GeneratorConfig

console = Console(stderr=True)


def _is_path_field(key: str) -> bool:
    """Check if a field name suggests it's a path field.

    Uses naming convention: fields ending with _dir, _path or _file are
    treated as paths.
    """
    return key.endswith(('_dir', '_path', '_file'))


def _resolve_cli_paths(cli_overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Resolve relative paths in CLI overrides to CWD.

    CLI paths resolve relative to where you ran the command.
    """
    result = {}
    cwd = Path.cwd()

    for key, value in cli_overrides.items():
        if _is_path_field(key) and value is not None and isinstance(value, (str, Path)):
            path = Path(value)
            result[key] = (cwd / path).resolve() if not path.is_absolute() else path
        else:
            result[key] = value

    return result


def load_config(
    project_file: Optional[Path] = None,
    **cli_overrides
) -> GeneratorConfig:
    """Load configuration with hierarchical priority.

    Priority order (highest to lowest):
    1. CLI arguments (passed as kwargs)
    2. Environment variables (PLUGSMITH_* prefix)
    3. Project config file (plugsmith.yaml)
    4. Built-in defaults

    Args:
        project_file: Path to project config file (for non-standard locations)
        **cli_overrides: CLI argument overrides; None values are ignored

    Returns:
        GeneratorConfig object
    """
    try:
        overrides = {k: v for k, v in cli_overrides.items() if v is not None}
        if project_file is not None:
            overrides['project_file'] = project_file
        return GeneratorConfig(**_resolve_cli_paths(overrides))

    except ValidationError as e:
        console.print("[bold red]Configuration validation failed:[/bold red]")
        for error in e.errors():
            field = " → ".join(str(x) for x in error["loc"])
            console.print(f"  [red]{field}: {error['msg']}[/red]")
        raise


@lru_cache(maxsize=1)
def get_config() -> GeneratorConfig:
    """Get cached configuration instance."""
    return load_config()


def reset_config() -> None:
    """Reset the cached configuration (mainly for testing)."""
    get_config.cache_clear()
