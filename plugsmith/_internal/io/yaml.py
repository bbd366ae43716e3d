# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""YAML helpers shared by descriptor manifests and config files."""

import os
from pathlib import Path
from typing import Any

import yaml


def _describe_mark(error: yaml.YAMLError) -> str:
    mark = getattr(error, "problem_mark", None)
    if mark is None:
        return "unknown location"
    return f"line {mark.line + 1}, column {mark.column + 1}"


def load_yaml(file_path: str | Path, what: str = "YAML file", expand_env: bool = False) -> dict[str, Any]:
    """Load a YAML mapping; an empty document loads as {}.

    Args:
        file_path: File to read
        what: Kind of document, used in error messages
        expand_env: Expand environment variables in every string value

    Raises:
        FileNotFoundError: If the file doesn't exist
        yaml.YAMLError: If the YAML is invalid or not a mapping; the message
            names the file and the error position
    """
    file_path = Path(file_path)
    if not file_path.is_file():
        raise FileNotFoundError(f"{what} not found: {file_path}")

    with open(file_path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            problem = getattr(e, "problem", None) or e
            raise yaml.YAMLError(f"Invalid YAML in {what} {file_path} at {_describe_mark(e)}: {problem}") from e

    if not isinstance(data, dict):
        raise yaml.YAMLError(f"{what} {file_path} must contain a mapping, got {type(data).__name__}")
    return expand_env_vars(data) if expand_env else data


def deep_merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Merge overlay into a copy of base; nested mappings merge key by key."""
    merged = dict(base)
    for key, value in overlay.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def expand_env_vars(data: Any) -> Any:
    """Expand $VAR and ${VAR} in every string of a loaded document.

    Undefined variables are left as written.
    """
    if isinstance(data, dict):
        return {key: expand_env_vars(value) for key, value in data.items()}
    if isinstance(data, list):
        return [expand_env_vars(item) for item in data]
    return os.path.expandvars(data) if isinstance(data, str) else data
