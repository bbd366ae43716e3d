# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Tests for configuration loading and priority."""

import pytest
import yaml
from pydantic import ValidationError

from plugsmith.settings import GeneratorConfig, get_config, load_config


def test_defaults_resolve_against_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    config = load_config()

    assert config.output_dir == (tmp_path / "generated").resolve()
    assert config.services_manifest_path == config.output_dir / "plugsmith-services.json"
    assert config.strict is True
    assert config.logging.level == "normal"
    assert config.project_file is None


def test_project_file_values_resolve_against_project_dir(tmp_path, monkeypatch):
    project = tmp_path / "project"
    project.mkdir()
    (project / "plugsmith.yaml").write_text("output_dir: build/gen\nstrict: false\n")
    monkeypatch.setenv("PLUGSMITH_PROJECT_DIR", str(project))

    config = load_config()

    assert config.output_dir == (project / "build" / "gen").resolve()
    assert config.strict is False
    assert config.project_file == (project / "plugsmith.yaml").resolve()


def test_environment_overrides_project_file(tmp_path, monkeypatch):
    config_file = tmp_path / "custom.yaml"
    config_file.write_text("strict: false\nlogging:\n  level: verbose\n")
    monkeypatch.setenv("PLUGSMITH_STRICT", "true")

    config = load_config(project_file=config_file)

    assert config.strict is True
    assert config.logging.level == "verbose"


def test_nested_environment_variable(monkeypatch):
    monkeypatch.setenv("PLUGSMITH_LOGGING__LEVEL", "debug")

    assert load_config().logging.level == "debug"


def test_cli_overrides_win_and_none_is_ignored(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PLUGSMITH_STRICT", "false")

    config = load_config(output_dir="out", strict=True, services_manifest=None)

    assert config.output_dir == tmp_path.resolve() / "out"
    assert config.strict is True
    assert config.services_manifest == "plugsmith-services.json"


def test_user_config_is_merged_under_project_config(tmp_path, monkeypatch):
    import plugsmith.settings.schema as schema

    user_file = tmp_path / "user.yaml"
    user_file.write_text("services_manifest: user.json\nstrict: false\n")
    monkeypatch.setattr(schema, "USER_CONFIG_FILE", user_file)
    project_file = tmp_path / "plugsmith.yaml"
    project_file.write_text("services_manifest: project.json\n")

    config = load_config(project_file=project_file)

    assert config.services_manifest == "project.json"
    assert config.strict is False


def test_unknown_keys_are_rejected(tmp_path):
    config_file = tmp_path / "plugsmith.yaml"
    config_file.write_text("colour: red\n")

    with pytest.raises(ValidationError):
        load_config(project_file=config_file)


def test_invalid_log_level_is_rejected():
    with pytest.raises(ValidationError):
        GeneratorConfig(logging={"level": "loud"})


def test_invalid_yaml_names_the_file(tmp_path):
    config_file = tmp_path / "plugsmith.yaml"
    config_file.write_text("strict: [unclosed\n")

    with pytest.raises(yaml.YAMLError, match="Invalid YAML in config file"):
        load_config(project_file=config_file)


def test_get_config_is_cached():
    assert get_config() is get_config()
