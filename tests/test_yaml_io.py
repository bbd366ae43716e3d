# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Tests for the shared YAML helpers."""

import pytest
import yaml

from plugsmith._internal.io.yaml import deep_merge, expand_env_vars, load_yaml


def test_empty_document_loads_as_empty_mapping(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")

    assert load_yaml(path) == {}


def test_syntax_error_names_file_and_position(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("plugins:\n  - [unclosed\n")

    with pytest.raises(yaml.YAMLError, match=r"Invalid YAML in descriptor manifest .*broken\.yaml at line \d+, column \d+"):
        load_yaml(path, what="descriptor manifest")


def test_non_mapping_document_is_rejected(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- one\n- two\n")

    with pytest.raises(yaml.YAMLError, match="must contain a mapping, got list"):
        load_yaml(path)


def test_missing_file_names_the_document_kind(tmp_path):
    with pytest.raises(FileNotFoundError, match="config file not found"):
        load_yaml(tmp_path / "absent.yaml", what="config file")


def test_environment_expansion_is_opt_in(tmp_path, monkeypatch):
    monkeypatch.setenv("PLUGSMITH_TEST_PACKAGE", "aarch64")
    path = tmp_path / "vars.yaml"
    path.write_text("package: ${PLUGSMITH_TEST_PACKAGE}\n")

    assert load_yaml(path) == {"package": "${PLUGSMITH_TEST_PACKAGE}"}
    assert load_yaml(path, expand_env=True) == {"package": "aarch64"}


def test_expand_env_vars_recurses_and_keeps_undefined(monkeypatch):
    monkeypatch.setenv("PLUGSMITH_TEST_NAME", "sqrt")
    monkeypatch.delenv("PLUGSMITH_TEST_UNSET", raising=False)

    data = {"m": ["$PLUGSMITH_TEST_NAME", 3], "n": "${PLUGSMITH_TEST_UNSET}"}

    assert expand_env_vars(data) == {"m": ["sqrt", 3], "n": "${PLUGSMITH_TEST_UNSET}"}


def test_deep_merge_merges_nested_mappings_without_mutation():
    base = {"logging": {"level": "normal"}, "strict": True}
    overlay = {"logging": {"level": "debug"}, "output_dir": "out"}

    merged = deep_merge(base, overlay)

    assert merged == {"logging": {"level": "debug"}, "strict": True, "output_dir": "out"}
    assert base == {"logging": {"level": "normal"}, "strict": True}
