# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Global pytest configuration and fixtures."""

import os

import pytest

from plugsmith.declarations import DeclarationFactory
from plugsmith.environment import ProcessingEnvironment
from plugsmith.plugins import GeneratedPlugin
from plugsmith.settings import reset_config


class StubPlugin(GeneratedPlugin):
    """Minimal plugin for exercising the generator without a real variant."""

    def __init__(self, intrinsic_method, superclass="GeneratedInvocationPlugin", extra=(), **kwargs):
        super().__init__(intrinsic_method, **kwargs)
        self._superclass = superclass
        self.extra = tuple(extra)

    @property
    def plugin_superclass(self):
        return self._superclass

    def extra_imports(self, env, imports):
        imports.update(self.extra)

    def create_execute(self, out):
        out.write("        return False\n")


@pytest.fixture
def decls():
    """Fresh declaration factory."""
    return DeclarationFactory()


@pytest.fixture
def make_plugin(decls):
    """Build a StubPlugin anchored at package.class_path.method."""

    def _make(package="graphkit.replacements", class_path="MathSubstitutions", method="sqrt",
              parameters=("float",), **kwargs):
        owner = decls.class_(package, class_path)
        return StubPlugin(decls.method(owner, method, parameters), **kwargs)

    return _make


@pytest.fixture
def env(tmp_path):
    """Processing environment writing under a temporary directory."""
    return ProcessingEnvironment.for_output_dir(tmp_path / "generated")


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user/project config files and PLUGSMITH_* variables out of tests."""
    import plugsmith.settings.schema as schema

    for key in list(os.environ):
        if key.startswith("PLUGSMITH_"):
            monkeypatch.delenv(key)
    monkeypatch.setattr(schema, "USER_CONFIG_FILE", tmp_path / "no-user-config.yaml")
    monkeypatch.setenv("PLUGSMITH_PROJECT_DIR", str(tmp_path / "no-project"))
    reset_config()
    yield
    reset_config()
