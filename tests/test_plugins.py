# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Tests for rendering individual plugin classes."""

import io

import pytest

from plugsmith.constants import CONSTANT_NODE
from plugsmith.errors import DescriptorError
from plugsmith.plugins import GeneratedFoldPlugin, GeneratedNodeIntrinsicPlugin
from plugsmith.plugins.base import class_reference, default_plugin_name


def _render(plugin, method="generate"):
    out = io.StringIO()
    if method == "generate":
        plugin.generate(None, out)
    else:
        plugin.register(out)
    return out.getvalue()


@pytest.fixture
def fma(decls):
    inner = decls.class_("graphkit.replacements", "MathSubstitutions.Inner")
    return decls.method(inner, "fma", ("float", "float", "float"))


def test_default_name_includes_nested_classes(fma):
    assert default_plugin_name(fma) == "Plugin_MathSubstitutions_Inner_fma"


def test_class_reference_is_relative_to_package(fma):
    assert class_reference(fma.enclosing) == "MathSubstitutions.Inner"


def test_fold_plugin_calls_target_with_constants(decls):
    owner = decls.class_("graphkit.replacements", "MathSubstitutions")
    plugin = GeneratedFoldPlugin(decls.method(owner, "sqrt", ("float",)))

    text = _render(plugin)

    assert "class Plugin_MathSubstitutions_sqrt(GeneratedFoldInvocationPlugin):" in text
    assert "        result = MathSubstitutions.sqrt(*(arg.as_constant() for arg in args))\n" in text
    assert "def replace" not in text

    imports = set()
    plugin.extra_imports(None, imports)
    assert imports == {CONSTANT_NODE}


def test_node_intrinsic_plugin_builds_node(fma):
    plugin = GeneratedNodeIntrinsicPlugin(fma, node_class="compiler.nodes.calc.FusedMultiplyAddNode")

    text = _render(plugin)

    assert "class Plugin_MathSubstitutions_Inner_fma(GeneratedNodeIntrinsicInvocationPlugin):" in text
    assert "        super().__init__('fma', 'float', 'float', 'float')\n" in text
    assert "        node = FusedMultiplyAddNode(*args)\n" in text

    imports = set()
    plugin.extra_imports(None, imports)
    assert imports == {"compiler.nodes.calc.FusedMultiplyAddNode"}


def test_node_class_must_be_qualified(fma):
    with pytest.raises(DescriptorError, match="Node class must be a qualified class name"):
        GeneratedNodeIntrinsicPlugin(fma, node_class="compiler.nodes.calc")


def test_replacement_renders_deferral_and_replace(fma):
    plugin = GeneratedNodeIntrinsicPlugin(
        fma, node_class="compiler.nodes.calc.FusedMultiplyAddNode", needs_replacement=True
    )

    text = _render(plugin)

    assert "        if b.should_defer_plugin(self):\n" in text
    assert "b.replace_plugin(self, target_method, args, Plugin_MathSubstitutions_Inner_fma.replace)" in text
    assert '    @ExcludeFromCoverageReport("deferred plugin support")\n' in text
    assert "        return PluginReplacementNode.replace(" in text


def test_replacement_with_exception_uses_exception_node(fma):
    plugin = GeneratedNodeIntrinsicPlugin(
        fma,
        node_class="compiler.nodes.calc.FusedMultiplyAddNode",
        needs_replacement=True,
        is_with_exception_replacement=True,
    )

    assert "        return PluginReplacementWithExceptionNode.replace(" in _render(plugin)


def test_injected_arguments_are_fetched_from_injection(fma):
    plugin = GeneratedNodeIntrinsicPlugin(
        fma, node_class="compiler.nodes.calc.FusedMultiplyAddNode", injected=["SnippetReflection", "WordTypes"]
    )

    text = _render(plugin)

    assert "        self.injected_0 = injection.get_injected_argument('SnippetReflection')\n" in text
    assert "        self.injected_1 = injection.get_injected_argument('WordTypes')\n" in text


def test_register_statement_uses_class_reference(fma):
    plugin = GeneratedNodeIntrinsicPlugin(fma, node_class="compiler.nodes.calc.FusedMultiplyAddNode")

    assert _render(plugin, "register") == (
        "        plugins.register(MathSubstitutions.Inner, Plugin_MathSubstitutions_Inner_fma(injection))\n"
    )


def test_explicit_plugin_name_is_used(decls):
    owner = decls.class_("pkg", "Owner")
    plugin = GeneratedFoldPlugin(decls.method(owner, "run"), plugin_name="FastRun")

    assert "class FastRun(" in _render(plugin)


def test_plugin_name_must_be_identifier(decls):
    owner = decls.class_("pkg", "Owner")

    with pytest.raises(DescriptorError, match="must be an identifier"):
        GeneratedFoldPlugin(decls.method(owner, "run"), plugin_name="not-valid")


def test_anchor_must_be_a_method(decls):
    with pytest.raises(DescriptorError, match="anchor must be a method"):
        GeneratedFoldPlugin(decls.class_("pkg", "Owner"))
