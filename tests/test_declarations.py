# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Tests for the declaration model and owner resolution."""

import pytest

from plugsmith.declarations import Declaration, DeclarationKind, resolve_owner
from plugsmith.errors import DescriptorError


def test_owner_of_top_level_method(decls):
    owner = decls.class_("graphkit.replacements", "MathSubstitutions")
    method = decls.method(owner, "sqrt", ("float",))

    assert resolve_owner(method) is owner


def test_owner_of_nested_class_method_is_outermost_class(decls):
    inner = decls.class_("graphkit.replacements", "Outer.Middle.Inner")
    method = decls.method(inner, "run")

    owner = resolve_owner(method)

    assert owner.qualified_name == "graphkit.replacements.Outer"
    assert owner.enclosing.kind is DeclarationKind.PACKAGE


def test_detached_anchor_is_rejected():
    orphan_class = Declaration("Orphan", DeclarationKind.CLASS)
    method = Declaration("run", DeclarationKind.METHOD, orphan_class)

    with pytest.raises(DescriptorError, match="No enclosing package"):
        resolve_owner(method)


def test_names(decls):
    inner = decls.class_("graphkit.replacements.aarch64", "Outer.Inner")
    method = decls.method(inner, "fma", ("float", "float", "float"))

    assert inner.qualified_name == "graphkit.replacements.aarch64.Outer.Inner"
    assert inner.simple_name == "Inner"
    assert inner.package.simple_name == "aarch64"
    assert str(method) == "graphkit.replacements.aarch64.Outer.Inner.fma(float, float, float)"


def test_factory_interns_declarations(decls):
    first = decls.class_("pkg", "Owner")
    second = decls.class_("pkg", "Owner")

    assert first is second
    assert decls.method(first, "m", ("int",)) is decls.method(second, "m", ("int",))


def test_equal_chains_compare_equal_across_factories(decls):
    from plugsmith.declarations import DeclarationFactory

    other = DeclarationFactory()

    assert decls.class_("pkg", "Owner") == other.class_("pkg", "Owner")
    assert hash(decls.class_("pkg", "Owner")) == hash(other.class_("pkg", "Owner"))


@pytest.mark.parametrize("package,class_path", [
    ("", "Owner"),
    ("pkg.", "Owner"),
    ("pkg/sub", "Owner"),
    ("pkg", "Owner..Inner"),
    ("pkg", "1Owner"),
])
def test_invalid_names_are_rejected(decls, package, class_path):
    with pytest.raises(DescriptorError):
        decls.class_(package, class_path)
