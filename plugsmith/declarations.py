# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Declaration model for plugin anchors and their owners.

A declaration chain mirrors how the host compiler's IR builder is laid out:
a package encloses top-level classes, classes may enclose nested classes, and
methods are the anchors plugins intercept. The top-level class is the owner
that hosts a generated plugin factory.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Optional, Tuple

from .errors import DescriptorError


class DeclarationKind(Enum):
    """Declaration kind enumeration."""

    PACKAGE = auto()
    CLASS = auto()
    METHOD = auto()

    def __str__(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class Declaration:
    """One element of a declaration chain.

    Attributes:
        name: Dotted name for packages, simple name otherwise
        kind: Declaration kind
        enclosing: Enclosing declaration (None for packages)
        parameters: Parameter type names (methods only)
    """

    name: str
    kind: DeclarationKind
    enclosing: Optional["Declaration"] = None
    parameters: Tuple[str, ...] = ()

    @property
    def simple_name(self) -> str:
        return self.name.rsplit('.', 1)[-1]

    @property
    def qualified_name(self) -> str:
        if self.kind is DeclarationKind.PACKAGE or self.enclosing is None:
            return self.name
        return f"{self.enclosing.qualified_name}.{self.name}"

    @property
    def package(self) -> Optional["Declaration"]:
        """Nearest enclosing package, or None for a detached chain."""
        current = self
        while current is not None and current.kind is not DeclarationKind.PACKAGE:
            current = current.enclosing
        return current

    def __str__(self) -> str:
        if self.kind is DeclarationKind.METHOD:
            return f"{self.qualified_name}({', '.join(self.parameters)})"
        return self.qualified_name


def resolve_owner(anchor: Declaration) -> Declaration:
    """Find the top-level declaration that hosts an anchor's generated code.

    Walks the enclosing chain upward, keeping the last declaration seen below
    the package level.

    Raises:
        DescriptorError: If the chain never reaches a package
    """
    prev = anchor
    enclosing = anchor.enclosing
    while enclosing is not None and enclosing.kind is not DeclarationKind.PACKAGE:
        prev = enclosing
        enclosing = enclosing.enclosing
    if enclosing is None:
        raise DescriptorError(f"No enclosing package for {anchor}")
    return prev


class DeclarationFactory:
    """Builds declaration chains, interning identical declarations.

    Example:
        >>> decls = DeclarationFactory()
        >>> owner = decls.class_('graphkit.replacements', 'MathSubstitutions')
        >>> method = decls.method(owner, 'sqrt', ('float',))
        >>> resolve_owner(method) is owner
        True
    """

    def __init__(self):
        self._interned: Dict[Declaration, Declaration] = {}

    def _intern(self, decl: Declaration) -> Declaration:
        return self._interned.setdefault(decl, decl)

    def package(self, name: str) -> Declaration:
        if not name or any(not part.isidentifier() for part in name.split('.')):
            raise DescriptorError(f"Invalid package name: '{name}'")
        return self._intern(Declaration(name, DeclarationKind.PACKAGE))

    def class_(self, package: str, class_path: str) -> Declaration:
        """Create a (possibly nested) class; class_path is 'Outer.Inner'."""
        current = self.package(package)
        for part in class_path.split('.'):
            if not part.isidentifier():
                raise DescriptorError(f"Invalid class name '{class_path}' in {package}")
            current = self._intern(Declaration(part, DeclarationKind.CLASS, current))
        return current

    def method(self, declaring_class: Declaration, name: str, parameters=()) -> Declaration:
        if not name.isidentifier():
            raise DescriptorError(f"Invalid method name '{name}' in {declaring_class}")
        return self._intern(
            Declaration(name, DeclarationKind.METHOD, declaring_class, tuple(parameters))
        )
