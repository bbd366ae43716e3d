# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Base class for generated invocation plugins.

A GeneratedPlugin describes one plugin intercepting a call to a method of the
host compiler's IR builder. The factory generator only talks to plugins
through three capabilities:

- generate(): render the plugin's class definition
- register(): render the statement registering it with InvocationPlugins
- extra_imports(): add dependencies the rendered class needs

Everything else here is shared rendering used by the concrete variants.
"""

import re
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterable, Optional, Set, TextIO

from ..constants import (
    DISAMBIGUATION_MARKER,
    EXCLUDE_FROM_COVERAGE,
    PLUGIN_PREFIX,
    PLUGIN_REPLACEMENT_NODE,
    PLUGIN_REPLACEMENT_WITH_EXCEPTION_NODE,
)
from ..declarations import Declaration, DeclarationKind
from ..errors import DescriptorError

if TYPE_CHECKING:
    from ..environment import ProcessingEnvironment

_UNDERSCORE_RUN = re.compile(r"_{2,}")


def default_plugin_name(method: Declaration) -> str:
    """Plugin_<Class>[_<Inner>...]_<method> for an intrinsic method.

    Runs of underscores collapse to one and trailing underscores are dropped,
    so a dunder method such as __add__ yields Plugin_<Class>_add and default
    names never contain the disambiguation marker.
    """
    parts = [method.name]
    current = method.enclosing
    while current is not None and current.kind is not DeclarationKind.PACKAGE:
        parts.append(current.name)
        current = current.enclosing
    name = PLUGIN_PREFIX + '_'.join(reversed(parts))
    return _UNDERSCORE_RUN.sub('_', name).rstrip('_')


def class_reference(decl: Declaration) -> str:
    """Name of a class as seen from a module in its own package ('Outer.Inner')."""
    package = decl.package
    if package is None:
        return decl.qualified_name
    return decl.qualified_name[len(package.qualified_name) + 1:]


class GeneratedPlugin(ABC):
    """One plugin destined for a generated factory module.

    Attributes:
        intrinsic_method: Method the plugin intercepts (its anchor)
        plugin_name: Name of the generated plugin class; may be rewritten once
            by name disambiguation
        needs_replacement: Plugin can be deferred to a replacement node
        is_with_exception_replacement: Replacement node has an exception edge
        injected: Type names of arguments supplied by the injection provider
    """

    def __init__(
        self,
        intrinsic_method: Declaration,
        plugin_name: Optional[str] = None,
        needs_replacement: bool = False,
        is_with_exception_replacement: bool = False,
        injected: Iterable[str] = (),
    ):
        if intrinsic_method.kind is not DeclarationKind.METHOD:
            raise DescriptorError(f"Plugin anchor must be a method, got {intrinsic_method.kind}: {intrinsic_method}")
        if plugin_name is not None and not plugin_name.isidentifier():
            raise DescriptorError(f"Plugin name must be an identifier, got '{plugin_name}'")
        if plugin_name is not None and DISAMBIGUATION_MARKER in plugin_name:
            raise DescriptorError(
                f"Plugin name '{plugin_name}' must not contain '{DISAMBIGUATION_MARKER}', "
                f"which is reserved for disambiguated names"
            )
        self.intrinsic_method = intrinsic_method
        self.plugin_name = plugin_name or default_plugin_name(intrinsic_method)
        self.needs_replacement = needs_replacement
        self.is_with_exception_replacement = is_with_exception_replacement
        self.injected = tuple(injected)

    @property
    @abstractmethod
    def plugin_superclass(self) -> str:
        """Simple name of the base registration contract."""
        pass

    @property
    def declaring_class(self) -> Declaration:
        return self.intrinsic_method.enclosing

    def extra_imports(self, env: "ProcessingEnvironment", imports: Set[str]) -> None:
        """Add variant-specific dependencies to imports."""
        pass

    def generate(self, env: "ProcessingEnvironment", out: TextIO) -> None:
        """Render this plugin's class definition."""
        method = self.intrinsic_method
        out.write(f"#        class: {self.declaring_class.qualified_name}\n")
        out.write(f"#       method: {method.name}({', '.join(method.parameters)})\n")
        out.write(f"# generated-by: {type(self).__module__}.{type(self).__name__}\n")
        out.write(f"class {self.plugin_name}({self.plugin_superclass}):\n")
        out.write("\n")
        self._create_init(out)
        out.write("\n")
        out.write("    def execute(self, b, target_method, receiver, args):\n")
        if self.needs_replacement:
            out.write("        if b.should_defer_plugin(self):\n")
            out.write(f"            b.replace_plugin(self, target_method, args, {self.plugin_name}.replace)\n")
            out.write("            return True\n")
        self.create_execute(out)
        if self.needs_replacement:
            out.write("\n")
            self._create_replace(out)
        out.write("\n")

    @abstractmethod
    def create_execute(self, out: TextIO) -> None:
        """Render the body of execute(), indented by eight spaces."""
        pass

    def register(self, out: TextIO) -> None:
        """Render the registration statement for register_plugins()."""
        out.write(
            f"        plugins.register({class_reference(self.declaring_class)}, "
            f"{self.plugin_name}(injection))\n"
        )

    def _create_init(self, out: TextIO) -> None:
        method = self.intrinsic_method
        arguments = ', '.join(repr(value) for value in (method.name, *method.parameters))
        out.write("    def __init__(self, injection):\n")
        out.write(f"        super().__init__({arguments})\n")
        for index, type_name in enumerate(self.injected):
            out.write(f"        self.injected_{index} = injection.get_injected_argument({type_name!r})\n")

    def _create_replace(self, out: TextIO) -> None:
        if self.is_with_exception_replacement:
            node = PLUGIN_REPLACEMENT_WITH_EXCEPTION_NODE.rsplit('.', 1)[1]
        else:
            node = PLUGIN_REPLACEMENT_NODE.rsplit('.', 1)[1]
        decorator = EXCLUDE_FROM_COVERAGE.rsplit('.', 1)[1]
        out.write(f"    @{decorator}(\"deferred plugin support\")\n")
        out.write("    @staticmethod\n")
        out.write("    def replace(b, injection, stamp, args):\n")
        out.write(f"        return {node}.replace(b, {self.plugin_name}(injection), stamp, args)\n")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.plugin_name!r}, {self.intrinsic_method})"
