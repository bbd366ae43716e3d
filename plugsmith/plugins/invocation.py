# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Concrete invocation plugin variants."""

from typing import TYPE_CHECKING, Set, TextIO

from ..constants import CONSTANT_NODE
from ..dependencies import split_class_boundary
from ..errors import DescriptorError
from .base import GeneratedPlugin, class_reference

if TYPE_CHECKING:
    from ..environment import ProcessingEnvironment


class GeneratedFoldPlugin(GeneratedPlugin):
    """Folds a call to a pure method when every argument is a constant."""

    plugin_superclass = 'GeneratedFoldInvocationPlugin'

    def extra_imports(self, env: "ProcessingEnvironment", imports: Set[str]) -> None:
        imports.add(CONSTANT_NODE)

    def create_execute(self, out: TextIO) -> None:
        target = f"{class_reference(self.declaring_class)}.{self.intrinsic_method.name}"
        out.write("        if not all(arg.is_constant() for arg in args):\n")
        out.write("            return False\n")
        out.write(f"        result = {target}(*(arg.as_constant() for arg in args))\n")
        out.write("        b.add_push(target_method.return_kind, ConstantNode.for_constant(result, b.meta_access))\n")
        out.write("        return True\n")


class GeneratedNodeIntrinsicPlugin(GeneratedPlugin):
    """Replaces a call with a node built from the call's arguments.

    Attributes:
        node_class: Qualified name of the node class to instantiate
    """

    plugin_superclass = 'GeneratedNodeIntrinsicInvocationPlugin'

    def __init__(self, intrinsic_method, node_class: str, **kwargs):
        super().__init__(intrinsic_method, **kwargs)
        module, class_name = split_class_boundary(node_class)
        if module is None:
            raise DescriptorError(f"Node class must be a qualified class name, got '{node_class}'")
        self.node_class = node_class
        self._node_reference = class_name

    def extra_imports(self, env: "ProcessingEnvironment", imports: Set[str]) -> None:
        imports.add(self.node_class)

    def create_execute(self, out: TextIO) -> None:
        out.write(f"        node = {self._node_reference}(*args)\n")
        out.write("        b.add_push(target_method.return_kind, node)\n")
        out.write("        return True\n")
