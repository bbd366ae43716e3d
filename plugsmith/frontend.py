# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Descriptor manifest loading.

Builds plugin descriptors from a YAML manifest so factories can be generated
without a source-level front end. A manifest lists one entry per plugin:

    plugins:
      - package: graphkit.replacements.aarch64
        class: MathSubstitutions          # 'Outer.Inner' for nested classes
        method: sqrt
        parameters: [float]
        kind: fold                        # or node_intrinsic
      - package: graphkit.replacements.aarch64
        class: MathSubstitutions
        method: fma
        parameters: [float, float, float]
        kind: node_intrinsic
        node_class: compiler.nodes.calc.FusedMultiplyAddNode
        needs_replacement: true

${VAR} references are expanded from the environment.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from ._internal.io.yaml import load_yaml
from .declarations import DeclarationFactory
from .errors import DescriptorError
from .plugins import GeneratedFoldPlugin, GeneratedNodeIntrinsicPlugin, GeneratedPlugin

logger = logging.getLogger(__name__)

PLUGIN_KINDS = {
    'fold': GeneratedFoldPlugin,
    'node_intrinsic': GeneratedNodeIntrinsicPlugin,
}

_REQUIRED_KEYS = ('package', 'class', 'method')
_KNOWN_KEYS = frozenset(_REQUIRED_KEYS + (
    'parameters', 'kind', 'name', 'needs_replacement', 'with_exception', 'node_class', 'injected',
))


class DescriptorLoader:
    """Turns manifest entries into plugin descriptors.

    Declarations are interned across every manifest loaded by one loader, so
    plugins on the same class share a single owner.
    """

    def __init__(self, declarations: Optional[DeclarationFactory] = None):
        self.declarations = declarations or DeclarationFactory()

    def load(self, path: Path) -> List[GeneratedPlugin]:
        """Load every plugin listed in a YAML manifest.

        Raises:
            FileNotFoundError: If the manifest doesn't exist
            yaml.YAMLError: If the manifest is not a valid YAML mapping
            DescriptorError: If the manifest or one of its entries is malformed
        """
        data = load_yaml(path, what="descriptor manifest", expand_env=True)
        entries = data.get('plugins')
        if not isinstance(entries, list):
            raise DescriptorError(f"{path}: expected a 'plugins' list")

        plugins = [self.build(entry, f"{path}: plugins[{index}]") for index, entry in enumerate(entries)]
        logger.info(f"Loaded {len(plugins)} plugin descriptors from {path}")
        return plugins

    def build(self, entry: Dict[str, Any], where: str = "plugin") -> GeneratedPlugin:
        """Build one descriptor from a manifest entry."""
        if not isinstance(entry, dict):
            raise DescriptorError(f"{where}: expected a mapping, got {type(entry).__name__}")

        missing = [key for key in _REQUIRED_KEYS if not entry.get(key)]
        if missing:
            raise DescriptorError(f"{where}: missing required keys: {', '.join(missing)}")
        unknown = sorted(set(entry) - _KNOWN_KEYS)
        if unknown:
            raise DescriptorError(f"{where}: unknown keys: {', '.join(unknown)}")

        kind = entry.get('kind', 'fold')
        plugin_cls = PLUGIN_KINDS.get(kind)
        if plugin_cls is None:
            valid = ", ".join(PLUGIN_KINDS)
            raise DescriptorError(f"{where}: invalid plugin kind '{kind}'. Must be one of: {valid}")

        try:
            declaring_class = self.declarations.class_(str(entry['package']), str(entry['class']))
            method = self.declarations.method(
                declaring_class, str(entry['method']), [str(p) for p in entry.get('parameters') or ()]
            )
            kwargs = {
                'plugin_name': entry.get('name'),
                'needs_replacement': bool(entry.get('needs_replacement', False)),
                'is_with_exception_replacement': bool(entry.get('with_exception', False)),
                'injected': [str(t) for t in entry.get('injected') or ()],
            }
            if plugin_cls is GeneratedNodeIntrinsicPlugin:
                if not entry.get('node_class'):
                    raise DescriptorError("node_intrinsic plugins require 'node_class'")
                return plugin_cls(method, node_class=str(entry['node_class']), **kwargs)
            return plugin_cls(method, **kwargs)
        except DescriptorError as e:
            raise DescriptorError(f"{where}: {e}") from e


def load_descriptors(path: Path, loader: Optional[DescriptorLoader] = None) -> List[GeneratedPlugin]:
    """Load plugin descriptors from a YAML manifest."""
    return (loader or DescriptorLoader()).load(path)
