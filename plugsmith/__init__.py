# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
plugsmith

Generates invocation plugin factory modules for the host compiler. Plugins
collected for one compilation unit are grouped by the top-level class that
declares their intrinsic method; each group becomes one generated module
that registers its plugins when the compiler loads it.
"""

from .declarations import Declaration, DeclarationFactory, DeclarationKind, resolve_owner
from .dependencies import compute_dependencies
from .emitter import PluginFactoryEmitter
from .environment import Filer, Messager, ProcessingEnvironment, ServiceRegistry, load_services
from .errors import DescriptorError, FilerError, GenerationError, PlugsmithError
from .frontend import DescriptorLoader, load_descriptors
from .generator import GenerationReport, PluginGenerator
from .naming import disambiguate_names
from .plugins import GeneratedFoldPlugin, GeneratedNodeIntrinsicPlugin, GeneratedPlugin

__all__ = [
    "Declaration",
    "DeclarationFactory",
    "DeclarationKind",
    "DescriptorError",
    "DescriptorLoader",
    "Filer",
    "FilerError",
    "GeneratedFoldPlugin",
    "GeneratedNodeIntrinsicPlugin",
    "GeneratedPlugin",
    "GenerationError",
    "GenerationReport",
    "Messager",
    "PluginFactoryEmitter",
    "PluginGenerator",
    "PlugsmithError",
    "ProcessingEnvironment",
    "ServiceRegistry",
    "compute_dependencies",
    "disambiguate_names",
    "load_descriptors",
    "load_services",
    "resolve_owner",
]
