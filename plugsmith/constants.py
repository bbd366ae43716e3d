# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Centralized constants for generated plugin factories.

Single source of truth for the host compiler names that appear in generated
modules, the service contract they are registered under, and the architecture
table used for architecture-specific factories.
"""

from types import MappingProxyType

# ============================================================================
# Host Compiler Namespaces
# ============================================================================

HOST_PACKAGE = 'compiler'
GRAPHBUILDERCONF_PACKAGE = f'{HOST_PACKAGE}.nodes.graphbuilderconf'

# Service contract every generated factory is registered under
GENERATED_PLUGIN_FACTORY = f'{GRAPHBUILDERCONF_PACKAGE}.GeneratedPluginFactory'

# Capability declared by factories living in an architecture package
ARCHITECTURE_SPECIFIC = f'{HOST_PACKAGE}.core.ArchitectureSpecific'

# Dependencies every generated factory module declares
BASELINE_DEPENDENCIES = frozenset([
    f'{HOST_PACKAGE}.meta.ResolvedMethod',
    f'{HOST_PACKAGE}.nodes.ValueNode',
    f'{GRAPHBUILDERCONF_PACKAGE}.GraphBuilderContext',
    f'{GRAPHBUILDERCONF_PACKAGE}.InvocationPlugin',
    f'{GRAPHBUILDERCONF_PACKAGE}.InvocationPlugins',
    GENERATED_PLUGIN_FACTORY,
    f'{GRAPHBUILDERCONF_PACKAGE}.GeneratedPluginInjectionProvider',
])

# Dependencies pulled in by plugins that defer to a replacement node
EXCLUDE_FROM_COVERAGE = f'{HOST_PACKAGE}.options.ExcludeFromCoverageReport'
PLUGIN_REPLACEMENT_NODE = f'{HOST_PACKAGE}.nodes.PluginReplacementNode'
PLUGIN_REPLACEMENT_WITH_EXCEPTION_NODE = f'{HOST_PACKAGE}.nodes.PluginReplacementWithExceptionNode'

CONSTANT_NODE = f'{HOST_PACKAGE}.nodes.ConstantNode'

# ============================================================================
# Generated Module Naming
# ============================================================================

FACTORY_PREFIX = 'PluginFactory_'
PLUGIN_PREFIX = 'Plugin_'

# Separates a colliding plugin name from its numeric suffix
DISAMBIGUATION_MARKER = '__'

GENERATOR_NAMES = (
    'plugsmith.frontend.DescriptorLoader',
    'plugsmith.generator.PluginGenerator',
)

# ============================================================================
# Architectures
# ============================================================================

# Maps an architecture as it appears in a package name to the name the host
# compiler's code generation back end reports for it
ARCHITECTURES = MappingProxyType({
    'amd64': 'AMD64',
    'aarch64': 'aarch64',
    'riscv64': 'riscv64',
})
