# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""plugsmith CLI commands.

Single source of truth for CLI command registration; cli.py's LazyGroup
imports a command's module only when the command is invoked.
"""

# Format: 'command_name': (relative_module, attribute_name)
_COMMAND_REGISTRY = {
    "generate": (".generate", "generate"),
    "architectures": (".architectures", "architectures"),
    "services": (".services", "services"),
}

COMMAND_MAP = {
    name: (f"plugsmith.cli.commands{module}", attr)
    for name, (module, attr) in _COMMAND_REGISTRY.items()
}

__all__ = [
    "COMMAND_MAP",
]
