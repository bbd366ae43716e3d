# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""plugsmith command-line interface.

Architecture:
- Command group built by create_cli() in cli.py, loading commands lazily
- Configuration managed through ApplicationContext (context.py)
- Commands auto-receive context via @click.pass_obj decorator

Entry point defined in setup.py.
"""

from .cli import create_cli, main

__all__ = [
    "create_cli",
    "main",
]
