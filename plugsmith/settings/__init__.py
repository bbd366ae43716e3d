# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""plugsmith configuration module.

Provides type-safe configuration management with Pydantic Settings.
"""

from .loader import get_config, load_config, reset_config
from .schema import GeneratorConfig, LoggingConfig

__all__ = [
    "GeneratorConfig",
    "LoggingConfig",
    "load_config",
    "get_config",
    "reset_config",
]
