# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Plugin descriptors consumed by the factory generator."""

from .base import GeneratedPlugin, class_reference, default_plugin_name
from .invocation import GeneratedFoldPlugin, GeneratedNodeIntrinsicPlugin

__all__ = [
    "GeneratedPlugin",
    "GeneratedFoldPlugin",
    "GeneratedNodeIntrinsicPlugin",
    "class_reference",
    "default_plugin_name",
]
