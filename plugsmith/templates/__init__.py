# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Jinja2 templates for generated plugin factory modules."""

from pathlib import Path

TEMPLATE_DIR = Path(__file__).parent
PLUGIN_FACTORY_TEMPLATE = "plugin_factory.py.j2"

__all__ = ["TEMPLATE_DIR", "PLUGIN_FACTORY_TEMPLATE"]
