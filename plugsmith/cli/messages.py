# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""User-facing messages and strings for CLI output."""

PACKAGE_NAME = "plugsmith"

# Generate command
MANIFEST_VALIDATION_HINTS = [
    "Every plugin entry needs 'package', 'class' and 'method'",
    "node_intrinsic plugins also need a qualified 'node_class'",
    "Plugin names must be valid Python identifiers without a double underscore",
]

GENERATION_FAILED_HINT = "Run with --log-level verbose to see every generated factory"

# Services command
SERVICES_NOT_FOUND_HINT = "Run 'plugsmith generate' first, or pass the manifest path explicitly"
