# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
Error handling for plugin factory generation.

Per-owner I/O failures are reported through the Messager rather than raised;
everything here signals a broken contract with a collaborator.
"""


class PlugsmithError(Exception):
    """Base exception for all plugsmith errors."""
    pass


class DescriptorError(PlugsmithError):
    """Malformed plugin descriptor or descriptor manifest."""
    pass


class GenerationError(PlugsmithError):
    """Error while rendering a generated module."""
    pass


class FilerError(PlugsmithError, OSError):
    """A generated artifact could not be created."""
    pass
