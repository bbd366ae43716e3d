# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""I/O and data loading utilities.

Private utilities for loading YAML. Not part of the public API.
"""
