# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from enum import IntEnum

# ============================================================================
# CLI Names
# ============================================================================

CLI_NAME = "plugsmith"

# ============================================================================
# Exit Codes
# ============================================================================


class ExitCode(IntEnum):
    """Process exit codes (BSD sysexits.h where one applies)."""

    SUCCESS = 0
    GENERATION_FAILED = 1
    USAGE = 64
    DATAERR = 65
    NOINPUT = 66
    SOFTWARE = 70
    CONFIG = 78
    INTERRUPTED = 130  # Standard SIGINT exit code
