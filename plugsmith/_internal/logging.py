# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Simple logging configuration using Python's standard logging with Rich.

Usage:
    from plugsmith._internal.logging import setup_logging

    # In CLI setup
    setup_logging(level="verbose")

    # In application code
    import logging
    logger = logging.getLogger(__name__)
    logger.info("Generating...")
"""

import logging

# CLI verbosity names and their logging levels
LEVELS = {
    'quiet': logging.ERROR,
    'normal': logging.WARNING,
    'verbose': logging.INFO,
    'debug': logging.DEBUG,
}


def setup_logging(level: str = "normal") -> None:
    """Configure Python logging with Rich handler.

    Accepts CLI verbosity names (quiet, normal, verbose, debug) as well as
    standard level names (error, warning, info).
    """
    from rich.logging import RichHandler

    level_map = {
        **LEVELS,
        'error': logging.ERROR,
        'warning': logging.WARNING,
        'info': logging.INFO,
    }
    log_level = level_map.get(level.lower(), logging.WARNING)

    root = logging.getLogger()
    root.setLevel(log_level)

    if not root.handlers:
        handler = RichHandler(
            rich_tracebacks=(log_level == logging.DEBUG),
            show_path=False,
            markup=False,
            show_time=False
        )
        handler.setLevel(log_level)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        root.addHandler(handler)
    else:
        for handler in root.handlers:
            handler.setLevel(log_level)

    # Keep template engine noise out of non-debug output
    if log_level > logging.DEBUG:
        logging.getLogger('jinja2').setLevel(logging.WARNING)
