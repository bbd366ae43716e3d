# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Tests for console logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from plugsmith._internal.logging import setup_logging


def _rich_handlers(logger):
    return [h for h in logger.handlers if isinstance(h, RichHandler)]


@pytest.fixture
def clean_root():
    """Root logger with no handlers; pytest's capture handlers may be added later."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    yield root
    root.handlers = saved_handlers
    root.setLevel(saved_level)


@pytest.mark.parametrize("name, level", [
    ("quiet", logging.ERROR),
    ("normal", logging.WARNING),
    ("verbose", logging.INFO),
    ("debug", logging.DEBUG),
    ("info", logging.INFO),
])
def test_cli_levels_map_to_logging_levels(clean_root, name, level):
    root = clean_root
    root.handlers = []

    setup_logging(name)

    assert root.level == level
    assert len(_rich_handlers(root)) == 1


def test_repeated_setup_reuses_handler(clean_root):
    root = clean_root
    root.handlers = []

    setup_logging("normal")
    setup_logging("debug")

    handlers = _rich_handlers(root)
    assert len(handlers) == 1
    assert handlers[0].level == logging.DEBUG


def test_template_engine_is_quieted_outside_debug(clean_root):
    setup_logging("verbose")

    assert logging.getLogger("jinja2").level == logging.WARNING
