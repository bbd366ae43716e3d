# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Plugin name disambiguation.

Plugins generated into the same factory module must have distinct names.
Colliding names get a short numeric suffix instead of one derived from the
parameter types, which keeps generated names clear of file name length
limits. The suffix starts with a double underscore so synthesized names stand
out.
"""

import logging
from typing import Callable, List

from .constants import DISAMBIGUATION_MARKER
from .plugins.base import GeneratedPlugin

logger = logging.getLogger(__name__)


def disambiguate_with(
    plugins: List[GeneratedPlugin],
    gen_name: Callable[[GeneratedPlugin, int], str],
    next_id: int = 0,
) -> int:
    """Rename every plugin whose name is shared with another plugin.

    Sorts plugins by name in place (stable), then scans neighbours. The first
    member of a run of equal names is renamed once, when its first duplicate
    is found; every later member is renamed as it is reached. Each rename
    consumes one index from a counter shared by the whole list.

    Args:
        plugins: Plugins to rename
        gen_name: Builds a new name from a plugin and its suffix index
        next_id: First suffix index to hand out

    Returns:
        The next unused suffix index
    """
    plugins.sort(key=lambda plugin: plugin.plugin_name)
    if not plugins:
        return next_id

    current = plugins[0]
    current_name = current.plugin_name

    for next_plugin in plugins[1:]:
        if current_name == next_plugin.plugin_name:
            if current is not None:
                next_id = _rename(current, gen_name, next_id)
                current = None
            next_id = _rename(next_plugin, gen_name, next_id)
        else:
            current = next_plugin
            current_name = current.plugin_name

    return next_id


def _rename(plugin: GeneratedPlugin, gen_name: Callable[[GeneratedPlugin, int], str], index: int) -> int:
    name = gen_name(plugin, index)
    logger.debug(f"Renamed plugin {plugin.plugin_name} -> {name}")
    plugin.plugin_name = name
    return index + 1


def disambiguate_names(plugins: List[GeneratedPlugin], next_id: int = 0) -> int:
    """Suffix colliding plugin names with `__<n>`.

    Example:
        names ["foo", "bar", "foo", "foo", "baz"] become
        ["bar", "baz", "foo__0", "foo__1", "foo__2"]
    """
    return disambiguate_with(
        plugins,
        lambda plugin, index: f"{plugin.plugin_name}{DISAMBIGUATION_MARKER}{index}",
        next_id,
    )
