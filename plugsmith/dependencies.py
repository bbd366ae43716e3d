# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Dependency computation for generated factory modules.

Dependencies are qualified class names such as
'compiler.nodes.graphbuilderconf.InvocationPlugin'. The module part ends
where the first segment starting with an uppercase letter begins; everything
after that boundary is a (possibly nested) class path.
"""

import logging
import re
from typing import TYPE_CHECKING, Iterable, List, Optional, Set, Tuple

from .constants import (
    BASELINE_DEPENDENCIES,
    EXCLUDE_FROM_COVERAGE,
    GRAPHBUILDERCONF_PACKAGE,
    PLUGIN_REPLACEMENT_NODE,
    PLUGIN_REPLACEMENT_WITH_EXCEPTION_NODE,
)

if TYPE_CHECKING:
    from .environment import ProcessingEnvironment
    from .plugins.base import GeneratedPlugin

logger = logging.getLogger(__name__)

_PACKAGE_CLASS_BOUNDARY = re.compile(r"\.([A-Z])")


def split_class_boundary(name: str) -> Tuple[Optional[str], str]:
    """Split a qualified name into (module, class path).

    Examples:
        >>> split_class_boundary('compiler.nodes.ValueNode')
        ('compiler.nodes', 'ValueNode')
        >>> split_class_boundary('pkg.Outer.Inner')
        ('pkg', 'Outer.Inner')
        >>> split_class_boundary('pkg.helpers')
        (None, 'pkg.helpers')
    """
    match = _PACKAGE_CLASS_BOUNDARY.search(name)
    if match is None:
        return None, name
    return name[:match.start()], name[match.start() + 1:]


def is_visible_in_package(name: str, package: str) -> bool:
    """True for a top-level class of `package`, which needs no import there.

    Nested classes of the same package are not covered.
    """
    module, class_path = split_class_boundary(name)
    return module == package and '.' not in class_path


def compute_dependencies(
    plugins: Iterable["GeneratedPlugin"],
    package: str,
    env: Optional["ProcessingEnvironment"] = None,
) -> List[str]:
    """Compute the sorted dependencies a factory module in `package` declares.

    Args:
        plugins: Plugins rendered into the module
        package: Qualified name of the module's package
        env: Processing environment handed to extra_imports()

    Returns:
        Sorted, duplicate-free qualified names, minus the top-level classes
        of `package` itself
    """
    extra: Set[str] = set(BASELINE_DEPENDENCIES)

    for plugin in plugins:
        plugin.extra_imports(env, extra)
        extra.add(f"{GRAPHBUILDERCONF_PACKAGE}.{plugin.plugin_superclass}")
        if plugin.needs_replacement:
            extra.add(EXCLUDE_FROM_COVERAGE)
            if plugin.is_with_exception_replacement:
                extra.add(PLUGIN_REPLACEMENT_WITH_EXCEPTION_NODE)
            else:
                extra.add(PLUGIN_REPLACEMENT_NODE)

    dependencies = [name for name in sorted(extra) if not is_visible_in_package(name, package)]
    logger.debug(f"{len(dependencies)} dependencies for package {package} ({len(extra) - len(dependencies)} elided)")
    return dependencies


def format_dependency(name: str) -> str:
    """Render the import statement declaring one dependency."""
    module, class_path = split_class_boundary(name)
    if module is None:
        return f"import {name}"
    return f"from {module} import {class_path.split('.', 1)[0]}"


def format_dependencies(names: Iterable[str]) -> List[str]:
    """Render import statements in order, collapsing identical lines."""
    lines: List[str] = []
    for name in names:
        line = format_dependency(name)
        if line not in lines:
            lines.append(line)
    return lines
