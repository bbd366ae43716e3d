# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
Plugin factory generator.

Collects the plugins discovered while processing one compilation unit,
groups them by the top-level class that declares their intrinsic method, and
emits one factory module per group.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .declarations import Declaration, resolve_owner
from .emitter import PluginFactoryEmitter
from .environment import ProcessingEnvironment
from .naming import disambiguate_names
from .plugins.base import GeneratedPlugin

logger = logging.getLogger(__name__)


@dataclass
class GenerationReport:
    """Outcome of a generate_all() run.

    Attributes:
        generated: Qualified names of the factory modules written
        failed: Qualified names of owners whose module could not be written
    """

    generated: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


class PluginGenerator:
    """Groups plugins by owner and generates their factory modules."""

    def __init__(self, emitter: Optional[PluginFactoryEmitter] = None):
        self.emitter = emitter or PluginFactoryEmitter()
        self._plugins: Dict[Declaration, List[GeneratedPlugin]] = {}

    def add_plugin(self, plugin: GeneratedPlugin) -> None:
        owner = resolve_owner(plugin.intrinsic_method)
        self._plugins.setdefault(owner, []).append(plugin)
        logger.debug(f"Added {plugin!r} for owner {owner}")

    register = add_plugin

    def owners(self) -> List[Declaration]:
        """Owners in first-registration order."""
        return list(self._plugins)

    def plugins_for(self, owner: Declaration) -> List[GeneratedPlugin]:
        return list(self._plugins.get(owner, []))

    def generate_all(self, env: ProcessingEnvironment) -> GenerationReport:
        """Generate one factory module per owner, in first-registration order.

        A failure for one owner is reported through env.messager and does
        not stop generation for the others.
        """
        report = GenerationReport()
        logger.info(f"Generating plugin factories for {len(self._plugins)} owners")

        for owner, plugins in self._plugins.items():
            disambiguate_names(plugins)
            if self.emitter.emit(owner, plugins, env):
                report.generated.append(owner.qualified_name)
            else:
                report.failed.append(owner.qualified_name)

        return report
