# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
Plugin factory module emitter.

Renders one generated module per owner through the Jinja2 template engine:
provenance header, namespace import, dependency imports, one class per
plugin, and the factory class whose register_plugins() registers them all.
"""

import io
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from .constants import (
    ARCHITECTURE_SPECIFIC,
    ARCHITECTURES,
    FACTORY_PREFIX,
    GENERATED_PLUGIN_FACTORY,
    GENERATOR_NAMES,
)
from .declarations import Declaration
from .dependencies import compute_dependencies, format_dependencies, split_class_boundary
from .environment import ProcessingEnvironment
from .errors import GenerationError
from .plugins.base import GeneratedPlugin
from .templates import PLUGIN_FACTORY_TEMPLATE, TEMPLATE_DIR

logger = logging.getLogger(__name__)


def factory_class_name(owner: Declaration) -> str:
    return FACTORY_PREFIX + owner.simple_name


def architecture_for(package: Declaration) -> Optional[str]:
    """Architecture name for a package whose leading segment names one."""
    return ARCHITECTURES.get(package.name.split('.', 1)[0])


class PluginFactoryEmitter:
    """Emits generated plugin factory modules."""

    def __init__(self, template_dir: Optional[Path] = None, generators: Sequence[str] = GENERATOR_NAMES):
        """
        Initialize PluginFactoryEmitter.

        Args:
            template_dir: Directory containing the factory template
            generators: Names recorded in the generated header
        """
        self.template_dir = Path(template_dir) if template_dir else TEMPLATE_DIR
        self.generators = tuple(generators)
        self.jinja_env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        self.jinja_env.filters['repr'] = repr

    def emit(self, owner: Declaration, plugins: List[GeneratedPlugin], env: ProcessingEnvironment) -> bool:
        """Generate and register the factory module for one owner.

        Render and I/O failures are reported through env.messager and leave
        other owners unaffected; nothing is registered for a failed owner.
        The module is rendered before its artifact is created, so a render
        failure reserves nothing in the Filer.

        Returns:
            True if the module was written and registered
        """
        qualified_name = f"{owner.enclosing.qualified_name}.{factory_class_name(owner)}"
        try:
            content = self.render(owner, plugins, env)
            artifact = env.filer.create_source_file(qualified_name, owner)
            with artifact.open_writer() as out:
                out.write(content)
        except (GenerationError, OSError) as e:
            env.messager.report_error(str(e))
            return False

        env.services.register_provider(qualified_name, GENERATED_PLUGIN_FACTORY, owner)
        logger.info(f"Generated {qualified_name} with {len(plugins)} plugins")
        return True

    def render(self, owner: Declaration, plugins: List[GeneratedPlugin], env: Optional[ProcessingEnvironment] = None) -> str:
        """Render the full text of an owner's factory module.

        Raises:
            GenerationError: If a plugin or the template fails to render
        """
        package = owner.enclosing
        architecture = architecture_for(package)

        try:
            dependencies = compute_dependencies(plugins, package.qualified_name, env)
            bases = [split_class_boundary(GENERATED_PLUGIN_FACTORY)[1]]
            if architecture is not None:
                dependencies = sorted({*dependencies, ARCHITECTURE_SPECIFIC})
                bases.append(split_class_boundary(ARCHITECTURE_SPECIFIC)[1])

            context: Dict[str, Any] = {
                'header': [
                    'fmt: off',
                    'flake8: noqa',
                    'GENERATED CONTENT - DO NOT EDIT',
                    f"GENERATORS: {', '.join(self.generators)}",
                ],
                'package': package.qualified_name,
                'imports': format_dependencies(dependencies),
                'blocks': [self._capture(lambda out: plugin.generate(env, out)) for plugin in plugins],
                'class_name': factory_class_name(owner),
                'bases': bases,
                'architecture': architecture,
                'registrations': [self._capture(plugin.register) for plugin in plugins],
            }

            template = self.jinja_env.get_template(PLUGIN_FACTORY_TEMPLATE)
            return template.render(**context)
        except Exception as e:
            raise GenerationError(f"Failed to render plugin factory for {owner}: {e}") from e

    @staticmethod
    def _capture(write: Callable[[io.StringIO], None]) -> str:
        buffer = io.StringIO()
        write(buffer)
        return buffer.getvalue().rstrip('\n')
