# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from pathlib import Path

import click
import yaml

from plugsmith.environment import ProcessingEnvironment
from plugsmith.errors import DescriptorError
from plugsmith.frontend import DescriptorLoader
from plugsmith.generator import PluginGenerator

from ..constants import ExitCode
from ..context import ApplicationContext
from ..exceptions import CommandError, ValidationError
from ..messages import GENERATION_FAILED_HINT, MANIFEST_VALIDATION_HINTS
from ..utils import console, owner_table, success, warning


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("manifests", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--output-dir", "-o", type=click.Path(file_okay=False, path_type=Path),
              help="Root directory for generated modules (default: from configuration)")
@click.option("--no-strict", is_flag=True,
              help="Exit successfully even if some factories could not be generated")
@click.pass_obj
def generate(ctx: ApplicationContext, manifests: tuple[Path, ...], output_dir: Path | None, no_strict: bool) -> None:
    """Generate plugin factory modules from descriptor MANIFESTS (YAML)."""
    config = ctx.get_effective_config()
    if output_dir is not None:
        output_dir = output_dir if output_dir.is_absolute() else (Path.cwd() / output_dir).resolve()
    else:
        output_dir = config.output_dir
    strict = config.strict and not no_strict

    loader = DescriptorLoader()
    generator = PluginGenerator()
    try:
        for manifest in manifests:
            for plugin in loader.load(manifest):
                generator.add_plugin(plugin)
    except DescriptorError as e:
        raise ValidationError(str(e), details=MANIFEST_VALIDATION_HINTS) from e
    except yaml.YAMLError as e:
        raise ValidationError(str(e)) from e

    env = ProcessingEnvironment.for_output_dir(output_dir)
    report = generator.generate_all(env)

    try:
        manifest_path = env.services.write(output_dir / config.services_manifest)
    except OSError as e:
        raise CommandError(f"Failed to write service manifest: {e}") from e

    console.print(owner_table(
        (owner.qualified_name, len(generator.plugins_for(owner)), owner.qualified_name not in report.failed)
        for owner in generator.owners()
    ))

    if report.ok:
        success(f"Generated {len(report.generated)} factories into {output_dir}")
        console.print(f"Service manifest: {manifest_path}")
        return

    warning(f"{len(report.failed)} of {len(generator.owners())} factories failed", details=env.messager.errors)
    if strict:
        console.print(f"[dim]{GENERATION_FAILED_HINT}[/dim]")
        click.get_current_context().exit(ExitCode.GENERATION_FAILED)
