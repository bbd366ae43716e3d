# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from pathlib import Path

import click

from plugsmith.environment import load_services

from ..context import ApplicationContext
from ..exceptions import CommandError, ValidationError
from ..messages import SERVICES_NOT_FOUND_HINT
from ..utils import console


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("manifest", required=False, type=click.Path(dir_okay=False, path_type=Path))
@click.pass_obj
def services(ctx: ApplicationContext, manifest: Path | None) -> None:
    """List generated providers recorded in a service MANIFEST."""
    if manifest is None:
        manifest = ctx.get_effective_config().services_manifest_path

    try:
        providers = load_services(manifest)
    except FileNotFoundError as e:
        raise CommandError(f"Service manifest not found: {manifest}", details=[SERVICES_NOT_FOUND_HINT]) from e
    except ValueError as e:
        raise ValidationError(f"Invalid service manifest {manifest}: {e}") from e

    for contract, names in providers.items():
        console.print(f"[bold]{contract}[/bold]")
        for name in names:
            console.print(f"  {name}")
