"""Main CLI entry point for privateerr-ctl."""

from pathlib import Path

import click

from privateerr_ctl.cli.helpers import configure_logging
from ..models.config import ComposeConfig
from .commands.build import build
from .commands.down import clean, down
from .commands.help import help_
from .commands.logs import logs
from .commands.preflight import build_depends, pia_creds
from .commands.up import run, start_service, up


@click.group(invoke_without_command=True)
@click.option('--project-dir', type=click.Path(exists=True, file_okay=False, path_type=Path),
              help='Directory holding the compose project (defaults to current directory)')
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, project_dir, verbose):
    """privateerr-ctl - Build, start and stop the privateerr Docker Compose stack"""
    configure_logging(verbose)

    if ctx.obj is None:
        ctx.obj = ComposeConfig.from_env(project_dir=project_dir)

    if ctx.invoked_subcommand is None:
        start_service(ctx.obj)


# Register commands
cli.add_command(build_depends)
cli.add_command(pia_creds)
cli.add_command(down)
cli.add_command(clean)
cli.add_command(build)
cli.add_command(up)
cli.add_command(logs)
cli.add_command(help_)
cli.add_command(run)


if __name__ == '__main__':
    cli()
