"""Up and run commands for privateerr-ctl."""

import click

from privateerr_ctl.cli.helpers import ensure_credentials, ensure_dependencies, run_compose
from ...core.constants import RUN, UP


def start_service(config):
    """Build, (re)create and start the containers after the pre-flight checks."""
    ensure_dependencies(config)
    ensure_credentials()

    click.echo(f"\nStarting service {config.service_name}")
    run_compose(config, UP)


@click.command(name=UP)
@click.pass_obj
def up(config):
    """Build, (re)create, and start containers for services"""
    start_service(config)


@click.command(name=RUN)
@click.pass_obj
def run(config):
    """Alias for up"""
    start_service(config)
