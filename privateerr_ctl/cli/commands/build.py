"""Build command for privateerr-ctl."""

import click

from privateerr_ctl.cli.helpers import ensure_credentials, ensure_dependencies, run_compose
from ...core.constants import BUILD


def build_service(config):
    """Build the service image after the pre-flight checks."""
    ensure_dependencies(config)
    ensure_credentials()

    click.echo(f"\nBuilding service {config.service_name}")
    run_compose(config, BUILD)


@click.command(name=BUILD)
@click.pass_obj
def build(config):
    """Build the service stack"""
    build_service(config)
