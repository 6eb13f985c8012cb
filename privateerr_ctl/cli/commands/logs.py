"""Logs command for privateerr-ctl."""

import click

from privateerr_ctl.cli.helpers import run_compose
from ...core.constants import LOGS


@click.command(name=LOGS)
@click.pass_obj
def logs(config):
    """Show logs for the service"""
    click.echo(f"\nGetting logs for service {config.service_name}")
    run_compose(config, LOGS)
