"""Down and clean commands for privateerr-ctl."""

import click

from privateerr_ctl.cli.helpers import ensure_dependencies, remove_base_images, run_compose
from ...core.constants import CLEAN, DOWN


def stop_service(config):
    """Tear the stack down, then remove images built on the base image."""
    ensure_dependencies(config)

    click.echo(f"\nStopping service {config.service_name}")
    run_compose(config, DOWN)

    remove_base_images(config)


@click.command(name=DOWN)
@click.pass_obj
def down(config):
    """Stop and remove containers, networks, volumes, and images"""
    stop_service(config)


@click.command(name=CLEAN)
@click.pass_obj
def clean(config):
    """Alias for down"""
    stop_service(config)
