"""Pre-flight check commands for privateerr-ctl."""

import click

from privateerr_ctl.cli.helpers import ensure_credentials, ensure_dependencies
from ...core.constants import BUILD_DEPENDS, PIA_CREDS


@click.command(name=BUILD_DEPENDS)
@click.pass_obj
def build_depends(config):
    """Ensure build dependencies are installed"""
    ensure_dependencies(config)


@click.command(name=PIA_CREDS)
def pia_creds():
    """Ensure Private Internet Access credentials are set"""
    ensure_credentials()
