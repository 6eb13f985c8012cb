"""CLI Helper Functions for privateerr-ctl.

This module provides the pieces shared by the CLI commands:
- Logging setup for the command group
- Pre-flight checks that exit on failure
- Running compose sub-commands with exit status propagation
- Best-effort image cleanup after teardown
"""

import logging
import shlex
import sys

import click

from privateerr_ctl.core.constants import INTERRUPTED_EXIT_CODE, LOGS
from privateerr_ctl.core.dockerfile import extract_base_image
from privateerr_ctl.core.preflight import check_credentials, check_dependencies
from privateerr_ctl.models.config import ComposeConfig
from privateerr_ctl.services.compose_service import ComposeService
from privateerr_ctl.services.docker_service import DockerService
from privateerr_ctl.services.exceptions import (
    ComposeServiceError,
    ConfigurationError,
    DockerServiceError,
    MissingCredentialError,
    MissingDependencyError,
)

logger = logging.getLogger(__name__)

INTERRUPT_MESSAGES = {
    LOGS: "Stopped following logs.",
}


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr, at DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )


def ensure_dependencies(config: ComposeConfig) -> None:
    """Ensure the build dependencies are on PATH, exit with error if not."""
    try:
        check_dependencies(config.dependencies)
    except MissingDependencyError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def ensure_credentials() -> None:
    """Ensure PIA credentials are set, exit with error if not."""
    try:
        check_credentials()
    except MissingCredentialError as e:
        click.echo(str(e))
        sys.exit(1)


def get_compose_service(config: ComposeConfig) -> ComposeService:
    """Create the compose runner for the configured project."""
    return ComposeService(config.compose_command, config.project_dir)


def run_compose(config: ComposeConfig, subcommand: str) -> None:
    """Echo and run a compose sub-command, exiting with its status on failure.

    The sub-command's settings are parsed here, so a malformed value only
    fails the operation that uses it. Ctrl-C ends the child and exits 130.
    """
    try:
        args = config.compose_args(subcommand)
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    compose = get_compose_service(config)
    click.echo(shlex.join(compose.command(subcommand, args)))
    try:
        compose.run(subcommand, args)
    except ComposeServiceError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(e.returncode)
    except KeyboardInterrupt:
        click.echo(f"\n{INTERRUPT_MESSAGES.get(subcommand, f'Interrupted {subcommand}.')}")
        sys.exit(INTERRUPTED_EXIT_CODE)


def remove_base_images(config: ComposeConfig) -> None:
    """Remove local images matching the Dockerfile's base image.

    Best effort: nothing here fails the calling command.
    """
    reference = extract_base_image(config.dockerfile)
    click.echo(f"\nRemoving images based on {reference}")
    if not reference:
        return

    try:
        docker_service = DockerService()
    except DockerServiceError as e:
        logger.warning(f"Skipping image cleanup: {e}")
        return
    docker_service.remove_images(reference)
