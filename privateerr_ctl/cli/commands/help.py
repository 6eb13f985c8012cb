"""Help command for privateerr-ctl."""

import textwrap

import click
from tabulate import tabulate

from ...core.constants import (
    BUILD,
    BUILD_DEPENDS,
    CLEAN,
    DOWN,
    HELP,
    LOGS,
    PIA_CREDS,
    RUN,
    UP,
)

COMMANDS = [
    ("(none)", "Builds and starts the service stack."),
    (BUILD_DEPENDS, "Ensures build dependencies are installed."),
    (PIA_CREDS, "Ensures Private Internet Access credentials are set."),
    (DOWN, "Stops and removes containers, networks, volumes, and images."),
    (CLEAN, f"Alias for {DOWN}."),
    (BUILD, "Builds the service stack."),
    (UP, "Builds, (re)creates, and starts containers for services."),
    (RUN, f"Alias for {UP}."),
    (LOGS, "Shows logs for the service."),
    (HELP, "Displays this help message."),
]


def format_usage() -> str:
    """Render the static usage text."""
    rows = [(name, f"- {description}") for name, description in COMMANDS]
    table = textwrap.indent(tabulate(rows, tablefmt="plain"), "  ")
    return f"Usage: privateerr-ctl [OPTIONS] [COMMAND]\n\nCommands:\n{table}"


@click.command(name=HELP)
def help_():
    """Display usage information"""
    click.echo(format_usage())
