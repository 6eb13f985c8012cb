"""Compose service for running Docker Compose commands."""

import logging
import shlex
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence

from ..core.constants import COMPOSE_COMMAND
from .exceptions import ComposeServiceError

logger = logging.getLogger(__name__)


class ComposeService:
    """Runs Docker Compose sub-commands, streaming their output to the terminal."""

    def __init__(self, compose_command: str = COMPOSE_COMMAND, project_dir: Optional[Path] = None):
        """Initialize Compose service.

        Args:
            compose_command: Compose executable to invoke
            project_dir: Working directory for the compose project
                (defaults to current directory)
        """
        self.compose_command = compose_command
        self.project_dir = project_dir or Path.cwd()

    def command(self, subcommand: str, args: Optional[Sequence[str]] = None) -> List[str]:
        """Compose the full argument list for a sub-command."""
        return [self.compose_command, subcommand, *(args or [])]

    def run(self, subcommand: str, args: Optional[Sequence[str]] = None, check: bool = True) -> int:
        """Run a compose sub-command in the foreground.

        Output is not captured; the child writes straight to the
        inherited stdout and stderr.

        Args:
            subcommand: Compose sub-command (build, up, down, logs)
            args: Options and arguments following the sub-command
            check: Raise if the command exits non-zero

        Returns:
            The command's exit status

        Raises:
            ComposeServiceError: If the command cannot be started, or exits
                non-zero while check is set
        """
        cmd = self.command(subcommand, args)
        logger.info(f"Running: {shlex.join(cmd)}")
        try:
            result = subprocess.run(cmd, cwd=self.project_dir, check=False)
        except OSError as e:
            raise ComposeServiceError(
                f"Failed to run {self.compose_command}: {e}", returncode=127
            ) from e

        if check and result.returncode != 0:
            raise ComposeServiceError(
                f"{shlex.join(cmd)} failed with exit status {result.returncode}",
                returncode=result.returncode,
            )
        return result.returncode

    def build(self, service_name: str, options: Sequence[str]) -> int:
        """Build images for a service."""
        return self.run("build", [*options, service_name])

    def up(self, options: Sequence[str]) -> int:
        """Create and start the containers."""
        return self.run("up", options)

    def down(self, options: Sequence[str]) -> int:
        """Stop and remove containers, networks and, per options, images and volumes."""
        return self.run("down", options)

    def logs(self, options: Sequence[str]) -> int:
        """Show container output; blocks while following."""
        return self.run("logs", options)
