"""Configuration models for privateerr-ctl."""

import os
import shlex
from pathlib import Path
from typing import List, Mapping, Optional

from pydantic import BaseModel, Field, SecretStr

from ..core.constants import (
    BUILD,
    COMPOSE_COMMAND,
    CREDENTIAL_VARS,
    DEFAULT_BUILD_OPTIONS,
    DEFAULT_DOWN_OPTIONS,
    DEFAULT_DOWN_TIMEOUT,
    DEFAULT_LOGS_OPTIONS,
    DEFAULT_SERVICE_NAME,
    DEFAULT_UP_OPTIONS,
    DEPENDENCIES,
    DOCKERFILE_PATH,
    DOWN,
    LOGS,
    UP,
)
from ..services.exceptions import ConfigurationError, MissingCredentialError


def split_options(value: str, variable: str = "options") -> List[str]:
    """Split an option string into arguments using shell word rules."""
    try:
        return shlex.split(value)
    except ValueError as e:
        raise ConfigurationError(f"Invalid {variable}: {e}") from e


class ComposeConfig(BaseModel):
    """Docker Compose settings for one invocation.

    Option values are kept as the raw strings found in the environment and
    only parsed by the operation that uses them, so a malformed value for one
    operation leaves the others working.
    """

    service_name: str = DEFAULT_SERVICE_NAME
    down_timeout: str = str(DEFAULT_DOWN_TIMEOUT)
    down_options: Optional[str] = None
    build_options: str = DEFAULT_BUILD_OPTIONS
    up_options: str = DEFAULT_UP_OPTIONS
    logs_options: str = DEFAULT_LOGS_OPTIONS
    dependencies: List[str] = Field(default_factory=lambda: list(DEPENDENCIES))
    compose_command: str = COMPOSE_COMMAND
    project_dir: Path = Field(default_factory=Path.cwd)

    @property
    def dockerfile(self) -> Path:
        """Path to the Dockerfile whose base image is cleaned up on teardown."""
        return self.project_dir / DOCKERFILE_PATH

    def down_args(self) -> List[str]:
        """Arguments for ``down``; the timeout only feeds the default options.

        Raises:
            ConfigurationError: If the options or the timeout cannot be parsed
        """
        if self.down_options is not None:
            return split_options(self.down_options, "COMPOSE_DOWN_OPTIONS")

        try:
            timeout = int(self.down_timeout)
        except ValueError as e:
            raise ConfigurationError(
                f"COMPOSE_DOWN_TIMEOUT must be a number of seconds, got {self.down_timeout!r}"
            ) from e
        return split_options(DEFAULT_DOWN_OPTIONS.format(timeout=timeout), "COMPOSE_DOWN_OPTIONS")

    def build_args(self) -> List[str]:
        """Arguments for ``build``, ending with the service name."""
        return [*split_options(self.build_options, "COMPOSE_BUILD_OPTIONS"), self.service_name]

    def up_args(self) -> List[str]:
        """Arguments for ``up``."""
        return split_options(self.up_options, "COMPOSE_UP_OPTIONS")

    def logs_args(self) -> List[str]:
        """Arguments for ``logs``."""
        return split_options(self.logs_options, "COMPOSE_LOGS_OPTIONS")

    def compose_args(self, subcommand: str) -> List[str]:
        """Arguments for a compose sub-command.

        Raises:
            ConfigurationError: If the sub-command's settings cannot be parsed
        """
        resolvers = {
            BUILD: self.build_args,
            UP: self.up_args,
            DOWN: self.down_args,
            LOGS: self.logs_args,
        }
        return resolvers[subcommand]()

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        project_dir: Optional[Path] = None,
    ) -> 'ComposeConfig':
        """Read the configuration from environment variables.

        Unset variables fall back to their defaults. A variable set to an
        empty string is kept as is, so an empty option string means no
        options. Nothing is parsed here.
        """
        env = os.environ if environ is None else environ

        return cls(
            service_name=env.get("COMPOSE_SERVICE_NAME", DEFAULT_SERVICE_NAME),
            down_timeout=env.get("COMPOSE_DOWN_TIMEOUT", str(DEFAULT_DOWN_TIMEOUT)),
            down_options=env.get("COMPOSE_DOWN_OPTIONS"),
            build_options=env.get("COMPOSE_BUILD_OPTIONS", DEFAULT_BUILD_OPTIONS),
            up_options=env.get("COMPOSE_UP_OPTIONS", DEFAULT_UP_OPTIONS),
            logs_options=env.get("COMPOSE_LOGS_OPTIONS", DEFAULT_LOGS_OPTIONS),
            project_dir=project_dir or Path.cwd(),
        )


class Credentials(BaseModel):
    """Private Internet Access credentials."""

    user: str
    password: SecretStr

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Credentials':
        """Read the credentials, checking each variable in order.

        Raises:
            MissingCredentialError: For the first variable that is unset or empty
        """
        env = os.environ if environ is None else environ
        values = []
        for variable in CREDENTIAL_VARS:
            value = env.get(variable, "")
            if not value:
                raise MissingCredentialError(variable)
            values.append(value)

        user, password = values
        return cls(user=user, password=password)
