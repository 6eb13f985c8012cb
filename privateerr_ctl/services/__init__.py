"""Service layer for abstracting Docker Compose and Docker operations."""

from .compose_service import ComposeService
from .docker_service import DockerService
from .exceptions import (
    ServiceError,
    PreflightError,
    MissingDependencyError,
    MissingCredentialError,
    ConfigurationError,
    ComposeServiceError,
    DockerServiceError,
    ImageNotFoundError,
)

__all__ = [
    "ComposeService",
    "DockerService",
    "ServiceError",
    "PreflightError",
    "MissingDependencyError",
    "MissingCredentialError",
    "ConfigurationError",
    "ComposeServiceError",
    "DockerServiceError",
    "ImageNotFoundError",
]
