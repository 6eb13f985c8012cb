"""Custom exceptions for service layer."""


class ServiceError(Exception):
    """Base exception for all service-related errors."""

    pass


class PreflightError(ServiceError):
    """Exception raised when a pre-flight check fails."""

    pass


class MissingDependencyError(PreflightError):
    """Exception raised when a required executable is not on PATH."""

    def __init__(self, executable: str):
        self.executable = executable
        super().__init__(f"No {executable} in PATH")


class MissingCredentialError(PreflightError):
    """Exception raised when a credential variable is unset or empty."""

    def __init__(self, variable: str):
        self.variable = variable
        super().__init__(f"Please set {variable}")


class ConfigurationError(ServiceError):
    """Exception raised for invalid configuration values."""

    pass


class ComposeServiceError(ServiceError):
    """Exception raised for Docker Compose operations."""

    def __init__(self, message: str, returncode: int = 1):
        self.returncode = returncode
        super().__init__(message)


class DockerServiceError(ServiceError):
    """Exception raised for Docker service operations."""

    pass


class ImageNotFoundError(DockerServiceError):
    """Exception raised when a Docker image is not found."""

    pass
