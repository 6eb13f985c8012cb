"""Pre-flight checks run before Docker Compose is invoked."""

import logging
import shutil
from typing import Callable, Dict, Iterable, Mapping, Optional

from ..models.config import Credentials
from ..services.exceptions import MissingDependencyError

logger = logging.getLogger(__name__)


def check_dependencies(
    dependencies: Iterable[str],
    which: Optional[Callable[[str], Optional[str]]] = None,
) -> Dict[str, str]:
    """Ensure every executable resolves on PATH.

    Returns:
        Mapping of executable name to resolved path

    Raises:
        MissingDependencyError: For the first executable that is not found
    """
    which = which or shutil.which
    resolved = {}
    for executable in dependencies:
        path = which(executable)
        if not path:
            raise MissingDependencyError(executable)
        logger.debug(f"Found {executable} at {path}")
        resolved[executable] = path
    return resolved


def check_credentials(environ: Optional[Mapping[str, str]] = None) -> Credentials:
    """Ensure the Private Internet Access credentials are set."""
    credentials = Credentials.from_env(environ)
    logger.debug("PIA credentials are set")
    return credentials
