"""privateerr-ctl - Shortcuts for building and running the privateerr Docker Compose stack."""

__version__ = "0.1.0"

# Export main CLI for convenience
from .cli.main import cli

__all__ = ['cli']
