"""Models for privateerr-ctl."""

from .config import ComposeConfig, Credentials

__all__ = [
    'ComposeConfig',
    'Credentials'
]
