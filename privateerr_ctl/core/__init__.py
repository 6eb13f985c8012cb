"""Core functionality for privateerr-ctl."""

from .dockerfile import extract_base_image

__all__ = [
    'extract_base_image'
]
