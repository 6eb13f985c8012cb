"""Base image extraction from the project Dockerfile."""

import logging
from pathlib import Path
from typing import Iterable, Union

from .constants import FROM_MARKER

logger = logging.getLogger(__name__)


def parse_base_image(lines: Iterable[str]) -> str:
    """Return the base image of the first ``FROM`` line, without its tag.

    Args:
        lines: Dockerfile lines

    Returns:
        The image name up to the first ':' or an empty string when no
        line starts with ``FROM``
    """
    for line in lines:
        tokens = line.split()
        if not tokens or tokens[0] != FROM_MARKER:
            continue
        if len(tokens) < 2:
            return ""
        return tokens[1].split(":", 1)[0]
    return ""


def extract_base_image(dockerfile: Union[str, Path]) -> str:
    """Read a Dockerfile and extract its base image reference.

    A missing or unreadable Dockerfile yields an empty reference.
    """
    try:
        with open(dockerfile, encoding="utf-8") as f:
            image = parse_base_image(f)
    except OSError as e:
        logger.warning(f"Could not read {dockerfile}: {e}")
        return ""

    if not image:
        logger.debug(f"No {FROM_MARKER} line found in {dockerfile}")
    return image
