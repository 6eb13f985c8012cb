"""Docker service for image cleanup through the Docker Engine API."""

import logging
from typing import List

import docker
import docker.errors

from .exceptions import DockerServiceError, ImageNotFoundError

logger = logging.getLogger(__name__)


class DockerService:
    """Service for Docker image operations."""

    def __init__(self):
        """Initialize Docker service and test connection."""
        try:
            self.client = docker.from_env()
            self.client.ping()
        except docker.errors.DockerException as e:
            if "connection refused" in str(e).lower() or "cannot connect" in str(e).lower():
                raise DockerServiceError(
                    "Docker daemon is not running. Please start Docker Desktop or the Docker service."
                ) from e
            else:
                raise DockerServiceError(f"Failed to connect to Docker: {e}") from e

    def list_image_ids(self, reference: str) -> List[str]:
        """List ids of local images whose repository matches a reference.

        Args:
            reference: Image name without tag

        Returns:
            Image ids, empty for an empty reference

        Raises:
            DockerServiceError: If listing fails
        """
        if not reference:
            return []
        try:
            images = self.client.images.list(name=reference)
        except docker.errors.APIError as e:
            raise DockerServiceError(f"Failed to list images: {e}") from e
        return [image.id for image in images]

    def remove_image(self, image_id: str, force: bool = True) -> None:
        """Remove a Docker image.

        Raises:
            ImageNotFoundError: If image not found
            DockerServiceError: If removal fails
        """
        try:
            self.client.images.remove(image_id, force=force)
        except docker.errors.ImageNotFound as e:
            raise ImageNotFoundError(f"Image '{image_id}' not found") from e
        except docker.errors.APIError as e:
            raise DockerServiceError(f"Failed to remove image: {e}") from e

    def remove_images(self, reference: str) -> int:
        """Force-remove every local image matching a reference.

        Failures are logged and skipped; nothing is raised.

        Returns:
            Number of images removed
        """
        try:
            image_ids = self.list_image_ids(reference)
        except DockerServiceError as e:
            logger.warning(f"Could not list images for {reference}: {e}")
            return 0

        removed = 0
        for image_id in image_ids:
            try:
                self.remove_image(image_id)
                removed += 1
            except DockerServiceError as e:
                logger.warning(f"Could not remove image {image_id}: {e}")
        logger.info(f"Removed {removed} image(s) matching {reference}")
        return removed
