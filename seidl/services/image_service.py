"""Public cloud image service"""

import logging
from typing import List

from seidl.exceptions import CloudInfoDecodeError
from seidl.models.image import (
    AZURE_ENVIRONMENTS,
    Environment,
    Image,
    Region,
    images_from_payload,
    regions_from_payload,
)
from seidl.models.provider import Provider
from seidl.services.cloudinfo_client import CloudInfoClient
from seidl.services.filter_service import filter_deprecated
from seidl.validation import (
    ValidationError,
    validate_images_response,
    validate_regions_response,
)

logger = logging.getLogger("seidl")


class ImageService:
    """Service for fetching public cloud images"""

    def __init__(self, client: CloudInfoClient):
        """
        Initialize image service

        Args:
            client: Public cloud info client wrapper
        """
        self.client = client

    def get_images(self, provider: Provider) -> List[Image]:
        """
        Fetch the active images of a provider

        Deprecated and deleted images are dropped and the rest is sorted
        by name.

        Returns:
            List of Image objects

        Raises:
            CloudInfoConnectionError: If the request fails
            CloudInfoDecodeError: If the payload is malformed
        """
        payload = self.client.get_images_payload(provider)
        try:
            validate_images_response(payload)
        except ValidationError as e:
            raise CloudInfoDecodeError(f"invalid {provider.value} images response: {e}") from e

        images = images_from_payload(payload)
        active = filter_deprecated(images)
        logger.debug(
            f"{provider.value}: {len(images)} images, "
            f"{len(images) - len(active)} deprecated or deleted"
        )
        return sorted(active, key=lambda image: image.name)

    def get_aws_regions(self) -> List[Region]:
        """
        Fetch the AWS regions known to the service

        Raises:
            CloudInfoConnectionError: If the request fails
            CloudInfoDecodeError: If the payload is malformed
        """
        payload = self.client.get_regions_payload()
        try:
            validate_regions_response(payload)
        except ValidationError as e:
            raise CloudInfoDecodeError(f"invalid regions response: {e}") from e
        return regions_from_payload(payload)

    def get_azure_environments(self) -> List[Environment]:
        """Get the Azure environments (static, not served by the API)"""
        return [Environment(name=name) for name in AZURE_ENVIRONMENTS]
