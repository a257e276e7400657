"""Image query commands"""

import logging
from dataclasses import dataclass
from typing import List

from seidl.cli.interpreter import Configuration, QueryStep
from seidl.cli.output import TableFormatter
from seidl.models.image import Image
from seidl.models.provider import Provider
from seidl.services.filter_service import FilterCriteria, apply_filters
from seidl.services.image_service import ImageService

from .base import write_output

logger = logging.getLogger("seidl")


@dataclass
class ProviderResult:
    """Filtered images of one provider query"""
    provider: Provider
    configuration: Configuration
    images: List[Image]


def query_images(step: QueryStep, service: ImageService) -> ProviderResult:
    """Fetch and filter the images of one provider.

    Raises:
        CloudInfoError: If fetching or decoding fails
        NoImagesFoundError: If no image is left after filtering
    """
    images = service.get_images(step.provider)
    criteria = FilterCriteria.from_configuration(step.configuration)
    result = apply_filters(images, step.provider, criteria)
    logger.debug(
        f"{step.provider.value}: {len(result.images)} of {len(images)} images "
        f"left, {result.removed} removed by filter '{criteria.filter}'"
    )
    result.check_not_empty()
    return ProviderResult(
        provider=step.provider,
        configuration=step.configuration,
        images=result.images,
    )


def render_result(result: ProviderResult) -> str:
    """Render a provider result as a table"""
    formatter = TableFormatter()
    region = result.configuration.region if result.provider is Provider.AMAZON else ""
    return formatter.format_images(result.images, result.provider, region)


def cmd_query(step: QueryStep, service: ImageService) -> None:
    """Query a provider and print its image table"""
    result = query_images(step, service)
    write_output(render_result(result))
