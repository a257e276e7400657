"""Image filtering service

Every filter returns a new list holding the retained images in their
original order.
"""

from dataclasses import dataclass
from typing import List, Tuple

from seidl.exceptions import NoImagesFoundError
from seidl.models.image import Image
from seidl.models.provider import Provider

# The Microsoft feed carries entries that are not SUSE products
MICROSOFT_NAME_PREFIX = "suse-"


@dataclass(frozen=True)
class FilterCriteria:
    """User supplied filter criteria.

    Attributes:
        filter: Comma-separated substrings, all of which must be in the name
        region: Exact region name (only applied to Amazon images)
    """
    filter: str = ""
    region: str = ""

    @classmethod
    def from_configuration(cls, configuration) -> "FilterCriteria":
        """Create from an interpreter Configuration."""
        return cls(
            filter=configuration.filter,
            region=configuration.region,
        )


@dataclass
class FilterResult:
    """Images left after the pipeline and how many the token filter removed"""
    images: List[Image]
    removed: int = 0

    def check_not_empty(self) -> None:
        """Raise NoImagesFoundError if no image survived.

        Raises:
            NoImagesFoundError: restrictive=True when the token filter
                removed images, restrictive=False otherwise
        """
        if not self.images:
            raise NoImagesFoundError(restrictive=self.removed > 0)


def filter_deprecated(images: List[Image]) -> List[Image]:
    """Drop images with a deletion or deprecation date."""
    return [image for image in images if not image.is_deprecated]


def parse_tokens(filter_string: str) -> List[str]:
    """Split a filter string into trimmed, lowercased tokens."""
    return [token.strip() for token in filter_string.lower().split(",")]


def matches_tokens(image: Image, tokens: List[str]) -> bool:
    """Check if the lowercased image name contains every token."""
    name = image.name.lower()
    return all(token in name for token in tokens)


def filter_by_tokens(images: List[Image], filter_string: str) -> Tuple[List[Image], int]:
    """Keep images whose name contains all comma-separated filter tokens.

    Matching is case-insensitive. An empty filter keeps everything.

    Args:
        images: Images to filter
        filter_string: Filter string, e.g. 'sles,15-sp2'

    Returns:
        Tuple of (kept images, number of removed images)
    """
    if not filter_string:
        return list(images), 0
    tokens = parse_tokens(filter_string)
    kept = [image for image in images if matches_tokens(image, tokens)]
    return kept, len(images) - len(kept)


def filter_by_region(images: List[Image], region: str) -> List[Image]:
    """Keep images in the given region. An empty region keeps everything."""
    if not region:
        return list(images)
    return [image for image in images if image.region == region]


def filter_name_prefix(images: List[Image], prefix: str) -> List[Image]:
    """Keep images whose name starts with prefix."""
    return [image for image in images if image.name.startswith(prefix)]


def apply_filters(
    images: List[Image],
    provider: Provider,
    criteria: FilterCriteria
) -> FilterResult:
    """Apply the provider's filter pipeline to already fetched images.

    Order: provider prefix filter, token filter, region filter. The prefix
    filter runs first so that the removed count only reflects the user's
    filter.

    Args:
        images: Active images as returned by ImageService.get_images
        provider: Provider the images belong to
        criteria: User filter criteria

    Returns:
        FilterResult with the remaining images
    """
    filtered = images

    if provider is Provider.MICROSOFT:
        filtered = filter_name_prefix(filtered, MICROSOFT_NAME_PREFIX)

    filtered, removed = filter_by_tokens(filtered, criteria.filter)

    if provider is Provider.AMAZON:
        filtered = filter_by_region(filtered, criteria.region)

    return FilterResult(images=filtered, removed=removed)
