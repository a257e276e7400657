"""API response validation module"""

from .api_validators import (
    ValidationError,
    validate_image_entry,
    validate_images_response,
    validate_regions_response,
)

__all__ = [
    "ValidationError",
    "validate_image_entry",
    "validate_images_response",
    "validate_regions_response",
]
