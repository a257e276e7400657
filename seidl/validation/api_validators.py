"""API response validators for public cloud info data"""

# Image fields that must be strings when present, missing and null decode as ""
IMAGE_TEXT_FIELDS = (
    "name",
    "urn",
    "id",
    "state",
    "changeinfo",
    "publishedon",
    "deprecatedon",
    "deletedon",
    "environment",
    "region",
    "project",
)


class ValidationError(Exception):
    """Raised when API response validation fails"""
    pass


def validate_image_entry(data: dict, index: int = 0) -> None:
    """
    Validate a single entry of an images.json response

    Args:
        data: Image entry from the API
        index: Position in the images list, for error messages

    Raises:
        ValidationError: If the entry is not an object or has invalid fields
    """
    if not isinstance(data, dict):
        raise ValidationError(
            f"Image entry {index} is not an object: {data!r}"
        )

    for field in IMAGE_TEXT_FIELDS:
        value = data.get(field)
        if value is not None and not isinstance(value, str):
            raise ValidationError(
                f"Invalid '{field}' for image entry {index}: {value!r} (must be a string)"
            )


def validate_images_response(data: object) -> None:
    """
    Validate an images.json response body

    Args:
        data: Decoded JSON body

    Raises:
        ValidationError: If the 'images' list is missing or malformed
    """
    if not isinstance(data, dict):
        raise ValidationError("Images response is not a JSON object")

    images = data.get("images")
    if images is None:
        # An empty feed may omit the list entirely
        return
    if not isinstance(images, list):
        raise ValidationError(
            f"Invalid 'images' type in response: {type(images).__name__}"
        )

    for index, entry in enumerate(images):
        validate_image_entry(entry, index)


def validate_regions_response(data: object) -> None:
    """
    Validate a regions.json response body

    Raises:
        ValidationError: If the 'regions' list is missing or malformed
    """
    if not isinstance(data, dict):
        raise ValidationError("Regions response is not a JSON object")

    regions = data.get("regions")
    if regions is None:
        return
    if not isinstance(regions, list):
        raise ValidationError(
            f"Invalid 'regions' type in response: {type(regions).__name__}"
        )

    for index, entry in enumerate(regions):
        if not isinstance(entry, dict) or not isinstance(entry.get("name"), str):
            raise ValidationError(
                f"Missing or invalid 'name' for region entry {index}: {entry!r}"
            )
