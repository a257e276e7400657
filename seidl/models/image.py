"""Public cloud image data models"""

from dataclasses import dataclass
from typing import List


# Azure environments are not served by the API
AZURE_ENVIRONMENTS = ["Blackforest", "Fairfax", "Mooncake", "PublicAzure"]


@dataclass(frozen=True)
class Image:
    """A published cloud image"""
    name: str
    urn: str = ""
    id: str = ""
    state: str = ""
    change_info: str = ""
    published_on: str = ""
    deprecated_on: str = ""
    deleted_on: str = ""
    environment: str = ""
    region: str = ""
    project: str = ""

    @property
    def is_deprecated(self) -> bool:
        """Check if the image is scheduled for deprecation or deletion"""
        return bool(self.deleted_on) or bool(self.deprecated_on)

    @classmethod
    def from_api_response(cls, data: dict) -> "Image":
        """Create Image from a public cloud info API entry

        Missing or null fields decode as empty strings.
        """
        def text(key: str) -> str:
            value = data.get(key)
            return "" if value is None else str(value)

        return cls(
            name=text("name"),
            urn=text("urn"),
            id=text("id"),
            state=text("state"),
            change_info=text("changeinfo"),
            published_on=text("publishedon"),
            deprecated_on=text("deprecatedon"),
            deleted_on=text("deletedon"),
            environment=text("environment"),
            region=text("region"),
            project=text("project"),
        )


@dataclass(frozen=True)
class Region:
    """A provider region"""
    name: str

    @classmethod
    def from_api_response(cls, data: dict) -> "Region":
        return cls(name=str(data["name"]))


@dataclass(frozen=True)
class Environment:
    """An Azure cloud environment"""
    name: str


def images_from_payload(payload: dict) -> List[Image]:
    """Decode the 'images' list of an images.json payload"""
    return [Image.from_api_response(entry) for entry in payload.get("images") or []]


def regions_from_payload(payload: dict) -> List[Region]:
    """Decode the 'regions' list of a regions.json payload"""
    return [Region.from_api_response(entry) for entry in payload.get("regions") or []]
