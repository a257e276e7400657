"""Output formatters for CLI"""

from dataclasses import dataclass
from typing import Iterable, List

from seidl.models.image import Image
from seidl.models.provider import Provider


@dataclass(frozen=True)
class Column:
    """A fixed-width table column"""
    title: str
    width: int
    attribute: str


ID = Column("ID", 25, "id")
NAME = Column("Name", 60, "name")
PROJECT = Column("Project", 40, "project")
REGION = Column("Region", 20, "region")
STATE = Column("State", 20, "state")
URN = Column("URN", 60, "urn")


def columns_for(provider: Provider, region: str = "") -> List[Column]:
    """Get the column set for a provider.

    With a region set, the Amazon region column is dropped since every
    row would show the same value.
    """
    if provider is Provider.GOOGLE:
        return [NAME, PROJECT, STATE]
    if provider is Provider.AMAZON:
        if region:
            return [ID, NAME, STATE]
        return [ID, NAME, REGION, STATE]
    return [URN, NAME, STATE]


class TableFormatter:
    """Fixed-width text table formatter"""

    def format_header(self, columns: List[Column], closed: bool = True) -> str:
        # The leading "| " takes two characters of the first column
        cells = [columns[0].title.ljust(columns[0].width - 2)]
        cells += [column.title.ljust(column.width) for column in columns[1:]]
        header = "| " + " | ".join(cells)
        if closed:
            header += " |"
        return header

    def format_row(self, image: Image, columns: List[Column]) -> str:
        return " | ".join(
            getattr(image, column.attribute).ljust(column.width)
            for column in columns
        )

    def format_images(self, images: List[Image], provider: Provider, region: str = "") -> str:
        """Format images as a table, header first"""
        columns = columns_for(provider, region)
        # The Azure header has no closing bar
        lines = [self.format_header(columns, closed=provider is not Provider.MICROSOFT)]
        lines.extend(self.format_row(image, columns) for image in images)
        return "\n".join(lines)

    def format_names(self, names: Iterable[str]) -> str:
        """Format a plain listing, one name per line"""
        return "\n".join(names)
