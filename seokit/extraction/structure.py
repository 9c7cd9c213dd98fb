"""Page structure summary.

Built from the page content model alone: heading counts and hierarchy,
paragraphs, links, image alt coverage and structured data.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType

import structlog

from seokit.page.models import HEADING_LEVELS, ImageStats, LinkStats, PageContent

logger = structlog.get_logger(__name__)


class H1Status(StrEnum):
    """How many H1 headings a page has."""

    MISSING = "missing"
    SINGLE = "single"
    MULTIPLE = "multiple"

    @classmethod
    def from_count(cls, count: int) -> "H1Status":
        if count == 0:
            return cls.MISSING
        if count == 1:
            return cls.SINGLE
        return cls.MULTIPLE


@dataclass(frozen=True)
class StructureSummary:
    """Structural audit of a page."""

    h1_count: int
    h1_text: tuple[str, ...]
    total_headings: int
    heading_breakdown: Mapping[str, int]  # Read-only
    skip_count: int  # Level skips such as H2 -> H4
    has_proper_hierarchy: bool
    paragraph_count: int
    links: LinkStats
    images: ImageStats
    has_structured_data: bool
    structured_data_count: int

    @property
    def h1_status(self) -> H1Status:
        return H1Status.from_count(self.h1_count)

    @property
    def has_skipped_level(self) -> bool:
        return self.skip_count > 0

    @property
    def images_without_alt(self) -> int:
        return self.images.without_alt

    def to_dict(self) -> dict:
        return {
            "h1_count": self.h1_count,
            "h1_text": list(self.h1_text),
            "total_headings": self.total_headings,
            "heading_breakdown": dict(self.heading_breakdown),
            "skip_count": self.skip_count,
            "has_proper_hierarchy": self.has_proper_hierarchy,
            "paragraph_count": self.paragraph_count,
            "links": self.links.model_dump(mode="json"),
            "images": self.images.model_dump(mode="json"),
            "has_structured_data": self.has_structured_data,
            "structured_data_count": self.structured_data_count,
        }


def count_level_skips(levels: list[int]) -> int:
    """Count headings whose level is more than one below the previous heading."""
    skips = 0
    prev_level = 0
    for level in levels:
        if prev_level > 0 and level > prev_level + 1:
            skips += 1
        prev_level = level
    return skips


def analyze_structure(page: PageContent) -> StructureSummary:
    """
    Summarize the structure of a page.

    Args:
        page: Page content model

    Returns:
        StructureSummary for the page
    """
    headings = page.headings
    breakdown = {f"h{level}": len(headings.at_level(level)) for level in HEADING_LEVELS}
    h1_count = breakdown["h1"]

    skip_count = count_level_skips([level for level, _ in headings.sequence()])

    summary = StructureSummary(
        h1_count=h1_count,
        h1_text=tuple(headings.h1),
        total_headings=sum(breakdown.values()),
        heading_breakdown=MappingProxyType(breakdown),
        skip_count=skip_count,
        has_proper_hierarchy=skip_count == 0 and h1_count == 1,
        paragraph_count=len(page.paragraphs),
        links=page.links,
        images=page.images,
        has_structured_data=len(page.structured_data) > 0,
        structured_data_count=len(page.structured_data),
    )

    logger.debug(
        "structure_analysis_complete",
        total_headings=summary.total_headings,
        h1_count=h1_count,
        skip_count=skip_count,
    )

    return summary
