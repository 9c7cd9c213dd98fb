"""Page content model package."""

from seokit.page.models import (
    Headings,
    ImageStats,
    LinkStats,
    MetaTags,
    PageContent,
    Section,
)

__all__ = [
    "Headings",
    "ImageStats",
    "LinkStats",
    "MetaTags",
    "PageContent",
    "Section",
]
