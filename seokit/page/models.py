"""Page content model.

Input to the analyzer, produced by a page-content extractor outside this
package. Every feature is optional and defaults to an empty string, empty
list or zero. Both the extractor's camelCase JSON keys (``bodyText``,
``withoutAlt``) and the snake_case field names are accepted.
"""

from collections.abc import Iterator
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

HEADING_LEVELS = (1, 2, 3, 4, 5, 6)


class PageModel(BaseModel):
    """Base for page content schemas."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class MetaTags(PageModel):
    """Head metadata of a page."""

    title: str = ""
    title_length: int | None = Field(default=None, ge=0)
    description: str = ""
    description_length: int | None = Field(default=None, ge=0)
    keywords: str = ""
    canonical: str = ""
    robots: str = ""
    og: dict[str, str] = Field(default_factory=dict)  # keyed "og:title", ...
    twitter: dict[str, str] = Field(default_factory=dict)  # keyed "twitter:card", ...
    lang: str = ""
    charset: str = ""
    viewport: str = ""

    @model_validator(mode="after")
    def fill_lengths(self) -> "MetaTags":
        if self.title_length is None:
            self.title_length = len(self.title)
        if self.description_length is None:
            self.description_length = len(self.description)
        return self


class Headings(PageModel):
    """Heading texts grouped by level."""

    h1: list[str] = Field(default_factory=list)
    h2: list[str] = Field(default_factory=list)
    h3: list[str] = Field(default_factory=list)
    h4: list[str] = Field(default_factory=list)
    h5: list[str] = Field(default_factory=list)
    h6: list[str] = Field(default_factory=list)

    def at_level(self, level: int) -> list[str]:
        return getattr(self, f"h{level}")

    def sequence(self) -> Iterator[tuple[int, str]]:
        """Yield ``(level, text)`` for every heading, all h1 first, then h2, ..."""
        for level in HEADING_LEVELS:
            for text in self.at_level(level):
                yield level, text


class LinkStats(PageModel):
    """Anchor statistics."""

    total: int = Field(default=0, ge=0)
    internal: int = Field(default=0, ge=0)
    external: int = Field(default=0, ge=0)
    nofollow: int = Field(default=0, ge=0)
    broken: list[str] = Field(default_factory=list)


class ImageStats(PageModel):
    """Image alt-text statistics."""

    total: int = Field(default=0, ge=0)
    with_alt: int = Field(default=0, ge=0)
    without_alt: int = Field(default=0, ge=0)
    missing_alt: list[str] = Field(default_factory=list)
    alt_coverage: int | None = Field(default=None, ge=0, le=100)

    @model_validator(mode="after")
    def fill_coverage(self) -> "ImageStats":
        if self.alt_coverage is None:
            if self.total > 0:
                self.alt_coverage = min(100, int(self.with_alt / self.total * 100 + 0.5))
            else:
                self.alt_coverage = 100
        return self


class Section(PageModel):
    """Contiguous body span between two successive headings."""

    heading: str | None = None
    level: int = Field(default=0, ge=0, le=6)  # 0 = introduction / no heading
    text: str = ""
    word_count: int = Field(default=0, ge=0)


class PageContent(PageModel):
    """Everything the analyzer knows about one page."""

    url: str = ""
    timestamp: int | None = None  # Epoch milliseconds
    meta: MetaTags = Field(default_factory=MetaTags)
    headings: Headings = Field(default_factory=Headings)
    body_text: str = ""
    paragraphs: list[str] = Field(default_factory=list)
    links: LinkStats = Field(default_factory=LinkStats)
    images: ImageStats = Field(default_factory=ImageStats)
    structured_data: list[Any] = Field(default_factory=list)
    sections: list[Section] = Field(default_factory=list)

    def to_dict(self) -> dict:
        return self.model_dump(mode="json")
