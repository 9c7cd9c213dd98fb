"""Recommendation generator.

Derives prioritized, human-readable actions from the page's metric groups.
Candidates are produced independently, then stably sorted by priority so
equal-priority items keep the order they were generated in.
"""

from dataclasses import dataclass
from enum import StrEnum

import structlog

from seokit.extraction.keywords import KeywordStats
from seokit.extraction.meta import MetaAudit, Severity
from seokit.extraction.readability import ReadabilityMetrics
from seokit.extraction.structure import H1Status, StructureSummary

logger = structlog.get_logger(__name__)


class Priority(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Category(StrEnum):
    META = "meta"
    STRUCTURE = "structure"
    CONTENT = "content"
    READABILITY = "readability"
    ACCESSIBILITY = "accessibility"
    TECHNICAL = "technical"


PRIORITY_ORDER = {Priority.HIGH: 0, Priority.MEDIUM: 1, Priority.LOW: 2}
UNKNOWN_PRIORITY_ORDER = 3


@dataclass(frozen=True)
class Recommendation:
    priority: Priority
    category: Category
    message: str

    def to_dict(self) -> dict:
        return {
            "priority": str(self.priority),
            "category": str(self.category),
            "message": self.message,
        }


@dataclass
class RecommendationConfig:
    """Thresholds that trigger recommendations."""

    thin_content_words: int = 300
    hard_reading_ease: float = 40.0
    long_sentence_words: float = 25.0
    low_diversity: float = 25.0


def priority_rank(priority: str) -> int:
    """Sort ordinal of a priority; unknown priorities sort last."""
    return PRIORITY_ORDER.get(priority, UNKNOWN_PRIORITY_ORDER)


def sort_by_priority(recommendations: list[Recommendation]) -> list[Recommendation]:
    """Stable sort: high, medium, low, then anything else."""
    return sorted(recommendations, key=lambda r: priority_rank(r.priority))


class RecommendationGenerator:
    """Generates prioritized recommendations from metric groups."""

    def __init__(self, config: RecommendationConfig | None = None):
        self.config = config or RecommendationConfig()

    def generate(
        self,
        readability: ReadabilityMetrics,
        keywords: KeywordStats,
        structure: StructureSummary,
        meta: MetaAudit,
    ) -> list[Recommendation]:
        """
        Generate recommendations for a page.

        Args:
            readability: Readability metrics
            keywords: Keyword statistics
            structure: Structure summary
            meta: Meta tag audit

        Returns:
            Recommendations ordered by priority
        """
        recs: list[Recommendation] = []
        recs.extend(self._critical_meta(meta))
        recs.extend(self._structure(structure))
        recs.extend(self._content(keywords))
        recs.extend(self._readability(readability))
        recs.extend(self._accessibility(structure))
        recs.extend(self._diversity(keywords))
        recs.extend(self._technical(structure))
        recs.extend(self._meta_warnings(meta))

        ordered = sort_by_priority(recs)

        logger.debug(
            "recommendations_generated",
            total=len(ordered),
            high=sum(1 for r in ordered if r.priority == Priority.HIGH),
        )

        return ordered

    def _critical_meta(self, meta: MetaAudit) -> list[Recommendation]:
        return [
            Recommendation(Priority.HIGH, Category.META, issue.message)
            for issue in meta.issues_with(Severity.CRITICAL)
        ]

    def _structure(self, structure: StructureSummary) -> list[Recommendation]:
        recs = []
        status = structure.h1_status
        if status == H1Status.MISSING:
            recs.append(
                Recommendation(
                    Priority.HIGH,
                    Category.STRUCTURE,
                    "Add an H1 heading that includes your primary keyword",
                )
            )
        elif status == H1Status.MULTIPLE:
            recs.append(
                Recommendation(
                    Priority.MEDIUM,
                    Category.STRUCTURE,
                    f"Use only one H1 heading per page (found {structure.h1_count})",
                )
            )

        if not structure.has_proper_hierarchy:
            recs.append(
                Recommendation(
                    Priority.MEDIUM,
                    Category.STRUCTURE,
                    "Fix heading hierarchy: avoid skipping levels (e.g., H1 → H3 without H2)",
                )
            )
        return recs

    def _content(self, keywords: KeywordStats) -> list[Recommendation]:
        words = keywords.total_content_words
        if words >= self.config.thin_content_words:
            return []
        return [
            Recommendation(
                Priority.HIGH,
                Category.CONTENT,
                f"Content is thin ({words} words). Aim for 600+ words for better ranking",
            )
        ]

    def _readability(self, readability: ReadabilityMetrics) -> list[Recommendation]:
        recs = []
        ease = readability.reading_ease
        if ease is not None and ease < self.config.hard_reading_ease:
            recs.append(
                Recommendation(
                    Priority.MEDIUM,
                    Category.READABILITY,
                    f"Content is hard to read (Flesch score: {ease:g}). "
                    "Simplify sentences and use shorter words",
                )
            )

        avg = readability.avg_words_per_sentence
        if avg > self.config.long_sentence_words:
            recs.append(
                Recommendation(
                    Priority.MEDIUM,
                    Category.READABILITY,
                    f"Average sentence length is {avg:g} words. "
                    "Keep sentences under 20 words for better readability",
                )
            )
        return recs

    def _accessibility(self, structure: StructureSummary) -> list[Recommendation]:
        missing = structure.images_without_alt
        if missing <= 0:
            return []
        return [
            Recommendation(
                Priority.MEDIUM,
                Category.ACCESSIBILITY,
                f"{missing} image(s) missing alt text",
            )
        ]

    def _diversity(self, keywords: KeywordStats) -> list[Recommendation]:
        diversity = keywords.lexical_diversity
        if diversity >= self.config.low_diversity:
            return []
        return [
            Recommendation(
                Priority.LOW,
                Category.CONTENT,
                f"Low vocabulary diversity ({diversity:g}%). Use more varied language",
            )
        ]

    def _technical(self, structure: StructureSummary) -> list[Recommendation]:
        if structure.has_structured_data:
            return []
        return [
            Recommendation(
                Priority.LOW,
                Category.TECHNICAL,
                "No structured data (JSON-LD) found. Add schema markup for rich search results",
            )
        ]

    def _meta_warnings(self, meta: MetaAudit) -> list[Recommendation]:
        return [
            Recommendation(Priority.MEDIUM, Category.META, issue.message)
            for issue in meta.issues_with(Severity.WARNING)
        ]


def generate_recommendations(
    readability: ReadabilityMetrics,
    keywords: KeywordStats,
    structure: StructureSummary,
    meta: MetaAudit,
    config: RecommendationConfig | None = None,
) -> list[Recommendation]:
    """Convenience function to generate recommendations."""
    generator = RecommendationGenerator(config)
    return generator.generate(readability, keywords, structure, meta)
