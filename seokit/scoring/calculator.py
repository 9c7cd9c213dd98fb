"""Composite content score.

Four sub-scores (readability, content, structure, meta) start at 25 points
each and lose fixed penalties, never dropping below 0. The total (0-100) maps
to a letter grade.
"""

from dataclasses import dataclass

import structlog

from seokit.extraction.keywords import KeywordStats
from seokit.extraction.meta import MetaAudit
from seokit.extraction.readability import ReadabilityMetrics
from seokit.extraction.structure import H1Status, StructureSummary

logger = structlog.get_logger(__name__)

MAX_PART_POINTS = 25

# (minimum total, grade), highest first
GRADE_THRESHOLDS = [
    (90, "A"),
    (80, "B"),
    (65, "C"),
    (50, "D"),
]
FAILING_GRADE = "F"

STRUCTURED_DATA_BONUS = 3
META_PENALTIES = {"critical": 8, "warning": 3, "info": 1}
MAX_ALT_PENALTY = 5


@dataclass(frozen=True)
class ScoreBreakdown:
    readability: int
    content: int
    structure: int
    meta: int

    @property
    def total(self) -> int:
        return self.readability + self.content + self.structure + self.meta

    def to_dict(self) -> dict:
        return {
            "readability": self.readability,
            "content": self.content,
            "structure": self.structure,
            "meta": self.meta,
        }


@dataclass(frozen=True)
class ContentScore:
    total: int
    grade: str
    breakdown: ScoreBreakdown

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "grade": self.grade,
            "breakdown": self.breakdown.to_dict(),
        }

    def show_the_math(self) -> str:
        """Generate human-readable calculation breakdown."""
        lines = [
            "=" * 40,
            "CONTENT SCORE",
            "=" * 40,
            f"Total: {self.total}/100 (grade {self.grade})",
            "-" * 40,
        ]
        for name, points in self.breakdown.to_dict().items():
            lines.append(f"  {name:<12} {points:>2}/{MAX_PART_POINTS}")
        return "\n".join(lines)


def grade_for(total: float) -> str:
    """Letter grade for a 0-100 total."""
    for threshold, grade in GRADE_THRESHOLDS:
        if total >= threshold:
            return grade
    return FAILING_GRADE


def _clamp(points: int) -> int:
    return max(0, min(MAX_PART_POINTS, points))


def score_readability(readability: ReadabilityMetrics) -> int:
    points = MAX_PART_POINTS
    ease = readability.reading_ease
    if ease is not None:
        if ease < 30:
            points -= 15
        elif ease < 50:
            points -= 8
        elif ease > 80:
            points -= 3
    if readability.avg_words_per_sentence > 25:
        points -= 5
    if readability.avg_words_per_sentence < 5:
        points -= 3
    return _clamp(points)


def score_content(keywords: KeywordStats) -> int:
    points = MAX_PART_POINTS
    if keywords.total_content_words < 100:
        points -= 15
    elif keywords.total_content_words < 300:
        points -= 8
    if keywords.lexical_diversity < 20:
        points -= 5
    if len(keywords.top_bigrams) < 3:
        points -= 3
    return _clamp(points)


def score_structure(structure: StructureSummary) -> int:
    points = MAX_PART_POINTS
    status = structure.h1_status
    if status == H1Status.MISSING:
        points -= 10
    elif status == H1Status.MULTIPLE:
        points -= 5
    if not structure.has_proper_hierarchy:
        points -= 5
    points -= min(MAX_ALT_PENALTY, structure.images_without_alt)
    if structure.links.total == 0:
        points -= 3
    return _clamp(points)


def score_meta(meta: MetaAudit, has_structured_data: bool) -> int:
    points = MAX_PART_POINTS
    points -= meta.summary.critical * META_PENALTIES["critical"]
    points -= meta.summary.warning * META_PENALTIES["warning"]
    points -= meta.summary.info * META_PENALTIES["info"]
    points = max(0, points)
    # Bonus applies to the floored score
    if has_structured_data:
        points += STRUCTURED_DATA_BONUS
    return _clamp(points)


def calculate_score(
    readability: ReadabilityMetrics,
    keywords: KeywordStats,
    structure: StructureSummary,
    meta: MetaAudit,
) -> ContentScore:
    """
    Combine metric groups into the composite content score.

    Args:
        readability: Readability metrics
        keywords: Keyword statistics
        structure: Structure summary
        meta: Meta tag audit

    Returns:
        ContentScore with total, grade and breakdown
    """
    breakdown = ScoreBreakdown(
        readability=score_readability(readability),
        content=score_content(keywords),
        structure=score_structure(structure),
        meta=score_meta(meta, structure.has_structured_data),
    )
    total = breakdown.total
    score = ContentScore(total=total, grade=grade_for(total), breakdown=breakdown)

    logger.debug("content_score_calculated", total=total, grade=score.grade, **breakdown.to_dict())

    return score
