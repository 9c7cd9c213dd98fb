"""Section-level snippet potential scoring.

Grades how well each content section would stand alone as a snippet
retrieved by an AI search / RAG pipeline. Every section is read and scored
on its own; the only shared input is the page's global top-keyword set,
passed in explicitly as an immutable tuple.
"""

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass, field

import structlog

from seokit.extraction.keywords import TermCount, rank_terms
from seokit.nlp.document import RawDocument, read_document
from seokit.nlp.oracle import Entity, NLPOracle
from seokit.page.models import Section
from seokit.rounding import percentage, round_half_up

logger = structlog.get_logger(__name__)

NO_HEADING = "(No heading)"
INTRODUCTION = "(Introduction)"
PLACEHOLDER_HEADINGS = frozenset({"", NO_HEADING, INTRODUCTION})

# (minimum score, grade), highest first
SNIPPET_GRADES = [
    (80, "A"),
    (65, "B"),
    (50, "C"),
    (35, "D"),
]
STRONG_CHUNK_SCORE = 70
WEAK_CHUNK_SCORE = 40


@dataclass
class ChunkScorerConfig:
    """Configuration for section scoring."""

    min_section_chars: int = 20  # Shorter sections are skipped
    alignment_terms: int = 10  # Local terms compared against the global set
    top_terms: int = 5
    max_entities: int = 10
    key_statements: int = 3
    statement_chars: int = 150


@dataclass(frozen=True)
class ChunkResult:
    """Snippet potential of one section."""

    index: int  # Position in the page's section list
    heading: str
    level: int
    word_count: int  # Non-stop content words
    sentence_count: int
    top_terms: tuple[TermCount, ...]
    entities: tuple[Entity, ...]
    entity_count: int
    entity_density: float
    unique_term_ratio: float
    sentiment: float
    topic_alignment: int
    snippet_score: int
    snippet_grade: str
    key_statements: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "heading": self.heading,
            "level": self.level,
            "word_count": self.word_count,
            "sentence_count": self.sentence_count,
            "top_terms": [t.to_dict() for t in self.top_terms],
            "entities": [e.to_dict() for e in self.entities],
            "entity_count": self.entity_count,
            "entity_density": self.entity_density,
            "unique_term_ratio": self.unique_term_ratio,
            "sentiment": self.sentiment,
            "topic_alignment": self.topic_alignment,
            "snippet_score": self.snippet_score,
            "snippet_grade": self.snippet_grade,
            "key_statements": list(self.key_statements),
        }


@dataclass(frozen=True)
class ChunkSummary:
    total_chunks: int
    avg_snippet_score: int
    avg_grade: str
    strong_chunks: int
    weak_chunks: int
    weak_chunk_headings: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "total_chunks": self.total_chunks,
            "avg_snippet_score": self.avg_snippet_score,
            "avg_grade": self.avg_grade,
            "strong_chunks": self.strong_chunks,
            "weak_chunks": self.weak_chunks,
            "weak_chunk_headings": list(self.weak_chunk_headings),
        }


@dataclass(frozen=True)
class ChunkAnalysis:
    items: tuple[ChunkResult, ...]
    summary: ChunkSummary | None  # None when the page has no sections

    def to_dict(self) -> dict:
        return {
            "items": [c.to_dict() for c in self.items],
            "summary": self.summary.to_dict() if self.summary else None,
        }


def snippet_grade(score: float) -> str:
    for threshold, grade in SNIPPET_GRADES:
        if score >= threshold:
            return grade
    return "F"


def has_real_heading(heading: str | None) -> bool:
    return bool(heading) and heading not in PLACEHOLDER_HEADINGS


def compute_snippet_score(
    word_count: int,
    entity_count: int,
    entity_density: float,
    unique_ratio: float,
    heading: str | None,
) -> int:
    """
    Score a section's fitness as a standalone snippet (0-100).

    Args:
        word_count: Content words in the section
        entity_count: Named entities in the section
        entity_density: Entities per 100 content words
        unique_ratio: Unique terms as % of content words
        heading: Section heading, if any

    Returns:
        Snippet score clamped to 0-100
    """
    score = 50

    # 40-300 words fits typical RAG chunk sizes
    if 40 <= word_count <= 300:
        score += 15
    elif 20 <= word_count <= 500:
        score += 8
    elif word_count < 20:
        score -= 20
    else:
        score -= 5  # Too long, will be split by chunkers

    if entity_count >= 3:
        score += 10
    elif entity_count >= 1:
        score += 5
    else:
        score -= 5

    if 3 <= entity_density <= 15:
        score += 10
    elif entity_density > 0:
        score += 3

    if 50 <= unique_ratio <= 85:
        score += 8
    elif unique_ratio >= 30:
        score += 3
    else:
        score -= 5

    # Chunkers split on headings
    if has_real_heading(heading):
        score += 7

    return max(0, min(100, score))


def topic_alignment(local_terms: Sequence[str], global_terms: frozenset[str]) -> int:
    """Percentage of ``local_terms`` that appear in ``global_terms``."""
    if not local_terms:
        return 0
    aligned = sum(1 for term in local_terms if term in global_terms)
    return int(percentage(aligned, len(local_terms), 0))


def summarize_chunks(items: Sequence[ChunkResult]) -> ChunkSummary:
    """Aggregate scored sections into a page-level summary."""
    total = sum(c.snippet_score for c in items)
    avg = int(round_half_up(total / len(items))) if items else 0
    weak = [c for c in items if c.snippet_score < WEAK_CHUNK_SCORE]
    strong = [c for c in items if c.snippet_score >= STRONG_CHUNK_SCORE]

    return ChunkSummary(
        total_chunks=len(items),
        avg_snippet_score=avg,
        avg_grade=snippet_grade(avg),
        strong_chunks=len(strong),
        weak_chunks=len(weak),
        weak_chunk_headings=tuple(c.heading for c in weak),
    )


class ChunkScorer:
    """Scores page sections for AI snippet potential."""

    def __init__(self, oracle: NLPOracle, config: ChunkScorerConfig | None = None):
        self.oracle = oracle
        self.config = config or ChunkScorerConfig()

    def is_scorable(self, section: Section) -> bool:
        return len(section.text or "") >= self.config.min_section_chars

    def score_section(
        self,
        index: int,
        section: Section,
        global_terms: tuple[str, ...],
    ) -> ChunkResult:
        """
        Score a single section.

        Args:
            index: Position of the section in the page's section list
            section: Section to score
            global_terms: The page's top keywords, most frequent first

        Returns:
            ChunkResult for the section
        """
        doc = read_document(self.oracle, section.text)
        return self._score_document(index, section, doc, frozenset(global_terms))

    def _score_document(
        self,
        index: int,
        section: Section,
        doc: RawDocument,
        global_terms: frozenset[str],
    ) -> ChunkResult:
        cfg = self.config
        terms = doc.content_terms()
        ranked = rank_terms(terms)
        entities = doc.entities
        word_count = len(terms)

        entity_density = percentage(len(entities), word_count, 2)
        unique_ratio = percentage(len(ranked), word_count, 1)
        local_terms = [term for term, _ in ranked[: cfg.alignment_terms]]

        score = compute_snippet_score(
            word_count=word_count,
            entity_count=len(entities),
            entity_density=entity_density,
            unique_ratio=unique_ratio,
            heading=section.heading,
        )

        return ChunkResult(
            index=index,
            heading=section.heading or NO_HEADING,
            level=section.level,
            word_count=word_count,
            sentence_count=len(doc.sentences),
            top_terms=tuple(TermCount(term=t, count=c) for t, c in ranked[: cfg.top_terms]),
            entities=tuple(entities[: cfg.max_entities]),
            entity_count=len(entities),
            entity_density=entity_density,
            unique_term_ratio=unique_ratio,
            sentiment=round_half_up(doc.sentiment, 3),
            topic_alignment=topic_alignment(local_terms, global_terms),
            snippet_score=score,
            snippet_grade=snippet_grade(score),
            key_statements=self._key_statements(doc),
        )

    def _key_statements(self, doc: RawDocument) -> tuple[str, ...]:
        """Text of the most important sentences; empty without importance support."""
        if not doc.supports_importance:
            return ()

        ranked = sorted(doc.importance or (), key=lambda imp: -(imp.importance or 0))
        statements = []
        for imp in ranked[: self.config.key_statements]:
            if 0 <= imp.index < len(doc.sentences):
                text = doc.sentences[imp.index].text[: self.config.statement_chars]
                if text:
                    statements.append(text)
        return tuple(statements)

    def score_sections(
        self,
        sections: Sequence[Section],
        global_terms: tuple[str, ...],
    ) -> ChunkAnalysis:
        """
        Score every section of a page in order.

        Sections shorter than ``min_section_chars`` are skipped.

        Args:
            sections: The page's section partition
            global_terms: The page's top keywords

        Returns:
            ChunkAnalysis with per-section results and a summary
        """
        if not sections:
            return ChunkAnalysis(items=(), summary=None)

        items = tuple(
            self.score_section(i, section, global_terms)
            for i, section in enumerate(sections)
            if self.is_scorable(section)
        )
        return self._finish(sections, items)

    async def score_sections_async(
        self,
        sections: Sequence[Section],
        global_terms: tuple[str, ...],
    ) -> ChunkAnalysis:
        """Same as score_sections, scoring sections in parallel worker threads."""
        if not sections:
            return ChunkAnalysis(items=(), summary=None)

        tasks = [
            asyncio.to_thread(self.score_section, i, section, global_terms)
            for i, section in enumerate(sections)
            if self.is_scorable(section)
        ]
        items = tuple(await asyncio.gather(*tasks))
        return self._finish(sections, items)

    def _finish(
        self,
        sections: Sequence[Section],
        items: tuple[ChunkResult, ...],
    ) -> ChunkAnalysis:
        summary = summarize_chunks(items)

        logger.info(
            "chunk_scoring_complete",
            sections=len(sections),
            scored=summary.total_chunks,
            skipped=len(sections) - summary.total_chunks,
            avg_snippet_score=summary.avg_snippet_score,
        )

        return ChunkAnalysis(items=items, summary=summary)
