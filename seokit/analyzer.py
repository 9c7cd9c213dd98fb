"""Content analyzer.

Orchestrates the metric extractors, the composite scorer, the recommendation
generator and the chunk scorer into one :class:`~seokit.report.Report` per
page.
"""

import asyncio
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import structlog
from pydantic import ValidationError

from seokit.chunking.scorer import ChunkAnalysis, ChunkScorer, ChunkScorerConfig
from seokit.config import get_settings
from seokit.exceptions import InvalidPageContentError
from seokit.extraction.entities import MAX_ENTITIES, EntitySummary, analyze_entities
from seokit.extraction.keywords import (
    MAX_BIGRAMS,
    MAX_KEYWORDS,
    MAX_TRIGRAMS,
    KeywordStats,
    TermCount,
    analyze_keywords,
    rank_terms,
)
from seokit.extraction.meta import MetaAudit, audit_meta
from seokit.extraction.readability import ReadabilityMetrics, analyze_readability
from seokit.extraction.sentiment import SentimentSummary, analyze_sentiment
from seokit.extraction.structure import StructureSummary, analyze_structure
from seokit.fixes.generator import RecommendationConfig, RecommendationGenerator
from seokit.logging import bind_page
from seokit.nlp.document import RawDocument, read_document
from seokit.nlp.oracle import NLPOracle
from seokit.page.models import PageContent
from seokit.report import (
    INSUFFICIENT_CONTENT,
    AnalysisError,
    Performance,
    Report,
    TextAnalysis,
)
from seokit.scoring.calculator import calculate_score

logger = structlog.get_logger(__name__)

VERSION = "1.0.0"

TEXT_TOP_KEYWORDS = 20


def _default_wpm() -> int:
    return get_settings().reading_words_per_minute


@dataclass
class AnalyzerConfig:
    """Configuration for the analyzer."""

    min_body_chars: int = 10  # Shorter bodies yield an AnalysisError
    words_per_minute: int = field(default_factory=_default_wpm)
    max_keywords: int = MAX_KEYWORDS
    max_bigrams: int = MAX_BIGRAMS
    max_trigrams: int = MAX_TRIGRAMS
    max_entities: int = MAX_ENTITIES
    alignment_terms: int = 10  # Global keywords used for topic alignment
    chunks: ChunkScorerConfig = field(default_factory=ChunkScorerConfig)
    recommendations: RecommendationConfig = field(default_factory=RecommendationConfig)


@dataclass(frozen=True)
class _PageMetrics:
    doc: RawDocument
    readability: ReadabilityMetrics
    keywords: KeywordStats
    entities: EntitySummary
    sentiment: SentimentSummary
    structure: StructureSummary
    meta: MetaAudit


class SEOAnalyzer:
    """Turns a page content model into a graded content-quality report."""

    def __init__(self, oracle: NLPOracle, config: AnalyzerConfig | None = None):
        self.oracle = oracle
        self.config = config or AnalyzerConfig()
        self._chunk_scorer = ChunkScorer(oracle, self.config.chunks)
        self._recommendations = RecommendationGenerator(self.config.recommendations)

    def analyze(self, page: PageContent | Mapping[str, Any]) -> Report | AnalysisError:
        """
        Analyze one page.

        Args:
            page: Page content model, or a mapping in its JSON shape

        Returns:
            Report, or AnalysisError when the body text is too short

        Raises:
            InvalidPageContentError: If a mapping does not validate
        """
        content = self._coerce(page)
        started = time.perf_counter()

        with bind_page(content.url):
            if self._too_short(content):
                return self._insufficient(content)

            metrics = self._extract(content)
            global_terms = metrics.keywords.top_terms(self.config.alignment_terms)
            chunks = self._chunk_scorer.score_sections(content.sections, global_terms)

            return self._assemble(content, metrics, chunks, started)

    async def analyze_async(self, page: PageContent | Mapping[str, Any]) -> Report | AnalysisError:
        """Same as analyze, scoring sections in parallel worker threads."""
        content = self._coerce(page)
        started = time.perf_counter()

        with bind_page(content.url):
            if self._too_short(content):
                return self._insufficient(content)

            metrics = await asyncio.to_thread(self._extract, content)
            global_terms = metrics.keywords.top_terms(self.config.alignment_terms)
            chunks = await self._chunk_scorer.score_sections_async(content.sections, global_terms)

            return self._assemble(content, metrics, chunks, started)

    def analyze_text(self, text: str) -> TextAnalysis:
        """
        Quick linguistic summary of arbitrary text.

        Args:
            text: Text to analyze

        Returns:
            TextAnalysis with counts, entities, sentiment and top keywords
        """
        doc = read_document(self.oracle, text)
        words = [t for t in doc.tokens if t.is_word]
        content = [t.normal_form() for t in words if not t.is_stop]

        return TextAnalysis(
            readability=doc.readability,
            word_count=len(words),
            content_words=len(content),
            stop_words=len(words) - len(content),
            sentences=len(doc.sentences),
            entities=doc.entities,
            sentiment=doc.sentiment,
            top_keywords=tuple(
                TermCount(term=t, count=c) for t, c in rank_terms(content)[:TEXT_TOP_KEYWORDS]
            ),
            tokens=len(doc.tokens),
        )

    def _coerce(self, page: PageContent | Mapping[str, Any]) -> PageContent:
        if isinstance(page, PageContent):
            # Reports keep the content; detach it from the caller's model
            return page.model_copy(deep=True)
        try:
            return PageContent.model_validate(page)
        except ValidationError as e:
            raise InvalidPageContentError(
                "Page content failed validation",
                errors=e.errors(include_url=False, include_context=False),
            ) from e

    def _too_short(self, content: PageContent) -> bool:
        return len(content.body_text or "") < self.config.min_body_chars

    def _insufficient(self, content: PageContent) -> AnalysisError:
        logger.warning(
            "insufficient_content",
            body_chars=len(content.body_text or ""),
            min_chars=self.config.min_body_chars,
        )
        return AnalysisError(error=INSUFFICIENT_CONTENT, content=content)

    def _extract(self, content: PageContent) -> _PageMetrics:
        cfg = self.config
        doc = read_document(self.oracle, content.body_text)
        return _PageMetrics(
            doc=doc,
            readability=analyze_readability(doc, cfg.words_per_minute),
            keywords=analyze_keywords(doc, cfg.max_keywords, cfg.max_bigrams, cfg.max_trigrams),
            entities=analyze_entities(doc, cfg.max_entities),
            sentiment=analyze_sentiment(doc),
            structure=analyze_structure(content),
            meta=audit_meta(content.meta),
        )

    def _assemble(
        self,
        content: PageContent,
        metrics: _PageMetrics,
        chunks: ChunkAnalysis,
        started: float,
    ) -> Report:
        score = calculate_score(
            metrics.readability,
            metrics.keywords,
            metrics.structure,
            metrics.meta,
        )
        recommendations = self._recommendations.generate(
            metrics.readability,
            metrics.keywords,
            metrics.structure,
            metrics.meta,
        )
        elapsed_ms = int((time.perf_counter() - started) * 1000)

        logger.info(
            "page_analysis_complete",
            total_score=score.total,
            grade=score.grade,
            recommendations=len(recommendations),
            chunks=len(chunks.items),
            analysis_time_ms=elapsed_ms,
        )

        return Report(
            url=content.url,
            timestamp=content.timestamp,
            score=score,
            readability=metrics.readability,
            keywords=metrics.keywords,
            entities=metrics.entities,
            sentiment=metrics.sentiment,
            structure=metrics.structure,
            meta=metrics.meta,
            chunks=chunks,
            recommendations=tuple(recommendations),
            raw=content,
            performance=Performance(analysis_time_ms=elapsed_ms, version=VERSION),
        )


def analyze_page(
    oracle: NLPOracle,
    page: PageContent | Mapping[str, Any],
    config: AnalyzerConfig | None = None,
) -> Report | AnalysisError:
    """Convenience function to analyze one page."""
    analyzer = SEOAnalyzer(oracle, config)
    return analyzer.analyze(page)
