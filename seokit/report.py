"""Analysis results returned by the analyzer."""

import json
from dataclasses import dataclass

from seokit.chunking.scorer import ChunkAnalysis
from seokit.extraction.entities import EntitySummary
from seokit.extraction.keywords import KeywordStats, TermCount
from seokit.extraction.meta import MetaAudit
from seokit.extraction.readability import ReadabilityMetrics
from seokit.extraction.sentiment import SentimentSummary
from seokit.extraction.structure import StructureSummary
from seokit.fixes.generator import Recommendation
from seokit.nlp.oracle import Entity, ReadabilityStats
from seokit.page.models import PageContent
from seokit.scoring.calculator import ContentScore

INSUFFICIENT_CONTENT = "Insufficient content for analysis"


@dataclass(frozen=True)
class Performance:
    analysis_time_ms: int
    version: str

    def to_dict(self) -> dict:
        return {"analysis_time_ms": self.analysis_time_ms, "version": self.version}


@dataclass(frozen=True)
class Report:
    """Complete content-quality report for one page."""

    url: str
    timestamp: int | None
    score: ContentScore
    readability: ReadabilityMetrics
    keywords: KeywordStats
    entities: EntitySummary
    sentiment: SentimentSummary
    structure: StructureSummary
    meta: MetaAudit
    chunks: ChunkAnalysis
    recommendations: tuple[Recommendation, ...]
    raw: PageContent
    performance: Performance | None = None

    @property
    def ok(self) -> bool:
        return True

    def to_dict(self) -> dict:
        return {
            "url": self.url,
            "timestamp": self.timestamp,
            "score": self.score.to_dict(),
            "readability": self.readability.to_dict(),
            "keywords": self.keywords.to_dict(),
            "entities": self.entities.to_dict(),
            "sentiment": self.sentiment.to_dict(),
            "structure": self.structure.to_dict(),
            "meta": self.meta.to_dict(),
            "chunks": self.chunks.to_dict(),
            "recommendations": [r.to_dict() for r in self.recommendations],
            "raw": self.raw.to_dict(),
            "performance": self.performance.to_dict() if self.performance else None,
        }

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)


@dataclass(frozen=True)
class AnalysisError:
    """Result returned instead of a report when the page cannot be analyzed."""

    error: str
    content: PageContent

    @property
    def ok(self) -> bool:
        return False

    def to_dict(self) -> dict:
        return {"error": self.error, "content": self.content.to_dict()}

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)


@dataclass(frozen=True)
class TextAnalysis:
    """Quick linguistic summary of arbitrary text."""

    readability: ReadabilityStats | None
    word_count: int  # Content words + stop words
    content_words: int
    stop_words: int
    sentences: int
    entities: tuple[Entity, ...]
    sentiment: float
    top_keywords: tuple[TermCount, ...]
    tokens: int

    def to_dict(self) -> dict:
        stats = self.readability
        return {
            "readability": (
                {
                    "fres": stats.fres,
                    "reading_time_mins": stats.reading_time_mins,
                    "reading_time_secs": stats.reading_time_secs,
                    "num_complex_words": stats.num_complex_words,
                    "complex_words": dict(stats.complex_words),
                }
                if stats
                else None
            ),
            "word_count": self.word_count,
            "content_words": self.content_words,
            "stop_words": self.stop_words,
            "sentences": self.sentences,
            "entities": [e.to_dict() for e in self.entities],
            "sentiment": self.sentiment,
            "top_keywords": [k.to_dict() for k in self.top_keywords],
            "tokens": self.tokens,
        }
