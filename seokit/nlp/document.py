"""Annotated documents handed to the metric extractors."""

from dataclasses import dataclass

import structlog

from seokit.exceptions import CapabilityUnavailableError
from seokit.nlp.oracle import (
    Annotation,
    Capability,
    Entity,
    NLPOracle,
    ReadabilityStats,
    Sentence,
    SentenceImportance,
    Token,
)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class RawDocument:
    """Text plus its oracle annotation. Built once per page or section."""

    text: str
    annotation: Annotation
    readability: ReadabilityStats | None = None
    importance: tuple[SentenceImportance, ...] | None = None

    @property
    def tokens(self) -> tuple[Token, ...]:
        return self.annotation.tokens

    @property
    def sentences(self) -> tuple[Sentence, ...]:
        return self.annotation.sentences

    @property
    def entities(self) -> tuple[Entity, ...]:
        return self.annotation.entities

    @property
    def sentiment(self) -> float:
        return self.annotation.sentiment

    @property
    def supports_readability(self) -> bool:
        return self.readability is not None

    @property
    def supports_importance(self) -> bool:
        return self.importance is not None

    def words(self) -> list[str]:
        """Raw text of every word-type token."""
        return [t.text for t in self.tokens if t.is_word]

    def content_terms(self) -> list[str]:
        """Normal forms of non-stop word tokens, in document order."""
        return [t.normal_form() for t in self.tokens if t.is_word and not t.is_stop]


def read_document(oracle: NLPOracle, text: str) -> RawDocument:
    """
    Run the oracle over ``text`` and collect the optional capabilities.

    A capability the oracle declares but fails to serve is logged and
    treated as absent, so the dependent extractor falls back.

    Args:
        oracle: NLP oracle
        text: Text to annotate

    Returns:
        RawDocument for the text
    """
    annotation = oracle.annotate(text)
    capabilities = oracle.capabilities

    readability: ReadabilityStats | None = None
    if Capability.READABILITY in capabilities:
        try:
            readability = oracle.readability_stats(text)
        except CapabilityUnavailableError as e:
            logger.warning(
                "oracle_capability_unavailable",
                capability=e.capability,
                error=e.message,
            )

    importance: tuple[SentenceImportance, ...] | None = None
    if Capability.SENTENCE_IMPORTANCE in capabilities:
        try:
            importance = tuple(oracle.sentence_importance(text))
        except CapabilityUnavailableError as e:
            logger.warning(
                "oracle_capability_unavailable",
                capability=e.capability,
                error=e.message,
            )

    return RawDocument(
        text=text,
        annotation=annotation,
        readability=readability,
        importance=importance,
    )
