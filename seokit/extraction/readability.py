"""Readability metrics for page body text."""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from seokit.config import DEFAULT_READING_WPM
from seokit.nlp.document import RawDocument
from seokit.rounding import percentage, round_half_up

LONG_WORD_CHARS = 6  # Words longer than this count as long

# Flesch reading ease bands, highest first
READING_EASE_BANDS = [
    (90, "Very Easy (5th grade)"),
    (80, "Easy (6th grade)"),
    (70, "Fairly Easy (7th grade)"),
    (60, "Standard (8th-9th grade)"),
    (50, "Fairly Difficult (10th-12th grade)"),
    (30, "Difficult (College level)"),
]
HARDEST_LABEL = "Very Difficult (Graduate level)"
UNKNOWN_LABEL = "unknown"


@dataclass(frozen=True)
class ReadingTime:
    minutes: int
    seconds: int

    def to_dict(self) -> dict:
        return {"minutes": self.minutes, "seconds": self.seconds}


@dataclass(frozen=True)
class ComplexWords:
    count: int
    words: Mapping[str, int]

    def to_dict(self) -> dict:
        return {"count": self.count, "words": dict(self.words)}


@dataclass(frozen=True)
class ReadabilityMetrics:
    """Readability of a document."""

    reading_ease: float | None  # None when the oracle has no readability support
    reading_level: str
    sentence_count: int
    word_count: int
    token_count: int
    avg_words_per_sentence: float
    avg_word_length: float
    long_word_percentage: float
    reading_time: ReadingTime
    complex_words: ComplexWords | None = None

    def to_dict(self) -> dict:
        return {
            "reading_ease": self.reading_ease,
            "reading_level": self.reading_level,
            "sentence_count": self.sentence_count,
            "word_count": self.word_count,
            "token_count": self.token_count,
            "avg_words_per_sentence": self.avg_words_per_sentence,
            "avg_word_length": self.avg_word_length,
            "long_word_percentage": self.long_word_percentage,
            "reading_time": self.reading_time.to_dict(),
            "complex_words": self.complex_words.to_dict() if self.complex_words else None,
        }


def reading_ease_label(score: float | None) -> str:
    """Map a Flesch reading ease score to its band label."""
    if score is None:
        return UNKNOWN_LABEL
    for threshold, label in READING_EASE_BANDS:
        if score >= threshold:
            return label
    return HARDEST_LABEL


def estimate_reading_time(word_count: int, words_per_minute: int = DEFAULT_READING_WPM) -> ReadingTime:
    """Estimate reading time when the oracle cannot supply one."""
    minutes, remainder = divmod(word_count, words_per_minute)
    seconds = int(round_half_up(remainder / words_per_minute * 60))
    return ReadingTime(minutes=minutes, seconds=seconds)


def analyze_readability(
    doc: RawDocument,
    words_per_minute: int = DEFAULT_READING_WPM,
) -> ReadabilityMetrics:
    """
    Compute readability metrics for a document.

    Without oracle readability support the reading ease is reported as
    unknown and reading time is estimated from the word count.

    Args:
        doc: Annotated page body
        words_per_minute: Reading speed for the fallback estimate

    Returns:
        ReadabilityMetrics for the document
    """
    words = doc.words()
    word_count = len(words)
    sentence_count = len(doc.sentences)
    total_chars = sum(len(w) for w in words)
    long_words = sum(1 for w in words if len(w) > LONG_WORD_CHARS)

    stats = doc.readability
    reading_ease = stats.fres if stats else None

    if stats is not None:
        reading_time = ReadingTime(
            minutes=stats.reading_time_mins,
            seconds=stats.reading_time_secs or 0,
        )
    else:
        reading_time = estimate_reading_time(word_count, words_per_minute)

    complex_words = None
    if stats and stats.num_complex_words:
        complex_words = ComplexWords(
            count=stats.num_complex_words,
            words=MappingProxyType(dict(stats.complex_words)),
        )

    return ReadabilityMetrics(
        reading_ease=reading_ease,
        reading_level=reading_ease_label(reading_ease),
        sentence_count=sentence_count,
        word_count=word_count,
        token_count=len(doc.tokens),
        avg_words_per_sentence=(
            round_half_up(word_count / sentence_count, 1) if sentence_count else 0.0
        ),
        avg_word_length=round_half_up(total_chars / word_count, 1) if word_count else 0.0,
        long_word_percentage=percentage(long_words, word_count, 1),
        reading_time=reading_time,
        complex_words=complex_words,
    )
