"""NLP oracle interface.

The analyzer never tokenizes or tags text itself. Every linguistic signal
comes from an oracle implementing :class:`NLPOracle`: tokens with type,
stop-word flag and normal form, sentences with sentiment, named entities and
document sentiment. Readability statistics and sentence importance are
optional capabilities that an oracle declares through ``capabilities``.
"""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Protocol, runtime_checkable


class Capability(StrEnum):
    """Optional oracle capabilities."""

    READABILITY = "readability"
    SENTENCE_IMPORTANCE = "sentence_importance"


@dataclass(frozen=True)
class Token:
    """A single token as seen by the oracle."""

    text: str
    type: str  # word, number, punctuation, emoji, ...
    is_stop: bool = False
    normal: str = ""

    @property
    def is_word(self) -> bool:
        return self.type == "word"

    def normal_form(self) -> str:
        return self.normal or self.text.lower()


@dataclass(frozen=True)
class Sentence:
    """A sentence with its sentiment in [-1, 1]."""

    text: str
    sentiment: float = 0.0


@dataclass(frozen=True)
class Entity:
    """A named entity; ``type`` is None when the oracle did not classify it."""

    value: str
    type: str | None = None

    def to_dict(self) -> dict:
        return {"value": self.value, "type": self.type}


@dataclass(frozen=True)
class ReadabilityStats:
    """Readability statistics for a text."""

    fres: float | None = None  # Flesch reading ease
    reading_time_mins: int = 0
    reading_time_secs: int = 0
    num_complex_words: int = 0
    complex_words: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class SentenceImportance:
    """Relative importance of the sentence at ``index``."""

    index: int
    importance: float = 0.0


@dataclass(frozen=True)
class Annotation:
    """Everything the oracle reports about one text."""

    tokens: tuple[Token, ...] = ()
    sentences: tuple[Sentence, ...] = ()
    entities: tuple[Entity, ...] = ()
    sentiment: float = 0.0


@runtime_checkable
class NLPOracle(Protocol):
    """Natural-language engine consumed by the analyzer.

    ``readability_stats`` and ``sentence_importance`` are only called when the
    matching :class:`Capability` is in ``capabilities``. An oracle that
    declares a capability but cannot serve it for a given text raises
    :class:`~seokit.exceptions.CapabilityUnavailableError`.
    """

    capabilities: frozenset[Capability]

    def annotate(self, text: str) -> Annotation: ...

    def readability_stats(self, text: str) -> ReadabilityStats: ...

    def sentence_importance(self, text: str) -> list[SentenceImportance]: ...
