"""Document and sentence sentiment summary."""

from dataclasses import dataclass

from seokit.nlp.document import RawDocument
from seokit.rounding import round_half_up

SENTENCE_PREVIEW_CHARS = 120
EXTREMES = 3


@dataclass(frozen=True)
class SentenceSentiment:
    text: str
    score: float

    def to_dict(self) -> dict:
        return {"text": self.text, "score": self.score}


@dataclass(frozen=True)
class SentimentSummary:
    overall: float
    label: str
    most_positive: tuple[SentenceSentiment, ...]
    most_negative: tuple[SentenceSentiment, ...]

    def to_dict(self) -> dict:
        return {
            "overall": self.overall,
            "label": self.label,
            "most_positive": [s.to_dict() for s in self.most_positive],
            "most_negative": [s.to_dict() for s in self.most_negative],
        }


def sentiment_label(score: float) -> str:
    if score > 0.2:
        return "positive"
    if score > 0.05:
        return "slightly positive"
    if score < -0.2:
        return "negative"
    if score < -0.05:
        return "slightly negative"
    return "neutral"


def analyze_sentiment(doc: RawDocument) -> SentimentSummary:
    """
    Summarize document sentiment and its most extreme sentences.

    Args:
        doc: Annotated text

    Returns:
        SentimentSummary with the three most positive and negative sentences
    """
    ranked = sorted(
        (
            SentenceSentiment(text=s.text[:SENTENCE_PREVIEW_CHARS], score=s.sentiment)
            for s in doc.sentences
        ),
        key=lambda s: s.score,
    )

    return SentimentSummary(
        overall=round_half_up(doc.sentiment, 3),
        label=sentiment_label(doc.sentiment),
        most_positive=tuple(reversed(ranked[-EXTREMES:])),
        most_negative=tuple(ranked[:EXTREMES]),
    )
