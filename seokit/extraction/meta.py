"""Meta tag audit.

Runs an ordered rule table over the page's head metadata. Each rule emits at
most one issue. Title and description are first classified into a
:class:`LengthStatus`, so "missing" and "too short" can never both fire.
"""

from collections import Counter
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from seokit.page.models import MetaTags

TITLE_MIN_CHARS = 30
TITLE_MAX_CHARS = 60
DESCRIPTION_MIN_CHARS = 120
DESCRIPTION_MAX_CHARS = 160


class Severity(StrEnum):
    CRITICAL = "critical"
    WARNING = "warning"
    INFO = "info"


class LengthStatus(StrEnum):
    """Classification of a length-bounded text field."""

    MISSING = "missing"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    OK = "ok"

    @classmethod
    def classify(cls, value: str, length: int, min_chars: int, max_chars: int) -> "LengthStatus":
        if not value:
            return cls.MISSING
        if length < min_chars:
            return cls.TOO_SHORT
        if length > max_chars:
            return cls.TOO_LONG
        return cls.OK


@dataclass(frozen=True)
class Issue:
    severity: Severity
    message: str

    def to_dict(self) -> dict:
        return {"severity": self.severity.value, "message": self.message}


@dataclass(frozen=True)
class SeveritySummary:
    critical: int = 0
    warning: int = 0
    info: int = 0

    def to_dict(self) -> dict:
        return {"critical": self.critical, "warning": self.warning, "info": self.info}


@dataclass(frozen=True)
class MetaAudit:
    """Audit of a page's meta tags."""

    title: str
    title_length: int
    title_status: LengthStatus
    description: str
    description_length: int
    description_status: LengthStatus
    has_canonical: bool
    has_lang: bool
    has_viewport: bool
    has_og: bool
    has_twitter_card: bool
    issues: tuple[Issue, ...]
    summary: SeveritySummary

    def issues_with(self, severity: Severity) -> list[Issue]:
        return [i for i in self.issues if i.severity == severity]

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "title_length": self.title_length,
            "title_status": self.title_status.value,
            "description": self.description,
            "description_length": self.description_length,
            "description_status": self.description_status.value,
            "has_canonical": self.has_canonical,
            "has_lang": self.has_lang,
            "has_viewport": self.has_viewport,
            "has_og": self.has_og,
            "has_twitter_card": self.has_twitter_card,
            "issues": [i.to_dict() for i in self.issues],
            "summary": self.summary.to_dict(),
        }


def _title_issue(meta: MetaTags) -> Issue | None:
    length = meta.title_length or 0
    status = LengthStatus.classify(meta.title, length, TITLE_MIN_CHARS, TITLE_MAX_CHARS)
    if status == LengthStatus.MISSING:
        return Issue(Severity.CRITICAL, "Missing page title")
    if status == LengthStatus.TOO_SHORT:
        return Issue(Severity.WARNING, f"Title too short ({length} chars, aim for 50-60)")
    if status == LengthStatus.TOO_LONG:
        return Issue(Severity.WARNING, f"Title too long ({length} chars, aim for 50-60)")
    return None


def _description_issue(meta: MetaTags) -> Issue | None:
    length = meta.description_length or 0
    status = LengthStatus.classify(
        meta.description, length, DESCRIPTION_MIN_CHARS, DESCRIPTION_MAX_CHARS
    )
    if status == LengthStatus.MISSING:
        return Issue(Severity.CRITICAL, "Missing meta description")
    if status == LengthStatus.TOO_SHORT:
        return Issue(
            Severity.WARNING,
            f"Meta description too short ({length} chars, aim for 150-160)",
        )
    if status == LengthStatus.TOO_LONG:
        return Issue(
            Severity.WARNING,
            f"Meta description too long ({length} chars, aim for 150-160)",
        )
    return None


def _absent(check: Callable[[MetaTags], str], severity: Severity, message: str):
    def rule(meta: MetaTags) -> Issue | None:
        return None if check(meta) else Issue(severity, message)

    return rule


# Evaluated in order; issue order in the audit follows this table
META_RULES: list[Callable[[MetaTags], Issue | None]] = [
    _title_issue,
    _description_issue,
    _absent(lambda m: m.canonical, Severity.INFO, "No canonical URL specified"),
    _absent(lambda m: m.lang, Severity.WARNING, "Missing lang attribute on html element"),
    _absent(lambda m: m.viewport, Severity.WARNING, "Missing viewport meta tag"),
    _absent(lambda m: m.og.get("og:title", ""), Severity.INFO, "Missing Open Graph title"),
    _absent(
        lambda m: m.og.get("og:description", ""),
        Severity.INFO,
        "Missing Open Graph description",
    ),
    _absent(lambda m: m.og.get("og:image", ""), Severity.INFO, "Missing Open Graph image"),
    _absent(
        lambda m: m.twitter.get("twitter:card", ""),
        Severity.INFO,
        "Missing Twitter Card meta tags",
    ),
]


def audit_meta(meta: MetaTags) -> MetaAudit:
    """
    Audit a page's meta tags.

    Args:
        meta: Head metadata from the page content model

    Returns:
        MetaAudit with ordered issues and a severity summary
    """
    issues = tuple(issue for rule in META_RULES if (issue := rule(meta)) is not None)
    counts = Counter(i.severity for i in issues)
    title_length = meta.title_length or 0
    description_length = meta.description_length or 0

    return MetaAudit(
        title=meta.title,
        title_length=title_length,
        title_status=LengthStatus.classify(
            meta.title, title_length, TITLE_MIN_CHARS, TITLE_MAX_CHARS
        ),
        description=meta.description,
        description_length=description_length,
        description_status=LengthStatus.classify(
            meta.description, description_length, DESCRIPTION_MIN_CHARS, DESCRIPTION_MAX_CHARS
        ),
        has_canonical=bool(meta.canonical),
        has_lang=bool(meta.lang),
        has_viewport=bool(meta.viewport),
        has_og=bool(meta.og.get("og:title")),
        has_twitter_card=bool(meta.twitter.get("twitter:card")),
        issues=issues,
        summary=SeveritySummary(
            critical=counts[Severity.CRITICAL],
            warning=counts[Severity.WARNING],
            info=counts[Severity.INFO],
        ),
    )
