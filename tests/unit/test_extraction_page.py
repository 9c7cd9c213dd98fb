"""Tests for page-level extractors: structure and meta tags."""

from seokit.extraction.meta import LengthStatus, Severity, audit_meta
from seokit.extraction.structure import H1Status, analyze_structure, count_level_skips
from seokit.page.models import MetaTags
from tests.fixtures.pages import GOOD_TITLE, complete_meta, make_page


class TestStructure:
    """Tests for the structure summary."""

    def test_well_formed_page(self) -> None:
        summary = analyze_structure(make_page())

        assert summary.h1_count == 1
        assert summary.h1_status == H1Status.SINGLE
        assert summary.total_headings == 3
        assert summary.heading_breakdown["h2"] == 2
        assert summary.has_proper_hierarchy is True
        assert summary.paragraph_count == 1
        assert summary.has_structured_data is True
        assert summary.structured_data_count == 1

    def test_skipped_level(self) -> None:
        page = make_page(headings={"h2": ["Intro"], "h4": ["Detail"]})

        summary = analyze_structure(page)

        assert summary.h1_status == H1Status.MISSING
        assert summary.skip_count == 1
        assert summary.has_skipped_level is True
        assert summary.has_proper_hierarchy is False

    def test_multiple_h1(self) -> None:
        page = make_page(headings={"h1": ["One", "Two"], "h2": ["Three"]})

        summary = analyze_structure(page)

        assert summary.h1_status == H1Status.MULTIPLE
        assert summary.skip_count == 0
        assert summary.has_proper_hierarchy is False

    def test_images_without_alt(self) -> None:
        page = make_page(images={"total": 3, "withAlt": 1, "withoutAlt": 2})
        assert analyze_structure(page).images_without_alt == 2

    def test_count_level_skips(self) -> None:
        assert count_level_skips([]) == 0
        assert count_level_skips([3]) == 0
        assert count_level_skips([1, 3, 2, 5]) == 2
        # Going back up is never a skip
        assert count_level_skips([1, 2, 3, 1, 2]) == 0

    def test_h1_status_from_count(self) -> None:
        assert H1Status.from_count(0) == H1Status.MISSING
        assert H1Status.from_count(1) == H1Status.SINGLE
        assert H1Status.from_count(4) == H1Status.MULTIPLE


class TestMetaAudit:
    """Tests for the meta tag audit."""

    def test_complete_meta_has_no_issues(self) -> None:
        audit = audit_meta(MetaTags.model_validate(complete_meta()))

        assert audit.issues == ()
        assert audit.title_status == LengthStatus.OK
        assert audit.description_status == LengthStatus.OK
        assert audit.has_og is True
        assert audit.has_twitter_card is True

    def test_missing_title_and_description(self) -> None:
        meta = MetaTags.model_validate(complete_meta(title="", description=""))

        audit = audit_meta(meta)

        assert audit.summary.critical == 2
        assert [i.message for i in audit.issues] == [
            "Missing page title",
            "Missing meta description",
        ]
        assert audit.title_status == LengthStatus.MISSING

    def test_short_title_is_not_also_missing(self) -> None:
        audit = audit_meta(MetaTags.model_validate(complete_meta(title="Compost")))

        assert audit.title_status == LengthStatus.TOO_SHORT
        assert [i.message for i in audit.issues] == [
            "Title too short (7 chars, aim for 50-60)"
        ]
        assert audit.issues[0].severity == Severity.WARNING

    def test_long_description(self) -> None:
        audit = audit_meta(MetaTags.model_validate(complete_meta(description="x" * 170)))

        assert audit.description_status == LengthStatus.TOO_LONG
        assert audit.issues[0].message == (
            "Meta description too long (170 chars, aim for 150-160)"
        )

    def test_length_boundaries_are_inclusive(self) -> None:
        assert LengthStatus.classify("t", 30, 30, 60) == LengthStatus.OK
        assert LengthStatus.classify("t", 60, 30, 60) == LengthStatus.OK
        assert LengthStatus.classify("t", 29, 30, 60) == LengthStatus.TOO_SHORT
        assert LengthStatus.classify("t", 61, 30, 60) == LengthStatus.TOO_LONG

    def test_empty_meta_issue_order(self) -> None:
        audit = audit_meta(MetaTags())

        assert [i.message for i in audit.issues] == [
            "Missing page title",
            "Missing meta description",
            "No canonical URL specified",
            "Missing lang attribute on html element",
            "Missing viewport meta tag",
            "Missing Open Graph title",
            "Missing Open Graph description",
            "Missing Open Graph image",
            "Missing Twitter Card meta tags",
        ]
        assert audit.summary.to_dict() == {"critical": 2, "warning": 2, "info": 5}

    def test_issues_with(self) -> None:
        audit = audit_meta(MetaTags(title=GOOD_TITLE))
        critical = audit.issues_with(Severity.CRITICAL)
        assert [i.message for i in critical] == ["Missing meta description"]
