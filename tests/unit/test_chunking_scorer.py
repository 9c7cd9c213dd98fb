"""Tests for section snippet scoring."""

import pytest

from seokit.chunking.scorer import (
    NO_HEADING,
    ChunkResult,
    ChunkScorer,
    ChunkScorerConfig,
    compute_snippet_score,
    has_real_heading,
    snippet_grade,
    summarize_chunks,
    topic_alignment,
)
from seokit.page.models import Section
from tests.fixtures.oracle import StubOracle, full_oracle


def _result(score: int, heading: str = "Heading") -> ChunkResult:
    return ChunkResult(
        index=0,
        heading=heading,
        level=2,
        word_count=50,
        sentence_count=3,
        top_terms=(),
        entities=(),
        entity_count=0,
        entity_density=0.0,
        unique_term_ratio=60.0,
        sentiment=0.0,
        topic_alignment=0,
        snippet_score=score,
        snippet_grade=snippet_grade(score),
    )


class TestComputeSnippetScore:
    def test_ideal_section(self) -> None:
        score = compute_snippet_score(
            word_count=100, entity_count=3, entity_density=3.0, unique_ratio=60.0, heading="Intro"
        )
        assert score == 100

    def test_placeholder_heading_earns_nothing(self) -> None:
        score = compute_snippet_score(
            word_count=100,
            entity_count=3,
            entity_density=3.0,
            unique_ratio=60.0,
            heading="(Introduction)",
        )
        assert score == 93

    def test_short_section_without_entities(self) -> None:
        score = compute_snippet_score(
            word_count=4, entity_count=0, entity_density=0.0, unique_ratio=100.0, heading=None
        )
        # 50 - 20 - 5 + 3
        assert score == 28

    def test_long_section(self) -> None:
        score = compute_snippet_score(
            word_count=600, entity_count=1, entity_density=0.2, unique_ratio=20.0, heading=""
        )
        # 50 - 5 + 5 + 3 - 5
        assert score == 48

    def test_medium_length(self) -> None:
        score = compute_snippet_score(
            word_count=30, entity_count=0, entity_density=0.0, unique_ratio=40.0, heading="Tips"
        )
        # 50 + 8 - 5 + 3 + 7
        assert score == 63

    def test_has_real_heading(self) -> None:
        assert has_real_heading("Getting Started") is True
        assert has_real_heading(None) is False
        assert has_real_heading("") is False
        assert has_real_heading(NO_HEADING) is False


class TestSnippetGrade:
    @pytest.mark.parametrize(
        "score,grade",
        [(100, "A"), (80, "A"), (79, "B"), (65, "B"), (64, "C"), (50, "C"), (35, "D"), (34, "F")],
    )
    def test_boundaries(self, score, grade) -> None:
        assert snippet_grade(score) == grade


class TestTopicAlignment:
    def test_full_and_none(self) -> None:
        assert topic_alignment(["a", "b"], frozenset({"a", "b", "c"})) == 100
        assert topic_alignment(["x", "y"], frozenset({"a", "b"})) == 0

    def test_partial_rounds(self) -> None:
        assert topic_alignment(["a", "x", "y"], frozenset({"a"})) == 33

    def test_no_local_terms(self) -> None:
        assert topic_alignment([], frozenset({"a"})) == 0


class TestSummarizeChunks:
    def test_summary(self) -> None:
        summary = summarize_chunks([_result(90, "Strong"), _result(30, "Weak"), _result(65)])

        assert summary.total_chunks == 3
        assert summary.avg_snippet_score == 62  # 61.67
        assert summary.avg_grade == "C"
        assert summary.strong_chunks == 1
        assert summary.weak_chunks == 1
        assert summary.weak_chunk_headings == ("Weak",)

    def test_empty(self) -> None:
        summary = summarize_chunks([])

        assert summary.total_chunks == 0
        assert summary.avg_snippet_score == 0
        assert summary.avg_grade == "F"


class TestChunkScorer:
    """Tests for ChunkScorer."""

    def test_minimum_length_is_inclusive(self) -> None:
        scorer = ChunkScorer(StubOracle())
        sections = [
            Section(heading=None, level=0, text="Worms eat the peel."),  # 19 chars
            Section(heading=None, level=0, text="Worms eat scraps ok."),  # 20 chars
        ]

        analysis = scorer.score_sections(sections, ())

        assert len(analysis.items) == 1
        item = analysis.items[0]
        assert item.index == 1
        assert item.heading == NO_HEADING
        assert item.word_count == 4
        assert item.snippet_score == 28
        assert item.snippet_grade == "F"

    def test_topic_alignment_against_global_terms(self) -> None:
        scorer = ChunkScorer(StubOracle())
        sections = [
            Section(heading="Compost", level=2, text="Compost soil worms feed gardens daily."),
            Section(heading="Tomatoes", level=2, text="Tomato vines climb tall fences quickly."),
        ]
        global_terms = ("compost", "soil", "worms", "feed", "gardens", "daily")

        analysis = scorer.score_sections(sections, global_terms)

        assert [c.topic_alignment for c in analysis.items] == [100, 0]

    def test_entities_and_ratios(self) -> None:
        scorer = ChunkScorer(StubOracle(entities={"Portland": "GPE"}))
        section = Section(
            heading="Local", level=2, text="Portland gardeners compost in Portland yards."
        )

        result = scorer.score_section(0, section, ())

        assert result.word_count == 5
        assert result.entity_count == 2
        assert result.entity_density == 40.0
        assert result.unique_term_ratio == 80.0
        assert [(t.term, t.count) for t in result.top_terms][:1] == [("portland", 2)]

    def test_key_statements_by_importance(self) -> None:
        oracle = full_oracle(importance={0: 0.2, 1: 0.9, 2: 0.5})
        scorer = ChunkScorer(oracle)
        section = Section(
            heading="Points",
            level=2,
            text="First point here. Second point matters most. Third point is fine.",
        )

        result = scorer.score_section(0, section, ())

        assert result.key_statements == (
            "Second point matters most.",
            "Third point is fine.",
            "First point here.",
        )

    def test_key_statements_are_truncated(self) -> None:
        scorer = ChunkScorer(full_oracle(), ChunkScorerConfig(key_statements=1, statement_chars=10))
        section = Section(heading="Long", level=2, text="A sentence that runs past ten characters.")

        result = scorer.score_section(0, section, ())

        assert result.key_statements == ("A sentence",)

    def test_no_key_statements_without_importance(self) -> None:
        scorer = ChunkScorer(StubOracle())
        section = Section(heading="Points", level=2, text="First point here. Second point.")
        assert scorer.score_section(0, section, ()).key_statements == ()

    def test_no_sections(self) -> None:
        analysis = ChunkScorer(StubOracle()).score_sections([], ("compost",))

        assert analysis.items == ()
        assert analysis.summary is None

    def test_all_sections_skipped(self) -> None:
        analysis = ChunkScorer(StubOracle()).score_sections([Section(text="Too short.")], ())

        assert analysis.items == ()
        assert analysis.summary is not None
        assert analysis.summary.total_chunks == 0

    @pytest.mark.asyncio
    async def test_async_matches_sync(self) -> None:
        scorer = ChunkScorer(StubOracle(entities={"Portland": "GPE"}))
        sections = [
            Section(heading="One", level=2, text="Portland gardeners compost in Portland yards."),
            Section(heading="Two", level=2, text="Worms eat the peel."),
            Section(heading="Three", level=3, text="Compost soil worms feed gardens daily."),
        ]

        sync = scorer.score_sections(sections, ("compost",))
        parallel = await scorer.score_sections_async(sections, ("compost",))

        assert parallel == sync
        assert [c.index for c in parallel.items] == [0, 2]
