"""
Tests for scoring and suggestion generation.
"""

import dataclasses

import pytest

from ats_scorer.config import AnalysisConfig
from ats_scorer.extractor import ExtractedKeyword
from ats_scorer.indexer import index_resume
from ats_scorer.matcher import MatchOutcome
from ats_scorer.resume import (
    EducationEntry,
    ExperienceEntry,
    ResumeDocument,
    Skills,
)
from ats_scorer.scorer import (
    EMPTY_RESUME,
    NO_JOB_DESCRIPTION,
    NO_KEYWORDS,
    ResumeScorer,
    score,
)


def kw(term, weight, *extra_forms):
    return ExtractedKeyword(term, weight, (term,) + extra_forms)


@pytest.fixture
def full_doc():
    return ResumeDocument(
        summary="Data engineer building machine pipelines",
        experience=[ExperienceEntry(company="Acme", position="Engineer", description="Spark jobs")],
        education=[EducationEntry(institution="State University")],
        skills=Skills(keywords=["Python"]),
    )


class TestScore:

    def test_weighted_ratio(self, full_doc):
        outcome = MatchOutcome(matched=[kw("python", 3.0)], missing=[kw("scala", 1.0)])
        result = score(outcome, full_doc)
        assert result.score == 75
        assert result.passed

    def test_rounds_half_up(self, full_doc):
        outcome = MatchOutcome(matched=[kw("python", 1.0)], missing=[kw("scala", 7.0)])
        assert score(outcome, full_doc).score == 13

    def test_zero_weights_score_zero(self, full_doc):
        result = score(MatchOutcome(), full_doc)
        assert result.score == 0
        assert not result.passed
        assert NO_KEYWORDS in result.suggestions

    def test_structural_penalties(self):
        outcome = MatchOutcome(matched=[kw("python", 1.0)])
        doc = ResumeDocument(summary="Python developer", skills=Skills(keywords=["Python"]))
        result = score(outcome, doc)
        # no experience, no education
        assert result.score == 90
        assert any("Experience" in s for s in result.suggestions)
        assert any("Education" in s for s in result.suggestions)
        assert not any("summary" in s for s in result.suggestions)

    def test_penalties_floor_at_zero(self):
        outcome = MatchOutcome(matched=[kw("python", 1.0)], missing=[kw("go", 49.0)])
        result = score(outcome, ResumeDocument())
        assert result.score == 0
        assert len(result.suggestions) == 1 + 1 + 4  # empty resume, one keyword, four sections

    def test_custom_threshold_and_penalty(self, full_doc):
        outcome = MatchOutcome(matched=[kw("python", 4.0)], missing=[kw("scala", 1.0)])
        config = AnalysisConfig(threshold=90, section_penalty=10)
        result = score(outcome, full_doc, config=config)
        assert result.score == 80
        assert not result.passed
        assert result.rating == "needs_improvement"

    @pytest.mark.parametrize("matched,missing,rating", [
        (9.0, 1.0, "excellent"),
        (8.0, 2.0, "good"),
        (1.0, 1.0, "needs_improvement"),
    ])
    def test_rating_bands(self, full_doc, matched, missing, rating):
        outcome = MatchOutcome(matched=[kw("python", matched)], missing=[kw("scala", missing)])
        assert score(outcome, full_doc).rating == rating

    def test_failing_score_is_never_excellent(self, full_doc):
        outcome = MatchOutcome(matched=[kw("python", 9.0)], missing=[kw("scala", 1.0)])
        result = score(outcome, full_doc, config=AnalysisConfig(threshold=95))
        assert result.score == 90
        assert not result.passed
        assert result.rating == "needs_improvement"

    @pytest.mark.parametrize("value,rating", [
        (94, "needs_improvement"),
        (95, "excellent"),
        (100, "excellent"),
    ])
    def test_rating_with_threshold_above_excellent_band(self, value, rating):
        assert AnalysisConfig(threshold=95).rating_for(value) == rating

    def test_keyword_coverage(self, full_doc):
        outcome = MatchOutcome(
            matched=[kw("python", 1.0)],
            missing=[kw("scala", 1.0), kw("go", 1.0), kw("rust", 1.0)],
        )
        result = score(outcome, full_doc)
        assert result.keyword_coverage == 0.25
        assert result.to_dict()["keywordCoverage"] == 25.0

    def test_result_lists_terms_in_order(self, full_doc):
        outcome = MatchOutcome(
            matched=[kw("python", 2.0), kw("spark", 1.0)],
            missing=[kw("amazon web services", 3.0, "aws"), kw("scala", 1.0)],
        )
        result = score(outcome, full_doc)
        assert result.matched_keywords == ("python", "spark")
        assert result.missing_keywords == ("amazon web services", "scala")

    def test_result_is_immutable(self, full_doc):
        result = score(MatchOutcome(matched=[kw("python", 1.0)]), full_doc)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.score = 100

    def test_to_dict(self, full_doc):
        result = score(MatchOutcome(matched=[kw("python", 1.0)], missing=[kw("go", 1.0)]), full_doc)
        assert result.to_dict() == {
            "lastScore": 50,
            "keywordMatches": ["python"],
            "missedKeywords": ["go"],
            "suggestions": list(result.suggestions),
            "passesATS": False,
            "rating": "needs_improvement",
            "keywordCoverage": 50.0,
        }


class TestSuggestions:

    def test_missing_keyword_defaults_to_skills_or_experience(self, full_doc):
        outcome = MatchOutcome(missing=[kw("scala", 1.0)])
        result = score(outcome, full_doc)
        assert result.suggestions == ('Add "scala" to your Skills or Experience section.',)

    def test_missing_phrase_uses_indexed_section(self, full_doc):
        outcome = MatchOutcome(missing=[kw("machine learning", 1.0)])
        result = score(outcome, full_doc, index=index_resume(full_doc))
        assert result.suggestions == ('Add "machine learning" to your Summary section.',)

    def test_acronym_keyword_shows_both_forms(self, full_doc):
        outcome = MatchOutcome(missing=[kw("amazon web services", 1.0, "aws")])
        result = score(outcome, full_doc)
        assert result.suggestions[0] == 'Add "amazon web services (aws)" to your Skills or Experience section.'

    def test_limits_keyword_suggestions(self, full_doc):
        missing = [kw(f"tool{i}", 10.0 - i) for i in range(8)]
        result = score(MatchOutcome(missing=missing), full_doc)
        assert len(result.suggestions) == 5
        assert '"tool0"' in result.suggestions[0]
        scorer = ResumeScorer(AnalysisConfig(suggestion_limit=2))
        assert len(scorer.score(MatchOutcome(missing=missing), full_doc).suggestions) == 2

    def test_missing_job_description(self, full_doc):
        result = score(MatchOutcome(), full_doc, job_has_content=False)
        assert result.suggestions == (NO_JOB_DESCRIPTION,)

    def test_empty_resume(self):
        result = score(MatchOutcome(missing=[kw("python", 1.0)]), ResumeDocument())
        assert result.suggestions[0] == EMPTY_RESUME

    def test_deterministic(self, full_doc):
        outcome = MatchOutcome(matched=[kw("python", 1.0)], missing=[kw("go", 2.0), kw("rust", 2.0)])
        assert score(outcome, full_doc) == score(outcome, full_doc)
