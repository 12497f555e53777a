"""
Scorer and suggestion generator.
Turns a keyword match into a 0-100 ATS score, a pass/fail decision and
template-based improvement tips.
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from .config import AnalysisConfig
from .extractor import ExtractedKeyword
from .indexer import ResumeIndex, index_resume
from .matcher import MatchOutcome
from .resume import ResumeDocument

logger = logging.getLogger(__name__)

NO_JOB_DESCRIPTION = (
    "The job description has no extractable content. "
    "Paste the full job posting text to check keyword matches."
)
NO_KEYWORDS = "No keywords were extracted from the job description, so keyword matching could not be scored."
EMPTY_RESUME = "Your resume has no text content to match. Add a summary, experience and skills before analyzing."
MISSING_KEYWORD = 'Add "{keyword}" to your {section} section.'
DEFAULT_SECTION = "Skills or Experience"


@dataclass(frozen=True)
class StructuralCheck:
    """A resume section whose absence commonly breaks ATS parsing."""
    name: str
    is_missing: Callable[[ResumeDocument], bool]
    suggestion: str


def _no_summary(doc: ResumeDocument) -> bool:
    return not doc.has_summary()


def _no_skills(doc: ResumeDocument) -> bool:
    return doc.skills.is_empty()


def _no_experience(doc: ResumeDocument) -> bool:
    return len(doc.experience) < 1


def _no_education(doc: ResumeDocument) -> bool:
    return len(doc.education) < 1


STRUCTURAL_CHECKS: Tuple[StructuralCheck, ...] = (
    StructuralCheck(
        "summary", _no_summary,
        "Add a professional summary. Many ATS parsers expect a short summary at the top of the resume.",
    ),
    StructuralCheck(
        "skills", _no_skills,
        "Add a Skills section that lists your key tools and technologies.",
    ),
    StructuralCheck(
        "experience", _no_experience,
        "Add at least one work experience entry. Resumes without an Experience section often fail ATS parsing.",
    ),
    StructuralCheck(
        "education", _no_education,
        "Add an Education section. Many ATS filters check for degree information.",
    ),
)


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of one ATS analysis. Never mutated after construction."""
    score: int
    passed: bool
    matched_keywords: Tuple[str, ...]
    missing_keywords: Tuple[str, ...]
    suggestions: Tuple[str, ...]
    rating: str
    keyword_coverage: float = 0.0
    keywords: Tuple[ExtractedKeyword, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """The ``atsData`` shape the resume builder stores and displays."""
        return {
            "lastScore": self.score,
            "keywordMatches": list(self.matched_keywords),
            "missedKeywords": list(self.missing_keywords),
            "suggestions": list(self.suggestions),
            "passesATS": self.passed,
            "rating": self.rating,
            "keywordCoverage": round(self.keyword_coverage * 100, 1),
        }


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _display(keyword: ExtractedKeyword) -> str:
    if len(keyword.forms) > 1:
        return f"{keyword.term} ({keyword.forms[1]})"
    return keyword.term


def _safe(check: Callable[[ResumeDocument], bool], doc: ResumeDocument) -> bool:
    # A section of the wrong type counts as missing
    try:
        return check(doc)
    except (AttributeError, TypeError):
        return True


class ResumeScorer:
    """Score a keyword match and generate improvement suggestions."""

    def __init__(self, config: Optional[AnalysisConfig] = None):
        self.config = config or AnalysisConfig()

    def base_score(self, outcome: MatchOutcome) -> int:
        total = outcome.matched_weight + outcome.missing_weight
        if total <= 0:
            return 0
        return _round_half_up(100 * outcome.matched_weight / total)

    def failed_checks(self, doc: ResumeDocument) -> List[StructuralCheck]:
        return [check for check in STRUCTURAL_CHECKS if _safe(check.is_missing, doc)]

    def score(
        self,
        outcome: MatchOutcome,
        doc: ResumeDocument,
        index: Optional[ResumeIndex] = None,
        job_has_content: bool = True,
        keywords: Optional[Sequence[ExtractedKeyword]] = None,
    ) -> AnalysisResult:
        """Build the final result for a match outcome.

        ``keywords`` is the extracted list in rank order; without it the
        result lists matched keywords before missing ones.
        """
        if index is None:
            index = index_resume(doc)
        if keywords is None:
            keywords = outcome.matched + outcome.missing

        base = self.base_score(outcome)
        failed = self.failed_checks(doc)
        penalty = self.config.section_penalty * len(failed)
        final = min(100, max(0, _round_half_up(base - penalty)))

        suggestions = self._suggestions(outcome, index, failed, job_has_content)
        logger.debug(
            "Score %d (base %d, %d structural penalties), %d suggestions",
            final, base, len(failed), len(suggestions)
        )

        return AnalysisResult(
            score=final,
            passed=final >= self.config.threshold,
            matched_keywords=tuple(k.term for k in outcome.matched),
            missing_keywords=tuple(k.term for k in outcome.missing),
            suggestions=tuple(suggestions),
            rating=self.config.rating_for(final),
            keyword_coverage=outcome.keyword_coverage,
            keywords=tuple(keywords),
        )

    def _suggestions(
        self,
        outcome: MatchOutcome,
        index: ResumeIndex,
        failed: List[StructuralCheck],
        job_has_content: bool,
    ) -> List[str]:
        suggestions = []

        if not job_has_content:
            suggestions.append(NO_JOB_DESCRIPTION)
        elif not outcome.matched and not outcome.missing:
            suggestions.append(NO_KEYWORDS)

        if index.is_empty():
            suggestions.append(EMPTY_RESUME)

        # Missing keywords are already ordered by weight
        for keyword in outcome.missing[:self.config.suggestion_limit]:
            section = None
            for tokens in keyword.form_tokens:
                section = index.best_section(tokens)
                if section is not None:
                    break
            suggestions.append(MISSING_KEYWORD.format(
                keyword=_display(keyword),
                section=section.value if section else DEFAULT_SECTION,
            ))

        suggestions.extend(check.suggestion for check in failed)
        return suggestions


def score(
    outcome: MatchOutcome,
    doc: ResumeDocument,
    index: Optional[ResumeIndex] = None,
    config: Optional[AnalysisConfig] = None,
    job_has_content: bool = True,
) -> AnalysisResult:
    """Convenience function to score a match outcome."""
    return ResumeScorer(config).score(outcome, doc, index, job_has_content)
