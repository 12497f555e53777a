"""
Keyword matcher.
Splits job keywords into those the resume already contains and those it lacks.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from .extractor import ExtractedKeyword
from .indexer import ResumeIndex

logger = logging.getLogger(__name__)


@dataclass
class MatchOutcome:
    """Result of matching job keywords against a resume."""
    matched: List[ExtractedKeyword] = field(default_factory=list)
    missing: List[ExtractedKeyword] = field(default_factory=list)

    @property
    def matched_weight(self) -> float:
        return sum(k.weight for k in self.matched)

    @property
    def missing_weight(self) -> float:
        return sum(k.weight for k in self.missing)

    @property
    def keyword_coverage(self) -> float:
        total = len(self.matched) + len(self.missing)
        return len(self.matched) / total if total else 0.0


class KeywordMatcher:
    """Match extracted keywords against a resume index.

    Matching is exact on normalized tokens: a keyword is present when any of
    its surface forms occurs as a token (or contiguous token run) in the
    resume. There is no fuzzy or stem tolerance.
    """

    def __init__(self, index: ResumeIndex):
        self.index = index

    def is_present(self, keyword: ExtractedKeyword) -> bool:
        return any(self.index.contains(tokens) for tokens in keyword.form_tokens)

    def match(self, keywords: Sequence[ExtractedKeyword]) -> MatchOutcome:
        """Partition keywords, preserving their input order in both lists."""
        outcome = MatchOutcome()
        for keyword in keywords:
            if self.is_present(keyword):
                outcome.matched.append(keyword)
            else:
                outcome.missing.append(keyword)

        logger.debug("Matched %d of %d keywords", len(outcome.matched), len(keywords))
        return outcome


def match(keywords: Sequence[ExtractedKeyword], index: ResumeIndex) -> MatchOutcome:
    """Convenience function to match keywords against a resume index."""
    return KeywordMatcher(index).match(keywords)
