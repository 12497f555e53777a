"""
ATS analysis pipeline.
Resume + job description -> keywords -> index -> match -> score.
"""

import logging
from typing import Any, Mapping, Optional, Union

from .config import AnalysisConfig, resolve_config
from .extractor import KeywordExtractor
from .indexer import index_resume
from .matcher import KeywordMatcher
from .normalizer import normalize_segments
from .resume import ResumeDocument, resume_from_dict
from .scorer import AnalysisResult, ResumeScorer

logger = logging.getLogger(__name__)

ResumeInput = Union[ResumeDocument, Mapping[str, Any]]
ConfigInput = Union[AnalysisConfig, Mapping[str, Any], None]


def analyze(
    resume: ResumeInput,
    job_description: str,
    config: ConfigInput = None,
    *,
    threshold: Optional[float] = None,
    max_keywords: Optional[int] = None,
) -> AnalysisResult:
    """Score a resume against a job description.

    ``resume`` may be a ResumeDocument or the builder's JSON dict. ``config``
    may be an AnalysisConfig or a mapping such as ``{"threshold": 80,
    "maxKeywords": 30}``; keyword arguments override it.

    Raises ConfigurationError for invalid configuration. Empty or malformed
    input never raises; it yields a zero score with explanatory suggestions.
    """
    cfg = resolve_config(config, threshold=threshold, max_keywords=max_keywords)

    doc = resume if isinstance(resume, ResumeDocument) else resume_from_dict(resume)
    job_text = job_description if isinstance(job_description, str) else ""

    keywords = KeywordExtractor(cfg).extract(job_text)
    index = index_resume(doc)
    outcome = KeywordMatcher(index).match(keywords)

    result = ResumeScorer(cfg).score(
        outcome,
        doc,
        index=index,
        job_has_content=bool(normalize_segments(job_text)),
        keywords=keywords,
    )
    logger.debug(
        "ATS analysis: score=%d passed=%s matched=%d missing=%d",
        result.score, result.passed, len(result.matched_keywords), len(result.missing_keywords)
    )
    return result
