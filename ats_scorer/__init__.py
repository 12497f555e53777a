"""
ATS Resume Scorer

Scores a structured resume against a job description: a 0-100 ATS
compatibility score, matched and missing keywords, and improvement tips.
"""

from .config import AnalysisConfig
from .engine import analyze
from .exceptions import ConfigurationError
from .extractor import extract_keywords, ExtractedKeyword, KeywordExtractor
from .indexer import index_resume, ResumeIndex
from .matcher import match, KeywordMatcher, MatchOutcome
from .normalizer import normalize
from .resume import resume_from_dict, ResumeDocument, Section
from .scorer import score, AnalysisResult, ResumeScorer
from .report import generate_report, MatchReportGenerator

__version__ = "1.0.0"
__all__ = [
    "analyze",
    "normalize",
    "extract_keywords",
    "index_resume",
    "match",
    "score",
    "resume_from_dict",
    "generate_report",
    "AnalysisConfig",
    "AnalysisResult",
    "ConfigurationError",
    "ExtractedKeyword",
    "KeywordExtractor",
    "KeywordMatcher",
    "MatchOutcome",
    "MatchReportGenerator",
    "ResumeDocument",
    "ResumeIndex",
    "ResumeScorer",
    "Section",
]
