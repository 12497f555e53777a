"""
Markdown match report for an ATS analysis.
"""

from typing import List, Optional, Sequence

from .extractor import ExtractedKeyword
from .scorer import AnalysisResult

RATING_LABELS = {
    "excellent": "Excellent! Your resume is highly ATS-compatible and likely to pass automated screening.",
    "good": "Good. Your resume should pass most ATS systems, but there's room for improvement.",
    "needs_improvement": "Your resume needs improvement to pass ATS systems. Follow the recommendations below.",
}


def score_bar(score: int, width: int = 10) -> str:
    filled = int(score / (100 / width))
    return "█" * filled + "░" * (width - filled)


class MatchReportGenerator:
    """Generate a Markdown report for an analysis result."""

    def __init__(self, result: AnalysisResult, keywords: Optional[Sequence[ExtractedKeyword]] = None):
        self.result = result
        self.keywords = list(keywords if keywords is not None else result.keywords)

    def generate(self) -> str:
        lines: List[str] = []
        lines.append("# ATS Match Report")
        lines.append("")

        lines.append(f"**Match Score:** [{score_bar(self.result.score)}] {self.result.score}/100")
        lines.append("")
        lines.append(f"**Keyword Coverage:** {self.result.keyword_coverage * 100:.1f}%")
        lines.append("")
        status = "✓ Passes ATS screening" if self.result.passed else "✗ Unlikely to pass ATS screening"
        lines.append(f"**Status:** {status}")
        lines.append("")
        lines.append(RATING_LABELS.get(self.result.rating, ""))
        lines.append("")

        lines.append("## ✓ Matched Keywords")
        lines.append("")
        if self.result.matched_keywords:
            lines.append(", ".join(self.result.matched_keywords))
        else:
            lines.append("_No keywords matched_")
        lines.append("")

        lines.append("## ✗ Missing Keywords")
        lines.append("")
        if self.result.missing_keywords:
            lines.append(", ".join(self.result.missing_keywords))
        else:
            lines.append("_All keywords matched!_")
        lines.append("")

        if self.keywords:
            matched = set(self.result.matched_keywords)
            lines.append("## Keyword Weights")
            lines.append("")
            lines.append("| Keyword | Weight | Forms | Found |")
            lines.append("| --- | --- | --- | --- |")
            for kw in self.keywords:
                found = "✓" if kw.term in matched else "✗"
                lines.append(f"| {kw.term} | {kw.weight:g} | {' / '.join(kw.forms)} | {found} |")
            lines.append("")

        if self.result.suggestions:
            lines.append("## Recommendations")
            lines.append("")
            for suggestion in self.result.suggestions:
                lines.append(f"- {suggestion}")
            lines.append("")

        lines.append("---")
        lines.append("*Generated by ATS Resume Scorer*")

        return "\n".join(lines)


def generate_report(result: AnalysisResult, keywords: Optional[Sequence[ExtractedKeyword]] = None) -> str:
    """Convenience function to render a Markdown report."""
    return MatchReportGenerator(result, keywords).generate()
