#!/usr/bin/env python3
"""
ATS Resume Scorer - CLI Entry Point

Scores a resume (builder JSON export) against a job description and writes
a Markdown match report.

Usage:
    ats-score --resume resume.json --job job_description.txt
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import resolve_config
from .engine import analyze
from .exceptions import ConfigurationError
from .report import generate_report, score_bar
from .scorer import AnalysisResult

EXIT_INPUT_ERROR = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="ATS Resume Scorer - Check how well a resume matches a job description",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    ats-score --resume resume.json --job job_description.txt
    ats-score -r resume.json -j job.txt -o output/match_report.md
    ats-score -r resume.json -j job.txt --threshold 80 --max-keywords 30 --json
        """
    )

    parser.add_argument(
        "-r", "--resume",
        type=str,
        required=True,
        help="Path to resume JSON (full resume object or its content)"
    )

    parser.add_argument(
        "-j", "--job",
        type=str,
        required=True,
        help="Path to job description text file"
    )

    parser.add_argument(
        "-o", "--output",
        type=str,
        help="Write a Markdown match report to this path"
    )

    parser.add_argument(
        "--threshold",
        type=float,
        help="Passing score, 0-100 (default: 75)"
    )

    parser.add_argument(
        "--max-keywords",
        type=int,
        help="Maximum number of job keywords to consider (default: 50)"
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the analysis as JSON instead of a summary"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output"
    )

    return parser.parse_args(argv)


class InputError(Exception):
    """An input file could not be read or parsed."""


def load_file(path: str) -> str:
    """Load content from a file."""
    file_path = Path(path)
    if not file_path.exists():
        raise InputError(f"File not found: {path}")
    try:
        return file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Error reading {path}: {e}") from e


def load_resume(path: str) -> dict:
    """Load a resume JSON file."""
    try:
        data = json.loads(load_file(path))
    except json.JSONDecodeError as e:
        raise InputError(f"Invalid resume JSON in {path}: {e}") from e
    if not isinstance(data, dict):
        raise InputError(f"Resume JSON in {path} must be an object")
    return data


def save_file(path: Path, content: str) -> None:
    """Save content to a file."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise InputError(f"Error writing {path}: {e}") from e


def print_summary(result: AnalysisResult, verbose: bool = False) -> None:
    """Print a summary of the analysis."""
    print("\n" + "=" * 60)
    print("ATS RESUME SCORER - MATCH SUMMARY")
    print("=" * 60)

    print(f"\nATS Score: [{score_bar(result.score)}] {result.score}/100")
    print(f"Passes ATS: {'yes' if result.passed else 'no'}")
    print(f"Keyword Coverage: {result.keyword_coverage * 100:.1f}%")

    print(f"\nMatched Keywords: {len(result.matched_keywords)}")
    print(f"Missing Keywords: {len(result.missing_keywords)}")

    if verbose:
        if result.matched_keywords:
            print("\n--- Matched Keywords ---")
            print(f"  {', '.join(result.matched_keywords)}")
        if result.missing_keywords:
            print("\n--- Missing Keywords ---")
            print(f"  {', '.join(result.missing_keywords)}")

    if result.suggestions:
        print("\n--- Improvement Tips ---")
        for suggestion in result.suggestions:
            print(f"  - {suggestion}")

    print("\n" + "=" * 60)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = resolve_config(threshold=args.threshold, max_keywords=args.max_keywords)
        resume = load_resume(args.resume)
        job_content = load_file(args.job)

        result = analyze(resume, job_content, config)

        if args.output:
            report_path = Path(args.output)
            save_file(report_path, generate_report(result))
            if not args.json:
                print(f"Saved match report: {report_path}")
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR
    except InputError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print_summary(result, args.verbose)

    return 0 if result.passed else 1


if __name__ == "__main__":
    sys.exit(main())
