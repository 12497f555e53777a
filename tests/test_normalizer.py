"""
Tests for the text normalizer.
"""

import pytest

from ats_scorer.normalizer import STOPWORDS, is_numeric, normalize, normalize_segments


class TestNormalize:

    @pytest.mark.parametrize("text", ["", "   ", "\n\t  \n", None, 42])
    def test_empty_or_invalid_input_yields_no_tokens(self, text):
        assert normalize(text) == []
        assert normalize_segments(text) == []

    def test_lowercases_and_strips_punctuation(self):
        assert normalize("Python, SQL; and Docker!") == ["python", "sql", "docker"]

    def test_keeps_inner_hyphens_and_dots(self):
        assert normalize("Front-End developer using Node.js.") == ["front-end", "developer", "using", "node.js"]

    def test_keeps_language_symbols(self):
        assert normalize("C++, C# and .NET") == ["c++", "c#", ".net"]

    def test_folds_typographic_apostrophe(self):
        assert normalize("Bachelor’s degree") == ["bachelor's", "degree"]

    def test_parenthesized_acronym_is_separate_token(self):
        assert normalize("Search Engine Optimization (SEO)") == ["search", "engine", "optimization", "seo"]

    def test_removes_stopwords(self):
        tokens = normalize("The ability to work with a team of engineers")
        assert tokens == ["ability", "work", "team", "engineers"]
        assert not set(tokens) & STOPWORDS

    def test_only_ascii_letters_are_lowercased(self):
        assert normalize("ÉCOLE Polytechnique") == ["École", "polytechnique"]

    def test_deterministic(self):
        text = "Kubernetes, Terraform and CI/CD pipelines (GitHub Actions)"
        assert normalize(text) == normalize(text)
        assert "ci/cd" in normalize(text)


class TestNormalizeSegments:

    def test_splits_on_clause_punctuation(self):
        assert normalize_segments("React, Node.js. Docker") == [["react"], ["node.js"], ["docker"]]

    def test_splits_on_line_breaks_and_bullets(self):
        text = "Requirements\n• Python\n• Machine learning"
        assert normalize_segments(text) == [["requirements"], ["python"], ["machine", "learning"]]

    def test_flattened_segments_equal_normalize(self):
        text = "Senior engineer (Python). Builds APIs, mentors peers."
        flat = [t for seg in normalize_segments(text) for t in seg]
        assert flat == normalize(text)


@pytest.mark.parametrize("token,expected", [
    ("5", True),
    ("10+", True),
    ("3.5", True),
    ("50k", True),
    ("python3", False),
    ("s3", False),
    ("node.js", False),
])
def test_is_numeric(token, expected):
    assert is_numeric(token) is expected
