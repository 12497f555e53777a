"""
Text normalizer.
Lowercases, strips punctuation, tokenizes and removes stopwords.
"""

import re
import string
from typing import List


STOPWORDS = frozenset({
    # articles / determiners
    'a', 'an', 'the', 'this', 'that', 'these', 'those', 'each', 'every', 'any', 'some', 'all', 'both',
    'either', 'neither', 'such', 'other', 'another', 'same', 'own',
    # prepositions
    'about', 'above', 'across', 'after', 'against', 'along', 'among', 'around', 'as', 'at', 'before',
    'behind', 'below', 'beneath', 'beside', 'between', 'beyond', 'by', 'despite', 'down', 'during',
    'except', 'for', 'from', 'in', 'inside', 'into', 'like', 'near', 'of', 'off', 'on', 'onto', 'out',
    'outside', 'over', 'per', 'since', 'through', 'throughout', 'till', 'to', 'toward', 'towards',
    'under', 'until', 'up', 'upon', 'via', 'with', 'within', 'without',
    # conjunctions
    'and', 'or', 'but', 'nor', 'so', 'yet', 'if', 'then', 'than', 'because', 'while', 'whereas',
    'although', 'though', 'unless', 'whether',
    # pronouns
    'i', 'me', 'my', 'mine', 'we', 'us', 'our', 'ours', 'you', 'your', 'yours', 'he', 'him', 'his',
    'she', 'her', 'hers', 'it', 'its', 'they', 'them', 'their', 'theirs', 'who', 'whom', 'whose',
    'which', 'what', 'where', 'when', 'why', 'how',
    # auxiliaries
    'am', 'is', 'are', 'was', 'were', 'be', 'been', 'being', 'have', 'has', 'had', 'having', 'do',
    'does', 'did', 'doing', 'will', 'would', 'shall', 'should', 'can', 'could', 'may', 'might', 'must',
    # filler
    'also', 'just', 'only', 'very', 'too', 'more', 'most', 'much', 'many', 'few', 'etc', 'e.g', 'i.e',
    'not', 'no', 'here', 'there', 'well', 'really', 'including', 'include', 'includes',
})

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

_TYPOGRAPHIC = str.maketrans({
    '\u2018': "'",
    '\u2019': "'",
    '\u2010': '-',
    '\u2011': '-',
    '\u2012': ' ',
    '\u2013': ' ',
    '\u2014': ' ',
    '\u00a0': ' ',
})

# Clause boundaries: sentence ends, list separators, brackets, bullets, line breaks
CLAUSE_BREAK = re.compile(r'[.!?](?=\s|$)|[,;:()\[\]{}|\u2022\u00b7\r\n]|\s-+\s')

# A word may hold inner connectors (front-end, node.js, ci/cd, bachelor's),
# trailing +/# (c++, c#) and a leading dot when it starts one (.net)
TOKEN_PATTERN = re.compile(r"(?:(?<!\S)\.)?[^\W_][\w+#]*(?:[-./'][^\W_][\w+#]*)*")

NUMBER_PATTERN = re.compile(r"\d[\d.,]*\+?[km]?")


def fold_case(text: str) -> str:
    """ASCII-only lowercase with typographic punctuation folded."""
    return text.translate(_TYPOGRAPHIC).translate(_ASCII_LOWER)


def normalize_segments(text: str) -> List[List[str]]:
    """Normalize text into clause-level token lists.

    Phrases are only ever built inside a single clause, so a sentence end or
    a comma between two words stops them from forming a keyword together.
    """
    if not isinstance(text, str) or not text.strip():
        return []

    segments = []
    for clause in CLAUSE_BREAK.split(fold_case(text)):
        tokens = [t for t in TOKEN_PATTERN.findall(clause) if t not in STOPWORDS]
        if tokens:
            segments.append(tokens)
    return segments


def normalize(text: str) -> List[str]:
    """Normalize text into a flat token sequence."""
    return [token for segment in normalize_segments(text) for token in segment]


def is_numeric(token: str) -> bool:
    """True for bare numbers such as 5, 10+, 3.5 or 50k."""
    return bool(NUMBER_PATTERN.fullmatch(token))
