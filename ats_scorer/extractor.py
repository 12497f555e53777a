"""
Keyword extractor for job descriptions.
Ranks single words and short phrases by frequency and position, merging
acronyms with their spelled-out form.
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .config import AnalysisConfig, resolve_config
from .normalizer import STOPWORDS, fold_case, is_numeric, normalize, normalize_segments

logger = logging.getLogger(__name__)

MAX_NGRAM = 3

# "Search Engine Optimization (SEO)": up to eight words on the same line, then the acronym
FULL_TERM_THEN_ACRONYM = r"([A-Za-z][\w'./&+-]*(?:[ \t]+[A-Za-z][\w'./&+-]*){0,7})[ \t]*\(\s*([A-Z][A-Za-z0-9&./+-]*)\s*\)"

# "SEO (Search Engine Optimization)"
ACRONYM_THEN_FULL_TERM = r"\b([A-Z][A-Za-z0-9&./+-]*)[ \t]*\(\s*([A-Za-z][^()\n]*?)\s*\)"

Phrase = Tuple[str, ...]


@dataclass(frozen=True)
class ExtractedKeyword:
    """A ranked job keyword with every surface form that counts as a match."""
    term: str
    weight: float
    forms: Tuple[str, ...]

    @property
    def form_tokens(self) -> List[Phrase]:
        return [tuple(form.split(' ')) for form in self.forms]


@dataclass
class _Candidate:
    count: int
    first: Tuple[int, int]  # (token position, phrase length)


def _acronym_letters(acronym: str) -> str:
    return ''.join(c for c in fold_case(acronym) if c.isalpha())


def _initials(words: List[str]) -> str:
    folded = [fold_case(w) for w in words]
    return ''.join(w[0] for w in folded if w[0].isalpha() and w not in STOPWORDS)


def _looks_like_acronym(text: str) -> bool:
    return sum(1 for c in text if c.isupper()) >= 2 and ' ' not in text


class KeywordExtractor:
    """Extract weighted keywords from a job description."""

    def __init__(self, config: Optional[AnalysisConfig] = None):
        self.config = config or AnalysisConfig()
        self.full_then_acronym = re.compile(FULL_TERM_THEN_ACRONYM)
        self.acronym_then_full = re.compile(ACRONYM_THEN_FULL_TERM)

    def extract(self, text: str, max_keywords: Optional[int] = None) -> List[ExtractedKeyword]:
        """Extract keywords, highest weight first."""
        limit = resolve_config(self.config, max_keywords=max_keywords).max_keywords
        segments = normalize_segments(text)
        if not segments or limit == 0:
            return []

        total_tokens = sum(len(s) for s in segments)
        lead_limit = total_tokens * self.config.lead_fraction

        candidates = self._count_ngrams(segments)
        merged = self._merge_acronyms(text, segments, candidates)

        keywords: List[Tuple[Tuple[int, int], ExtractedKeyword]] = []
        for phrase, cand in candidates.items():
            term = ' '.join(phrase)
            weight = self._weight(cand, lead_limit)
            keywords.append((cand.first, ExtractedKeyword(term=term, weight=weight, forms=(term,))))
        for forms, cand in merged:
            weight = self._weight(cand, lead_limit)
            keywords.append((cand.first, ExtractedKeyword(term=forms[0], weight=weight, forms=forms)))

        keywords.sort(key=lambda item: (-item[1].weight, item[0]))
        result = [kw for _, kw in keywords[:limit]]

        logger.debug(
            "Extracted %d keywords from %d candidates (%d acronym pairs)",
            len(result), len(keywords), len(merged)
        )
        return result

    def _weight(self, cand: _Candidate, lead_limit: float) -> float:
        boost = self.config.positional_boost if cand.first[0] < lead_limit else 1.0
        return cand.count * boost

    def _count_ngrams(self, segments: List[List[str]]) -> Dict[Phrase, _Candidate]:
        """Count 1-3 word phrases inside each clause, in first-occurrence order."""
        candidates: Dict[Phrase, _Candidate] = {}
        position = 0
        for segment in segments:
            for i in range(len(segment)):
                for n in range(1, MAX_NGRAM + 1):
                    if i + n > len(segment):
                        break
                    phrase = tuple(segment[i:i + n])
                    if is_numeric(phrase[0]) or is_numeric(phrase[-1]):
                        continue
                    cand = candidates.get(phrase)
                    if cand is None:
                        candidates[phrase] = _Candidate(count=1, first=(position + i, n))
                    else:
                        cand.count += 1
            position += len(segment)
        return candidates

    def _find_acronym_pairs(self, text: str) -> List[Tuple[Phrase, Phrase]]:
        """Find (expansion, acronym) pairs, one entry per definition site."""
        pairs = []

        for match in self.full_then_acronym.finditer(text):
            words, acronym = match.group(1).split(), match.group(2)
            if not _looks_like_acronym(acronym):
                continue
            letters = _acronym_letters(acronym)
            # Shortest run of trailing words whose initials spell the acronym
            for start in range(len(words) - 1, -1, -1):
                run = words[start:]
                if fold_case(run[0]) in STOPWORDS:
                    continue
                if _initials(run) == letters:
                    pairs.append((' '.join(run), acronym))
                    break

        for match in self.acronym_then_full.finditer(text):
            acronym, expansion = match.group(1), match.group(2)
            if not _looks_like_acronym(acronym) or _looks_like_acronym(expansion):
                continue
            if _initials(expansion.split()) == _acronym_letters(acronym):
                pairs.append((expansion, acronym))

        normalized = []
        for expansion, acronym in pairs:
            exp_tokens, acr_tokens = tuple(normalize(expansion)), tuple(normalize(acronym))
            if exp_tokens and acr_tokens and exp_tokens != acr_tokens:
                normalized.append((exp_tokens, acr_tokens))
        return normalized

    def _merge_acronyms(
        self,
        text: str,
        segments: List[List[str]],
        candidates: Dict[Phrase, _Candidate],
    ) -> List[Tuple[Tuple[str, str], _Candidate]]:
        """Fold acronym/expansion pairs into single candidates.

        Both forms are removed from the plain n-gram candidates. Each definition
        site mentions the keyword once even though it spells out both forms.
        """
        definitions: Dict[Tuple[Phrase, Phrase], int] = {}
        for pair in self._find_acronym_pairs(text):
            definitions[pair] = definitions.get(pair, 0) + 1

        merged = []
        used = set()
        for (expansion, acronym), sites in definitions.items():
            if expansion in used or acronym in used:
                continue
            used.update((expansion, acronym))

            exp_count, exp_first = _count_phrase(segments, expansion)
            acr_count, acr_first = _count_phrase(segments, acronym)
            candidates.pop(expansion, None)
            candidates.pop(acronym, None)
            # "search", "engine optimization" etc. only count when used outside the expansion
            for sub in _sub_phrases(expansion):
                cand = candidates.get(sub)
                if cand is not None and cand.count <= exp_count * _occurrences(expansion, sub):
                    del candidates[sub]

            firsts = [f for f in (exp_first, acr_first) if f is not None]
            if not firsts:
                continue
            count = max(exp_count + acr_count - sites, 1)
            forms = (' '.join(expansion), ' '.join(acronym))
            merged.append((forms, _Candidate(count=count, first=min(firsts))))
        return merged


def _sub_phrases(phrase: Phrase) -> List[Phrase]:
    """Proper contiguous sub-phrases short enough to be candidates."""
    subs: List[Phrase] = []
    for n in range(1, min(MAX_NGRAM, len(phrase) - 1) + 1):
        for i in range(len(phrase) - n + 1):
            sub = phrase[i:i + n]
            if sub not in subs:
                subs.append(sub)
    return subs


def _occurrences(phrase: Phrase, sub: Phrase) -> int:
    n = len(sub)
    return sum(1 for i in range(len(phrase) - n + 1) if phrase[i:i + n] == sub)


def _count_phrase(segments: List[List[str]], phrase: Phrase) -> Tuple[int, Optional[Tuple[int, int]]]:
    """Count contiguous occurrences of a phrase inside clauses."""
    count, first, position = 0, None, 0
    n = len(phrase)
    for segment in segments:
        for i in range(len(segment) - n + 1):
            if tuple(segment[i:i + n]) == phrase:
                count += 1
                if first is None:
                    first = (position + i, n)
        position += len(segment)
    return count, first


def extract_keywords(
    job_description: str,
    max_keywords: Optional[int] = None,
    config: Optional[AnalysisConfig] = None,
) -> List[ExtractedKeyword]:
    """Convenience function to extract keywords from a job description."""
    extractor = KeywordExtractor(config)
    return extractor.extract(job_description, max_keywords)
