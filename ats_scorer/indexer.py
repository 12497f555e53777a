"""
Resume indexer.
Flattens a structured resume into a normalized, searchable token corpus that
remembers which section each token came from.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from .normalizer import normalize_segments
from .resume import ResumeDocument, Section

logger = logging.getLogger(__name__)


@dataclass
class ResumeIndex:
    """Normalized resume text.

    ``clauses`` keeps each field's token runs separately so multi-word
    keywords only match inside one piece of text.
    """
    corpus: Counter = field(default_factory=Counter)
    section_of: Dict[str, Section] = field(default_factory=dict)
    clauses: List[Tuple[str, ...]] = field(default_factory=list)

    def __len__(self) -> int:
        return sum(self.corpus.values())

    def is_empty(self) -> bool:
        return not self.corpus

    def add(self, section: Section, text: Optional[str]):
        """Normalize one field and record its tokens under a section."""
        for segment in normalize_segments(text):
            self.clauses.append(tuple(segment))
            self.corpus.update(segment)
            for token in segment:
                self.section_of.setdefault(token, section)

    def contains(self, phrase: Sequence[str]) -> bool:
        """True when the token sequence appears contiguously in one clause."""
        phrase = tuple(phrase)
        if not phrase:
            return False
        if len(phrase) == 1:
            return phrase[0] in self.corpus
        if any(token not in self.corpus for token in phrase):
            return False

        n = len(phrase)
        for clause in self.clauses:
            for i in range(len(clause) - n + 1):
                if clause[i:i + n] == phrase:
                    return True
        return False

    def best_section(self, phrase: Sequence[str]) -> Optional[Section]:
        """Section where the first already-present token of a phrase was seen."""
        for token in phrase:
            if token in self.section_of:
                return self.section_of[token]
        return None


def _items(value) -> list:
    return value if isinstance(value, list) else []


def _section_texts(doc: ResumeDocument) -> Iterator[Tuple[Section, Optional[str]]]:
    """Yield (section, text) for every searchable field, in a fixed order."""
    yield Section.SUMMARY, getattr(doc, 'summary', None)

    for exp in _items(getattr(doc, 'experience', None)):
        yield Section.EXPERIENCE, getattr(exp, 'position', None)
        yield Section.EXPERIENCE, getattr(exp, 'description', None)
        for achievement in _items(getattr(exp, 'achievements', None)):
            yield Section.EXPERIENCE, achievement

    for edu in _items(getattr(doc, 'education', None)):
        yield Section.EDUCATION, getattr(edu, 'degree', None)
        yield Section.EDUCATION, getattr(edu, 'field_of_study', None)
        yield Section.EDUCATION, getattr(edu, 'description', None)

    skills = getattr(doc, 'skills', None)
    for name in _items(getattr(skills, 'keywords', None)):
        yield Section.SKILLS, name
    for category in _items(getattr(skills, 'categories', None)):
        for name in _items(getattr(category, 'skills', None)):
            yield Section.SKILLS, name

    for project in _items(getattr(doc, 'projects', None)):
        yield Section.PROJECTS, getattr(project, 'title', None)
        yield Section.PROJECTS, getattr(project, 'description', None)
        for tech in _items(getattr(project, 'technologies', None)):
            yield Section.PROJECTS, tech

    for cert in _items(getattr(doc, 'certifications', None)):
        yield Section.CERTIFICATIONS, getattr(cert, 'name', None)
        yield Section.CERTIFICATIONS, getattr(cert, 'issuer', None)

    for lang in _items(getattr(doc, 'languages', None)):
        yield Section.LANGUAGES, getattr(lang, 'language', None)

    for custom in _items(getattr(doc, 'custom_sections', None)):
        yield Section.CUSTOM, getattr(custom, 'content', None)


def index_resume(doc: ResumeDocument) -> ResumeIndex:
    """Build the searchable index for a resume."""
    index = ResumeIndex()
    for section, text in _section_texts(doc):
        index.add(section, text)

    logger.debug("Indexed resume: %d tokens, %d distinct", len(index), len(index.corpus))
    return index
