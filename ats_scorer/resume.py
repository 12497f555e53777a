"""
Resume document model.
Structured resume content as sent by the builder front end, plus a tolerant
loader from its JSON shape.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class Section(Enum):
    """Top-level resume sections that carry searchable text."""
    SUMMARY = "Summary"
    EXPERIENCE = "Experience"
    EDUCATION = "Education"
    SKILLS = "Skills"
    PROJECTS = "Projects"
    CERTIFICATIONS = "Certifications"
    LANGUAGES = "Languages"
    CUSTOM = "Additional"


@dataclass
class PersonalInfo:
    full_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    website: Optional[str] = None
    linkedin: Optional[str] = None
    title: Optional[str] = None


@dataclass
class ExperienceEntry:
    """A single position held."""
    company: Optional[str] = None
    position: Optional[str] = None
    location: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    current: bool = False
    description: Optional[str] = None
    achievements: List[str] = field(default_factory=list)


@dataclass
class EducationEntry:
    institution: Optional[str] = None
    degree: Optional[str] = None
    field_of_study: Optional[str] = None
    location: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    graduation_year: Optional[str] = None
    gpa: Optional[str] = None
    description: Optional[str] = None


@dataclass
class SkillCategory:
    name: Optional[str] = None
    skills: List[str] = field(default_factory=list)


@dataclass
class Skills:
    """Flat keyword list and/or named categories."""
    keywords: List[str] = field(default_factory=list)
    categories: List[SkillCategory] = field(default_factory=list)

    def all_skills(self) -> List[str]:
        """Flat keywords first, then categorized skills, in order."""
        names = list(self.keywords)
        for category in self.categories:
            names.extend(category.skills)
        return names

    def is_empty(self) -> bool:
        return not any(isinstance(s, str) and s.strip() for s in self.all_skills())


@dataclass
class Project:
    title: Optional[str] = None
    description: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    current: bool = False
    url: Optional[str] = None
    technologies: List[str] = field(default_factory=list)


@dataclass
class Certification:
    name: Optional[str] = None
    issuer: Optional[str] = None
    date: Optional[str] = None
    expiry_date: Optional[str] = None
    credential_id: Optional[str] = None
    url: Optional[str] = None


@dataclass
class Language:
    language: Optional[str] = None
    proficiency: Optional[str] = None


@dataclass
class CustomSection:
    title: Optional[str] = None
    content: Optional[str] = None


@dataclass
class ResumeDocument:
    """Complete resume content. Every section is optional."""
    personal_info: PersonalInfo = field(default_factory=PersonalInfo)
    summary: Optional[str] = None
    experience: List[ExperienceEntry] = field(default_factory=list)
    education: List[EducationEntry] = field(default_factory=list)
    skills: Skills = field(default_factory=Skills)
    projects: List[Project] = field(default_factory=list)
    certifications: List[Certification] = field(default_factory=list)
    languages: List[Language] = field(default_factory=list)
    custom_sections: List[CustomSection] = field(default_factory=list)

    def has_summary(self) -> bool:
        return isinstance(self.summary, str) and bool(self.summary.strip())


def _text(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def _dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def _texts(value: Any) -> List[str]:
    return [t for t in (_text(v) for v in _list(value)) if t is not None]


def _skill_name(value: Any) -> Optional[str]:
    # Categorized skills are either plain strings or {"name": ..., "level": ...}
    if isinstance(value, dict):
        return _text(value.get("name"))
    return _text(value)


def resume_from_dict(data: Any) -> ResumeDocument:
    """Build a ResumeDocument from the builder's JSON shape.

    Accepts the full resume object (content nested under ``content``) or the
    content object itself. Keys are camelCase as stored by the front end;
    anything of the wrong type is treated as absent.
    """
    data = _dict(data)
    content = _dict(data["content"]) if isinstance(data.get("content"), dict) else data

    info = _dict(content.get("personalInfo"))
    personal_info = PersonalInfo(
        full_name=_text(info.get("fullName")),
        email=_text(info.get("email")),
        phone=_text(info.get("phone")),
        location=_text(info.get("location")),
        website=_text(info.get("website")),
        linkedin=_text(info.get("linkedin")),
        title=_text(info.get("title")),
    )

    experience = []
    for e in _list(content.get("experience")):
        e = _dict(e)
        experience.append(ExperienceEntry(
            company=_text(e.get("company")),
            position=_text(e.get("position")),
            location=_text(e.get("location")),
            start_date=_text(e.get("startDate")),
            end_date=_text(e.get("endDate")),
            current=bool(e.get("current")),
            description=_text(e.get("description")),
            achievements=_texts(e.get("achievements")),
        ))

    education = []
    for ed in _list(content.get("education")):
        ed = _dict(ed)
        education.append(EducationEntry(
            institution=_text(ed.get("institution")),
            degree=_text(ed.get("degree")),
            field_of_study=_text(ed.get("fieldOfStudy")),
            location=_text(ed.get("location")),
            start_date=_text(ed.get("startDate")),
            end_date=_text(ed.get("endDate")),
            graduation_year=_text(ed.get("graduationYear")),
            gpa=_text(ed.get("gpa")),
            description=_text(ed.get("description")),
        ))

    skills_d = _dict(content.get("skills"))
    categories = []
    for c in _list(skills_d.get("categories")):
        c = _dict(c)
        names = [n for n in (_skill_name(s) for s in _list(c.get("skills"))) if n is not None]
        categories.append(SkillCategory(name=_text(c.get("name")), skills=names))
    skills = Skills(keywords=_texts(skills_d.get("keywords")), categories=categories)

    projects = []
    for p in _list(content.get("projects")):
        p = _dict(p)
        projects.append(Project(
            title=_text(p.get("title")),
            description=_text(p.get("description")),
            start_date=_text(p.get("startDate")),
            end_date=_text(p.get("endDate")),
            current=bool(p.get("current")),
            url=_text(p.get("url")),
            technologies=_texts(p.get("technologies")),
        ))

    certifications = []
    for cert in _list(content.get("certifications")):
        cert = _dict(cert)
        certifications.append(Certification(
            name=_text(cert.get("name")),
            issuer=_text(cert.get("issuer")),
            date=_text(cert.get("date")),
            expiry_date=_text(cert.get("expiryDate")),
            credential_id=_text(cert.get("credentialID")),
            url=_text(cert.get("url")),
        ))

    languages = [
        Language(language=_text(_dict(lang).get("language")), proficiency=_text(_dict(lang).get("proficiency")))
        for lang in _list(content.get("languages"))
    ]

    custom_sections = [
        CustomSection(title=_text(_dict(cs).get("title")), content=_text(_dict(cs).get("content")))
        for cs in _list(content.get("customSections"))
    ]

    return ResumeDocument(
        personal_info=personal_info,
        summary=_text(content.get("summary")),
        experience=experience,
        education=education,
        skills=skills,
        projects=projects,
        certifications=certifications,
        languages=languages,
        custom_sections=custom_sections,
    )
