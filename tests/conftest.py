import pytest

from ats_scorer.resume import resume_from_dict


BACKEND_JOB = """Senior Backend Engineer
We are hiring a backend engineer with strong Python and PostgreSQL skills.
Experience with Amazon Web Services (AWS) and Docker is required.
You will design REST APIs and mentor junior engineers."""

REACT_JOB = "5 years of experience with React and Node.js. Bachelor's degree required."


@pytest.fixture
def backend_job() -> str:
    return BACKEND_JOB


@pytest.fixture
def react_job() -> str:
    return REACT_JOB


@pytest.fixture
def complete_resume_data() -> dict:
    """A resume with every structurally checked section filled in."""
    return {
        "content": {
            "personalInfo": {"fullName": "Jane Doe", "email": "jane@example.com"},
            "summary": "Backend engineer focused on Python services and Docker deployments.",
            "experience": [
                {
                    "company": "Acme",
                    "position": "Software Engineer",
                    "startDate": "2019-01",
                    "current": True,
                    "description": "Built REST APIs in Python on AWS.",
                    "achievements": ["Mentored junior engineers", "Cut PostgreSQL query time by 40%"],
                }
            ],
            "education": [
                {"institution": "State University", "degree": "BSc", "fieldOfStudy": "Computer Science"}
            ],
            "skills": {
                "keywords": ["Python", "Docker"],
                "categories": [
                    {"name": "Databases", "skills": [{"name": "PostgreSQL", "level": 4}, "Redis"]}
                ],
            },
        },
        "layout": {"sectionOrder": ["summary", "experience"], "visibleSections": {"summary": True}},
    }


@pytest.fixture
def complete_resume(complete_resume_data):
    return resume_from_dict(complete_resume_data)
