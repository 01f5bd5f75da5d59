"""Built-in sample profile used by ``portfolio manage seed``.

The document is fictional. It exercises every part of the schema:
all four skill levels, several categories, projects with overlapping
skill tags, a current job, and an education entry with a GPA.
"""

from portfolio_api.core import Profile

SAMPLE_PROFILE: dict = {
    "name": "Alex Morgan",
    "email": "alex.morgan@example.com",
    "title": "Full Stack Developer",
    "bio": (
        "Full stack developer who enjoys building small, well-tested web "
        "services and the interfaces on top of them. Organiser of a local "
        "hackathon and occasional open-source contributor."
    ),
    "location": "Lisbon, Portugal",
    "phone": "+351 900 000 000",
    "skills": [
        {"name": "python", "level": "expert", "category": "backend"},
        {"name": "javascript", "level": "expert", "category": "frontend"},
        {"name": "react", "level": "advanced", "category": "frontend"},
        {"name": "fastapi", "level": "advanced", "category": "backend"},
        {"name": "postgresql", "level": "advanced", "category": "database"},
        {"name": "sqlite", "level": "intermediate", "category": "database"},
        {"name": "docker", "level": "intermediate", "category": "devops"},
        {"name": "github actions", "level": "intermediate", "category": "devops"},
        {"name": "kotlin", "level": "beginner", "category": "mobile"},
        {"name": "figma", "level": "beginner", "category": "other"},
    ],
    "projects": [
        {
            "title": "React Dashboard",
            "description": (
                "Analytics dashboard with live charts fed by a REST API; "
                "role-based views and CSV export."
            ),
            "links": ["https://github.com/example/react-dashboard"],
            "skills": ["react", "javascript", "fastapi"],
            "startDate": "2024-01-15",
            "endDate": "2024-05-30",
            "status": "completed",
        },
        {
            "title": "Recipe Finder API",
            "description": (
                "Search service over a catalogue of recipes with ingredient "
                "filters and pagination."
            ),
            "links": ["https://github.com/example/recipe-finder"],
            "skills": ["python", "fastapi", "postgresql"],
            "startDate": "2023-09-01",
            "endDate": "2023-12-20",
            "status": "completed",
        },
        {
            "title": "Hackathon Landing Page",
            "description": (
                "Responsive landing page for a 300-participant hackathon with "
                "lazy-loaded assets and accessible navigation."
            ),
            "links": [
                "https://github.com/example/hackathon-site",
                "https://hackathon.example.com",
            ],
            "skills": ["javascript", "css"],
            "startDate": "2023-06-01",
            "endDate": "2023-07-15",
            "status": "completed",
        },
        {
            "title": "Habit Tracker",
            "description": "Offline-first mobile habit tracker with weekly summaries.",
            "links": [],
            "skills": ["kotlin", "sqlite"],
            "startDate": "2025-02-01",
            "status": "in-progress",
        },
        {
            "title": "Deploy Bot",
            "description": "Chat bot that reports CI status and triggers container deploys.",
            "links": [],
            "skills": ["python", "docker", "github actions"],
            "status": "planned",
        },
    ],
    "work": [
        {
            "company": "Northwind Software",
            "position": "Full Stack Developer",
            "description": (
                "Builds and maintains REST APIs and React front ends for "
                "internal tooling; introduced automated container builds."
            ),
            "startDate": "2024-06-01",
            "current": True,
            "skills": ["python", "fastapi", "react", "docker"],
        },
        {
            "company": "Blue Harbor Labs",
            "position": "Junior Web Developer",
            "description": "Maintained a content site and its PostgreSQL-backed admin panel.",
            "startDate": "2022-09-01",
            "endDate": "2024-05-31",
            "current": False,
            "skills": ["javascript", "postgresql"],
        },
    ],
    "education": [
        {
            "institution": "University of Lisbon",
            "degree": "Bachelor of Science",
            "field": "Computer Science",
            "startDate": "2019-09-15",
            "endDate": "2022-07-15",
            "gpa": 8.4,
        }
    ],
    "links": {
        "github": "https://github.com/example",
        "linkedin": "https://linkedin.com/in/example",
        "portfolio": "https://alex.example.com",
    },
}


def sample_profile() -> Profile:
    """Return a fresh ``Profile`` built from ``SAMPLE_PROFILE``."""
    return Profile.from_dict(SAMPLE_PROFILE)
