"""Core data types for portfolio-api.

This module defines the profile document and the result objects the
search engine hands back to callers:
    - Skill, Project, WorkEntry, EducationEntry, ProfileLinks: owned entities
    - Profile: the single portfolio document aggregating all of the above
    - ProfileSummary: the name/title/bio/email subset returned by search
    - SearchResult, Pagination, PagedProjects: engine outputs

Design notes:
    - Dataclasses hold the data; ``__post_init__`` normalises and validates
      so that every constructed object satisfies the document schema
      regardless of whether it came from JSON, SQLite or test code.
    - String fields are trimmed; skill names, skill tags and the email
      address are lowercased, matching how stored documents are compared.
    - Dates are kept as ISO strings (YYYY-MM-DD).
    - ``from_dict`` accepts both snake_case and camelCase keys
      (``start_date`` / ``startDate``); ``to_dict`` emits the camelCase
      JSON document form.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, Optional, TypeVar

from portfolio_api.core.exceptions import ProfileValidationError

E = TypeVar("E", bound=Enum)


class SkillLevel(Enum):
    """Ordinal proficiency tag, beginner < intermediate < advanced < expert."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"


class SkillCategory(Enum):
    """Closed set of skill categories."""

    FRONTEND = "frontend"
    BACKEND = "backend"
    DATABASE = "database"
    DEVOPS = "devops"
    MOBILE = "mobile"
    OTHER = "other"


class ProjectStatus(Enum):
    """Lifecycle state of a portfolio project."""

    COMPLETED = "completed"
    IN_PROGRESS = "in-progress"
    PLANNED = "planned"


# ---------------------------------------------------------------------------
# Normalisation helpers
# ---------------------------------------------------------------------------


def _coerce_enum(enum_cls: type[E], value: Any, field_name: str) -> E:
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        value = value.strip().lower()
    try:
        return enum_cls(value)
    except ValueError as e:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ProfileValidationError(
            f"Invalid {field_name}: {value!r}",
            details=f"Allowed values: {allowed}",
        ) from e


def _required_text(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ProfileValidationError(f"{field_name} is required")
    return value.strip()


def _optional_text(value: Any, field_name: str) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ProfileValidationError(f"{field_name} must be a string")
    return value.strip()


def _tag_list(values: Any, field_name: str) -> list[str]:
    if values is None:
        return []
    if not isinstance(values, (list, tuple)):
        raise ProfileValidationError(f"{field_name} must be a list of strings")
    tags = []
    for value in values:
        if not isinstance(value, str):
            raise ProfileValidationError(f"{field_name} must be a list of strings")
        tags.append(value.strip().lower())
    return tags


def _iso_date(value: Any, field_name: str) -> Optional[str]:
    """Normalise a date-ish value to ``YYYY-MM-DD`` (None passes through)."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, str):
        # Full timestamps ("2024-01-01T00:00:00.000Z") keep only the date part.
        try:
            return date.fromisoformat(value.strip()[:10]).isoformat()
        except ValueError:
            pass
    raise ProfileValidationError(
        f"{field_name} must be an ISO-8601 date",
        details=repr(value),
    )


def _pick(data: dict, snake: str, camel: Optional[str] = None, default: Any = None) -> Any:
    if snake in data:
        return data[snake]
    if camel is not None and camel in data:
        return data[camel]
    return default


def _as_mapping(data: Any, entity: str) -> dict:
    if not isinstance(data, dict):
        raise ProfileValidationError(f"{entity} must be an object")
    return data


# ---------------------------------------------------------------------------
# Owned entities
# ---------------------------------------------------------------------------


@dataclass
class Skill:
    """A named skill with a proficiency level and a category.

    Attributes:
        name: Skill name, stored lowercased (e.g. "python", "node.js")
        level: Proficiency level (default intermediate)
        category: Skill category (default other)
    """

    name: str
    level: SkillLevel = SkillLevel.INTERMEDIATE
    category: SkillCategory = SkillCategory.OTHER

    def __post_init__(self) -> None:
        self.name = _required_text(self.name, "skill name").lower()
        self.level = _coerce_enum(SkillLevel, self.level, "skill level")
        self.category = _coerce_enum(SkillCategory, self.category, "skill category")

    @classmethod
    def from_dict(cls, data: dict) -> "Skill":
        data = _as_mapping(data, "skill")
        return cls(
            name=data.get("name"),
            level=data.get("level") or SkillLevel.INTERMEDIATE,
            category=data.get("category") or SkillCategory.OTHER,
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "level": self.level.value,
            "category": self.category.value,
        }


@dataclass
class Project:
    """A portfolio project.

    Attributes:
        title: Project title
        description: Free-text description
        links: URLs (repository, live demo); order preserved
        skills: Skill tags used by the project, lowercased
        start_date: ISO start date (optional)
        end_date: ISO end date (optional)
        status: Lifecycle state (default completed)
    """

    title: str
    description: str
    links: list[str] = field(default_factory=list)
    skills: list[str] = field(default_factory=list)
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    status: ProjectStatus = ProjectStatus.COMPLETED

    def __post_init__(self) -> None:
        self.title = _required_text(self.title, "project title")
        self.description = _required_text(self.description, "project description")
        if not isinstance(self.links, (list, tuple)):
            raise ProfileValidationError("project links must be a list of strings")
        self.links = [str(link).strip() for link in self.links]
        self.skills = _tag_list(self.skills, "project skills")
        self.start_date = _iso_date(self.start_date, "project startDate")
        self.end_date = _iso_date(self.end_date, "project endDate")
        self.status = _coerce_enum(ProjectStatus, self.status, "project status")

    @classmethod
    def from_dict(cls, data: dict) -> "Project":
        data = _as_mapping(data, "project")
        return cls(
            title=data.get("title"),
            description=data.get("description"),
            links=data.get("links") or [],
            skills=data.get("skills") or [],
            start_date=_pick(data, "start_date", "startDate"),
            end_date=_pick(data, "end_date", "endDate"),
            status=data.get("status") or ProjectStatus.COMPLETED,
        )

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "links": list(self.links),
            "skills": list(self.skills),
            "startDate": self.start_date,
            "endDate": self.end_date,
            "status": self.status.value,
        }


@dataclass
class WorkEntry:
    """A position in the work history.

    ``start_date`` is required; ``end_date`` is absent for the current job.
    """

    company: str
    position: str
    start_date: str
    description: Optional[str] = None
    end_date: Optional[str] = None
    current: bool = False
    skills: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.company = _required_text(self.company, "work company")
        self.position = _required_text(self.position, "work position")
        self.description = _optional_text(self.description, "work description")
        start = _iso_date(self.start_date, "work startDate")
        if start is None:
            raise ProfileValidationError("work startDate is required")
        self.start_date = start
        self.end_date = _iso_date(self.end_date, "work endDate")
        self.current = bool(self.current)
        self.skills = _tag_list(self.skills, "work skills")

    @classmethod
    def from_dict(cls, data: dict) -> "WorkEntry":
        data = _as_mapping(data, "work entry")
        return cls(
            company=data.get("company"),
            position=data.get("position"),
            start_date=_pick(data, "start_date", "startDate"),
            description=data.get("description"),
            end_date=_pick(data, "end_date", "endDate"),
            current=data.get("current", False),
            skills=data.get("skills") or [],
        )

    def to_dict(self) -> dict:
        return {
            "company": self.company,
            "position": self.position,
            "description": self.description,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "current": self.current,
            "skills": list(self.skills),
        }


@dataclass
class EducationEntry:
    """A degree or course of study. ``gpa`` must lie in [0, 10]."""

    institution: str
    degree: str
    field: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    gpa: Optional[float] = None

    def __post_init__(self) -> None:
        self.institution = _required_text(self.institution, "education institution")
        self.degree = _required_text(self.degree, "education degree")
        self.field = _optional_text(self.field, "education field")
        self.start_date = _iso_date(self.start_date, "education startDate")
        self.end_date = _iso_date(self.end_date, "education endDate")
        if self.gpa is not None:
            if isinstance(self.gpa, bool) or not isinstance(self.gpa, (int, float)):
                raise ProfileValidationError("education gpa must be a number")
            if not 0 <= self.gpa <= 10:
                raise ProfileValidationError(
                    "education gpa must be between 0 and 10",
                    details=str(self.gpa),
                )
            self.gpa = float(self.gpa)

    @classmethod
    def from_dict(cls, data: dict) -> "EducationEntry":
        data = _as_mapping(data, "education entry")
        return cls(
            institution=data.get("institution"),
            degree=data.get("degree"),
            field=data.get("field"),
            start_date=_pick(data, "start_date", "startDate"),
            end_date=_pick(data, "end_date", "endDate"),
            gpa=data.get("gpa"),
        )

    def to_dict(self) -> dict:
        return {
            "institution": self.institution,
            "degree": self.degree,
            "field": self.field,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "gpa": self.gpa,
        }


@dataclass
class ProfileLinks:
    """External profile links. All optional."""

    github: Optional[str] = None
    linkedin: Optional[str] = None
    portfolio: Optional[str] = None
    resume: Optional[str] = None
    twitter: Optional[str] = None

    def __post_init__(self) -> None:
        for name in ("github", "linkedin", "portfolio", "resume", "twitter"):
            setattr(self, name, _optional_text(getattr(self, name), f"links.{name}"))

    @classmethod
    def from_dict(cls, data: dict) -> "ProfileLinks":
        data = _as_mapping(data, "links")
        # Unknown link kinds (leetcode, email, ...) are dropped.
        return cls(
            github=data.get("github"),
            linkedin=data.get("linkedin"),
            portfolio=data.get("portfolio"),
            resume=data.get("resume"),
            twitter=data.get("twitter"),
        )

    def to_dict(self) -> dict:
        return {
            "github": self.github,
            "linkedin": self.linkedin,
            "portfolio": self.portfolio,
            "resume": self.resume,
            "twitter": self.twitter,
        }


# ---------------------------------------------------------------------------
# Profile document
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ProfileSummary:
    """The subset of profile fields returned when a search matches the profile."""

    name: str
    email: str
    title: Optional[str] = None
    bio: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "title": self.title,
            "bio": self.bio,
            "email": self.email,
        }


@dataclass
class Profile:
    """The single portfolio document.

    The profile owns its skills, projects, work entries and education
    entries by composition; their list order is the order in which they
    were written and is never re-sorted in place.

    Whether a profile is the *active* one is a property of its storage
    record, not of the document, so ``is_active`` does not appear here.

    Example:
        >>> profile = Profile.from_dict({
        ...     "name": "Alex Morgan",
        ...     "email": "Alex@Example.com",
        ...     "skills": [{"name": "Python", "level": "expert", "category": "backend"}],
        ... })
        >>> profile.email
        'alex@example.com'
    """

    name: str
    email: str
    title: Optional[str] = None
    bio: Optional[str] = None
    location: Optional[str] = None
    phone: Optional[str] = None
    skills: list[Skill] = field(default_factory=list)
    projects: list[Project] = field(default_factory=list)
    work: list[WorkEntry] = field(default_factory=list)
    education: list[EducationEntry] = field(default_factory=list)
    links: Optional[ProfileLinks] = None

    def __post_init__(self) -> None:
        self.name = _required_text(self.name, "name")
        self.email = _required_text(self.email, "email").lower()
        if "@" not in self.email:
            raise ProfileValidationError("email must be a valid address", details=self.email)
        self.title = _optional_text(self.title, "title")
        self.bio = _optional_text(self.bio, "bio")
        self.location = _optional_text(self.location, "location")
        self.phone = _optional_text(self.phone, "phone")

    @property
    def summary(self) -> ProfileSummary:
        """Return the name/title/bio/email summary."""
        return ProfileSummary(
            name=self.name,
            email=self.email,
            title=self.title,
            bio=self.bio,
        )

    @classmethod
    def from_dict(cls, data: dict) -> "Profile":
        """Build a Profile from a JSON-style document.

        Raises:
            ProfileValidationError: If any field violates the schema.
        """
        data = _as_mapping(data, "profile")

        def _entities(key: str, factory) -> list:
            values = data.get(key) or []
            if not isinstance(values, list):
                raise ProfileValidationError(f"{key} must be a list")
            return [factory(item) for item in values]

        links = data.get("links")
        return cls(
            name=data.get("name"),
            email=data.get("email"),
            title=data.get("title"),
            bio=data.get("bio"),
            location=data.get("location"),
            phone=data.get("phone"),
            skills=_entities("skills", Skill.from_dict),
            projects=_entities("projects", Project.from_dict),
            work=_entities("work", WorkEntry.from_dict),
            education=_entities("education", EducationEntry.from_dict),
            links=ProfileLinks.from_dict(links) if links else None,
        )

    def to_dict(self) -> dict:
        """Return the JSON document form of the profile."""
        return {
            "name": self.name,
            "email": self.email,
            "title": self.title,
            "bio": self.bio,
            "location": self.location,
            "phone": self.phone,
            "skills": [s.to_dict() for s in self.skills],
            "projects": [p.to_dict() for p in self.projects],
            "work": [w.to_dict() for w in self.work],
            "education": [e.to_dict() for e in self.education],
            "links": self.links.to_dict() if self.links else None,
        }


# ---------------------------------------------------------------------------
# Engine results
# ---------------------------------------------------------------------------


@dataclass
class SearchResult:
    """Result of a free-text search over a profile.

    Every sequence keeps document order; nothing is scored or truncated.

    Attributes:
        query: The trimmed query that was searched for
        profile: Summary if name, bio or title matched; None otherwise
        projects: Matching projects
        skills: Matching skills
        work: Matching work entries
        education: Matching education entries
    """

    query: str
    profile: Optional[ProfileSummary] = None
    projects: list[Project] = field(default_factory=list)
    skills: list[Skill] = field(default_factory=list)
    work: list[WorkEntry] = field(default_factory=list)
    education: list[EducationEntry] = field(default_factory=list)

    @property
    def total_matches(self) -> int:
        """Number of matched entities, counting the profile summary as one."""
        return (
            (1 if self.profile is not None else 0)
            + len(self.projects)
            + len(self.skills)
            + len(self.work)
            + len(self.education)
        )

    @property
    def is_empty(self) -> bool:
        return self.total_matches == 0

    def to_dict(self) -> dict:
        return {
            "query": self.query,
            "profile": self.profile.to_dict() if self.profile else None,
            "projects": [p.to_dict() for p in self.projects],
            "skills": [s.to_dict() for s in self.skills],
            "work": [w.to_dict() for w in self.work],
            "education": [e.to_dict() for e in self.education],
        }


@dataclass(frozen=True)
class Pagination:
    """Pagination block. ``pages`` is 0 when ``total`` is 0."""

    page: int
    limit: int
    total: int
    pages: int

    def to_dict(self) -> dict:
        return {
            "page": self.page,
            "limit": self.limit,
            "total": self.total,
            "pages": self.pages,
        }


@dataclass
class PagedProjects:
    """One page of (optionally skill-filtered) projects."""

    data: list[Project]
    pagination: Pagination
