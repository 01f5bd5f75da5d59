"""
Pydantic v2 response schemas for the portfolio API.

Schemas are separate from the core dataclasses in ``portfolio_api.core``
to provide a stable, explicit API contract. They mirror the JSON
document form produced by ``Profile.to_dict()`` (camelCase date keys),
so conversion is a single ``model_validate`` call.

Every response uses the same envelope:
    - success: ``{"success": true, "data": ..., "pagination"?: ..., "message"?: ...}``
    - failure: ``{"success": false, "message": ..., "details"?: ..., "errors"?: [...]}``

Naming convention:
    - Envelopes: ``<Resource>Response`` (e.g. ``ProjectListResponse``)
    - Payloads:  ``<Resource>Schema`` (e.g. ``ProjectSchema``)
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

SkillLevelName = Literal["beginner", "intermediate", "advanced", "expert"]
SkillCategoryName = Literal["frontend", "backend", "database", "devops", "mobile", "other"]
ProjectStatusName = Literal["completed", "in-progress", "planned"]


# ---------------------------------------------------------------------------
# Shared / error
# ---------------------------------------------------------------------------


class FieldError(BaseModel):
    """A single query-parameter validation failure."""

    field: str = Field(..., description="Parameter name (e.g. 'limit')")
    message: str


class ErrorResponse(BaseModel):
    """Envelope returned for all 4xx and 5xx responses."""

    success: bool = False
    message: str = Field(..., description="Human-readable error description")
    details: str | None = Field(None, description="Additional technical context")
    errors: list[FieldError] | None = Field(
        None, description="Per-parameter failures (validation errors only)"
    )


# ---------------------------------------------------------------------------
# Profile document
# ---------------------------------------------------------------------------


class SkillSchema(BaseModel):
    """A skill with its proficiency level and category."""

    name: str
    level: SkillLevelName
    category: SkillCategoryName


class ProjectSchema(BaseModel):
    """A portfolio project."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    description: str
    links: list[str] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    start_date: str | None = Field(None, alias="startDate", description="ISO date")
    end_date: str | None = Field(None, alias="endDate", description="ISO date")
    status: ProjectStatusName = "completed"


class WorkSchema(BaseModel):
    """A work history entry."""

    model_config = ConfigDict(populate_by_name=True)

    company: str
    position: str
    description: str | None = None
    start_date: str = Field(..., alias="startDate", description="ISO date")
    end_date: str | None = Field(None, alias="endDate", description="ISO date")
    current: bool = False
    skills: list[str] = Field(default_factory=list)


class EducationSchema(BaseModel):
    """An education entry."""

    model_config = ConfigDict(populate_by_name=True)

    institution: str
    degree: str
    field: str | None = None
    start_date: str | None = Field(None, alias="startDate", description="ISO date")
    end_date: str | None = Field(None, alias="endDate", description="ISO date")
    gpa: float | None = Field(None, ge=0.0, le=10.0)


class ProfileLinksSchema(BaseModel):
    """External links attached to the profile."""

    github: str | None = None
    linkedin: str | None = None
    portfolio: str | None = None
    resume: str | None = None
    twitter: str | None = None


class ProfileSchema(BaseModel):
    """The full profile document."""

    name: str
    email: str
    title: str | None = None
    bio: str | None = None
    location: str | None = None
    phone: str | None = None
    skills: list[SkillSchema] = Field(default_factory=list)
    projects: list[ProjectSchema] = Field(default_factory=list)
    work: list[WorkSchema] = Field(default_factory=list)
    education: list[EducationSchema] = Field(default_factory=list)
    links: ProfileLinksSchema | None = None


class ProfileSummarySchema(BaseModel):
    """Profile fields returned when a search matches name, bio or title."""

    name: str
    title: str | None = None
    bio: str | None = None
    email: str


# ---------------------------------------------------------------------------
# Engine results
# ---------------------------------------------------------------------------


class PaginationSchema(BaseModel):
    """Pagination block. ``pages`` is 0 when ``total`` is 0."""

    page: int = Field(..., ge=1)
    limit: int = Field(..., ge=1)
    total: int = Field(..., ge=0)
    pages: int = Field(..., ge=0)


class SearchResultSchema(BaseModel):
    """Matches for a free-text query, each list in document order."""

    query: str
    profile: ProfileSummarySchema | None = None
    projects: list[ProjectSchema] = Field(default_factory=list)
    skills: list[SkillSchema] = Field(default_factory=list)
    work: list[WorkSchema] = Field(default_factory=list)
    education: list[EducationSchema] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Envelopes
# ---------------------------------------------------------------------------


class ProfileResponse(BaseModel):
    """Response for ``GET /api/profile/``."""

    success: bool = True
    data: ProfileSchema


class ProjectListResponse(BaseModel):
    """Response for ``GET /api/profile/projects``."""

    success: bool = True
    data: list[ProjectSchema]
    pagination: PaginationSchema


class SkillListResponse(BaseModel):
    """Response for ``GET /api/profile/skills/top`` and ``/skills?category=``."""

    success: bool = True
    data: list[SkillSchema]


class SkillGroupsResponse(BaseModel):
    """Response for ``GET /api/profile/skills`` without a category."""

    success: bool = True
    data: dict[str, list[SkillSchema]] = Field(
        ..., description="Skills keyed by category, in first-seen order"
    )


class SearchResponse(BaseModel):
    """Response for ``GET /api/profile/search``."""

    success: bool = True
    data: SearchResultSchema


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------


class DatabaseHealth(BaseModel):
    """Profile store reachability."""

    status: Literal["connected", "disconnected"]
    active_profile: bool = Field(False, description="Whether an active profile exists")


class HealthData(BaseModel):
    """Body of the health check."""

    status: Literal["ok", "unavailable"]
    timestamp: str = Field(..., description="ISO 8601 UTC timestamp")
    uptime_seconds: float = Field(..., ge=0.0)
    version: str
    database: DatabaseHealth


class HealthResponse(BaseModel):
    """Response for ``GET /api/health``."""

    success: bool
    message: str
    data: HealthData
