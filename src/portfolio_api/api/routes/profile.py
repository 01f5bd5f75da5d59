"""
Profile endpoints: the active profile and the views the engine derives from it.

All routes are read-only:
    - ``GET /api/profile/``            full active profile
    - ``GET /api/profile/projects``    projects, optionally filtered by skill, paginated
    - ``GET /api/profile/skills/top``  skills ranked by proficiency
    - ``GET /api/profile/skills``      skills of one category, or grouped by category
    - ``GET /api/profile/search``      free-text search across the profile

Domain errors (``ProfileNotFoundError``, ``SearchError``) propagate to the
exception handlers registered in ``app.py``, which render the error
envelope.
"""

from typing import Union

from fastapi import APIRouter, Depends, Query

from portfolio_api.api.dependencies import (
    get_active_profile,
    get_profile_store,
    get_search_engine,
    load_active_profile,
)
from portfolio_api.api.schemas import (
    ErrorResponse,
    PaginationSchema,
    ProfileResponse,
    ProfileSchema,
    ProjectListResponse,
    ProjectSchema,
    SearchResponse,
    SearchResultSchema,
    SkillCategoryName,
    SkillGroupsResponse,
    SkillListResponse,
    SkillSchema,
)
from portfolio_api.config import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    DEFAULT_TOP_SKILLS_LIMIT,
    MAX_PAGE_SIZE,
    MAX_SKILL_FILTER_LENGTH,
)
from portfolio_api.core import Profile, Skill, get_logger
from portfolio_api.database import ProfileStore
from portfolio_api.search import SearchEngine

logger = get_logger(__name__)

router = APIRouter()

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "No active profile"}}
_BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Invalid parameters"}}


def _skills_to_schema(skills: list[Skill]) -> list[SkillSchema]:
    return [SkillSchema.model_validate(s.to_dict()) for s in skills]


@router.get(
    "/",
    response_model=ProfileResponse,
    responses=_NOT_FOUND,
    summary="Get the active profile",
)
async def get_profile(
    profile: Profile = Depends(get_active_profile),
) -> ProfileResponse:
    """Return the full active profile document."""
    return ProfileResponse(data=ProfileSchema.model_validate(profile.to_dict()))


@router.get(
    "/projects",
    response_model=ProjectListResponse,
    responses={**_NOT_FOUND, **_BAD_REQUEST},
    summary="List projects, optionally filtered by skill",
)
async def list_projects(
    profile: Profile = Depends(get_active_profile),
    engine: SearchEngine = Depends(get_search_engine),
    skill: str | None = Query(
        None,
        max_length=MAX_SKILL_FILTER_LENGTH,
        description="Substring matched against each project's skill tags",
    ),
    page: int = Query(DEFAULT_PAGE, ge=1, description="1-based page number"),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, description="Page size"),
) -> ProjectListResponse:
    """
    Return one page of projects in profile order.

    Without ``skill``, or with a blank one, every project is a candidate. A page past the end
    returns an empty list with the same ``total``.
    """
    paged = engine.filter_projects_by_skill(profile, skill=skill, page=page, limit=limit)
    return ProjectListResponse(
        data=[ProjectSchema.model_validate(p.to_dict()) for p in paged.data],
        pagination=PaginationSchema.model_validate(paged.pagination.to_dict()),
    )


@router.get(
    "/skills/top",
    response_model=SkillListResponse,
    responses={**_NOT_FOUND, **_BAD_REQUEST},
    summary="Top skills by proficiency",
)
async def top_skills(
    profile: Profile = Depends(get_active_profile),
    engine: SearchEngine = Depends(get_search_engine),
    limit: int = Query(
        DEFAULT_TOP_SKILLS_LIMIT, ge=1, le=MAX_PAGE_SIZE, description="Number of skills"
    ),
) -> SkillListResponse:
    """Return skills ordered expert → beginner; equal levels keep profile order."""
    return SkillListResponse(data=_skills_to_schema(engine.top_skills(profile, limit=limit)))


@router.get(
    "/skills",
    response_model=Union[SkillListResponse, SkillGroupsResponse],
    responses={**_NOT_FOUND, **_BAD_REQUEST},
    summary="Skills by category",
)
async def skills_by_category(
    profile: Profile = Depends(get_active_profile),
    engine: SearchEngine = Depends(get_search_engine),
    category: SkillCategoryName | None = Query(None, description="Category to select"),
) -> Union[SkillListResponse, SkillGroupsResponse]:
    """
    With ``category``: the skills in that category as a flat list.
    Without: every skill grouped into an object keyed by category.
    """
    result = engine.skills_by_category(profile, category=category)
    if isinstance(result, dict):
        return SkillGroupsResponse(
            data={cat.value: _skills_to_schema(skills) for cat, skills in result.items()}
        )
    return SkillListResponse(data=_skills_to_schema(result))


@router.get(
    "/search",
    response_model=SearchResponse,
    responses={**_NOT_FOUND, **_BAD_REQUEST},
    summary="Free-text search across the profile",
)
async def search_profile(
    store: ProfileStore = Depends(get_profile_store),
    engine: SearchEngine = Depends(get_search_engine),
    q: str | None = Query(None, description="Search text"),
) -> SearchResponse:
    """
    Case-insensitive substring search over the profile summary, projects,
    skills, work history and education.

    A missing, blank or overlong ``q`` is rejected before the profile is
    loaded. Length is measured after trimming.
    """
    query = engine.clean_query(q)

    profile = load_active_profile(store)
    result = engine.search(profile, query)
    return SearchResponse(data=SearchResultSchema.model_validate(result.to_dict()))
