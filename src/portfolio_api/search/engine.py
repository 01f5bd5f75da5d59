"""
Search engine over a single portfolio profile.

The engine is a pure transformation of an already-loaded ``Profile``
plus query parameters into result objects. It owns no storage and keeps
no state between calls, so the API and CLI share one instance and any
number of concurrent calls can run against different profile snapshots.

Usage:
    from portfolio_api.search import SearchEngine

    engine = SearchEngine()
    result = engine.search(profile, "react")
    page = engine.filter_projects_by_skill(profile, skill="python", page=2)
"""

import math
from typing import Optional, Union

from portfolio_api.config import SKILL_LEVEL_WEIGHTS, get_settings
from portfolio_api.core import (
    EducationEntry,
    InvalidCategoryError,
    InvalidLimitError,
    InvalidPageError,
    InvalidQueryError,
    PagedProjects,
    Pagination,
    Profile,
    Project,
    SearchResult,
    Skill,
    SkillCategory,
    WorkEntry,
    get_logger,
)

logger = get_logger(__name__)


def _contains(value: Optional[str], term: str) -> bool:
    """Case-insensitive substring test; ``term`` must already be lowercased."""
    return value is not None and term in value.lower()


def _any_contains(values: list[str], term: str) -> bool:
    return any(_contains(value, term) for value in values)


class SearchEngine:
    """
    Filter, search and rank the entities embedded in a profile.

    Four operations are provided:

    - ``search()``: case-insensitive substring search across the profile
      summary fields, projects, skills, work entries and education.
    - ``filter_projects_by_skill()``: projects whose skill tags contain a
      substring, paginated.
    - ``top_skills()``: skills ranked by proficiency level, stable for ties.
    - ``skills_by_category()``: skills of one category, or all skills
      grouped by category.

    Results always preserve the profile's own ordering; nothing is scored.
    Invalid parameters raise ``SearchError`` subclasses.

    Example:
        >>> engine = SearchEngine()
        >>> [s.name for s in engine.top_skills(profile, limit=2)]
        ['python', 'javascript']
    """

    def __init__(
        self,
        default_page_size: Optional[int] = None,
        max_page_size: Optional[int] = None,
        default_top_skills: Optional[int] = None,
    ) -> None:
        """
        Initialise the search engine.

        Args:
            default_page_size: Page size when the caller passes none.
                Defaults to ``SEARCH_DEFAULT_PAGE_SIZE``.
            max_page_size: Largest accepted page size. Defaults to
                ``SEARCH_MAX_PAGE_SIZE``.
            default_top_skills: Number of skills returned by
                ``top_skills()`` when no limit is given. Defaults to
                ``SEARCH_TOP_SKILLS_LIMIT``.
        """
        settings = get_settings()
        self._default_page_size = default_page_size or settings.search.default_page_size
        self._max_page_size = max_page_size or settings.search.max_page_size
        self._default_top_skills = default_top_skills or settings.search.top_skills_limit
        self._max_query_length = settings.search.max_query_length

        logger.debug(
            "SearchEngine initialised: page_size=%d, max_page_size=%d, top_skills=%d",
            self._default_page_size,
            self._max_page_size,
            self._default_top_skills,
        )

    # ------------------------------------------------------------------
    # Free-text search
    # ------------------------------------------------------------------

    def clean_query(self, query: Optional[str]) -> str:
        """
        Trim a free-text query and check it is usable.

        Raises:
            InvalidQueryError: If the query is empty or whitespace-only,
                or longer than ``SEARCH_MAX_QUERY_LENGTH`` once trimmed.
        """
        if not query or not query.strip():
            raise InvalidQueryError()
        query = query.strip()
        if len(query) > self._max_query_length:
            raise InvalidQueryError(
                "Search query is too long",
                details=f"{len(query)} > {self._max_query_length} characters",
            )
        return query

    def search(self, profile: Profile, query: str) -> SearchResult:
        """
        Search every entity in the profile for a substring.

        Matching is case-insensitive containment of the trimmed query:

        - profile: ``name``, ``bio``, ``title`` (summary returned on match)
        - projects: ``title``, ``description``, any skill tag
        - skills: ``name``, ``category``
        - work: ``company``, ``position``, ``description``, any skill tag
        - education: ``institution``, ``degree``, ``field``

        Args:
            profile: The active profile.
            query: Free-text query.

        Returns:
            ``SearchResult`` with matches in document order. A query that
            matches nothing yields an empty result, not an error.

        Raises:
            InvalidQueryError: If the query is empty or whitespace-only,
                or longer than ``SEARCH_MAX_QUERY_LENGTH`` once trimmed.
        """
        query = self.clean_query(query)
        term = query.lower()

        summary = None
        if (
            _contains(profile.name, term)
            or _contains(profile.bio, term)
            or _contains(profile.title, term)
        ):
            summary = profile.summary

        result = SearchResult(
            query=query,
            profile=summary,
            projects=[p for p in profile.projects if self._project_matches(p, term)],
            skills=[s for s in profile.skills if self._skill_matches(s, term)],
            work=[w for w in profile.work if self._work_matches(w, term)],
            education=[e for e in profile.education if self._education_matches(e, term)],
        )

        logger.info(
            "Search '%s' matched %d item(s) (profile=%s, projects=%d, skills=%d, "
            "work=%d, education=%d)",
            query[:80],
            result.total_matches,
            "yes" if summary else "no",
            len(result.projects),
            len(result.skills),
            len(result.work),
            len(result.education),
        )
        return result

    @staticmethod
    def _project_matches(project: Project, term: str) -> bool:
        return (
            _contains(project.title, term)
            or _contains(project.description, term)
            or _any_contains(project.skills, term)
        )

    @staticmethod
    def _skill_matches(skill: Skill, term: str) -> bool:
        return _contains(skill.name, term) or _contains(skill.category.value, term)

    @staticmethod
    def _work_matches(entry: WorkEntry, term: str) -> bool:
        return (
            _contains(entry.company, term)
            or _contains(entry.position, term)
            or _contains(entry.description, term)
            or _any_contains(entry.skills, term)
        )

    @staticmethod
    def _education_matches(entry: EducationEntry, term: str) -> bool:
        return (
            _contains(entry.institution, term)
            or _contains(entry.degree, term)
            or _contains(entry.field, term)
        )

    # ------------------------------------------------------------------
    # Project listing
    # ------------------------------------------------------------------

    def filter_projects_by_skill(
        self,
        profile: Profile,
        skill: Optional[str] = None,
        page: int = 1,
        limit: Optional[int] = None,
    ) -> PagedProjects:
        """
        Return one page of projects, optionally filtered by skill.

        Args:
            profile: The active profile.
            skill: Substring to look for in each project's skill tags
                   (case-insensitive). None or blank lists all projects.
            page: 1-based page number.
            limit: Page size in [1, max_page_size]. Defaults to
                   ``SEARCH_DEFAULT_PAGE_SIZE``.

        Returns:
            ``PagedProjects`` whose ``pagination.total`` counts every
            matching project. A page past the end is empty, not an error.

        Raises:
            InvalidPageError: If ``page`` < 1.
            InvalidLimitError: If ``limit`` is outside [1, max_page_size].
        """
        effective_limit = limit if limit is not None else self._default_page_size
        if page < 1:
            raise InvalidPageError(page)
        if not 1 <= effective_limit <= self._max_page_size:
            raise InvalidLimitError(effective_limit, maximum=self._max_page_size)

        candidates = profile.projects
        if skill and skill.strip():
            term = skill.strip().lower()
            candidates = [p for p in candidates if _any_contains(p.skills, term)]

        total = len(candidates)
        skip = (page - 1) * effective_limit
        data = candidates[skip : skip + effective_limit]

        pagination = Pagination(
            page=page,
            limit=effective_limit,
            total=total,
            pages=math.ceil(total / effective_limit),
        )

        logger.debug(
            "Projects (skill=%s): page %d/%d, %d of %d",
            skill or "any",
            page,
            pagination.pages,
            len(data),
            total,
        )
        return PagedProjects(data=list(data), pagination=pagination)

    # ------------------------------------------------------------------
    # Skills
    # ------------------------------------------------------------------

    def top_skills(self, profile: Profile, limit: Optional[int] = None) -> list[Skill]:
        """
        Return the highest-ranked skills by proficiency level.

        Levels are weighted expert=4, advanced=3, intermediate=2,
        beginner=1. The sort is stable, so skills of equal level keep
        their order from the profile. The profile itself is not reordered.

        Args:
            profile: The active profile.
            limit: Maximum number of skills (>= 1). Defaults to
                   ``SEARCH_TOP_SKILLS_LIMIT``.

        Raises:
            InvalidLimitError: If ``limit`` < 1.
        """
        effective_limit = limit if limit is not None else self._default_top_skills
        if effective_limit < 1:
            raise InvalidLimitError(effective_limit)

        ranked = sorted(
            profile.skills,
            key=lambda s: SKILL_LEVEL_WEIGHTS[s.level.value],
            reverse=True,
        )
        return ranked[:effective_limit]

    def skills_by_category(
        self,
        profile: Profile,
        category: Union[SkillCategory, str, None] = None,
    ) -> Union[list[Skill], dict[SkillCategory, list[Skill]]]:
        """
        Return skills of one category, or every skill grouped by category.

        Args:
            profile: The active profile.
            category: Category to select. When omitted, all skills are
                      grouped.

        Returns:
            With a category: the matching skills in profile order.
            Without: a dict keyed by category in first-seen order, each
            bucket in profile order. Categories with no skills are absent.

        Raises:
            InvalidCategoryError: If ``category`` is a string that names
                no known category.
        """
        if category is not None:
            selected = self._resolve_category(category)
            return [s for s in profile.skills if s.category is selected]

        grouped: dict[SkillCategory, list[Skill]] = {}
        for skill in profile.skills:
            grouped.setdefault(skill.category, []).append(skill)
        return grouped

    @staticmethod
    def _resolve_category(category: Union[SkillCategory, str]) -> SkillCategory:
        if isinstance(category, SkillCategory):
            return category
        try:
            return SkillCategory(category.strip().lower())
        except (ValueError, AttributeError) as e:
            raise InvalidCategoryError(str(category)) from e
