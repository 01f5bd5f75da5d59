"""
Tests for SearchEngine: free-text search, project filtering, skill ranking.

The engine is a pure function of (profile, parameters), so every test
builds its input in memory. Most scenarios use the seed profile; the
ordering and stability properties use small hand-built profiles where
the expected output is obvious at a glance.
"""

import pytest

from portfolio_api.core.exceptions import (
    InvalidCategoryError,
    InvalidLimitError,
    InvalidPageError,
    InvalidQueryError,
)
from portfolio_api.core.types import SkillCategory, SkillLevel
from portfolio_api.search.engine import SearchEngine
from tests.helpers import make_profile, make_project, make_skill, make_work


def _names(skills) -> list[str]:
    return [s.name for s in skills]


def _titles(projects) -> list[str]:
    return [p.title for p in projects]


# -----------------------------------------------------------------------
# search()
# -----------------------------------------------------------------------


class TestSearchValidation:
    """Blank queries are rejected before any matching happens."""

    @pytest.mark.parametrize("query", ["", "   ", "\t\n"])
    def test_blank_query_raises(self, engine, sample_profile, query):
        with pytest.raises(InvalidQueryError, match="Search query is required"):
            engine.search(sample_profile, query)

    def test_none_query_raises(self, engine, sample_profile):
        with pytest.raises(InvalidQueryError):
            engine.search(sample_profile, None)

    def test_overlong_query_raises(self, engine, sample_profile):
        with pytest.raises(InvalidQueryError, match="too long"):
            engine.search(sample_profile, "a" * 201)

    def test_length_measured_after_trimming(self, engine, sample_profile):
        result = engine.search(sample_profile, "  " + "a" * 200 + "  ")
        assert result.is_empty

    def test_clean_query_trims(self, engine):
        assert engine.clean_query("  React \n") == "React"


class TestSearchMatching:
    """Case-insensitive substring matching over each entity's fields."""

    def test_react_scenario(self, engine, sample_profile):
        result = engine.search(sample_profile, "react")
        assert _titles(result.projects) == ["React Dashboard"]
        assert _names(result.skills) == ["react"]
        # Northwind's description mentions React and its skills include react
        assert [w.company for w in result.work] == ["Northwind Software"]
        assert result.education == []
        assert result.profile is None

    def test_case_insensitive(self, engine, sample_profile):
        lower = engine.search(sample_profile, "react")
        upper = engine.search(sample_profile, "REACT")
        assert _titles(lower.projects) == _titles(upper.projects)
        assert _names(lower.skills) == _names(upper.skills)

    def test_query_is_trimmed(self, engine, sample_profile):
        result = engine.search(sample_profile, "  React  ")
        assert result.query == "React"
        assert _titles(result.projects) == ["React Dashboard"]

    def test_profile_summary_on_bio_match(self, engine, sample_profile):
        result = engine.search(sample_profile, "hackathon")
        assert result.profile is not None
        assert result.profile.name == "Alex Morgan"
        assert result.profile.email == "alex.morgan@example.com"
        assert result.profile.title == "Full Stack Developer"
        assert _titles(result.projects) == ["Hackathon Landing Page"]

    def test_profile_summary_on_name_match(self, engine, sample_profile):
        result = engine.search(sample_profile, "morgan")
        assert result.profile is not None
        assert result.projects == []

    def test_skill_matches_category(self, engine, sample_profile):
        result = engine.search(sample_profile, "backend")
        assert _names(result.skills) == ["python", "fastapi"]

    def test_project_matches_skill_tag_substring(self, engine, sample_profile):
        result = engine.search(sample_profile, "postgres")
        assert _titles(result.projects) == ["Recipe Finder API"]
        assert [w.company for w in result.work] == ["Blue Harbor Labs"]

    def test_education_matches_field(self, engine, sample_profile):
        result = engine.search(sample_profile, "computer science")
        assert [e.institution for e in result.education] == ["University of Lisbon"]

    def test_work_matches_position(self, engine, sample_profile):
        result = engine.search(sample_profile, "junior")
        assert [w.company for w in result.work] == ["Blue Harbor Labs"]

    def test_results_keep_document_order(self, engine):
        profile = make_profile(
            projects=[
                make_project(title="Zeta", skills=["go"]),
                make_project(title="Alpha", skills=["golang"]),
                make_project(title="Mid", skills=["rust"]),
                make_project(title="Beta", description="Written in Go."),
            ]
        )
        result = engine.search(profile, "go")
        assert _titles(result.projects) == ["Zeta", "Alpha", "Beta"]


class TestSearchEmptyResult:
    """A query that matches nothing is a valid, empty result."""

    def test_no_match(self, engine, sample_profile):
        result = engine.search(sample_profile, "haskell")
        assert result.profile is None
        assert result.projects == []
        assert result.skills == []
        assert result.work == []
        assert result.education == []
        assert result.is_empty
        assert result.total_matches == 0

    def test_empty_profile(self, engine):
        result = engine.search(make_profile(title=None), "anything")
        assert result.is_empty


class TestSearchPurity:
    """search() has no side effects and is repeatable."""

    def test_idempotent(self, engine, sample_profile):
        first = engine.search(sample_profile, "python")
        second = engine.search(sample_profile, "python")
        assert first.to_dict() == second.to_dict()

    def test_does_not_mutate_profile(self, engine, sample_profile):
        before = sample_profile.to_dict()
        engine.search(sample_profile, "python")
        assert sample_profile.to_dict() == before

    def test_total_matches_counts_profile(self, engine, sample_profile):
        result = engine.search(sample_profile, "full stack")
        # Profile title and Northwind position both say "Full Stack Developer"
        assert result.profile is not None
        assert result.total_matches == 1 + len(result.work) + len(result.projects)


# -----------------------------------------------------------------------
# filter_projects_by_skill()
# -----------------------------------------------------------------------


class TestFilterProjects:
    """Skill filtering and pagination of the project list."""

    def test_no_filter_returns_all(self, engine, sample_profile):
        paged = engine.filter_projects_by_skill(sample_profile)
        assert _titles(paged.data) == _titles(sample_profile.projects)
        assert paged.pagination.total == 5
        assert paged.pagination.pages == 1
        assert paged.pagination.page == 1
        assert paged.pagination.limit == 10

    def test_blank_filter_is_ignored(self, engine, sample_profile):
        paged = engine.filter_projects_by_skill(sample_profile, skill="   ")
        assert paged.pagination.total == 5

    def test_exact_skill(self, engine, sample_profile):
        paged = engine.filter_projects_by_skill(sample_profile, skill="python")
        assert _titles(paged.data) == ["Recipe Finder API", "Deploy Bot"]

    def test_substring_skill(self, engine, sample_profile):
        # "java" is a substring of "javascript"
        paged = engine.filter_projects_by_skill(sample_profile, skill="Java")
        assert _titles(paged.data) == ["React Dashboard", "Hackathon Landing Page"]

    def test_substring_spans_different_tags(self, engine, sample_profile):
        paged = engine.filter_projects_by_skill(sample_profile, skill="sql")
        assert _titles(paged.data) == ["Recipe Finder API", "Habit Tracker"]

    def test_no_matches(self, engine, sample_profile):
        paged = engine.filter_projects_by_skill(sample_profile, skill="haskell")
        assert paged.data == []
        assert paged.pagination.total == 0
        assert paged.pagination.pages == 0

    def test_pages_round_up(self, engine, sample_profile):
        paged = engine.filter_projects_by_skill(sample_profile, page=3, limit=2)
        assert _titles(paged.data) == ["Deploy Bot"]
        assert paged.pagination.pages == 3
        assert paged.pagination.total == 5

    def test_page_past_end_is_empty(self, engine, sample_profile):
        paged = engine.filter_projects_by_skill(
            sample_profile, skill="python", page=999, limit=10
        )
        assert paged.data == []
        assert paged.pagination.total == 2
        assert paged.pagination.page == 999

    @pytest.mark.parametrize("limit", [1, 2, 3, 4, 5, 7])
    def test_pages_reconstruct_project_list(self, engine, sample_profile, limit):
        first = engine.filter_projects_by_skill(sample_profile, limit=limit)
        collected = list(first.data)
        for page in range(2, first.pagination.pages + 1):
            collected.extend(
                engine.filter_projects_by_skill(sample_profile, page=page, limit=limit).data
            )
        assert collected == sample_profile.projects

    def test_default_page_size_from_constructor(self, sample_profile):
        engine = SearchEngine(default_page_size=2, max_page_size=100, default_top_skills=10)
        paged = engine.filter_projects_by_skill(sample_profile)
        assert len(paged.data) == 2
        assert paged.pagination.limit == 2

    @pytest.mark.parametrize("page", [0, -1])
    def test_invalid_page(self, engine, sample_profile, page):
        with pytest.raises(InvalidPageError) as exc_info:
            engine.filter_projects_by_skill(sample_profile, page=page)
        assert exc_info.value.page == page

    @pytest.mark.parametrize("limit", [0, -5, 101])
    def test_invalid_limit(self, engine, sample_profile, limit):
        with pytest.raises(InvalidLimitError) as exc_info:
            engine.filter_projects_by_skill(sample_profile, limit=limit)
        assert exc_info.value.maximum == 100

    def test_max_limit_accepted(self, engine, sample_profile):
        paged = engine.filter_projects_by_skill(sample_profile, limit=100)
        assert paged.pagination.limit == 100


# -----------------------------------------------------------------------
# top_skills()
# -----------------------------------------------------------------------


class TestTopSkills:
    """Ranking by level, stable for ties, truncated to the limit."""

    def test_ranking_scenario(self, engine):
        profile = make_profile(
            skills=[
                make_skill("javascript", "expert"),
                make_skill("python", "advanced"),
                make_skill("html", "intermediate"),
            ]
        )
        ranked = engine.top_skills(profile, limit=2)
        assert [(s.name, s.level) for s in ranked] == [
            ("javascript", SkillLevel.EXPERT),
            ("python", SkillLevel.ADVANCED),
        ]

    def test_sorted_descending(self, engine):
        profile = make_profile(
            skills=[
                make_skill("a", "beginner"),
                make_skill("b", "intermediate"),
                make_skill("c", "expert"),
                make_skill("d", "advanced"),
            ]
        )
        assert _names(engine.top_skills(profile, limit=10)) == ["c", "d", "b", "a"]

    def test_ties_keep_input_order(self, engine):
        profile = make_profile(
            skills=[
                make_skill("zig", "advanced"),
                make_skill("ada", "expert"),
                make_skill("bash", "advanced"),
                make_skill("cobol", "advanced"),
            ]
        )
        # Not alphabetical: zig precedes bash because it comes first in the profile
        assert _names(engine.top_skills(profile, limit=10)) == ["ada", "zig", "bash", "cobol"]

    def test_seed_profile(self, engine, sample_profile):
        ranked = engine.top_skills(sample_profile, limit=5)
        assert _names(ranked) == ["python", "javascript", "react", "fastapi", "postgresql"]

    @pytest.mark.parametrize("limit", [1, 3, 10, 50])
    def test_length_is_min_of_limit_and_count(self, engine, sample_profile, limit):
        assert len(engine.top_skills(sample_profile, limit=limit)) == min(limit, 10)

    def test_default_limit_from_constructor(self, sample_profile):
        engine = SearchEngine(default_page_size=10, max_page_size=100, default_top_skills=3)
        assert len(engine.top_skills(sample_profile)) == 3

    def test_does_not_reorder_profile(self, engine, sample_profile):
        before = _names(sample_profile.skills)
        engine.top_skills(sample_profile, limit=3)
        assert _names(sample_profile.skills) == before

    def test_no_skills(self, engine):
        assert engine.top_skills(make_profile(), limit=5) == []

    @pytest.mark.parametrize("limit", [0, -1])
    def test_invalid_limit(self, engine, sample_profile, limit):
        with pytest.raises(InvalidLimitError):
            engine.top_skills(sample_profile, limit=limit)


# -----------------------------------------------------------------------
# skills_by_category()
# -----------------------------------------------------------------------


class TestSkillsByCategory:
    """Flat list for one category, first-seen grouping otherwise."""

    def test_single_category(self, engine, sample_profile):
        result = engine.skills_by_category(sample_profile, category=SkillCategory.FRONTEND)
        assert _names(result) == ["javascript", "react"]

    def test_category_as_string(self, engine, sample_profile):
        result = engine.skills_by_category(sample_profile, category=" Database ")
        assert _names(result) == ["postgresql", "sqlite"]

    def test_category_with_no_skills(self, engine):
        profile = make_profile(skills=[make_skill("python", category="backend")])
        assert engine.skills_by_category(profile, category="mobile") == []

    def test_grouped_key_order_is_first_seen(self, engine, sample_profile):
        grouped = engine.skills_by_category(sample_profile)
        assert list(grouped) == [
            SkillCategory.BACKEND,
            SkillCategory.FRONTEND,
            SkillCategory.DATABASE,
            SkillCategory.DEVOPS,
            SkillCategory.MOBILE,
            SkillCategory.OTHER,
        ]

    def test_grouped_buckets_keep_order(self, engine):
        profile = make_profile(
            skills=[
                make_skill("vue", category="frontend"),
                make_skill("go", category="backend"),
                make_skill("css", category="frontend"),
                make_skill("html", category="frontend"),
            ]
        )
        grouped = engine.skills_by_category(profile)
        assert list(grouped) == [SkillCategory.FRONTEND, SkillCategory.BACKEND]
        assert _names(grouped[SkillCategory.FRONTEND]) == ["vue", "css", "html"]

    def test_grouped_omits_empty_categories(self, engine):
        profile = make_profile(skills=[make_skill("python", category="backend")])
        assert list(engine.skills_by_category(profile)) == [SkillCategory.BACKEND]

    def test_grouped_empty_profile(self, engine):
        assert engine.skills_by_category(make_profile()) == {}

    def test_unknown_category(self, engine, sample_profile):
        with pytest.raises(InvalidCategoryError, match="Invalid category: cloud"):
            engine.skills_by_category(sample_profile, category="cloud")


class TestWorkSkillMatching:
    """Work entries match on their skill tags as well as text fields."""

    def test_work_skill_tag(self, engine):
        profile = make_profile(
            work=[
                make_work(company="Initech", skills=["terraform"]),
                make_work(company="Globex", description="Kubernetes operators"),
            ]
        )
        result = engine.search(profile, "terra")
        assert [w.company for w in result.work] == ["Initech"]
