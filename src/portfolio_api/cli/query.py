"""Query commands: search, projects, skills and top-skills."""

from typing import Annotated, NoReturn, Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from portfolio_api.config import parse_category
from portfolio_api.core import (
    DatabaseError,
    Profile,
    SearchError,
    Skill,
    SkillLevel,
)
from portfolio_api.database import ProfileStore
from portfolio_api.search import SearchEngine

console = Console()

# Maximum characters of a description shown per table row.
_DESCRIPTION_PREVIEW_LIMIT = 120

_LEVEL_STYLES = {
    SkillLevel.EXPERT: "bold green",
    SkillLevel.ADVANCED: "green",
    SkillLevel.INTERMEDIATE: "yellow",
    SkillLevel.BEGINNER: "dim",
}


def _preview(text: Optional[str]) -> str:
    if not text:
        return ""
    if len(text) > _DESCRIPTION_PREVIEW_LIMIT:
        return text[:_DESCRIPTION_PREVIEW_LIMIT] + "..."
    return text


def _level_text(skill: Skill) -> Text:
    return Text(skill.level.value, style=_LEVEL_STYLES[skill.level])


def _load_profile() -> Profile:
    """Load the active profile or exit with a hint."""
    try:
        profile = ProfileStore().get_active()
    except DatabaseError as e:
        console.print(f"[red]Could not read profile store:[/red] {e.message}")
        if e.details:
            console.print(f"  [dim]{e.details}[/dim]")
        raise typer.Exit(code=1) from None

    if profile is None:
        console.print("[red]Profile not found.[/red]")
        console.print(
            "  [dim italic]Hint: Load one with 'portfolio manage seed' or "
            "'portfolio manage load FILE'.[/dim italic]"
        )
        raise typer.Exit(code=1)
    return profile


def _fail(error: SearchError) -> NoReturn:
    console.print(f"[red]Invalid request:[/red] {error.message}")
    if error.details:
        console.print(f"  [dim]{error.details}[/dim]")
    raise typer.Exit(code=1)


def _skills_table(skills: list[Skill], title: str) -> Table:
    table = Table(title=f"[bold]{title}[/bold]", border_style="dim", header_style="bold")
    table.add_column("#", style="bold", width=3, justify="right")
    table.add_column("Skill", style="cyan")
    table.add_column("Level")
    table.add_column("Category", style="dim")
    for i, skill in enumerate(skills, 1):
        table.add_row(str(i), skill.name, _level_text(skill), skill.category.value)
    return table


def search(
    query: Annotated[str, typer.Argument(help="Text to look for.")],
) -> None:
    """
    Search the profile, projects, skills, work history and education.

    Examples:

        portfolio search react

        portfolio search "computer science"
    """
    profile = _load_profile()
    try:
        result = SearchEngine().search(profile, query)
    except SearchError as e:
        _fail(e)

    if result.is_empty:
        console.print(f"[yellow]No matches for:[/yellow] [italic]{query}[/italic]")
        return

    console.print(
        f"\n[bold]Found {result.total_matches} match(es)[/bold] for: "
        f"[italic]{result.query}[/italic]\n"
    )

    if result.profile is not None:
        summary = result.profile
        console.print(f"[bold cyan]{summary.name}[/bold cyan]  {summary.title or ''}")
        if summary.bio:
            console.print(f"  [dim]{_preview(summary.bio)}[/dim]")
        console.print()

    if result.projects:
        table = Table(title="[bold]Projects[/bold]", border_style="dim", expand=True)
        table.add_column("Title", style="cyan", no_wrap=True)
        table.add_column("Status", style="green")
        table.add_column("Skills", style="dim")
        table.add_column("Description")
        for project in result.projects:
            table.add_row(
                project.title,
                project.status.value,
                ", ".join(project.skills),
                _preview(project.description),
            )
        console.print(table)

    if result.skills:
        console.print(_skills_table(result.skills, "Skills"))

    if result.work:
        table = Table(title="[bold]Work[/bold]", border_style="dim", expand=True)
        table.add_column("Company", style="cyan")
        table.add_column("Position")
        table.add_column("Period", style="dim")
        for entry in result.work:
            end = "present" if entry.current else (entry.end_date or "")
            table.add_row(entry.company, entry.position, f"{entry.start_date} – {end}")
        console.print(table)

    if result.education:
        table = Table(title="[bold]Education[/bold]", border_style="dim", expand=True)
        table.add_column("Institution", style="cyan")
        table.add_column("Degree")
        table.add_column("Field", style="dim")
        table.add_column("GPA", justify="right")
        for entry in result.education:
            table.add_row(
                entry.institution,
                entry.degree,
                entry.field or "",
                f"{entry.gpa:.2f}" if entry.gpa is not None else "",
            )
        console.print(table)


def projects(
    skill: Annotated[
        Optional[str],
        typer.Option("--skill", "-s", help="Only projects using a matching skill."),
    ] = None,
    page: Annotated[int, typer.Option("--page", "-p", help="Page number.")] = 1,
    limit: Annotated[
        Optional[int],
        typer.Option("--limit", "-l", help="Projects per page."),
    ] = None,
) -> None:
    """List projects, optionally filtered by skill."""
    profile = _load_profile()
    try:
        paged = SearchEngine().filter_projects_by_skill(
            profile, skill=skill, page=page, limit=limit
        )
    except SearchError as e:
        _fail(e)

    pagination = paged.pagination
    if not paged.data:
        console.print(
            f"[yellow]No projects on page {pagination.page}[/yellow] "
            f"({pagination.total} matching in total)."
        )
        return

    table = Table(
        title=f"[bold]Projects[/bold] (page {pagination.page}/{pagination.pages}, "
        f"{pagination.total} total)",
        border_style="dim",
        header_style="bold",
        show_lines=True,
    )
    table.add_column("Title", style="cyan")
    table.add_column("Status", style="green")
    table.add_column("Skills", style="dim")
    table.add_column("Links")
    for project in paged.data:
        table.add_row(
            project.title,
            project.status.value,
            ", ".join(project.skills),
            "\n".join(link for link in project.links if link),
        )
    console.print(table)


def skills(
    category: Annotated[
        Optional[str],
        typer.Option("--category", "-c", help="Only skills in this category."),
    ] = None,
) -> None:
    """List skills, grouped by category unless one is given."""
    if category is not None:
        try:
            category = parse_category(category)
        except ValueError as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(code=1) from None

    profile = _load_profile()
    result = SearchEngine().skills_by_category(profile, category=category)

    if isinstance(result, list):
        if not result:
            console.print(f"[yellow]No {category} skills.[/yellow]")
            return
        console.print(_skills_table(result, f"{category.capitalize()} skills"))
        return

    if not result:
        console.print("[yellow]No skills recorded.[/yellow]")
        return
    for cat, bucket in result.items():
        console.print(_skills_table(bucket, cat.value.capitalize()))


def top_skills(
    limit: Annotated[
        Optional[int],
        typer.Option("--limit", "-l", help="Number of skills to show."),
    ] = None,
) -> None:
    """Show the strongest skills, expert first."""
    profile = _load_profile()
    try:
        ranked = SearchEngine().top_skills(profile, limit=limit)
    except SearchError as e:
        _fail(e)

    if not ranked:
        console.print("[yellow]No skills recorded.[/yellow]")
        return
    console.print(_skills_table(ranked, "Top skills"))
