"""Profile store management subcommands (status, list, seed, load, update, export, activate, deactivate)."""

import json
from pathlib import Path
from typing import Annotated, NoReturn, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from portfolio_api.core import (
    DatabaseError,
    PortfolioError,
    Profile,
    ProfileNotFoundError,
    ProfileValidationError,
)
from portfolio_api.database import ProfileStore, sample_profile

console = Console()

manage_app = typer.Typer(no_args_is_help=True)


def _report(action: str, error: PortfolioError, hint: Optional[str] = None) -> NoReturn:
    console.print(f"[red]{action} failed:[/red] {error.message}")
    if error.details:
        console.print(f"  [dim]{error.details}[/dim]")
    if hint:
        console.print(f"  [dim italic]Hint: {hint}[/dim italic]")
    raise typer.Exit(code=1)


_BROKEN_HINT = (
    "Run 'portfolio manage deactivate', then store a fresh document "
    "with 'portfolio manage load FILE'."
)


def _open_store() -> ProfileStore:
    try:
        return ProfileStore()
    except DatabaseError as e:
        _report("Open", e, "Check DB_PROFILE_DB_PATH points at a writable location.")


def _timestamp(value: str) -> str:
    return value[:19].replace("T", " ")


def _read_document(path: Path) -> dict:
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        console.print(f"[red]Cannot read file:[/red] {path} ({e.strerror})")
        raise typer.Exit(code=1) from None
    except json.JSONDecodeError as e:
        console.print(f"[red]Not valid JSON:[/red] {path} ({e})")
        raise typer.Exit(code=1) from None
    if not isinstance(document, dict):
        console.print(f"[red]Expected a JSON object:[/red] {path}")
        raise typer.Exit(code=1)
    return document


def _store_profile(store: ProfileStore, profile: Profile, activate: bool) -> None:
    try:
        profile_id = store.create_profile(profile, activate=activate)
    except DatabaseError as e:
        _report(
            "Load",
            e,
            "Run 'portfolio manage list' to see stored profiles; "
            "use 'portfolio manage activate ID' to switch to an existing one.",
        )
    state = "[green]active[/green]" if activate else "[dim]inactive[/dim]"
    console.print(
        f"[green]Stored:[/green] profile #{profile_id} for {profile.name} "
        f"<{profile.email}> ({state})"
    )


@manage_app.command("status")
def status() -> None:
    """Show the active profile and store statistics."""
    store = _open_store()

    try:
        total = store.count()
        record = store.get_active_record()
        profile = store.get_active() if record is not None else None
    except DatabaseError as e:
        _report("Status", e, _BROKEN_HINT)

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="bold")
    table.add_column("Value")

    table.add_row("Database", Text(store.db_path, style="dim"))
    table.add_row("Profiles", Text(str(total), style="green" if total else "dim"))

    if profile is not None and record is not None:
        table.add_row("Active", Text(f"#{record.id} {profile.name} <{profile.email}>", style="cyan"))
        table.add_row("Skills", Text(str(len(profile.skills))))
        table.add_row("Projects", Text(str(len(profile.projects))))
        table.add_row("Work", Text(str(len(profile.work))))
        table.add_row("Education", Text(str(len(profile.education))))
        table.add_row("Updated", Text(_timestamp(record.updated_at), style="dim"))
    else:
        table.add_row("Active", Text("none", style="dim"))

    console.print(Panel(table, title="[bold]Profile Store[/bold]", expand=False))


@manage_app.command("list")
def list_profiles() -> None:
    """List every stored profile, including deactivated ones."""
    try:
        records = _open_store().list_profiles()
    except DatabaseError as e:
        _report("List", e)

    if not records:
        console.print("[yellow]No profiles found.[/yellow]")
        return

    table = Table(
        title="[bold]Stored Profiles[/bold]",
        border_style="dim",
        header_style="bold",
    )
    table.add_column("ID", justify="right", style="bold")
    table.add_column("Name", style="cyan")
    table.add_column("Email")
    table.add_column("Active", justify="center")
    table.add_column("Created", style="dim")
    table.add_column("Updated", style="dim")

    for r in records:
        table.add_row(
            str(r.id),
            r.name,
            r.email,
            Text("yes", style="green") if r.is_active else Text("no", style="dim"),
            _timestamp(r.created_at),
            _timestamp(r.updated_at),
        )

    console.print(table)


@manage_app.command("seed")
def seed() -> None:
    """Store the built-in sample profile and make it active."""
    _store_profile(_open_store(), sample_profile(), activate=True)


@manage_app.command("load")
def load(
    path: Annotated[Path, typer.Argument(help="JSON file holding a profile document.")],
    activate: Annotated[
        bool,
        typer.Option("--activate/--no-activate", help="Make the loaded profile active."),
    ] = True,
) -> None:
    """Store a profile document read from a JSON file."""
    document = _read_document(path)
    try:
        profile = Profile.from_dict(document)
    except ProfileValidationError as e:
        _report("Validation", e)
    _store_profile(_open_store(), profile, activate=activate)


@manage_app.command("update")
def update(
    path: Annotated[
        Path,
        typer.Argument(help="JSON file with the top-level fields to replace."),
    ],
) -> None:
    """Merge fields from a JSON file into the active profile."""
    changes = _read_document(path)
    try:
        profile = _open_store().update_active(changes)
    except ProfileNotFoundError as e:
        _report("Update", e, "Activate a profile first with 'portfolio manage activate ID'.")
    except PortfolioError as e:
        _report("Update", e)
    console.print(
        f"[green]Updated:[/green] {profile.name} <{profile.email}> "
        f"({', '.join(sorted(changes))})"
    )


@manage_app.command("export")
def export(
    path: Annotated[
        Optional[Path],
        typer.Argument(help="Output file. Prints to the terminal when omitted."),
    ] = None,
) -> None:
    """Write the active profile document as JSON."""
    try:
        profile = _open_store().get_active()
    except DatabaseError as e:
        _report("Export", e, _BROKEN_HINT)
    if profile is None:
        console.print("[red]Profile not found.[/red]")
        raise typer.Exit(code=1)

    if path is None:
        console.print_json(data=profile.to_dict())
        return
    path.write_text(json.dumps(profile.to_dict(), indent=2) + "\n", encoding="utf-8")
    console.print(f"[green]Exported:[/green] {profile.email} → {path}")


@manage_app.command("activate")
def activate(
    profile_id: Annotated[int, typer.Argument(help="ID shown by 'portfolio manage list'.")],
) -> None:
    """Make a stored profile the active one."""
    try:
        record = _open_store().set_active(profile_id)
    except DatabaseError as e:
        _report("Activation", e, "Run 'portfolio manage list' to see stored profile IDs.")
    console.print(f"[green]Active:[/green] #{record.id} {record.name} <{record.email}>")


@manage_app.command("deactivate")
def deactivate(
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Soft-delete the active profile (it stays in the store)."""
    store = _open_store()
    try:
        record = store.get_active_record()
    except DatabaseError as e:
        _report("Deactivation", e)
    if record is None:
        console.print("[red]Profile not found.[/red]")
        raise typer.Exit(code=1)

    if not yes:
        confirmed = typer.confirm(f"Deactivate profile #{record.id} ({record.email})?")
        if not confirmed:
            console.print("[dim]Cancelled.[/dim]")
            raise typer.Exit(code=0)

    try:
        store.deactivate()
    except DatabaseError as e:
        _report("Deactivation", e)
    console.print(f"[green]Deactivated:[/green] #{record.id} {record.email}")
