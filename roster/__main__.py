"""CLI for the roster record store.

Usage:
    python -m roster list                              # Show every student
    python -m roster add R1 "Alice" --course BCA       # Add a student
    python -m roster update R1 --name ... --course ... --grade ... --email ... --contact ...
    python -m roster delete R1                         # Remove (asks first)
    python -m roster show r1                           # One student, any case
    python -m roster search alice                      # Filter across all fields
    python -m roster save                              # Rewrite the backing file
    python -m roster courses                           # Suggested course names
"""

from __future__ import annotations

import json
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from roster.config import resolve_data_file
from roster.display import render_courses, render_record, render_roster, render_status
from roster.errors import RosterError
from roster.models import SUGGESTED_COURSES, StudentRecord
from roster.store import RecordStore

app = typer.Typer(
    name="roster",
    help="Maintain a roster of students in a flat text file",
    no_args_is_help=True,
)
console = Console(stderr=True)


def _store(ctx: typer.Context) -> RecordStore:
    return ctx.obj


def _fail(e: RosterError) -> None:
    console.print(f"[red]{escape(str(e))}[/red]")
    raise typer.Exit(1)


def _warn_delimiter(record: StudentRecord) -> None:
    if record.has_delimiter():
        console.print(
            "[yellow]Warning: a value contains a comma; "
            "this record will not load back correctly.[/yellow]"
        )


def _print_json(records: list[StudentRecord]) -> None:
    typer.echo(json.dumps([r.to_dict() for r in records], indent=2))


@app.callback()
def main(
    ctx: typer.Context,
    file: Optional[str] = typer.Option(
        None, "--file", "-f", help="Backing file (default: $ROSTER_FILE or students.txt)"
    ),
) -> None:
    """Load the roster once before any command runs."""
    store = RecordStore(resolve_data_file(file))
    try:
        store.load_all()
    except RosterError as e:
        _fail(e)
    ctx.obj = store


@app.command("list")
def cmd_list(
    ctx: typer.Context,
    as_json: bool = typer.Option(False, "--json", help="Print records as JSON to stdout"),
) -> None:
    """Show every student in store order."""
    store = _store(ctx)
    if as_json:
        _print_json(store.records)
        return
    render_roster(store.records, console)


@app.command("add")
def cmd_add(
    ctx: typer.Context,
    roll_number: str = typer.Argument(help="Roll number (unique, any case)"),
    name: str = typer.Argument(help="Student name"),
    course: str = typer.Option(SUGGESTED_COURSES[0], "--course", "-c", help="Course / major (free text)"),
    grade: str = typer.Option("", "--grade", "-g", help="Grade"),
    email: str = typer.Option("", "--email", "-e", help="Email address"),
    contact: str = typer.Option("", "--contact", help="Contact number"),
) -> None:
    """Add a new student."""
    store = _store(ctx)
    record = StudentRecord(
        roll_number=roll_number.strip(),
        name=name.strip(),
        course=course.strip(),
        grade=grade.strip(),
        email=email.strip(),
        contact=contact.strip(),
    )
    try:
        store.add(record)
    except RosterError as e:
        _fail(e)
    _warn_delimiter(record)
    console.print("[green]Student Added Successfully![/green]")
    render_status(store.count, console)


@app.command("update")
def cmd_update(
    ctx: typer.Context,
    roll_number: str = typer.Argument(help="Roll number of the student to edit (cannot change)"),
    name: str = typer.Option(..., "--name", "-n", help="Student name"),
    course: str = typer.Option(..., "--course", "-c", help="Course / major"),
    grade: str = typer.Option(..., "--grade", "-g", help="Grade"),
    email: str = typer.Option(..., "--email", "-e", help="Email address"),
    contact: str = typer.Option(..., "--contact", help="Contact number"),
) -> None:
    """Replace every field of a student except the roll number."""
    store = _store(ctx)
    try:
        record = store.update(
            roll_number.strip(),
            name=name.strip(),
            course=course.strip(),
            grade=grade.strip(),
            email=email.strip(),
            contact=contact.strip(),
        )
    except RosterError as e:
        _fail(e)
    _warn_delimiter(record)
    console.print("[green]Student Updated![/green]")
    render_status(store.count, console)


@app.command("delete")
def cmd_delete(
    ctx: typer.Context,
    roll_number: str = typer.Argument(help="Roll number to remove"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt"),
) -> None:
    """Delete a student."""
    store = _store(ctx)
    roll_number = roll_number.strip()
    if not roll_number:
        console.print("[red]No student selected.[/red]")
        raise typer.Exit(1)
    if not yes and not typer.confirm(f"Delete student {roll_number}?"):
        console.print("[dim]Cancelled.[/dim]")
        raise typer.Exit(0)
    try:
        store.delete(roll_number)
    except RosterError as e:
        _fail(e)
    console.print(f"[green]Deleted student {escape(roll_number)}.[/green]")
    render_status(store.count, console)


@app.command("show")
def cmd_show(
    ctx: typer.Context,
    roll_number: str = typer.Argument(help="Roll number (any case)"),
    as_json: bool = typer.Option(False, "--json", help="Print the record as JSON to stdout"),
) -> None:
    """Show one student."""
    store = _store(ctx)
    try:
        record = store.get(roll_number.strip())
    except RosterError as e:
        _fail(e)
    if as_json:
        typer.echo(json.dumps(record.to_dict(), indent=2))
        return
    render_record(record, console)


@app.command("search")
def cmd_search(
    ctx: typer.Context,
    query: str = typer.Argument("", help="Text to look for in any field (case-insensitive)"),
    as_json: bool = typer.Option(False, "--json", help="Print matches as JSON to stdout"),
) -> None:
    """Show students where any field contains QUERY."""
    store = _store(ctx)
    matches = list(store.search(query))
    if as_json:
        _print_json(matches)
        return
    title = f"Search: {escape(query)}" if query.strip() else "Student Records"
    render_roster(matches, console, title=title, total=store.count)


@app.command("save")
def cmd_save(ctx: typer.Context) -> None:
    """Rewrite the backing file from the current roster."""
    store = _store(ctx)
    try:
        store.save_all()
    except RosterError as e:
        _fail(e)
    console.print(f"Data Saved! ({escape(str(store.path))})")


@app.command("courses")
def cmd_courses() -> None:
    """List suggested course names."""
    render_courses(console)


if __name__ == "__main__":
    app()
