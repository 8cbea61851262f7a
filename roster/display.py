"""Roster display — renders Rich tables for the CLI.

Columns follow the original form's table: Roll No, Name, Course, Grade,
Email, Contact. Every listing ends with the total-students status line.
"""

from __future__ import annotations

from typing import Iterable

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from roster.models import SUGGESTED_COURSES, StudentRecord

_COLUMNS = [
    ("Roll No", "green"),
    ("Name", "bold"),
    ("Course", "cyan"),
    ("Grade", "yellow"),
    ("Email", "white"),
    ("Contact", "white"),
]

_LABELS = ["Roll No", "Name", "Course / Major", "Grade", "Email", "Contact"]


def _blank(value: str) -> str:
    """Show empty fields as a dim placeholder."""
    return value if value else "[dim]--[/dim]"


def render_status(count: int, console: Console) -> None:
    """Print the status line."""
    console.print(f"[italic]Total Students: {count}[/italic]")


def render_roster(
    records: Iterable[StudentRecord],
    console: Console,
    title: str = "Student Records",
    total: int | None = None,
) -> None:
    """Render a table of records in the order given.

    Args:
        records: Records to show (already filtered, if filtering applies).
        console: Destination console.
        title: Table title.
        total: Roster size for the status line; defaults to rows shown.
    """
    rows = list(records)

    table = Table(title=title, show_header=True, header_style="bold")
    for label, style in _COLUMNS:
        table.add_column(label, style=style)

    for record in rows:
        table.add_row(*(_blank(escape(v)) for v in record.fields()))

    if not rows:
        console.print("[yellow]No students found.[/yellow]")
    else:
        console.print()
        console.print(table)
        console.print()
    render_status(total if total is not None else len(rows), console)


def render_record(record: StudentRecord, console: Console) -> None:
    """Render one record as a two-column field/value table."""
    table = Table(title=f"Student {escape(record.roll_number)}", show_header=False)
    table.add_column("Field", style="dim", min_width=14)
    table.add_column("Value")

    for label, value in zip(_LABELS, record.fields()):
        table.add_row(label, _blank(escape(value)))

    console.print()
    console.print(table)
    console.print()


def render_courses(console: Console) -> None:
    """List the suggested courses (any other course text is accepted too)."""
    table = Table(title="Suggested Courses", show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Course", style="cyan")
    for i, course in enumerate(SUGGESTED_COURSES, start=1):
        table.add_row(str(i), course)

    console.print()
    console.print(table)
    console.print()
