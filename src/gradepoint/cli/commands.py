"""CLI commands for gradepoint.

Commands:
- serve: Run the Web API with uvicorn
- calc: Compute a GPA from courses given on the command line
- scale: Show the grade scale
"""

from __future__ import annotations

import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from gradepoint.config.app_config import load_app_config
from gradepoint.core.calculator import (
    UNKNOWN_GRADE,
    GradeValidationError,
    grade_options,
    grade_points,
    grade_value_for_letter,
    letter_for_grade_value,
    summarize,
)
from gradepoint.core.models import CourseInput
from gradepoint.db.record_store import RecordStore

app = typer.Typer(
    name="gpa",
    help="Track courses by semester and calculate GPA.",
    no_args_is_help=True,
)

console = Console()


class CourseArgError(ValueError):
    """Raised when a --course argument cannot be parsed."""


def parse_course_arg(arg: str) -> CourseInput:
    """Parse "Name:credits:grade" into a CourseInput.

    The grade may be a letter ("B+") or a scale value ("3.3").

    Raises:
        CourseArgError: If the argument is malformed or the grade is unknown
    """
    parts = arg.rsplit(":", 2)
    if len(parts) != 3 or not parts[0].strip():
        raise CourseArgError(f"Expected NAME:CREDITS:GRADE, got '{arg}'")

    name, credits_raw, grade_raw = (p.strip() for p in parts)

    try:
        credit_hours = float(credits_raw)
    except ValueError:
        raise CourseArgError(f"Credit hours must be a number, got '{credits_raw}'") from None

    try:
        grade_value: float | None = float(grade_raw)
    except ValueError:
        grade_value = grade_value_for_letter(grade_raw)

    if grade_value is None:
        raise CourseArgError(f"Unknown grade '{grade_raw}'")

    letter = letter_for_grade_value(grade_value)
    if letter == UNKNOWN_GRADE:
        raise CourseArgError(f"Grade value {grade_value} is not on the grade scale")

    return CourseInput(
        name=name,
        credit_hours=credit_hours,
        grade=letter,
        grade_value=grade_value,
        grade_points=grade_points(credit_hours, grade_value),
    )


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address"),
    port: int | None = typer.Option(None, "--port", "-p", help="Port"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the Web API server."""
    config = load_app_config()
    uvicorn.run(
        "gradepoint.web.api:create_app",
        factory=True,
        host=host or config.server.host,
        port=port or config.server.port,
        reload=reload,
    )


@app.command()
def calc(
    course: list[str] = typer.Option(
        ...,
        "--course",
        "-c",
        help="Course as NAME:CREDITS:GRADE (repeatable)",
    ),
) -> None:
    """Calculate the cumulative GPA of the given courses."""
    store = RecordStore()

    try:
        for arg in course:
            store.create_course(parse_course_arg(arg))
        summary = summarize(store.get_courses())
    except (CourseArgError, GradeValidationError) as e:
        console.print(f"[red]✗ {e}[/red]")
        raise typer.Exit(code=1)

    table = Table(title="Courses")
    table.add_column("#", justify="right")
    table.add_column("Course")
    table.add_column("Credits", justify="right")
    table.add_column("Grade")
    table.add_column("Points", justify="right")

    for c in store.get_courses():
        table.add_row(
            str(c.id),
            c.name,
            f"{c.credit_hours:g}",
            c.grade,
            f"{c.grade_points:.2f}",
        )

    console.print(table)
    console.print(
        f"\n[bold]GPA:[/bold] {summary.gpa:.2f} ({summary.letter_grade})"
        f"  [dim]credits:[/dim] {summary.total_credit_hours:g}"
        f"  [dim]points:[/dim] {summary.total_grade_points:.2f}"
    )


@app.command()
def scale() -> None:
    """Show the grade scale."""
    table = Table(title="Grade scale")
    table.add_column("Grade")
    table.add_column("Value", justify="right")

    for option in grade_options():
        table.add_row(option.grade, f"{option.value:.1f}")

    console.print(table)


if __name__ == "__main__":
    app()
