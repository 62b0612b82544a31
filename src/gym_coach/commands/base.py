"""Shared CLI utilities."""

import asyncio
from functools import wraps

import click

from ..db import get_db_path
from ..db.repositories import UserProfileRepository
from ..errors import GymCoachError
from ..models.user_profile import UserProfile


def async_command(f):
    """Decorator to run async Click commands.

    GymCoachError is reported as an error message with exit status 1.
    """

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return asyncio.run(f(*args, **kwargs))
        except GymCoachError as e:
            echo_error(str(e))
            raise SystemExit(1) from e

    return wrapper


def ensure_initialized(ctx: click.Context) -> None:
    """Ensure the database is initialized."""
    db_path = get_db_path()
    if not db_path.exists():
        click.echo(
            click.style("Error: ", fg="red")
            + "Project not initialized. Run 'gym-coach init' first."
        )
        ctx.exit(1)


async def require_profile(ctx: click.Context) -> UserProfile:
    """Load the current profile or exit with a hint."""
    ensure_initialized(ctx)
    profile = await UserProfileRepository().get_latest()
    if not profile:
        echo_error("No user profile found. Run 'gym-coach profile setup' first.")
        ctx.exit(1)
    return profile


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)


def format_weight(weight_kg: float) -> str:
    """Format a load, showing bodyweight for zero."""
    if weight_kg <= 0:
        return "bodyweight"
    return f"{weight_kg:g}kg"


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    # Calculate column widths
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = []

    header_line = ""
    for i, h in enumerate(headers):
        header_line += h.ljust(widths[i] + padding)
    lines.append(header_line)

    sep_line = ""
    for w in widths:
        sep_line += "-" * w + " " * padding
    lines.append(sep_line)

    for row in rows:
        row_line = ""
        for i, cell in enumerate(row):
            row_line += str(cell).ljust(widths[i] + padding)
        lines.append(row_line)

    return "\n".join(lines)
