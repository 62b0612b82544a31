"""Initialize project command."""

from pathlib import Path

import click

from ..config import get_data_dir
from ..data.exercise_loader import seed_exercises_from_json
from ..db import get_db_path, init_db, seed_exercises
from .base import async_command, echo_info, echo_success


@click.command()
@click.option(
    "--catalog",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Seed from a JSON exercise catalog instead of the built-in one.",
)
@async_command
async def init(catalog: Path | None):
    """Initialize the gym-coach data directory and database.

    Creates the SQLite schema and seeds the exercise catalog. Safe to run
    again: existing exercises are kept.
    """
    data_dir = get_data_dir()
    db_path = get_db_path(data_dir)

    echo_info(f"Initializing gym-coach in {data_dir}")

    await init_db(db_path)
    echo_success("Database initialized")

    if catalog is not None:
        count = await seed_exercises_from_json(catalog, db_path)
        echo_success(f"Exercise catalog populated from {catalog.name} ({count} exercises)")
    else:
        count = await seed_exercises(db_path)
        echo_success(f"Exercise catalog populated ({count} exercises)")

    click.echo()
    click.echo("gym-coach is ready to use!")
    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Create your profile:      gym-coach profile setup")
    click.echo("  2. List your equipment:      gym-coach equipment add barbell bench squat_rack")
    click.echo("  3. Note any injuries:        gym-coach conditions add knee_right 4")
    click.echo("  4. Generate a program:       gym-coach program generate")
    click.echo("  5. See your next workout:    gym-coach session preview")
