"""Exercise catalog commands."""

import click

from ..db.repositories import ExerciseRepository
from ..models.exercises import ExerciseCategory
from ..utils.exercise_utils import find_matching_exercise, group_exercises_by_category
from .base import async_command, echo_error, ensure_initialized, format_table


@click.group()
def exercises():
    """Browse the exercise catalog."""
    pass


@exercises.command("list")
@click.option(
    "--category",
    type=click.Choice([c.value for c in ExerciseCategory]),
    help="Only show one category",
)
@click.pass_context
@async_command
async def list_exercises(ctx: click.Context, category: str | None):
    """List catalog exercises by category."""
    ensure_initialized(ctx)

    grouped = group_exercises_by_category(await ExerciseRepository().list_all())
    for name, items in grouped.items():
        if not items or (category and name != category):
            continue
        click.echo("\n" + click.style(name.capitalize(), bold=True))
        rows = [
            [
                str(ex.id),
                ex.name,
                ", ".join(eq.value for eq in ex.equipment_needed) or "bodyweight",
            ]
            for ex in items
        ]
        click.echo(format_table(["ID", "Name", "Equipment"], rows))


@exercises.command("show")
@click.argument("name")
@click.pass_context
@async_command
async def show(ctx: click.Context, name: str):
    """Show one exercise, matched loosely by NAME (e.g. 'db row')."""
    ensure_initialized(ctx)

    exercise = find_matching_exercise(name, await ExerciseRepository().list_all())
    if exercise is None:
        echo_error(f"No exercise matches '{name}'")
        ctx.exit(1)

    click.echo("\n" + click.style(f"{exercise.name} (#{exercise.id})", bold=True))
    click.echo(f"Category: {exercise.category.value}")
    click.echo(f"Primary: {', '.join(m.value for m in exercise.primary_muscles)}")
    if exercise.secondary_muscles:
        click.echo(f"Secondary: {', '.join(m.value for m in exercise.secondary_muscles)}")
    click.echo(
        f"Equipment: {', '.join(eq.value for eq in exercise.equipment_needed) or 'bodyweight'}"
    )
    if exercise.contraindications:
        click.echo(f"Avoid with pain in: {', '.join(z.value for z in exercise.contraindications)}")
    if exercise.alternatives:
        click.echo(f"Alternatives: {', '.join(exercise.alternatives)}")
    if exercise.instructions:
        click.echo(f"\n{exercise.instructions}")
