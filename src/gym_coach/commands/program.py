"""Program generation and display commands."""

import click

from ..db.repositories import ExerciseRepository, WorkoutProgramRepository
from ..engine.time_budget import estimate_session_minutes
from ..models.exercises import Exercise
from ..models.program import WorkoutProgram
from ..services.programs import regenerate_program
from .base import async_command, echo_info, echo_success, format_table, require_profile


def render_program(program: WorkoutProgram, catalog: dict[int, Exercise]) -> str:
    """Render every session as a table of prescriptions."""
    lines = [click.style(f"{program.name} ({program.type.value})", bold=True)]
    for session in program.sessions:
        intensity = session.intensity.value if session.intensity else "-"
        minutes = estimate_session_minutes(session.exercises)
        lines.append("")
        lines.append(f"{session.order}. {session.name} [{intensity}] ~{minutes} min")
        rows = []
        for pe in session.exercises:
            exercise = catalog.get(pe.exercise_id)
            reps = f"{pe.target_reps}s" if pe.is_time_based else str(pe.target_reps)
            rows.append(
                [
                    str(pe.order),
                    exercise.name if exercise else f"#{pe.exercise_id}",
                    f"{pe.sets} x {reps}",
                    f"{pe.rest_seconds}s",
                ]
            )
        lines.append(format_table(["#", "Exercise", "Sets", "Rest"], rows))
    return "\n".join(lines)


@click.group()
def program():
    """Generate and view your training program."""
    pass


@program.command("generate")
@click.option("--refresh", is_flag=True, help="Swap in different exercises where possible")
@click.pass_context
@async_command
async def generate(ctx: click.Context, refresh: bool):
    """Generate a new program from your profile, conditions and equipment.

    The new program replaces the active one.
    """
    user = await require_profile(ctx)

    generated = await regenerate_program(user.id, refresh=refresh)
    catalog = {ex.id: ex for ex in await ExerciseRepository().list_all()}

    echo_success(f"Program {generated.id} is now active")
    click.echo()
    click.echo(render_program(generated, catalog))


@program.command("show")
@click.pass_context
@async_command
async def show(ctx: click.Context):
    """Show the active program."""
    user = await require_profile(ctx)

    active = await WorkoutProgramRepository().get_active(user.id)
    if active is None:
        echo_info("No active program. Generate one with 'gym-coach program generate'")
        return

    catalog = {ex.id: ex for ex in await ExerciseRepository().list_all()}
    click.echo()
    click.echo(render_program(active, catalog))
