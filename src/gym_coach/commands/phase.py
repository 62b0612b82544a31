"""Training phase commands."""

import click

from ..db.repositories import TrainingPhaseRepository
from ..engine.progression import should_deload
from ..models.progress import TrainingPhase
from ..services.workout import current_phase, recommend_phase
from .base import async_command, echo_info, echo_success, echo_warning, require_profile


@click.group()
def phase():
    """View and change your training phase."""
    pass


@phase.command("show")
@click.pass_context
@async_command
async def show(ctx: click.Context):
    """Show the current phase and the recommendation for next week."""
    user = await require_profile(ctx)

    record = await current_phase(user.id)
    if record is None:
        echo_info("No phase started yet. Your first finished session starts hypertrophy.")
        return

    click.echo(
        f"Phase: {record.phase.value}, week {record.week_count} "
        f"(since {record.started_at:%Y-%m-%d})"
    )
    if should_deload(record.week_count) and record.phase != TrainingPhase.DELOAD:
        echo_warning("A deload is due.")

    recommended = await recommend_phase(user.id)
    if recommended != record.phase:
        echo_info(f"Ready to move on: 'gym-coach phase start {recommended.value}'")


@phase.command("start")
@click.argument(
    "name",
    type=click.Choice([p.value for p in TrainingPhase if p != TrainingPhase.DELOAD]),
)
@click.pass_context
@async_command
async def start(ctx: click.Context, name: str):
    """Close the current phase and start NAME.

    Deloads are not phases; use 'gym-coach session run --deload' for a lighter week.
    """
    user = await require_profile(ctx)

    await TrainingPhaseRepository().start_phase(user.id, TrainingPhase(name))
    echo_success(f"Started {name} phase")
