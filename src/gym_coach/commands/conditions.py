"""Health condition commands."""

import click

from ..config import CONTRAINDICATION_PAIN_THRESHOLD, PAIN_NO_PROGRESSION
from ..db.repositories import HealthConditionRepository, PainLogRepository
from ..engine.rest_day import RestDayVariant, generate_rest_day_routine
from ..models.exercises import BodyZone
from ..models.health import HealthCondition, PainContext, PainLog
from .base import (
    async_command,
    echo_info,
    echo_success,
    echo_warning,
    format_table,
    require_profile,
)

ZONE_CHOICES = click.Choice([z.value for z in BodyZone])


@click.group()
def conditions():
    """Track injuries and painful zones.

    Active conditions at pain 7 or more exclude contraindicated exercises
    from new programs; any active condition adds its rehab protocol to
    your sessions.
    """
    pass


@conditions.command("add")
@click.argument("zone", type=ZONE_CHOICES)
@click.argument("pain_level", type=click.IntRange(0, 10))
@click.option("--label", default="", help="Short name, e.g. 'Tennis elbow'")
@click.option("--diagnosis", default="", help="Diagnosis, if known")
@click.option("--since", default="", help="When it started")
@click.pass_context
@async_command
async def add(ctx: click.Context, zone: str, pain_level: int, label: str, diagnosis: str, since: str):
    """Add a condition on ZONE with a 0-10 PAIN_LEVEL."""
    user = await require_profile(ctx)

    condition = HealthCondition(
        user_id=user.id,
        body_zone=BodyZone(zone),
        pain_level=pain_level,
        label=label,
        diagnosis=diagnosis,
        since=since,
    )
    condition_id = await HealthConditionRepository().create(condition)
    await PainLogRepository().create(
        PainLog(
            user_id=user.id,
            zone=condition.body_zone,
            level=pain_level,
            context=PainContext.ONBOARDING,
        )
    )

    echo_success(f"Condition {condition_id} added on {zone} (pain {pain_level}/10)")
    if pain_level >= CONTRAINDICATION_PAIN_THRESHOLD:
        echo_warning("Contraindicated exercises will be left out of your next program.")


@conditions.command("list")
@click.option("--all", "show_all", is_flag=True, help="Include inactive conditions")
@click.pass_context
@async_command
async def list_conditions(ctx: click.Context, show_all: bool):
    """List your conditions."""
    user = await require_profile(ctx)

    found = await HealthConditionRepository().list_for_user(user.id, active_only=not show_all)
    if not found:
        echo_info("No conditions recorded.")
        return

    headers = ["ID", "Zone", "Pain", "Label", "Active"]
    rows = [
        [
            str(c.id),
            c.body_zone.value,
            f"{c.pain_level}/10",
            c.label or c.diagnosis or "-",
            "yes" if c.is_active else "no",
        ]
        for c in found
    ]
    click.echo()
    click.echo(format_table(headers, rows))


@conditions.command("deactivate")
@click.argument("condition_id", type=int)
@click.pass_context
@async_command
async def deactivate(ctx: click.Context, condition_id: int):
    """Mark a condition as resolved. History is kept."""
    await require_profile(ctx)

    await HealthConditionRepository().deactivate(condition_id)
    echo_success(f"Condition {condition_id} deactivated")


@conditions.command("rest-day")
@click.option(
    "--variant",
    type=click.Choice([v.value for v in RestDayVariant]),
    default=RestDayVariant.ALL.value,
    help="Limit the routine to upper or lower body zones",
)
@click.pass_context
@async_command
async def rest_day(ctx: click.Context, variant: str):
    """Show a short rehab routine for a rest day."""
    user = await require_profile(ctx)

    active = await HealthConditionRepository().list_for_user(user.id, active_only=True)
    recent = await PainLogRepository().list_for_user(user.id)
    accent = [log.zone for log in recent[:5] if log.level >= PAIN_NO_PROGRESSION]

    routine = generate_rest_day_routine(active, RestDayVariant(variant), accent_zones=accent)
    if not routine.exercises:
        echo_info("No rehab work for your active conditions. Enjoy the rest day.")
        return

    click.echo("\n" + click.style(f"Rest-day routine (~{routine.total_minutes} min)", bold=True))
    click.echo("=" * 40)
    for exercise in routine.exercises:
        click.echo(f"  {exercise.name}: {exercise.sets} x {exercise.reps}  [{exercise.protocol_name}]")
        if exercise.notes:
            click.echo(f"      {exercise.notes}")
