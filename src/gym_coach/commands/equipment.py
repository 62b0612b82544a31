"""Equipment configuration commands."""

import click

from ..db.repositories import AvailableWeightRepository, GymEquipmentRepository
from ..models.equipment import AvailableWeight, GymEquipment, WeightType
from ..models.exercises import Equipment
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    format_table,
    format_weight,
    require_profile,
)

EQUIPMENT_CHOICES = click.Choice([e.value for e in Equipment])


def parse_weights(raw: str) -> list[float]:
    """Parse weights given as '2.5,5,7.5' or a range '5-40:2.5'."""
    weights: list[float] = []
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            if "-" in part and ":" in part:
                bounds, step = part.split(":")
                low, high = (float(b) for b in bounds.split("-"))
                current = low
                while current <= high + 1e-9:
                    weights.append(round(current, 2))
                    current += float(step)
            else:
                weights.append(float(part))
        except ValueError as e:
            raise click.BadParameter(f"Cannot parse weight '{part}'", param_hint="weights") from e
    if any(w < 0 for w in weights):
        raise click.BadParameter("Weights cannot be negative", param_hint="weights")
    return sorted(set(weights))


@click.group()
def equipment():
    """Manage the equipment in your gym.

    Exercises whose equipment is missing are never programmed.
    """
    pass


@equipment.command("add")
@click.argument("names", nargs=-1, required=True, type=EQUIPMENT_CHOICES)
@click.pass_context
@async_command
async def add(ctx: click.Context, names: tuple[str, ...]):
    """Add one or more pieces of equipment."""
    user = await require_profile(ctx)

    repo = GymEquipmentRepository()
    for name in names:
        await repo.upsert(GymEquipment(user_id=user.id, name=Equipment(name)))
    echo_success(f"Added {', '.join(names)}")


@equipment.command("list")
@click.pass_context
@async_command
async def list_equipment(ctx: click.Context):
    """List your equipment and weights."""
    user = await require_profile(ctx)

    items = await GymEquipmentRepository().list_for_user(user.id)
    if not items:
        echo_info("No equipment recorded. Only bodyweight exercises can be programmed.")
    else:
        rows = [[eq.name.value, "yes" if eq.is_available else "no"] for eq in items]
        click.echo()
        click.echo(format_table(["Equipment", "Available"], rows))

    weights = await AvailableWeightRepository().get_weights(user.id)
    click.echo()
    if weights:
        click.echo("Weights: " + ", ".join(format_weight(w) for w in weights))
    else:
        click.echo("Weights: not set (loads are rounded to 2.5kg steps)")


@equipment.command("toggle")
@click.argument("name", type=EQUIPMENT_CHOICES)
@click.option("--off", is_flag=True, help="Mark as unavailable instead")
@click.pass_context
@async_command
async def toggle(ctx: click.Context, name: str, off: bool):
    """Mark equipment as available (or unavailable with --off)."""
    user = await require_profile(ctx)

    found = await GymEquipmentRepository().set_available(user.id, Equipment(name), not off)
    if not found:
        echo_error(f"'{name}' is not in your equipment list. Add it first.")
        ctx.exit(1)
    echo_success(f"{name} is now {'unavailable' if off else 'available'}")


@equipment.command("weights")
@click.argument("weights")
@click.option(
    "--type",
    "weight_type",
    type=click.Choice([t.value for t in WeightType]),
    default=WeightType.DUMBBELL.value,
    help="Where the weights come from",
)
@click.pass_context
@async_command
async def set_weights(ctx: click.Context, weights: str, weight_type: str):
    """Replace your selectable weights.

    Examples:

        gym-coach equipment weights "2.5,5,7.5,10,12.5"

        gym-coach equipment weights "5-40:2.5" --type barbell_plate
    """
    user = await require_profile(ctx)

    parsed = parse_weights(weights)
    await AvailableWeightRepository().replace_all(
        user.id,
        [AvailableWeight(user_id=user.id, weight_kg=w, weight_type=WeightType(weight_type)) for w in parsed],
    )
    echo_success(f"Saved {len(parsed)} weights")
