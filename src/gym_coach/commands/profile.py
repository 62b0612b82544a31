"""User profile commands."""

import click

from ..db.repositories import UserProfileRepository
from ..models.user_profile import Goal, Sex, UserProfile
from .base import async_command, echo_info, echo_success, ensure_initialized, require_profile

GOAL_CHOICES = [g.value for g in Goal]


def _parse_goals(raw: str) -> list[Goal]:
    """Parse a comma-separated goal list, ignoring blanks."""
    goals = []
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        if part not in GOAL_CHOICES:
            raise click.BadParameter(
                f"'{part}' is not one of {', '.join(GOAL_CHOICES)}", param_hint="goals"
            )
        goals.append(Goal(part))
    return goals


@click.group()
def profile():
    """Create and view your training profile."""
    pass


@profile.command("setup")
@click.pass_context
@async_command
async def setup(ctx: click.Context):
    """Interactive onboarding questionnaire.

    Asks for schedule, goals and body measurements. Running it again
    updates the existing profile.
    """
    ensure_initialized(ctx)

    repo = UserProfileRepository()
    existing = await repo.get_latest()

    click.echo("\n" + click.style("Profile Setup", bold=True))
    click.echo("=" * 40)
    click.echo()

    name = click.prompt("Name", default=existing.name if existing else "Athlete")
    days = click.prompt(
        "Training days per week",
        type=click.IntRange(1, 7),
        default=existing.days_per_week if existing else 3,
    )
    minutes = click.prompt(
        "Minutes per session",
        type=click.IntRange(15, 240),
        default=existing.minutes_per_session if existing else 60,
    )

    click.echo(f"\nGoals: {', '.join(GOAL_CHOICES)}")
    default_goals = ",".join(g.value for g in existing.goals) if existing else "muscle_gain"
    goals = _parse_goals(click.prompt("Goals (comma separated)", default=default_goals))

    weight = click.prompt(
        "Body weight in kg (0 to skip)",
        type=click.FloatRange(0, 400),
        default=(existing.weight_kg or 0.0) if existing else 0.0,
    )
    height = click.prompt(
        "Height in cm (0 to skip)",
        type=click.FloatRange(0, 260),
        default=(existing.height_cm or 0.0) if existing else 0.0,
    )
    age = click.prompt(
        "Age (0 to skip)",
        type=click.IntRange(0, 120),
        default=(existing.age or 0) if existing else 0,
    )
    sex = click.prompt(
        "Sex",
        type=click.Choice([s.value for s in Sex] + ["skip"]),
        default=existing.sex.value if existing and existing.sex else "skip",
    )

    user = UserProfile(
        name=name,
        days_per_week=days,
        minutes_per_session=minutes,
        goals=goals,
        weight_kg=weight or None,
        height_cm=height or None,
        age=age or None,
        sex=Sex(sex) if sex != "skip" else None,
    )

    if existing:
        user.id = existing.id
        await repo.update(user)
        echo_success(f"Profile {user.id} updated")
    else:
        user.id = await repo.create(user)
        echo_success(f"Profile saved with ID: {user.id}")

    click.echo()
    click.echo(user.get_summary())
    if existing and days != existing.days_per_week:
        echo_info("Schedule changed. Run 'gym-coach program generate' for a matching program.")


@profile.command("show")
@click.pass_context
@async_command
async def show(ctx: click.Context):
    """Display the current profile."""
    user = await require_profile(ctx)

    click.echo("\n" + click.style(f"Profile #{user.id}", bold=True))
    click.echo("=" * 40)
    click.echo(user.get_summary())
