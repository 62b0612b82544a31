"""Workout session commands."""

import time
from datetime import datetime

import click

from ..config import SET_EXECUTION_SECONDS
from ..engine.filler import FillerSuggestion, suggest_filler
from ..engine.pain_feedback import PainFeedbackEntry
from ..models.exercises import BodyZone
from ..models.progress import SessionSet, SkipReason, TrainingPhase
from ..services.workout import SessionPreview, finish_session, preview_next_session
from ..utils.exercise_utils import find_matching_exercise
from .base import (
    async_command,
    echo_info,
    echo_success,
    echo_warning,
    format_table,
    format_weight,
    require_profile,
)

ZONE_CHOICES = [z.value for z in BodyZone]


def render_preview(preview: SessionPreview) -> str:
    """Render a session preview: warm-up, working sets, rehab and cooldown."""
    engine = preview.engine
    integrated = preview.integrated
    intensity = engine.intensity.value if engine.intensity else "-"
    lines = [
        click.style(f"{engine.session.name} [{intensity}]", bold=True)
        + f"  phase: {preview.phase.value}"
    ]

    if integrated.warmup_rehab:
        lines.append("\nRehab warm-up:")
        lines.extend(f"  {r.name}: {r.sets} x {r.reps}" for r in integrated.warmup_rehab)

    if preview.warmup_sets:
        lines.append("\nRamp-up sets:")
        lines.extend(f"  {format_weight(s.weight_kg)} x {s.reps} ({s.label})" for s in preview.warmup_sets)

    rows = []
    for ex in engine.exercises:
        result = engine.progression_result(ex.exercise_id)
        reps = f"{ex.prescribed_reps}s" if ex.is_time_based else str(ex.prescribed_reps)
        rows.append(
            [
                str(ex.order),
                ex.exercise_name,
                f"{ex.prescribed_sets} x {reps}",
                format_weight(ex.prescribed_weight_kg),
                f"{ex.rest_seconds}s",
                result.action.value if result else "new",
            ]
        )
    lines.append("")
    lines.append(format_table(["#", "Exercise", "Sets", "Load", "Rest", "Progression"], rows))

    if preview.adjustments:
        lines.append("\nPain adjustments:")
        lines.extend(
            f"  {a.exercise_name}: {a.action.value} ({a.reason})" for a in preview.adjustments
        )

    if integrated.active_wait_pool:
        lines.append("\nWhile waiting for equipment:")
        lines.extend(f"  {r.name}: {r.sets} x {r.reps}" for r in integrated.active_wait_pool)

    if integrated.cooldown_rehab or preview.cooldown:
        lines.append("\nCooldown:")
        lines.extend(f"  {r.name}: {r.sets} x {r.reps}" for r in integrated.cooldown_rehab)
        lines.extend(f"  {ex.name}" for ex in preview.cooldown)

    return "\n".join(lines)


def collect_pain_feedback(preview: SessionPreview) -> list[PainFeedbackEntry]:
    """Merge pain flagged during sets with an end-of-session check."""
    worst: dict[BodyZone, PainFeedbackEntry] = {}

    def report(zone: BodyZone, level: int, exercise_name: str | None = None) -> None:
        entry = worst.setdefault(zone, PainFeedbackEntry(zone=zone, max_pain_level=level))
        entry.max_pain_level = max(entry.max_pain_level, level)
        if exercise_name and exercise_name not in entry.during_exercises:
            entry.during_exercises.append(exercise_name)

    for ex in preview.engine.exercises:
        for s in ex.sets:
            if s.pain_reported and s.pain_zone is not None:
                report(s.pain_zone, s.pain_level or 0, ex.exercise_name)

    session_exercises = [
        preview.engine.catalog[ex.exercise_id] for ex in preview.engine.exercises
    ]
    while click.confirm("Any other pain to report?", default=False):
        zone = BodyZone(click.prompt("Zone", type=click.Choice(ZONE_CHOICES)))
        level = click.prompt("Pain (0-10)", type=click.IntRange(0, 10))
        names = click.prompt("During which exercises (comma separated)", default="")
        matched = [
            find_matching_exercise(name, session_exercises) for name in names.split(",") if name.strip()
        ]
        report(zone, level)
        for exercise in matched:
            if exercise is not None:
                report(zone, level, exercise.name)

    return list(worst.values())


def occupied_filler(preview: SessionPreview, completed: list[str]) -> FillerSuggestion | None:
    """Filler for the wait before the current exercise, off its muscles."""
    engine = preview.engine
    exercise = engine.catalog.get(engine.current_exercise().exercise_id)
    return suggest_filler(
        preview.integrated.active_wait_pool,
        exercise.primary_muscles if exercise else [],
        completed,
        list(engine.catalog.values()),
    )


def run_workout(preview: SessionPreview) -> None:
    """Walk the user through every set of the session."""
    engine = preview.engine
    last_logged: float | None = None
    completed_fillers: list[str] = []

    while not engine.is_session_complete():
        ex = engine.current_exercise()
        set_number = engine.current_set_number()
        unit = "s" if ex.is_time_based else " reps"
        click.echo(
            f"\n{ex.exercise_name}: set {set_number}/{ex.prescribed_sets}, "
            f"{format_weight(ex.prescribed_weight_kg)} x {ex.prescribed_reps}{unit}"
        )

        action = click.prompt(
            "[l]og set, [s]kip, [o]ccupied", type=click.Choice(["l", "s", "o"]), default="l"
        )
        if action == "s":
            reason = click.prompt(
                "Reason", type=click.Choice([r.value for r in SkipReason]), default=SkipReason.TIME.value
            )
            engine.skip_exercise(SkipReason(reason))
            last_logged = None
            continue
        if action == "o":
            engine.mark_occupied()
            filler = occupied_filler(preview, completed_fillers)
            if filler is not None:
                click.echo(
                    f"While you wait: {filler.name}, {filler.sets} x {filler.reps} "
                    f"(~{filler.minutes} min)"
                )
                if filler.notes:
                    click.echo(f"  {filler.notes}")
            if click.confirm("Skip this exercise instead of waiting?", default=False):
                engine.skip_exercise(SkipReason.OCCUPIED)
                last_logged = None
            else:
                click.pause("Press any key once the equipment is free...")
                engine.mark_machine_free()
                if filler is not None:
                    completed_fillers.append(filler.name)
            continue

        reps = click.prompt("Reps done", type=click.IntRange(0, 500), default=ex.prescribed_reps)
        weight = click.prompt("Weight (kg)", type=float, default=ex.prescribed_weight_kg)
        rir = click.prompt("Reps in reserve", type=click.IntRange(0, 10), default=2)
        pain = click.confirm("Any pain?", default=False)
        pain_zone = pain_level = None
        if pain:
            pain_zone = BodyZone(click.prompt("Zone", type=click.Choice(ZONE_CHOICES)))
            pain_level = click.prompt("Pain (0-10)", type=click.IntRange(0, 10))

        now = time.monotonic()
        rest = None
        if last_logged is not None:
            rest = max(int(now - last_logged) - SET_EXECUTION_SECONDS, 0)
        last_logged = now

        engine.log_set(
            SessionSet(
                set_number=set_number,
                prescribed_reps=ex.prescribed_reps,
                prescribed_weight_kg=ex.prescribed_weight_kg,
                rest_prescribed_seconds=ex.rest_seconds,
                actual_reps=reps,
                actual_weight_kg=weight,
                reps_in_reserve=rir,
                pain_reported=pain,
                pain_zone=pain_zone,
                pain_level=pain_level,
                rest_actual_seconds=rest,
                completed_at=datetime.now(),
            )
        )
        if engine.is_current_exercise_complete():
            engine.complete_exercise()
            last_logged = None


@click.group()
def session():
    """Preview and log workouts."""
    pass


@session.command("preview")
@click.option("--deload", is_flag=True, help="Prescribe a deload session")
@click.pass_context
@async_command
async def preview(ctx: click.Context, deload: bool):
    """Show the next session with loads from your history."""
    user = await require_profile(ctx)

    result = await preview_next_session(
        user.id, phase=TrainingPhase.DELOAD if deload else None
    )
    click.echo()
    click.echo(render_preview(result))
    if result.deload_due and not deload:
        click.echo()
        echo_warning("A deload is due. Use --deload for a lighter week.")


@session.command("run")
@click.option("--deload", is_flag=True, help="Prescribe a deload session")
@click.pass_context
@async_command
async def run(ctx: click.Context, deload: bool):
    """Log the next session set by set, then update history."""
    user = await require_profile(ctx)

    result = await preview_next_session(
        user.id, phase=TrainingPhase.DELOAD if deload else None
    )
    click.echo()
    click.echo(render_preview(result))
    if not click.confirm("\nStart this session?", default=True):
        return

    run_workout(result)
    feedback = collect_pain_feedback(result)
    changed = await finish_session(user.id, result, feedback)

    click.echo()
    echo_success(f"'{result.session.name}' saved")
    for condition in changed:
        echo_info(f"Condition on {condition.body_zone.value} now at pain {condition.pain_level}/10")
