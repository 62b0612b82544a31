"""Warm-up ramp before the first heavy compound."""

from dataclasses import dataclass

from ..models.equipment import nearest_weight


@dataclass
class WarmupSet:
    """A warm-up set; not counted as a working set."""

    weight_kg: float
    reps: int
    label: str


def generate_warmup_sets(
    working_weight_kg: float, available_weights: list[float] | None = None
) -> list[WarmupSet]:
    """Ramp up to a working weight.

    Light loads get a shorter ramp. Each loaded set is snapped to the
    nearest available weight.
    """
    if working_weight_kg <= 0:
        return []

    if working_weight_kg < 8:
        return [WarmupSet(0.0, 10, "Unloaded")]

    half = nearest_weight(working_weight_kg * 0.5, available_weights)
    if working_weight_kg <= 20:
        sets = [WarmupSet(0.0, 10, "Unloaded")]
        if half > 0:
            sets.append(WarmupSet(half, 8, "50%"))
        return sets

    return [
        WarmupSet(0.0, 10, "Empty bar"),
        WarmupSet(half, 8, "50%"),
        WarmupSet(nearest_weight(working_weight_kg * 0.7, available_weights), 5, "70%"),
        WarmupSet(nearest_weight(working_weight_kg * 0.85, available_weights), 3, "85%"),
    ]
