"""Weekly split selection."""

from ..errors import InvalidInput
from ..models.program import SplitType


def determine_split(days_per_week: int) -> SplitType:
    """Map training days per week to a split archetype.

    Raises:
        InvalidInput: If days_per_week is not a positive integer.
    """
    if isinstance(days_per_week, bool) or not isinstance(days_per_week, int) or days_per_week < 1:
        raise InvalidInput(f"days_per_week must be a positive integer, got {days_per_week!r}")

    if days_per_week <= 3:
        return SplitType.FULL_BODY
    if days_per_week == 4:
        return SplitType.UPPER_LOWER
    return SplitType.PUSH_PULL_LEGS
