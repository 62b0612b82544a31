"""Utilities for exercise name normalization and matching."""

import re
from difflib import SequenceMatcher

from ..models.exercises import COMMON_EXERCISES, Exercise, ExerciseCategory


def normalize_exercise_name(name: str) -> str:
    """Normalize an exercise name for comparison.

    Converts to lowercase, removes extra whitespace and hyphens, and expands
    common abbreviations.
    """
    normalized = name.lower().strip().replace("-", " ")
    normalized = re.sub(r"\s+", " ", normalized)

    abbreviations = {
        "bb": "barbell",
        "db": "dumbbell",
        "kb": "kettlebell",
        "ohp": "overhead press",
        "rdl": "romanian deadlift",
        "bss": "bulgarian split squat",
        "ext": "extension",
    }

    if normalized in abbreviations:
        return abbreviations[normalized]

    for abbrev, full in abbreviations.items():
        normalized = re.sub(rf"\b{abbrev}\b", full, normalized)

    return normalized


def find_matching_exercise(
    name: str,
    exercises: list[Exercise] | None = None,
    threshold: float = 0.8,
) -> Exercise | None:
    """Find the best matching exercise in a catalog.

    Args:
        name: The exercise name to match
        exercises: Exercises to search (defaults to COMMON_EXERCISES)
        threshold: Minimum similarity ratio (0-1) to consider a match

    Returns:
        The best matching Exercise or None if no match above threshold
    """
    if exercises is None:
        exercises = COMMON_EXERCISES

    normalized_name = normalize_exercise_name(name)

    best_match: Exercise | None = None
    best_score = 0.0

    for exercise in exercises:
        candidate = normalize_exercise_name(exercise.name)
        if candidate == normalized_name:
            return exercise

        score = SequenceMatcher(None, normalized_name, candidate).ratio()
        if score > best_score:
            best_score = score
            best_match = exercise

    if best_score >= threshold:
        return best_match

    return None


def group_exercises_by_category(
    exercises: list[Exercise],
) -> dict[str, list[Exercise]]:
    """Group exercises by category, keeping catalog order within each group."""
    result: dict[str, list[Exercise]] = {category.value: [] for category in ExerciseCategory}

    for exercise in exercises:
        result[exercise.category.value].append(exercise)

    return result
