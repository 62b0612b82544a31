"""Data loading utilities."""

from .exercise_loader import load_catalog_file, seed_exercises_from_json

__all__ = ["load_catalog_file", "seed_exercises_from_json"]
