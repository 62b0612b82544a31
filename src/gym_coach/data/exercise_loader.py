"""Exercise catalog loader from JSON."""

import json
import logging
from pathlib import Path

from ..db.engine import get_db_path, seed_exercises
from ..errors import InvalidInput
from ..models.exercises import Exercise, load_exercise_catalog

logger = logging.getLogger(__name__)


def load_catalog_file(json_path: Path) -> list[Exercise]:
    """Load and validate an exercise catalog from a JSON file.

    The file holds either a list of exercise records or an object with an
    ``exercises`` list. Every record needs a unique integer ``id``.

    Raises:
        InvalidInput: If the file is not valid JSON or a record is invalid
    """
    try:
        with open(json_path) as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise InvalidInput(f"{json_path} is not valid JSON: {e}") from e

    records = data.get("exercises", []) if isinstance(data, dict) else data
    if not isinstance(records, list):
        raise InvalidInput(f"{json_path} has no exercise list")

    exercises = load_exercise_catalog(records)
    logger.info("Loaded %d exercises from %s", len(exercises), json_path)
    return exercises


async def seed_exercises_from_json(json_path: Path, db_path: Path | None = None) -> int:
    """Seed the database with exercises from a JSON catalog file.

    Args:
        json_path: Catalog file to load
        db_path: Optional database path. Uses default if not provided.

    Returns:
        Number of exercises in the catalog table afterwards
    """
    if db_path is None:
        db_path = get_db_path()

    return await seed_exercises(db_path, load_catalog_file(json_path))
