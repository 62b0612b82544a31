"""Tests for utility functions and the catalog loader."""

import asyncio
import json

import pytest

from gym_coach.data import load_catalog_file, seed_exercises_from_json
from gym_coach.db import ExerciseRepository, init_db
from gym_coach.errors import InvalidInput
from gym_coach.models.exercises import ExerciseCategory
from gym_coach.utils.exercise_utils import (
    find_matching_exercise,
    group_exercises_by_category,
    normalize_exercise_name,
)

CUSTOM_RECORD = {
    "id": 100,
    "name": "Landmine Press",
    "category": "compound",
    "primary_muscles": ["shoulders", "chest"],
    "equipment_needed": ["barbell"],
    "contraindications": ["shoulder_left"],
    "tags": ["push", "upper_body", "vertical"],
}


class TestNormalizeExerciseName:
    """Tests for normalize_exercise_name function."""

    def test_lowercase_and_strip(self):
        """Test basic normalization."""
        assert normalize_exercise_name("  Bench Press  ") == "bench press"

    def test_abbreviation_expansion(self):
        """Test abbreviation expansion."""
        assert normalize_exercise_name("BB") == "barbell"
        assert normalize_exercise_name("OHP") == "overhead press"
        assert normalize_exercise_name("RDL") == "romanian deadlift"

    def test_inline_abbreviation(self):
        """Test abbreviation expansion within name."""
        assert normalize_exercise_name("DB Bench Press") == "dumbbell bench press"
        assert normalize_exercise_name("Leg Ext") == "leg extension"

    def test_hyphens_and_whitespace(self):
        """Test hyphens become spaces and runs of spaces collapse."""
        assert normalize_exercise_name("Push-Up") == "push up"
        assert normalize_exercise_name("Bench   Press") == "bench press"


class TestFindMatchingExercise:
    """Tests for find_matching_exercise function."""

    def test_exact_match(self):
        """Test exact name matching is case-insensitive."""
        result = find_matching_exercise("barbell bench press")
        assert result is not None
        assert result.id == 16

    def test_abbreviation_match(self):
        """Test abbreviations resolve to catalog names."""
        assert find_matching_exercise("DB Bench Press").id == 17
        assert find_matching_exercise("RDL").id == 9

    def test_hyphen_insensitive(self):
        """Test hyphenation does not matter."""
        assert find_matching_exercise("push up").id == 19

    def test_fuzzy_match(self):
        """Test fuzzy matching."""
        result = find_matching_exercise("Barbell Bench Pres")
        assert result is not None
        assert result.id == 16

    def test_no_match_below_threshold(self):
        """Test no match returned for low similarity."""
        assert find_matching_exercise("xyzabc123") is None

    def test_custom_threshold(self):
        """Test custom threshold."""
        assert find_matching_exercise("Barbell Bench Pres", threshold=0.99) is None

    def test_custom_catalog(self, catalog_by_id):
        """Test searching a supplied list only."""
        assert find_matching_exercise("Plank", [catalog_by_id[42]]).id == 42
        assert find_matching_exercise("Plank", [catalog_by_id[1]]) is None


class TestGroupExercisesByCategory:
    """Tests for group_exercises_by_category."""

    def test_every_category_present(self, catalog):
        """Test all categories appear, in catalog order."""
        groups = group_exercises_by_category(catalog)

        assert set(groups) == {c.value for c in ExerciseCategory}
        assert groups["compound"][0].id == 1
        assert [ex.id for ex in groups["rehab"]] == [55, 56, 57]
        assert sum(len(v) for v in groups.values()) == len(catalog)


class TestCatalogLoader:
    """Tests for loading catalog JSON files."""

    def test_load_object_form(self, tmp_path):
        """Test a file with an exercises list."""
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps({"exercises": [CUSTOM_RECORD]}))

        exercises = load_catalog_file(path)

        assert [(ex.id, ex.name) for ex in exercises] == [(100, "Landmine Press")]

    def test_invalid_json(self, tmp_path):
        """Test unreadable JSON is rejected."""
        path = tmp_path / "catalog.json"
        path.write_text("{not json")

        with pytest.raises(InvalidInput):
            load_catalog_file(path)

    def test_unknown_vocabulary(self, tmp_path):
        """Test an unknown equipment name is rejected."""
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps([{**CUSTOM_RECORD, "equipment_needed": ["trebuchet"]}]))

        with pytest.raises(InvalidInput):
            load_catalog_file(path)

    def test_duplicate_ids(self, tmp_path):
        """Test ids must be unique."""
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps([CUSTOM_RECORD, {**CUSTOM_RECORD, "name": "Other"}]))

        with pytest.raises(InvalidInput):
            load_catalog_file(path)

    def test_seed_from_json(self, tmp_path, temp_db_path):
        """Test seeding a database from a catalog file."""
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps([CUSTOM_RECORD]))

        async def scenario():
            await init_db(temp_db_path)
            count = await seed_exercises_from_json(path, temp_db_path)
            return count, await ExerciseRepository(temp_db_path).get(100)

        count, exercise = asyncio.run(scenario())

        assert count == 1
        assert exercise.name == "Landmine Press"
