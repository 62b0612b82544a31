"""Tunable constants and filesystem locations."""

import os
from pathlib import Path

# Default data directory (overridable with GYM_COACH_DATA_DIR)
DATA_DIR = Path(__file__).parent.parent.parent / "data"
DATA_DIR_ENV = "GYM_COACH_DATA_DIR"
DB_FILENAME = "gym_coach.db"

# Contraindications: one threshold for program filtering and session skips.
# Pain 3-6 is handled by pain feedback adjustments and rehab, not exclusion.
CONTRAINDICATION_PAIN_THRESHOLD = 7

# Session time estimation
SET_EXECUTION_SECONDS = 45
TRANSITION_SECONDS = 90
WARMUP_COOLDOWN_MINUTES = 10
MIN_EXERCISES_PER_SESSION = 3

# Intensity variants
HEAVY_MAX_REPS = 6
HEAVY_MIN_SETS = 4
HEAVY_REST_CAP = 120
MODERATE_REST_CAP = 90
VOLUME_MIN_REPS = 12
VOLUME_REST_CAP = 75
ACCESSORY_MIN_REPS = 12
ACCESSORY_REST_CAP = 60
ISOMETRIC_SETS = 3
ISOMETRIC_SECONDS = 30
ISOMETRIC_REST = 60

# Refresh keeps its exclusions only if this many non-rehab exercises remain
REFRESH_MIN_POOL = 15

# Rehab placement caps
MAX_WARMUP_REHAB = 8
MAX_COOLDOWN_REHAB = 5
MAX_REST_DAY_REHAB = 5
MAX_COOLDOWN_MOBILITY = 3

# Fillers while equipment is occupied
FILLER_SECONDS_PER_SET = 45
FILLER_REST_SECONDS = 30
MOBILITY_FILLER_MINUTES = 2
MAX_CATALOG_FILLERS = 3

# Progression
REST_INFLATION_RATIO = 1.5
REGRESSION_DEFICIT = 0.25
GOOD_RIR = 2
PAIN_RIR = 1
DEFAULT_WEIGHT_INCREMENT_KG = 2.5
DEFAULT_WEIGHT_CEILING_KG = 300.0

# Deload and phases
DELOAD_FACTOR = 0.6
DELOAD_AFTER_WEEKS = 5
HYPERTROPHY_MIN_WEEKS = 6
TRANSITION_MIN_WEEKS = 4
PHASE_MIN_CONSISTENCY = 0.7
PHASE_MAX_AVG_PAIN = 2

# Pain tiers (max pain level reported for a zone)
PAIN_NO_PROGRESSION = 3
PAIN_REDUCE_WEIGHT = 5
PAIN_SKIP = 7
PAIN_WEIGHT_MULTIPLIER = 0.8

# First-session weight estimate from body weight
LOW_REP_THRESHOLD = 6
LOW_REP_BODYWEIGHT_RATIO = 0.25
HIGH_REP_BODYWEIGHT_RATIO = 0.15


def get_data_dir() -> Path:
    """Return the data directory, honouring GYM_COACH_DATA_DIR."""
    override = os.environ.get(DATA_DIR_ENV)
    if override:
        return Path(override)
    return DATA_DIR
