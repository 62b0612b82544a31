"""CLI commands for gym-coach."""

from .conditions import conditions
from .equipment import equipment
from .exercises import exercises
from .init import init
from .phase import phase
from .profile import profile
from .program import program
from .session import session

__all__ = [
    "conditions",
    "equipment",
    "exercises",
    "init",
    "phase",
    "profile",
    "program",
    "session",
]
