"""Exception types for gym-coach."""


class GymCoachError(Exception):
    """Base class for all gym-coach errors."""


class InvalidInput(GymCoachError, ValueError):
    """A caller passed data that violates the engine's input contract.

    Raised for out-of-range schedules, malformed history entries, catalog
    records with unknown vocabulary, and sessions that reference exercise
    ids missing from the supplied catalog.
    """


class ProgramGenerationError(GymCoachError):
    """A generated program failed one of its verified invariants."""
