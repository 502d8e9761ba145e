"""Error types for Tycoon 1824."""


class TycoonError(Exception):
    """Base class for all game errors."""


class ConfigurationError(TycoonError, ValueError):
    """Game data or setup is malformed.

    Raised for an empty or oversized roster, a corporation or company
    missing a required link, or a coordinate that resolves to no hex.
    """


class InvariantViolation(TycoonError, RuntimeError):
    """Game state reached a condition that correct data never produces."""
