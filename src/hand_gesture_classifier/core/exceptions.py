"""
Exceptions raised by the hand gesture classifier.
"""


class GestureClassifierError(Exception):
    """Base class for all classifier errors."""


class InvalidInputError(GestureClassifierError, ValueError):
    """
    Raised when a hand cannot be classified.

    A hand must contain exactly 21 landmarks, each with numeric, finite
    x and y coordinates. The error is scoped to a single frame.
    """


class ConfigurationError(GestureClassifierError, ValueError):
    """Raised when a classifier configuration value is invalid."""
