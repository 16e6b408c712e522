"""
Error types raised by the split generators.
"""


class SplitError(Exception):
    """Base class for all split generation errors."""


class InvalidPolicyError(SplitError, ValueError):
    """The split policy cannot be applied to the dataset."""


class LabelRequiredError(InvalidPolicyError):
    """Stratification was requested but the dataset has no label column."""


class ExhaustedError(SplitError):
    """Another split was requested after the last one was produced."""


class ReadOnlyViolationError(SplitError):
    """A dataset view was asked to modify its data."""
