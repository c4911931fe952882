from __future__ import annotations


class ProblemError(ValueError):
    """Base class for precondition violations raised by the engine."""


class FlavorError(ProblemError):
    """Raised when a value or position is not part of the flavor domain."""


class ConfigurationError(ProblemError):
    """Raised when a configuration does not have one value per variable."""


class ArityError(ProblemError):
    """Raised when a local configuration does not match the constraint arity."""


class ConstraintError(ProblemError):
    """Raised when a constraint references duplicate or unknown variables."""


class WeightLengthError(ProblemError):
    """Raised when a weight vector does not fit the problem structure."""


class SearchSpaceTooLargeError(ProblemError):
    """Raised when exhaustive search would exceed the configured state limit."""


class WeightTypeError(ProblemError):
    """Raised when a weight is not a number."""
