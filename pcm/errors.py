"""
Typed failures raised by the canopy computations.

Both derive from ValueError so callers that only care about "bad input" can
catch that, while the report layer can tell them apart.
"""


class CanopyError(ValueError):
    """Base class for canopy parameter problems."""


class DomainError(CanopyError):
    """Vent diameter is not smaller than the main diameter where a positive
    effective (drag producing) area is required."""


class InvalidParameter(CanopyError):
    """A parameter is outside the range the formulas accept at all
    (cell count below one, negative weight, diameter or seam allowance)."""
