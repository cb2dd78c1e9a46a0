"""
Exception hierarchy for the Camel Up oracle.

Parse errors are recoverable and meant to be reported to the user.
The remaining errors signal a programming defect in the caller.
"""


class CamelUpError(Exception):
    """Base exception for all oracle errors."""


class RaceParseError(CamelUpError):
    """Race text could not be turned into a valid race."""


class NotAMarkerError(RaceParseError):
    """A token is not one of the known markers."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Not a marker: {token!r}")
        self.token: str = token


class AdjacentToOasisError(RaceParseError):
    """A camel shares its position with an oasis."""


class AdjacentToSetbackTrapError(RaceParseError):
    """A camel shares its position with a setback trap."""


class MultipleAdjustmentsSamePositionError(RaceParseError):
    """Two traps occupy the same position."""


class AdjacentAdjustmentsError(RaceParseError):
    """Two traps occupy neighbouring positions."""


class DiceParseError(CamelUpError):
    """Dice text could not be turned into a dice pool."""


class DiceNotAMarkerError(DiceParseError):
    """A dice token is not one of the known markers."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Not a marker: {token!r}")
        self.token: str = token


class NotACamelError(DiceParseError):
    """A dice token is a marker, but not a camel."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Not a camel: {token!r}")
        self.token: str = token


class ZeroDenominatorError(CamelUpError, ValueError):
    """A fraction was constructed with a zero denominator."""


class ScalingLimitError(CamelUpError):
    """The dice pool is too large to enumerate exhaustively."""


class OracleInvariantError(CamelUpError):
    """The enumeration produced a leaf count that breaks the closed form."""
