"""Exact rational arithmetic for probabilities.

>>> Rational(1, 2) + Rational(1, 3)
Rational(5, 6)
"""

from __future__ import annotations

import math
from functools import total_ordering
from typing import override

from camel_up_oracle.core.exceptions import ZeroDenominatorError

type RationalLike = Rational | int


@total_ordering
class Rational:
    """The number ``numerator / denominator``, always kept in lowest terms."""

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: int, denominator: int = 1) -> None:
        if denominator == 0:
            raise ZeroDenominatorError(
                f"Denominator of {numerator}/{denominator} must not be zero",
            )
        if denominator < 0:
            numerator, denominator = -numerator, -denominator

        divisor = math.gcd(numerator, denominator)
        self._numerator: int = numerator // divisor
        self._denominator: int = denominator // divisor

    @classmethod
    def zero(cls) -> Rational:
        return cls(0, 1)

    @classmethod
    def one(cls) -> Rational:
        return cls(1, 1)

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def inverse(self) -> Rational | None:
        """Return ``1 / self``, or None for zero."""
        if self._numerator == 0:
            return None
        return Rational(self._denominator, self._numerator)

    # --- arithmetic ---

    def __add__(self, other: RationalLike) -> Rational:
        other = _coerce(other)
        return Rational(
            self._numerator * other._denominator + other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    __radd__ = __add__

    def __neg__(self) -> Rational:
        return Rational(-self._numerator, self._denominator)

    def __sub__(self, other: RationalLike) -> Rational:
        return self + (-_coerce(other))

    def __rsub__(self, other: RationalLike) -> Rational:
        return _coerce(other) - self

    def __mul__(self, other: RationalLike) -> Rational:
        other = _coerce(other)
        return Rational(
            self._numerator * other._numerator,
            self._denominator * other._denominator,
        )

    __rmul__ = __mul__

    def __truediv__(self, other: RationalLike) -> Rational | None:
        """Divide, returning None instead of raising when ``other`` is zero."""
        inverse = _coerce(other).inverse()
        if inverse is None:
            return None
        return self * inverse

    def __rtruediv__(self, other: RationalLike) -> Rational | None:
        return _coerce(other) / self

    # --- comparison ---

    @override
    def __eq__(self, other: object) -> bool:
        if isinstance(other, int):
            other = Rational(other)
        if not isinstance(other, Rational):
            return NotImplemented
        return (
            self._numerator == other._numerator
            and self._denominator == other._denominator
        )

    def __lt__(self, other: RationalLike) -> bool:
        if not isinstance(other, (Rational, int)):
            return NotImplemented
        other = _coerce(other)
        # Denominators are positive, so cross-multiplying keeps the direction
        return (
            self._numerator * other._denominator < other._numerator * self._denominator
        )

    @override
    def __hash__(self) -> int:
        # Whole numbers hash like the int they equal
        if self._denominator == 1:
            return hash(self._numerator)
        return hash((self._numerator, self._denominator))

    # --- conversion ---

    def __bool__(self) -> bool:
        return self._numerator != 0

    def __float__(self) -> float:
        return self._numerator / self._denominator

    @override
    def __str__(self) -> str:
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"

    @override
    def __repr__(self) -> str:
        return f"Rational({self._numerator}, {self._denominator})"


def _coerce(value: RationalLike) -> Rational:
    if isinstance(value, Rational):
        return value
    return Rational(value)
