"""Race model for a single Camel Up leg.

A race is a normalized sequence of markers. Dividers separate positions,
camels sharing a position form a stack listed bottom to top, so the camel
listed last is the one in the lead.

>>> race = parse_race("r,y")
>>> str(race.perform(Roll("Red", 1)))
'yr'
"""

import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Final, NamedTuple, override

from camel_up_oracle.core.exceptions import (
    AdjacentAdjustmentsError,
    AdjacentToOasisError,
    AdjacentToSetbackTrapError,
    MultipleAdjustmentsSamePositionError,
)
from camel_up_oracle.core.types import FACES, CamelName, FaceValue
from camel_up_oracle.engine.markers import (
    DIVIDER,
    CamelMarker,
    Marker,
    Oasis,
    SetbackTrap,
    tokenize,
)

logger = logging.getLogger("camel_up.race")

# Enough sentinels to count past the furthest face plus an oasis bonus
_PADDING: Final[int] = max(FACES) + 2


class Roll(NamedTuple):
    """A single die outcome: which camel moves and how far."""

    camel: CamelName
    face: FaceValue


def normalize(markers: Iterable[Marker]) -> tuple[Marker, ...]:
    """Trim everything before the first and after the last camel."""
    markers = tuple(markers)
    camel_indices = [i for i, marker in enumerate(markers) if marker.is_camel]
    if not camel_indices:
        return ()

    trimmed = markers[camel_indices[0] : camel_indices[-1] + 1]
    start = 0
    while start < len(trimmed) and trimmed[start].is_divider:
        start += 1
    return trimmed[start:]


def validate(markers: Sequence[Marker]) -> None:
    """Raise the first structural rule a marker sequence breaks."""
    neighbours = list(zip(markers, markers[1:]))

    if any(_camel_beside(pair, Oasis) for pair in neighbours):
        raise AdjacentToOasisError("A camel cannot stand on an oasis")

    if any(_camel_beside(pair, SetbackTrap) for pair in neighbours):
        raise AdjacentToSetbackTrapError("A camel cannot stand on a setback trap")

    if any(left.is_adjustment and right.is_adjustment for left, right in neighbours):
        raise MultipleAdjustmentsSamePositionError(
            "Only one trap fits in a single position",
        )

    if any(
        left.is_adjustment and right.is_adjustment
        for left, right in zip(markers, markers[2:])
    ):
        raise AdjacentAdjustmentsError("Traps cannot be placed next to each other")


def _camel_beside(pair: tuple[Marker, Marker], trap: type[Marker]) -> bool:
    left, right = pair
    return (left.is_camel and isinstance(right, trap)) or (
        isinstance(left, trap) and right.is_camel
    )


@dataclass(frozen=True, slots=True)
class Race:
    """Immutable marker sequence, normalized on construction."""

    markers: tuple[Marker, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "markers", normalize(self.markers))

    @classmethod
    def from_markers(cls, markers: Iterable[Marker]) -> "Race":
        return cls(tuple(markers))

    @override
    def __str__(self) -> str:
        return "".join(marker.token for marker in self.markers)

    def __iter__(self) -> Iterator[Marker]:
        return iter(self.markers)

    def __len__(self) -> int:
        return len(self.markers)

    def __contains__(self, camel: object) -> bool:
        return any(
            isinstance(marker, CamelMarker) and marker.camel == camel
            for marker in self.markers
        )

    # --- transition ---

    def perform(self, roll: Roll | tuple[CamelName, FaceValue]) -> "Race":
        """Move the rolled camel, carrying every camel stacked on top of it."""
        camel, face = roll
        markers = self.markers
        marker = CamelMarker(camel)
        if marker not in markers:
            return Race.from_markers(markers)

        start = markers.index(marker)
        end = start
        while end < len(markers) and markers[end].is_camel:
            end += 1
        unit = markers[start:end]

        remaining = markers[:start] + markers[end:] + (DIVIDER,) * _PADDING

        # boundaries[k] and boundaries[k + 1] enclose slot k; slot 0 is the origin
        before = [i for i in range(start) if remaining[i].is_divider]
        boundaries = [before[-1] if before else -1]
        boundaries.extend(
            i for i in range(start, len(remaining)) if remaining[i].is_divider
        )

        landing = remaining[boundaries[face + 1] - 1]
        if isinstance(landing, Oasis):
            insert_at = boundaries[face + 2]
            logger.debug("%s hits an Oasis, lands on slot %d", camel, face + 1)
        elif isinstance(landing, SetbackTrap):
            insert_at = boundaries[face - 1] + 1
            logger.debug("%s hits a SetbackTrap, lands under slot %d", camel, face - 1)
        else:
            insert_at = boundaries[face + 1]

        return Race.from_markers(remaining[:insert_at] + unit + remaining[insert_at:])

    # --- rankings ---

    def standings(self) -> list[CamelName]:
        """Camels ordered from the leader to the last one."""
        return [
            marker.camel
            for marker in reversed(self.markers)
            if isinstance(marker, CamelMarker)
        ]

    def camels(self) -> list[CamelName]:
        """Camels in track order, rearmost first."""
        return [
            marker.camel for marker in self.markers if isinstance(marker, CamelMarker)
        ]

    def winner(self) -> CamelName | None:
        standings = self.standings()
        return standings[0] if standings else None

    def runner_up(self) -> CamelName | None:
        standings = self.standings()
        return standings[1] if len(standings) >= 2 else None

    def loser(self) -> CamelName | None:
        """The rearmost camel, once at least three camels are racing.

        A loser needs three camels so it always differs from both winner and
        runner-up. The rear camel of a two-camel race is its runner-up, not its
        loser, and a lone camel is only the winner.
        """
        standings = self.standings()
        return standings[-1] if len(standings) >= 3 else None

    # --- board view ---

    def positions(self) -> list[list[Marker]]:
        """Split the race into divider-delimited slots, rear first."""
        slots: list[list[Marker]] = [[]]
        for marker in self.markers:
            if marker.is_divider:
                slots.append([])
            else:
                slots[-1].append(marker)
        return slots


def perform(race: Race, roll: Roll | tuple[CamelName, FaceValue]) -> Race:
    return race.perform(roll)


def parse_race(text: str) -> Race:
    """Parse race text such as ``"r,+,yo"``.

    Raises a `RaceParseError` subclass for unknown tokens or broken rules.
    """
    markers = tokenize(text)
    validate(markers)
    return Race.from_markers(markers)
