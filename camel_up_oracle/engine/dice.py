from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from camel_up_oracle.core.exceptions import (
    DiceNotAMarkerError,
    NotACamelError,
    NotAMarkerError,
)
from camel_up_oracle.core.types import CAMELS, CamelName
from camel_up_oracle.engine.markers import CamelMarker, parse_marker


@dataclass(frozen=True, slots=True)
class Dice:
    """The dice still in the pyramid this leg."""

    camels: frozenset[CamelName] = field(default_factory=frozenset)

    @classmethod
    def default(cls) -> "Dice":
        return cls(frozenset(CAMELS))

    @classmethod
    def of(cls, camels: Iterable[CamelName]) -> "Dice":
        return cls(frozenset(camels))

    def remove(self, camel: CamelName) -> "Dice":
        """Return a pool without `camel`; this pool is left untouched."""
        return Dice(self.camels - {camel})

    def __iter__(self) -> Iterator[CamelName]:
        # Canonical order keeps the tree layout reproducible
        return (camel for camel in CAMELS if camel in self.camels)

    def __len__(self) -> int:
        return len(self.camels)

    def __contains__(self, camel: object) -> bool:
        return camel in self.camels


def parse_dice(text: str) -> Dice:
    """Parse dice text such as ``"ryg"``; only camel tokens are allowed."""
    camels: set[CamelName] = set()
    for token in text:
        try:
            marker = parse_marker(token)
        except NotAMarkerError:
            raise DiceNotAMarkerError(token) from None
        if not isinstance(marker, CamelMarker):
            raise NotACamelError(token)
        camels.add(marker.camel)
    return Dice(frozenset(camels))
