from dataclasses import dataclass
from typing import Final, override

from camel_up_oracle.core.exceptions import NotAMarkerError
from camel_up_oracle.core.types import (
    CAMEL_TOKENS,
    DIVIDER_TOKEN,
    OASIS_TOKEN,
    SETBACK_TRAP_TOKEN,
    CamelName,
)


class Marker:
    """One symbol on the track: a camel, a divider or a trap."""

    __slots__ = ()

    @property
    def is_camel(self) -> bool:
        return False

    @property
    def is_divider(self) -> bool:
        return False

    @property
    def is_adjustment(self) -> bool:
        """Traps adjust the landing position of a moving unit."""
        return False

    @property
    def token(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class CamelMarker(Marker):
    camel: CamelName

    @property
    @override
    def is_camel(self) -> bool:
        return True

    @property
    @override
    def token(self) -> str:
        return _CAMEL_TO_TOKEN[self.camel]


@dataclass(frozen=True, slots=True)
class Divider(Marker):
    @property
    @override
    def is_divider(self) -> bool:
        return True

    @property
    @override
    def token(self) -> str:
        return DIVIDER_TOKEN


@dataclass(frozen=True, slots=True)
class Oasis(Marker):
    """Landing here moves the unit one position further, on top."""

    @property
    @override
    def is_adjustment(self) -> bool:
        return True

    @property
    @override
    def token(self) -> str:
        return OASIS_TOKEN


@dataclass(frozen=True, slots=True)
class SetbackTrap(Marker):
    """Landing here moves the unit one position back, underneath."""

    @property
    @override
    def is_adjustment(self) -> bool:
        return True

    @property
    @override
    def token(self) -> str:
        return SETBACK_TRAP_TOKEN


DIVIDER: Final[Divider] = Divider()
OASIS: Final[Oasis] = Oasis()
SETBACK_TRAP: Final[SetbackTrap] = SetbackTrap()

_CAMEL_TO_TOKEN: Final[dict[CamelName, str]] = {
    camel: token for token, camel in CAMEL_TOKENS.items()
}

MARKER_TOKENS: Final[dict[str, Marker]] = {
    **{token: CamelMarker(camel) for token, camel in CAMEL_TOKENS.items()},
    DIVIDER_TOKEN: DIVIDER,
    OASIS_TOKEN: OASIS,
    SETBACK_TRAP_TOKEN: SETBACK_TRAP,
}


def parse_marker(token: str) -> Marker:
    try:
        return MARKER_TOKENS[token]
    except KeyError:
        raise NotAMarkerError(token) from None


def tokenize(text: str) -> list[Marker]:
    """Turn race text into markers, one character per marker."""
    return [parse_marker(token) for token in text]
