"""Configuration schema for batch projections using msgspec."""

from __future__ import annotations

from pathlib import Path

import msgspec

from camel_up_oracle.core.types import LogLevel
from camel_up_oracle.engine.dice import Dice, parse_dice
from camel_up_oracle.engine.race import Race, parse_race


class ScenarioConfig(msgspec.Struct):
    """
    One board to project.
    Race and dice use the same text notation as the command line.
    """

    name: str
    race: str
    # All five dice are still in the pyramid by default
    dice: str = "roygw"

    def parsed(self) -> tuple[Race, Dice]:
        """Parse race and dice; raises the parse errors unchanged."""
        return parse_race(self.race), parse_dice(self.dice)


class OracleConfig(msgspec.Struct):
    """TOML-backed configuration for projecting several boards in one go."""

    log_level: LogLevel = "WARNING"
    scenarios: list[ScenarioConfig] = msgspec.field(default_factory=list)

    @classmethod
    def from_toml(cls, path: str) -> OracleConfig:
        """Load configuration from a TOML file path."""
        with Path(path).open("rb") as f:
            return msgspec.toml.decode(f.read(), type=cls)
