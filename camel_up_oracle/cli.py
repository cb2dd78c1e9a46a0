"""Command-line interface for projecting Camel Up legs."""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Literal

import cappa
import msgspec
from rich.console import Console
from tqdm import tqdm

from camel_up_oracle.core.exceptions import DiceParseError, RaceParseError
from camel_up_oracle.core.types import CATEGORIES, Category
from camel_up_oracle.engine.dice import parse_dice
from camel_up_oracle.engine.logging import configure_logging
from camel_up_oracle.engine.oracle import project
from camel_up_oracle.engine.race import parse_race
from camel_up_oracle.render import render_projection, render_race
from camel_up_oracle.simulation.config import OracleConfig

logger = logging.getLogger("camel_up.cli")


@dataclass
class Args:
    """Exact winner, runner-up and loser chances for the rest of a leg."""

    race: str | None = None
    """Race notation, e.g. 'r,,yo' (camels r o y g w, ',' divider, '+' oasis, '-' setback trap)"""

    dice: Annotated[str, cappa.Arg(short=True, long=True)] = "roygw"
    """Dice still in the pyramid"""

    category: Annotated[
        Literal["winner", "runner_up", "loser", "all"],
        cappa.Arg(short=True, long=True),
    ] = "all"
    """Which standing to report"""

    board: Annotated[bool, cappa.Arg(short=True, long=True)] = False
    """Also draw the board"""

    config: Annotated[Path | None, cappa.Arg(long=True)] = None
    """TOML file with scenarios to project in batch"""

    verbose: Annotated[bool, cappa.Arg(short=True, long=True)] = False
    """Log progress of the oracle"""

    def __call__(self) -> int:
        """Project a single race, or every scenario of a config file."""
        console = Console()
        categories: tuple[Category, ...] = (
            CATEGORIES if self.category == "all" else (self.category,)
        )

        if self.config is not None:
            return self._run_config(self.config, console, categories)

        if self.race is None:
            print("Error: Provide a race or --config", file=sys.stderr)
            return 1

        configure_logging(logging.INFO if self.verbose else logging.WARNING)
        try:
            race = parse_race(self.race)
            dice = parse_dice(self.dice)
        except (RaceParseError, DiceParseError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

        if self.board:
            console.print(render_race(race))
        console.print(render_projection(project(race, dice), categories))
        return 0

    def _run_config(
        self,
        path: Path,
        console: Console,
        categories: tuple[Category, ...],
    ) -> int:
        if not path.exists():
            print(f"Error: Config file not found: {path}", file=sys.stderr)
            return 1

        try:
            config = OracleConfig.from_toml(str(path))
        except msgspec.DecodeError as e:
            print(f"Error: Invalid config {path}: {e}", file=sys.stderr)
            return 1

        configure_logging(logging.INFO if self.verbose else config.log_level)

        failed = 0
        for scenario in tqdm(config.scenarios, desc="Projecting", unit="board"):
            try:
                race, dice = scenario.parsed()
            except (RaceParseError, DiceParseError) as e:
                tqdm.write(f"[{scenario.name}] skipped: {e}")
                failed += 1
                continue

            console.rule(scenario.name)
            if self.board:
                console.print(render_race(race))
            console.print(render_projection(project(race, dice), categories))

        if failed:
            logger.warning("%d of %d scenarios could not be parsed", failed, len(config.scenarios))
            return 1
        return 0


def main() -> int:
    """Entry point for CLI."""
    return cappa.invoke(Args)


if __name__ == "__main__":
    sys.exit(main())
