"""Divine the standings at the end of a leg by counting every outcome."""

import logging
import math
from collections import Counter
from dataclasses import dataclass, field

from camel_up_oracle.core.exceptions import OracleInvariantError
from camel_up_oracle.core.fraction import Rational
from camel_up_oracle.core.types import CAMELS, CamelName, Category
from camel_up_oracle.engine.dice import Dice
from camel_up_oracle.engine.race import Race
from camel_up_oracle.engine.tree import Tree

logger = logging.getLogger("camel_up.oracle")


class Distribution(dict[CamelName, Rational]):
    """Chance per camel; camels that never make the category read as zero."""

    def __missing__(self, camel: CamelName) -> Rational:
        return Rational.zero()

    def ranked(self) -> list[tuple[CamelName, Rational]]:
        """Most likely camel first; ties follow the canonical camel order."""
        return sorted(self.items(), key=lambda item: (-item[1], CAMELS.index(item[0])))


@dataclass(frozen=True, slots=True)
class Projection:
    winner: Distribution
    runner_up: Distribution
    loser: Distribution
    total: int

    def __getitem__(self, category: Category) -> Distribution:
        return getattr(self, category)


@dataclass(slots=True)
class LeafCounter:
    """Tallies winner, runner-up and loser over visited leaves."""

    total: int = 0
    winners: Counter[CamelName] = field(default_factory=Counter)
    runners_up: Counter[CamelName] = field(default_factory=Counter)
    losers: Counter[CamelName] = field(default_factory=Counter)

    def visit(self, race: Race) -> None:
        # Every leaf counts toward the total, even without a runner-up or loser
        self.total += 1
        if (winner := race.winner()) is not None:
            self.winners[winner] += 1
        if (runner_up := race.runner_up()) is not None:
            self.runners_up[runner_up] += 1
        if (loser := race.loser()) is not None:
            self.losers[loser] += 1

    def chances(self, tally: Counter[CamelName]) -> Distribution:
        return Distribution(
            {camel: Rational(count, self.total) for camel, count in tally.items()},
        )

    def projection(self) -> Projection:
        return Projection(
            winner=self.chances(self.winners),
            runner_up=self.chances(self.runners_up),
            loser=self.chances(self.losers),
            total=self.total,
        )


def expected_leaf_count(dice_count: int) -> int:
    """Number of equally likely draw sequences for `dice_count` dice."""
    return math.factorial(dice_count) * 3**dice_count


def project(race: Race, dice: Dice) -> Projection:
    """Exact winner, runner-up and loser chances once all `dice` are rolled."""
    tree = Tree.build(race, dice)

    counter = LeafCounter()
    tree.visit_leaves(counter.visit)

    expected = expected_leaf_count(len(dice))
    if counter.total != expected:
        raise OracleInvariantError(
            f"Visited {counter.total} leaves, expected {expected} for {len(dice)} dice",
        )

    logger.info(
        "Projected %s with %d dice over %d outcomes",
        race,
        len(dice),
        counter.total,
    )
    return counter.projection()
