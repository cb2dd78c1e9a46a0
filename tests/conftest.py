from typing import Callable

import pytest

from camel_up_oracle.core.types import CamelName, FaceValue
from camel_up_oracle.engine.dice import parse_dice
from camel_up_oracle.engine.oracle import Projection, project
from camel_up_oracle.engine.race import parse_race
from tests.test_utils import RaceScenario


@pytest.fixture
def scenario() -> Callable[..., RaceScenario]:
    """Factory fixture to create scenarios."""

    def _builder(
        race: str,
        rolls: list[tuple[CamelName, FaceValue]] | None = None,
    ) -> RaceScenario:
        return RaceScenario(race, rolls)

    return _builder


@pytest.fixture
def projected() -> Callable[[str, str], Projection]:
    """Factory fixture projecting race and dice text."""

    def _project(race: str, dice: str) -> Projection:
        return project(parse_race(race), parse_dice(dice))

    return _project


@pytest.fixture(scope="session")
def full_leg() -> Projection:
    """A whole leg with every die still in the pyramid."""
    return project(parse_race("gyor,,,w"), parse_dice("roygw"))
