"""Exact Camel Up leg probabilities.

>>> from camel_up_oracle import parse_dice, parse_race, project
>>> result = project(parse_race("r,,w"), parse_dice("rw"))
>>> result.winner["White"] > result.winner["Red"]
True
"""

from camel_up_oracle.core.fraction import Rational
from camel_up_oracle.core.types import CAMELS, CamelName, FaceValue
from camel_up_oracle.engine.dice import Dice, parse_dice
from camel_up_oracle.engine.oracle import Distribution, Projection, project
from camel_up_oracle.engine.race import Race, Roll, parse_race, perform

__all__ = [
    "CAMELS",
    "CamelName",
    "Dice",
    "Distribution",
    "FaceValue",
    "Projection",
    "Race",
    "Rational",
    "Roll",
    "parse_dice",
    "parse_race",
    "perform",
    "project",
]
