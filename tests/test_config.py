import msgspec
import pytest

from camel_up_oracle.core.exceptions import RaceParseError
from camel_up_oracle.engine.dice import Dice, parse_dice
from camel_up_oracle.engine.race import parse_race
from camel_up_oracle.simulation.config import OracleConfig, ScenarioConfig

CONFIG = """
log_level = "INFO"

[[scenarios]]
name = "opening"
race = "gyor,,,w"

[[scenarios]]
name = "chase"
race = "r,,y"
dice = "r"
"""


def test_loads_scenarios_from_toml(tmp_path):
    path = tmp_path / "oracle.toml"
    path.write_text(CONFIG)

    config = OracleConfig.from_toml(str(path))

    assert config.log_level == "INFO"
    assert [s.name for s in config.scenarios] == ["opening", "chase"]
    assert config.scenarios[0].dice == "roygw"


def test_scenario_parses_race_and_dice():
    race, dice = ScenarioConfig(name="chase", race="r,,y", dice="r").parsed()

    assert race == parse_race("r,,y")
    assert dice == parse_dice("r")


def test_default_scenario_uses_every_die():
    _, dice = ScenarioConfig(name="opening", race="gyor,,,w").parsed()

    assert dice == Dice.default()


def test_scenario_surfaces_parse_errors():
    with pytest.raises(RaceParseError):
        _ = ScenarioConfig(name="broken", race="r+").parsed()


def test_defaults_without_scenarios(tmp_path):
    path = tmp_path / "empty.toml"
    path.write_text("")

    config = OracleConfig.from_toml(str(path))

    assert config.log_level == "WARNING"
    assert config.scenarios == []


def test_rejects_malformed_schema(tmp_path):
    path = tmp_path / "bad.toml"
    path.write_text('[[scenarios]]\nrace = "r,y"\n')

    with pytest.raises(msgspec.ValidationError):
        _ = OracleConfig.from_toml(str(path))


def test_rejects_unknown_log_level(tmp_path):
    path = tmp_path / "loud.toml"
    path.write_text('log_level = "LOUD"\n')

    with pytest.raises(msgspec.ValidationError):
        _ = OracleConfig.from_toml(str(path))
