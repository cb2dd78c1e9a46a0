import pytest

from camel_up_oracle.core.exceptions import (
    DiceNotAMarkerError,
    DiceParseError,
    NotACamelError,
)
from camel_up_oracle.engine.dice import Dice, parse_dice


def test_dice_can_be_parsed():
    assert parse_dice("ryg") == Dice.of(["Red", "Yellow", "Green"])


def test_duplicate_dice_collapse():
    assert len(parse_dice("rrr")) == 1


def test_empty_text_is_an_empty_pool():
    assert len(parse_dice("")) == 0


def test_default_pool_has_every_camel():
    dice = Dice.default()

    assert len(dice) == 5
    assert parse_dice("roygw") == dice


def test_remove_leaves_original_untouched():
    dice = parse_dice("ry")

    smaller = dice.remove("Red")

    assert list(smaller) == ["Yellow"]
    assert list(dice) == ["Red", "Yellow"]


def test_iteration_follows_canonical_order():
    assert list(parse_dice("wgyor")) == ["Red", "Orange", "Yellow", "Green", "White"]


@pytest.mark.parametrize("text", ["r,", "r+", "-"])
def test_non_camel_markers_are_rejected(text: str):
    with pytest.raises(NotACamelError):
        _ = parse_dice(text)


def test_unknown_tokens_are_rejected():
    with pytest.raises(DiceNotAMarkerError) as excinfo:
        _ = parse_dice("rb")

    assert excinfo.value.token == "b"
    assert isinstance(excinfo.value, DiceParseError)
