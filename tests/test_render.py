import logging

from rich.console import Console

from camel_up_oracle.engine.logging import RichMarkupFormatter
from camel_up_oracle.render import render_projection, render_race


def _text(renderable) -> str:
    console = Console(width=100, record=True, color_system=None)
    console.print(renderable)
    return console.export_text()


def test_race_has_a_column_per_position(scenario):
    table = render_race(scenario("ro,+,,y").race)

    assert len(table.columns) == 4
    assert table.row_count == 2


def test_race_draws_stack_top_first(scenario):
    lines = _text(render_race(scenario("ro,+,y").race)).splitlines()

    top = next(i for i, line in enumerate(lines) if "O" in line)
    bottom = next(i for i, line in enumerate(lines) if "R" in line)
    assert top < bottom
    assert "+" in lines[bottom]
    assert "Y" in lines[bottom]


def test_projection_lists_present_camels(projected):
    table = render_projection(projected("r,,y", "r"))

    assert len(table.columns) == 4
    assert table.row_count == 2


def test_projection_shows_exact_and_percent(projected):
    output = _text(render_projection(projected("r,,y", "r"), ["winner"]))

    assert "2/3 (66.7%)" in output
    assert "1/3 (33.3%)" in output
    assert output.index("Red") < output.index("Yellow")


def test_formatter_highlights_camels_and_traps():
    record = logging.LogRecord(
        "camel_up.race",
        logging.DEBUG,
        __file__,
        1,
        "%s hits an Oasis, lands on slot %d",
        ("Red", 2),
        None,
    )

    formatted = RichMarkupFormatter().format(record)

    assert formatted.startswith("[dim]race[/dim]")
    assert "[red]Red[/]" in formatted
    assert "[bold magenta]Oasis[/bold magenta]" in formatted
