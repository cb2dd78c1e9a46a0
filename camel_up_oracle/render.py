"""Terminal rendering of races and projections with Rich."""

from collections.abc import Sequence

from rich.table import Table
from rich.text import Text

from camel_up_oracle.core.types import CAMELS, CATEGORIES, Category
from camel_up_oracle.engine.logging import CAMEL_COLOR
from camel_up_oracle.engine.markers import CamelMarker, Marker, Oasis
from camel_up_oracle.engine.oracle import Projection
from camel_up_oracle.engine.race import Race

CATEGORY_TITLES: dict[Category, str] = {
    "winner": "Winner",
    "runner_up": "Runner-up",
    "loser": "Loser",
}


def _cell(marker: Marker | None) -> Text:
    if marker is None:
        return Text("")
    if isinstance(marker, CamelMarker):
        return Text(marker.camel[0], style=f"bold {CAMEL_COLOR[marker.camel]}")
    style = "bold green" if isinstance(marker, Oasis) else "bold red"
    return Text(marker.token, style=style)


def render_race(race: Race) -> Table:
    """One column per position, rear on the left, top of each stack first."""
    slots = race.positions()
    height = max((len(slot) for slot in slots), default=0)

    table = Table(show_header=True, show_lines=False, box=None, pad_edge=False)
    for number in range(1, len(slots) + 1):
        table.add_column(str(number), justify="center")

    for level in reversed(range(height)):
        table.add_row(
            *(_cell(slot[level] if level < len(slot) else None) for slot in slots),
        )
    return table


def render_projection(
    projection: Projection,
    categories: Sequence[Category] = CATEGORIES,
) -> Table:
    """Tabulate the chances, most likely winner first."""
    table = Table(title=f"{projection.total} outcomes")
    table.add_column("Camel")
    for category in categories:
        table.add_column(CATEGORY_TITLES[category], justify="right")

    leading = categories[0]
    ranked = [camel for camel, _ in projection[leading].ranked()]
    ordered = ranked + [camel for camel in CAMELS if camel not in ranked]
    present = {
        camel for category in categories for camel in projection[category]
    }

    for camel in ordered:
        if camel not in present:
            continue
        cells = [Text(camel, style=CAMEL_COLOR[camel])]
        for category in categories:
            chance = projection[category][camel]
            cells.append(Text(f"{chance} ({float(chance):.1%})"))
        table.add_row(*cells)
    return table
