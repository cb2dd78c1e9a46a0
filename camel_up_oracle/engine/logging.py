import logging
import re
from typing import get_args, override

from rich.logging import RichHandler

from camel_up_oracle.core.types import CamelName

CAMEL_NAMES = set(get_args(CamelName))
TRAP_NAMES = {"Oasis", "SetbackTrap"}


# Precompiled regex patterns for highlighting
CAMEL_PATTERN = re.compile(rf"(?<!\[)\b({'|'.join(map(re.escape, CAMEL_NAMES))})\b")
TRAP_PATTERN = re.compile(rf"\b({'|'.join(map(re.escape, TRAP_NAMES))})\b")


# Simple color theme for Rich
COLOR = {
    "camel": "yellow",
    "trap": "bold magenta",
    "count": "bold green",
    "warning": "bold red",
    "prefix": "dim",
}

CAMEL_COLOR = {
    "Red": "red",
    "Orange": "dark_orange",
    "Yellow": "yellow",
    "Green": "green",
    "White": "white",
}


class RichMarkupFormatter(logging.Formatter):
    @override
    def format(self, record: logging.LogRecord) -> str:
        prefix = record.name.removeprefix("camel_up.")

        message = record.getMessage()
        styled = message

        styled = TRAP_PATTERN.sub(rf"[{COLOR['trap']}]\1[/{COLOR['trap']}]", styled)
        styled = re.sub(
            r"\b(\d+) (outcomes|nodes)\b",
            rf"[{COLOR['count']}]\1[/{COLOR['count']}] \2",
            styled,
        )
        styled = CAMEL_PATTERN.sub(
            lambda match: f"[{CAMEL_COLOR[match.group(1)]}]{match.group(1)}[/]",
            styled,
        )

        if record.levelno >= logging.WARNING:
            styled = f"[{COLOR['warning']}]{styled}[/{COLOR['warning']}]"

        return f"[{COLOR['prefix']}]{prefix}[/{COLOR['prefix']}]  {styled}"


def configure_logging(level: int | str = logging.INFO) -> None:
    logger = logging.getLogger("camel_up")
    logger.setLevel(level)
    handler = RichHandler(markup=True, show_path=False, show_time=False)
    handler.setFormatter(RichMarkupFormatter())
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False
