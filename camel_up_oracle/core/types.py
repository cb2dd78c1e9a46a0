from typing import Final, Literal

CamelName = Literal[
    "Red",
    "Orange",
    "Yellow",
    "Green",
    "White",
]

FaceValue = Literal[1, 2, 3]

Category = Literal["winner", "runner_up", "loser"]

# Canonical order, also used to iterate dice reproducibly
CAMELS: Final[tuple[CamelName, ...]] = ("Red", "Orange", "Yellow", "Green", "White")
FACES: Final[tuple[FaceValue, ...]] = (1, 2, 3)
CATEGORIES: Final[tuple[Category, ...]] = ("winner", "runner_up", "loser")

CAMEL_TOKENS: Final[dict[str, CamelName]] = {
    "r": "Red",
    "o": "Orange",
    "y": "Yellow",
    "g": "Green",
    "w": "White",
}
DIVIDER_TOKEN: Final[str] = ","
OASIS_TOKEN: Final[str] = "+"
SETBACK_TRAP_TOKEN: Final[str] = "-"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
