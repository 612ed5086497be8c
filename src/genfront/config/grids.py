"""Letter grids for the supported clock languages.

Each grid is a tuple of rows of equal length. Every row is a string, one
character per LED cell.
"""

from enum import Enum


class GridContent(str, Enum):
    """Built-in grid contents."""

    FRENCH = "french"
    ENGLISH = "english"


FRENCH_GRID: tuple[str, ...] = (
    "ILBESTWCINQ",
    "DEUXSEPTUNE",
    "QUATRETROIS",
    "NEUFSIXHUIT",
    "MIDIXMINUIT",
    "ONZEJHEURES",
    "LMOINSKCINQ",
    "ETYDIXDEMIE",
    "MVINGT-CINQ",
    "DLERQUARTBF",
)

ENGLISH_GRID: tuple[str, ...] = (
    "ITLISASAMPM",
    "ACQUARTERDC",
    "TWENTYFIVEX",
    "HALFSTENFTO",
    "PASTERUNINE",
    "ONESIXTHREE",
    "FOURFIVETWO",
    "EIGHTELEVEN",
    "SEVENTWELVE",
    "TENSEOCLOCK",
)

GRIDS: dict[GridContent, tuple[str, ...]] = {
    GridContent.FRENCH: FRENCH_GRID,
    GridContent.ENGLISH: ENGLISH_GRID,
}
