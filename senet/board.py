"""
Board layout, special houses and text rendering.

The 30 cells are laid out in three rows of ten, snaking back on the
middle row: 1-10 left to right, 20-11 left to right, 21-30 left to right.
"""

from enum import Enum
from typing import Dict, List, Optional

from senet.bits import CELL_COUNT, test_bit
from senet.cells import Occupancy, Occupant

SECOND_LIFE = 15
BEAUTY = 26
WATERS = 27
THREE_JUDGES = 28
TWO_JUDGES = 29
HORUS = 30

PROTECTED_FROM = BEAUTY

ROW_LENGTH = 10


class House(Enum):
    """Named houses on the board."""

    NORMAL = "normal"
    SECOND_LIFE = "second_life"
    BEAUTY = "beauty"
    WATERS = "waters"
    THREE_JUDGES = "three_judges"
    TWO_JUDGES = "two_judges"
    HORUS = "horus"


HOUSES: Dict[int, House] = {
    SECOND_LIFE: House.SECOND_LIFE,
    BEAUTY: House.BEAUTY,
    WATERS: House.WATERS,
    THREE_JUDGES: House.THREE_JUDGES,
    TWO_JUDGES: House.TWO_JUDGES,
    HORUS: House.HORUS,
}

# One-letter markers used by render_board
HOUSE_MARKERS: Dict[House, str] = {
    House.SECOND_LIFE: "*",
    House.BEAUTY: "b",
    House.WATERS: "w",
    House.THREE_JUDGES: "3",
    House.TWO_JUDGES: "2",
    House.HORUS: "h",
}

PIECE_CHARS: Dict[Occupant, str] = {
    Occupant.PLAYER_A: "A",
    Occupant.PLAYER_B: "B",
}


def classify(i: int) -> House:
    """Return the house at cell ``i``; ordinary cells are ``House.NORMAL``."""
    return HOUSES.get(i, House.NORMAL)


def is_protected_house(i: int) -> bool:
    """Cells 26..30 always protect their occupant."""
    return PROTECTED_FROM <= i <= CELL_COUNT


def board_rows() -> List[List[int]]:
    """Cell numbers per display row, top to bottom."""
    first = list(range(1, ROW_LENGTH + 1))
    second = list(range(2 * ROW_LENGTH, ROW_LENGTH, -1))
    third = list(range(2 * ROW_LENGTH + 1, CELL_COUNT + 1))
    return [first, second, third]


def render_board(occupancy: Occupancy, hidden: Optional[int] = None) -> str:
    """
    Render the board as text.

    Args:
        occupancy: Occupancy to draw.
        hidden: Optional positions mask of the viewer's invisible pieces;
            those cells are drawn in lowercase.
    """
    lines = []
    border = "+" + "----+" * ROW_LENGTH
    lines.append(border)
    for row in board_rows():
        numbers = "|"
        pieces = "|"
        for cell in row:
            numbers += f"{cell:>3}{HOUSE_MARKERS.get(classify(cell), ' ')}|"
            occupant = occupancy.occupant(cell)
            char = PIECE_CHARS.get(occupant, ".")
            if hidden and test_bit(hidden, cell):
                char = char.lower()
            pieces += f" {char}  |"
        lines.append(numbers)
        lines.append(pieces)
        lines.append(border)
    return "\n".join(lines)
