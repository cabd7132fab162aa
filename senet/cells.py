"""
Cell occupancy derived from the (occupied_mask, owner_mask) pair.

An owner bit is only meaningful where the occupied bit is set. Helpers here
never read an owner bit for an empty cell.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from senet.bits import CELL_COUNT, bits_of, set_bit, test_bit

Masks = Tuple[int, int]


class Occupant(Enum):
    """What a cell holds."""

    EMPTY = "empty"
    PLAYER_A = "a"
    PLAYER_B = "b"


def occupant_of(occupied_mask: int, owner_mask: int, i: int) -> Occupant:
    """Return the occupant of cell ``i``."""
    if not test_bit(occupied_mask, i):
        return Occupant.EMPTY
    return Occupant.PLAYER_B if test_bit(owner_mask, i) else Occupant.PLAYER_A


def place(occupied_mask: int, owner_mask: int, cell: int, player: Occupant) -> Masks:
    """Put ``player``'s piece on ``cell``. Owner bit is 0 for A, 1 for B."""
    if player is Occupant.EMPTY:
        return clear(occupied_mask, owner_mask, cell)
    occupied_mask = set_bit(occupied_mask, cell, True)
    owner_mask = set_bit(owner_mask, cell, player is Occupant.PLAYER_B)
    return occupied_mask, owner_mask


def clear(occupied_mask: int, owner_mask: int, cell: int) -> Masks:
    """Empty ``cell``, clearing both bits."""
    return set_bit(occupied_mask, cell, False), set_bit(owner_mask, cell, False)


def move_piece(occupied_mask: int, owner_mask: int, origin: int, destination: int) -> Masks:
    """Relocate the piece at ``origin`` to ``destination``; ``origin`` becomes empty."""
    piece = occupant_of(occupied_mask, owner_mask, origin)
    occupied_mask, owner_mask = place(occupied_mask, owner_mask, destination, piece)
    return clear(occupied_mask, owner_mask, origin)


def exchange(occupied_mask: int, owner_mask: int, origin: int, destination: int) -> Masks:
    """Swap the occupants of two cells. Nothing leaves the board."""
    at_origin = occupant_of(occupied_mask, owner_mask, origin)
    at_destination = occupant_of(occupied_mask, owner_mask, destination)
    occupied_mask, owner_mask = place(occupied_mask, owner_mask, origin, at_destination)
    return place(occupied_mask, owner_mask, destination, at_origin)


@dataclass(frozen=True)
class Occupancy:
    """Immutable (occupied_mask, owner_mask) pair with cell-level operations."""

    occupied_mask: int
    owner_mask: int

    def occupant(self, i: int) -> Occupant:
        return occupant_of(self.occupied_mask, self.owner_mask, i)

    def place(self, cell: int, player: Occupant) -> "Occupancy":
        return Occupancy(*place(self.occupied_mask, self.owner_mask, cell, player))

    def clear(self, cell: int) -> "Occupancy":
        return Occupancy(*clear(self.occupied_mask, self.owner_mask, cell))

    def move_piece(self, origin: int, destination: int) -> "Occupancy":
        return Occupancy(*move_piece(self.occupied_mask, self.owner_mask, origin, destination))

    def exchange(self, origin: int, destination: int) -> "Occupancy":
        return Occupancy(*exchange(self.occupied_mask, self.owner_mask, origin, destination))

    def cells(self, player: Occupant) -> List[int]:
        """Board cells held by ``player`` (or empty cells for ``Occupant.EMPTY``)."""
        if player is Occupant.EMPTY:
            return [i for i in range(1, CELL_COUNT + 1) if self.occupant(i) is Occupant.EMPTY]
        return [i for i in bits_of(self.occupied_mask) if self.occupant(i) is player]

    def count(self, player: Occupant) -> int:
        return len(self.cells(player))
