"""
Move legality.

This module provides the checks run against the reconciled occupancy and
the legal-move listing used by agents. Checks run in a fixed order and the
first failure aborts the move.
"""

from dataclasses import dataclass
from typing import List

from senet.bits import CELL_COUNT, is_board_cell
from senet.board import is_protected_house
from senet.cells import Occupancy, Occupant
from senet.exceptions import (
    IllegalDestinationError,
    InconsistentHiddenStateError,
    InvalidDiceError,
    InvalidMoverError,
    MoveError,
)
from senet import reconcile
from senet.state import PrivateState, PublicState

MIN_ROLL = 1
MAX_ROLL = 5


@dataclass(frozen=True)
class Move:
    """A legal move for the holder of the board."""

    origin: int
    dice: int
    is_exchange: bool = False

    @property
    def destination(self) -> int:
        return self.origin + self.dice


def _neighbour(occupancy: Occupancy, cell: int) -> Occupant:
    # Off-board neighbours of cells 1 and 30 never match.
    if not is_board_cell(cell):
        return Occupant.EMPTY
    return occupancy.occupant(cell)


def is_protected(occupancy: Occupancy, cell: int) -> bool:
    """
    Return True if the occupant of ``cell`` cannot be exchanged.

    Empty cells are never protected. A piece on cells 26..30 always is.
    Elsewhere a piece is protected when a neighbour holds a piece of the
    same player.
    """
    occupant = occupancy.occupant(cell)
    if occupant is Occupant.EMPTY:
        return False
    if is_protected_house(cell):
        return True
    return occupant in (_neighbour(occupancy, cell - 1), _neighbour(occupancy, cell + 1))


def check_move(occupancy: Occupancy, origin: int, dice: int, role: Occupant) -> Occupant:
    """
    Validate a move on the reconciled occupancy.

    ``role`` is the mover's piece colour, as given by ``PublicState.role_of``;
    EMPTY stands for an identity that is not playing.

    Returns:
        The occupant of the destination before the move.

    Raises:
        InvalidMoverError: origin not held by the mover.
        InvalidDiceError: dice outside 1..5.
        IllegalDestinationError: destination off the board, held by the
            mover, or a protected opponent piece.
    """
    if not is_board_cell(origin):
        raise InvalidMoverError(f"Origin {origin} is not a board cell", origin, dice)
    if role is Occupant.EMPTY:
        raise InvalidMoverError("Caller is not playing this game", origin, dice)
    if occupancy.occupant(origin) is not role:
        raise InvalidMoverError(f"Cell {origin} holds no {role.value} piece", origin, dice)
    if not MIN_ROLL <= dice <= MAX_ROLL:
        raise InvalidDiceError(f"Dice must be in {MIN_ROLL}..{MAX_ROLL}, got {dice}", origin, dice)
    if occupancy.occupant(origin) is Occupant.EMPTY:
        raise InvalidMoverError(f"Cell {origin} is empty", origin, dice)

    destination = origin + dice
    if destination > CELL_COUNT:
        raise IllegalDestinationError(
            f"Destination {destination} is beyond cell {CELL_COUNT}", origin, dice
        )
    target = occupancy.occupant(destination)
    if target is role:
        raise IllegalDestinationError(f"Cell {destination} holds the mover's own piece", origin, dice)
    if is_protected(occupancy, destination):
        raise IllegalDestinationError(f"Cell {destination} is protected", origin, dice)
    return target


def get_legal_moves(public: PublicState, private: PrivateState, caller: str, dice: int) -> List[Move]:
    """
    List every legal move for ``caller`` with a throw of ``dice``.

    Only the caller's own private state is consulted, so the result never
    depends on the opponent's invisible pieces.

    Raises:
        InconsistentHiddenStateError: the public board contradicts the
            caller's invisible pieces, so no move can be played at all.
    """
    reconcile.validate(public, private, caller)
    occupancy = reconcile.reconcile_in(public, private, caller)
    role = public.role_of(caller)
    moves: List[Move] = []
    for origin in occupancy.cells(role):
        try:
            target = check_move(occupancy, origin, dice, role)
        except MoveError:
            continue
        moves.append(Move(origin, dice, is_exchange=target is not Occupant.EMPTY))
    return moves


def is_legal_move(public: PublicState, private: PrivateState, caller: str, origin: int, dice: int) -> bool:
    """Non-raising form of the full move check."""
    try:
        moves = get_legal_moves(public, private, caller, dice)
    except InconsistentHiddenStateError:
        return False
    return any(m.origin == origin for m in moves)
