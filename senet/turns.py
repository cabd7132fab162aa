"""
Turn transfer and game initialization.
"""

from typing import Any, FrozenSet, Tuple

from senet.cells import Occupancy
from senet.exceptions import ValidationError
from senet.state import PrivateState, PublicState

# Throws that hand the board to the opponent; any other throw plays again.
PASS_ROLLS: FrozenSet[int] = frozenset({2, 3})

# Cells 1..10 occupied, alternating A, B, A, ... from cell 1.
INITIAL_OCCUPIED = 0b1111111111
INITIAL_OWNER = 0b1010101010


def next_holder(current_holder: str, opponent: str, dice: int) -> str:
    """Return who moves after a throw of ``dice``."""
    if dice in PASS_ROLLS:
        return opponent
    return current_holder


def initial_occupancy() -> Occupancy:
    return Occupancy(INITIAL_OCCUPIED, INITIAL_OWNER)


def initialize(
    caller: str, opponent: str, counter: Any = 0
) -> Tuple[PublicState, PrivateState, PrivateState]:
    """
    Create the starting public state and both private states.

    The caller plays A and holds authority first.

    Returns:
        (public_state, caller_private_state, opponent_private_state)
    """
    if caller == opponent:
        raise ValidationError(f"A game needs two distinct players, got {caller!r} twice")
    board = initial_occupancy()
    public = PublicState(
        occupied_mask=board.occupied_mask,
        owner_mask=board.owner_mask,
        authority_holder=caller,
        player_a=caller,
        player_b=opponent,
        counter=counter,
    )
    return public, PrivateState(owner=caller, counter=counter), PrivateState(owner=opponent, counter=counter)
