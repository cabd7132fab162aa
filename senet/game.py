"""
Engine entry points.

Both entry points are pure state transitions: they take the current tokens
and return new ones, or raise without producing anything.
"""

import logging
from dataclasses import replace
from typing import Tuple

from senet import reconcile
from senet.cells import Occupant
from senet.exceptions import InvalidDiceError
from senet.rules import MAX_ROLL, MIN_ROLL, check_move
from senet.state import PrivateState, PublicState
from senet.turns import initialize, next_holder

logger = logging.getLogger(__name__)

__all__ = ["initialize", "move", "pass_turn"]


def move(
    caller: str,
    origin_cell: int,
    dice: int,
    public_state: PublicState,
    private_state: PrivateState,
) -> Tuple[PublicState, PrivateState]:
    """
    Play ``dice`` cells forward from ``origin_cell``.

    Args:
        caller: Identity of the mover. The authority runtime guarantees the
            caller holds ``public_state``.
        origin_cell: Cell of the piece to move, 1..30.
        dice: Throw value, 1..5.
        public_state: Current shared board.
        private_state: The caller's own invisible pieces.

    Returns:
        (new_public_state, new_private_state)

    Raises:
        MoveError: any rule violation; nothing is produced.
    """
    reconcile.validate(public_state, private_state, caller)
    working = reconcile.reconcile_in(public_state, private_state, caller)

    target = check_move(working, origin_cell, dice, public_state.role_of(caller))
    destination = origin_cell + dice
    if target is Occupant.EMPTY:
        working = working.move_piece(origin_cell, destination)
    else:
        working = working.exchange(origin_cell, destination)

    positions = reconcile.relocate(private_state.positions, origin_cell, destination)
    working, positions = reconcile.conceal(working, positions, destination)
    board = reconcile.reconcile_out(working, positions)

    opponent = public_state.opponent_of(caller)
    holder = next_holder(caller, opponent, dice)
    logger.debug(
        f"{caller} moved {origin_cell}->{destination} "
        f"({'exchange' if target is not Occupant.EMPTY else 'step'}), next: {holder}"
    )

    new_public = replace(
        public_state,
        occupied_mask=board.occupied_mask,
        owner_mask=board.owner_mask,
        authority_holder=holder,
    )
    return new_public, replace(private_state, positions=positions)


def pass_turn(caller: str, dice: int, public_state: PublicState) -> PublicState:
    """
    Give up a throw that has no legal move.

    The board is unchanged; authority follows the usual throw rule. Only the
    public state is consulted, so confirming that the throw has no legal move
    is left to the referee holding the caller's private state.
    """
    if not MIN_ROLL <= dice <= MAX_ROLL:
        raise InvalidDiceError(f"Dice must be in {MIN_ROLL}..{MAX_ROLL}, got {dice}", dice=dice)
    holder = next_holder(caller, public_state.opponent_of(caller), dice)
    logger.debug(f"{caller} passed on a throw of {dice}, next: {holder}")
    return replace(public_state, authority_holder=holder)
