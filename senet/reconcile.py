"""
Hidden-piece reconciliation.

A move brackets validation with two pure steps:

1. ``reconcile_in`` merges the mover's invisible pieces into the public
   occupancy so the rules see the real board.
2. ``reconcile_out`` strips them again before the public state is handed
   to the next authority holder.

The merged occupancy is a local value inside one move and is never stored.
"""

from typing import Tuple

from senet.bits import set_bit, test_bit
from senet.board import SECOND_LIFE
from senet.cells import Occupancy, Occupant
from senet.exceptions import InconsistentHiddenStateError
from senet.state import PrivateState, PublicState


def validate(public: PublicState, private: PrivateState, caller: str) -> None:
    """
    Check the unmerged public state against the caller's invisible pieces.

    The opponent cannot knowingly land on a cell the caller secretly holds,
    so a public opponent piece on one of those cells means the public state
    is not one the caller can have reached.

    Raises:
        InconsistentHiddenStateError: if the states contradict each other.
    """
    if private.owner != caller:
        raise InconsistentHiddenStateError(
            f"Private state of {private.owner!r} used by {caller!r}"
        )
    role = public.role_of(caller)
    occupied, owner, positions = public.occupied_mask, public.owner_mask, private.positions
    if role is Occupant.PLAYER_A:
        conflict = occupied & owner & positions
    elif role is Occupant.PLAYER_B:
        conflict = occupied & positions & ~owner
    else:
        # Strangers are rejected by the ownership check.
        return
    if conflict:
        raise InconsistentHiddenStateError(
            f"Public state contradicts hidden pieces of {caller!r}"
        )


def reconcile_in(public: PublicState, private: PrivateState, caller: str) -> Occupancy:
    """Merge the caller's invisible pieces into the public occupancy."""
    occupied = public.occupied_mask | private.positions
    owner = public.owner_mask
    if public.role_of(caller) is Occupant.PLAYER_B:
        owner |= private.positions
    else:
        # Stale don't-care owner bits under A's hidden cells must read as A.
        owner &= ~private.positions
    return Occupancy(occupied, owner)


def relocate(positions: int, origin: int, destination: int) -> int:
    """Move an invisible marker from ``origin`` to ``destination`` if present."""
    if not test_bit(positions, origin):
        return positions
    positions = set_bit(positions, origin, False)
    return set_bit(positions, destination, True)


def conceal(occupancy: Occupancy, positions: int, destination: int) -> Tuple[Occupancy, int]:
    """A piece landing on the house of second life becomes invisible."""
    if destination != SECOND_LIFE:
        return occupancy, positions
    positions = set_bit(positions, SECOND_LIFE, True)
    return occupancy.clear(SECOND_LIFE), positions


def reconcile_out(occupancy: Occupancy, positions: int) -> Occupancy:
    """Remove every invisible piece from the public occupancy."""
    return Occupancy(
        occupancy.occupied_mask & ~positions,
        occupancy.owner_mask & ~positions,
    )
