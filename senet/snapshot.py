"""
Snapshot serialization of state tokens.

``public_snapshot`` produces the view both players may see: it is built
from the public state alone, so it cannot carry invisible pieces.
``private_snapshot`` is for the owner of a private state only.
"""

from typing import Any, Dict, List

from senet.bits import CELL_COUNT, bits_of
from senet.board import classify
from senet.cells import Occupant
from senet.state import PrivateState, PublicState


def public_snapshot(state: PublicState) -> Dict[str, Any]:
    """Serialize a PublicState into a stable JSON dict.

    The snapshot includes:
    - players and the current authority holder
    - one entry per board cell with its house and visible occupant
    - piece counts per player as visible on the board
    - the opaque counter, unchanged
    """
    board = state.occupancy
    names = {Occupant.PLAYER_A: state.player_a, Occupant.PLAYER_B: state.player_b}
    cells: List[Dict[str, Any]] = []
    for i in range(1, CELL_COUNT + 1):
        occupant = board.occupant(i)
        cells.append(
            {
                "cell": i,
                "house": classify(i).value,
                "occupant": names.get(occupant),
            }
        )

    return {
        "player_a": state.player_a,
        "player_b": state.player_b,
        "authority_holder": state.authority_holder,
        # Owner bits of empty cells are don't-care; normalize them away.
        "occupied_mask": state.occupied_mask,
        "owner_mask": state.owner_mask & state.occupied_mask,
        "cells": cells,
        "visible_pieces": {
            state.player_a: board.count(Occupant.PLAYER_A),
            state.player_b: board.count(Occupant.PLAYER_B),
        },
        "counter": state.counter,
    }


def private_snapshot(state: PrivateState) -> Dict[str, Any]:
    """Serialize a PrivateState for its owner."""
    return {
        "owner": state.owner,
        "positions": state.positions,
        "hidden_cells": list(bits_of(state.positions)),
        "counter": state.counter,
    }
