"""Greedy agent that prefers exchanges and the house of second life."""

from typing import List, Optional

from senet.board import SECOND_LIFE
from senet.rules import Move
from senet.state import PrivateState, PublicState

from agents.base import Agent


class GreedyAgent(Agent):
    """
    Simple AI with a fixed preference order.

    Priority order:
    1. Land on the house of second life (the piece turns invisible)
    2. Exchange with an opponent piece, furthest destination first
    3. Advance the rearmost piece
    """

    def choose_move(
        self, public: PublicState, private: PrivateState, legal_moves: List[Move]
    ) -> Optional[Move]:
        if not legal_moves:
            return None

        for m in legal_moves:
            if m.destination == SECOND_LIFE:
                return m

        exchanges = [m for m in legal_moves if m.is_exchange]
        if exchanges:
            return max(exchanges, key=lambda m: m.destination)

        # Bring up stragglers so pieces keep covering each other
        return min(legal_moves, key=lambda m: m.origin)
