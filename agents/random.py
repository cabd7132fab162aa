"""Random agent that makes random legal moves."""

import random
from typing import List, Optional

from senet.rules import Move
from senet.state import PrivateState, PublicState

from agents.base import Agent


class RandomAgent(Agent):
    """Simple AI that picks any legal move."""

    def __init__(self, identity: str, seed: Optional[int] = None):
        super().__init__(identity)
        self.rng = random.Random(seed)

    def choose_move(
        self, public: PublicState, private: PrivateState, legal_moves: List[Move]
    ) -> Optional[Move]:
        if not legal_moves:
            return None
        return self.rng.choice(legal_moves)
