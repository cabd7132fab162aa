"""
Senet Rules Engine

Bitmask board, move legality and hidden-piece reconciliation for a
two-player Senet variant with invisible pieces.
"""

from .game import initialize, move, pass_turn
from .state import PublicState, PrivateState
from .cells import Occupancy, Occupant
from .config import GameConfig
from .rules import Move, get_legal_moves, is_legal_move
from .session import GameSession

__all__ = [
    "initialize",
    "move",
    "pass_turn",
    "PublicState",
    "PrivateState",
    "Occupancy",
    "Occupant",
    "GameConfig",
    "Move",
    "get_legal_moves",
    "is_legal_move",
    "GameSession",
]
