"""Base class for all Senet agents."""

from abc import ABC, abstractmethod
from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from senet.rules import Move
    from senet.state import PrivateState, PublicState


class Agent(ABC):
    """
    Abstract base class for Senet agents.

    An agent only ever sees the public state and its own private state.

    Attributes:
        identity: The player identity the agent moves for.
    """

    def __init__(self, identity: str):
        """
        Initialize the agent.

        Args:
            identity: The player identity the agent moves for.
        """
        self.identity = identity

    @abstractmethod
    def choose_move(
        self,
        public: "PublicState",
        private: "PrivateState",
        legal_moves: List["Move"],
    ) -> Optional["Move"]:
        """
        Choose a move from the list of legal moves.

        Args:
            public: The shared board.
            private: The agent's own invisible pieces.
            legal_moves: Legal moves for the current throw.

        Returns:
            The chosen move, or None to pass when nothing is legal.
        """
        pass
