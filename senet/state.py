"""
Public and private state tokens.

The public state is shared by both players and changes hands every move.
Each player also owns a private state recording where their invisible
pieces are. A private state is never merged into a public state that the
opponent will see.
"""

from dataclasses import dataclass
from typing import Any

from senet.bits import check_mask
from senet.cells import Occupancy, Occupant
from senet.exceptions import ValidationError


@dataclass(frozen=True)
class PublicState:
    """Board visible to both players plus the current authority holder."""

    occupied_mask: int
    owner_mask: int
    authority_holder: str
    player_a: str
    player_b: str
    counter: Any = 0

    def __post_init__(self) -> None:
        check_mask(self.occupied_mask, "occupied_mask")
        check_mask(self.owner_mask, "owner_mask")
        if self.player_a == self.player_b:
            raise ValidationError(f"Players must differ, both are {self.player_a!r}")
        if self.authority_holder not in (self.player_a, self.player_b):
            raise ValidationError(
                f"Authority holder {self.authority_holder!r} is not one of the players"
            )

    @property
    def occupancy(self) -> Occupancy:
        return Occupancy(self.occupied_mask, self.owner_mask)

    def role_of(self, identity: str) -> Occupant:
        """Map an identity to its piece colour; strangers map to EMPTY."""
        if identity == self.player_a:
            return Occupant.PLAYER_A
        if identity == self.player_b:
            return Occupant.PLAYER_B
        return Occupant.EMPTY

    def opponent_of(self, identity: str) -> str:
        if identity == self.player_a:
            return self.player_b
        if identity == self.player_b:
            return self.player_a
        raise ValidationError(f"{identity!r} is not playing this game")


@dataclass(frozen=True)
class PrivateState:
    """One player's invisible pieces."""

    owner: str
    positions: int = 0
    counter: Any = 0

    def __post_init__(self) -> None:
        check_mask(self.positions, "positions")
