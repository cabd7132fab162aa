"""
Wire models for state tokens.

Producers must leave reserved bits 31-32 at zero; these models reject any
token that does not.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from senet.bits import check_mask
from senet.state import PrivateState, PublicState


class PublicStateModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    occupied_mask: int = Field(ge=0)
    owner_mask: int = Field(ge=0)
    authority_holder: str
    player_a: str
    player_b: str
    counter: Any = 0

    @field_validator("occupied_mask", "owner_mask")
    @classmethod
    def check_reserved_bits(cls, v: int) -> int:
        return check_mask(v)

    @model_validator(mode="after")
    def check_players(self) -> "PublicStateModel":
        if self.player_a == self.player_b:
            raise ValueError("player_a and player_b must differ")
        if self.authority_holder not in (self.player_a, self.player_b):
            raise ValueError("authority_holder must be player_a or player_b")
        return self

    @classmethod
    def from_state(cls, state: PublicState) -> "PublicStateModel":
        return cls(
            occupied_mask=state.occupied_mask,
            owner_mask=state.owner_mask,
            authority_holder=state.authority_holder,
            player_a=state.player_a,
            player_b=state.player_b,
            counter=state.counter,
        )

    def to_state(self) -> PublicState:
        return PublicState(**self.model_dump())


class PrivateStateModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    owner: str
    positions: int = Field(default=0, ge=0)
    counter: Any = 0

    @field_validator("positions")
    @classmethod
    def check_reserved_bits(cls, v: int) -> int:
        return check_mask(v, "positions")

    @classmethod
    def from_state(cls, state: PrivateState) -> "PrivateStateModel":
        return cls(owner=state.owner, positions=state.positions, counter=state.counter)

    def to_state(self) -> PrivateState:
        return PrivateState(**self.model_dump())
