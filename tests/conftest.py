"""Shared test fixtures for Senet engine tests."""

from dataclasses import replace

import pytest

from senet import GameConfig, GameSession, initialize
from senet.bits import mask_of
from senet.state import PrivateState, PublicState

ALICE = "alice"
BOB = "bob"


def make_public(a_cells=(), b_cells=(), holder=ALICE, counter=0) -> PublicState:
    """Build a public state with A pieces on ``a_cells`` and B pieces on ``b_cells``."""
    return PublicState(
        occupied_mask=mask_of(a_cells) | mask_of(b_cells),
        owner_mask=mask_of(b_cells),
        authority_holder=holder,
        player_a=ALICE,
        player_b=BOB,
        counter=counter,
    )


def make_private(owner, hidden=(), counter=0) -> PrivateState:
    return PrivateState(owner=owner, positions=mask_of(hidden), counter=counter)


@pytest.fixture
def opening():
    """Initial public state and both private states (alice plays A)."""
    return initialize(ALICE, BOB)


@pytest.fixture
def opening_for_bob(opening):
    """Initial board with bob holding authority."""
    public, private_a, private_b = opening
    return replace(public, authority_holder=BOB), private_b


@pytest.fixture
def session():
    """Seeded local session, alice vs bob."""
    return GameSession(ALICE, BOB, GameConfig(seed=42, max_moves=50))


class FixedSticks:
    """Stand-in for the session RNG that lands the sticks for given throws."""

    def __init__(self, *throws, stick_count=4):
        self.flats = []
        for dice in throws:
            up = 0 if dice == 5 else dice
            self.flats += [1] * up + [0] * (stick_count - up)

    def randint(self, low, high):
        return self.flats.pop(0)


def throw_as(session, dice) -> int:
    """Make the session's next throw come out as ``dice``."""
    session.rng = FixedSticks(dice, stick_count=session.config.stick_count)
    return session.throw()
