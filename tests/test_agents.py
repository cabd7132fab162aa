"""
Tests for the built-in agents.
"""

from agents import GreedyAgent, RandomAgent
from senet.rules import Move, get_legal_moves

from tests.conftest import ALICE, make_private, make_public


def test_agents_pass_without_moves():
    public = make_public(a_cells=[30])
    private = make_private(ALICE)
    assert RandomAgent(ALICE, seed=0).choose_move(public, private, []) is None
    assert GreedyAgent(ALICE).choose_move(public, private, []) is None


def test_random_agent_picks_legal_move():
    public = make_public(a_cells=[1, 3, 5, 7, 9], b_cells=[2, 4, 6, 8, 10])
    private = make_private(ALICE)
    legal = get_legal_moves(public, private, ALICE, 1)
    for seed in range(5):
        assert RandomAgent(ALICE, seed=seed).choose_move(public, private, legal) in legal


def test_greedy_prefers_second_life():
    public = make_public(a_cells=[5, 13], b_cells=[7])
    private = make_private(ALICE)
    legal = get_legal_moves(public, private, ALICE, 2)
    assert GreedyAgent(ALICE).choose_move(public, private, legal) == Move(13, 2)


def test_greedy_prefers_furthest_exchange():
    public = make_public(a_cells=[1, 10], b_cells=[3, 12])
    private = make_private(ALICE)
    legal = get_legal_moves(public, private, ALICE, 2)
    assert GreedyAgent(ALICE).choose_move(public, private, legal) == Move(10, 2, is_exchange=True)


def test_greedy_advances_rearmost_piece():
    public = make_public(a_cells=[4, 20])
    private = make_private(ALICE)
    legal = get_legal_moves(public, private, ALICE, 1)
    assert GreedyAgent(ALICE).choose_move(public, private, legal).origin == 4
