"""
Tests for hidden-piece reconciliation.
"""

import pytest

from senet.bits import mask_of
from senet.cells import Occupancy, Occupant
from senet.exceptions import InconsistentHiddenStateError
from senet.reconcile import conceal, reconcile_in, reconcile_out, relocate, validate
from senet.state import PublicState

from tests.conftest import ALICE, BOB, make_private, make_public


def test_validate_passes_without_hidden_pieces(opening):
    public, private_a, private_b = opening
    validate(public, private_a, ALICE)
    validate(public, private_b, BOB)


def test_validate_player_a_conflict():
    """B publicly on a cell where A has an invisible piece."""
    public = make_public(b_cells=[15])
    with pytest.raises(InconsistentHiddenStateError):
        validate(public, make_private(ALICE, hidden=[15]), ALICE)


def test_validate_player_b_conflict():
    public = make_public(a_cells=[15], holder=BOB)
    with pytest.raises(InconsistentHiddenStateError):
        validate(public, make_private(BOB, hidden=[15]), BOB)


def test_validate_ignores_own_colour_overlap():
    """Only an opponent piece on a hidden cell is a contradiction."""
    validate(make_public(a_cells=[15]), make_private(ALICE, hidden=[15]), ALICE)
    validate(make_public(b_cells=[15], holder=BOB), make_private(BOB, hidden=[15]), BOB)


def test_validate_rejects_someone_elses_private_state(opening):
    public, _, private_b = opening
    with pytest.raises(InconsistentHiddenStateError):
        validate(public, private_b, ALICE)


def test_reconcile_in_player_a():
    public = make_public(a_cells=[1], b_cells=[2])
    merged = reconcile_in(public, make_private(ALICE, hidden=[15, 17]), ALICE)
    assert merged.occupant(15) is Occupant.PLAYER_A
    assert merged.occupant(17) is Occupant.PLAYER_A
    assert merged.occupant(2) is Occupant.PLAYER_B


def test_reconcile_in_player_a_ignores_stale_owner_bits():
    """Don't-care owner bits under A's hidden cell must not turn it into B."""
    public = PublicState(
        occupied_mask=mask_of([1]),
        owner_mask=mask_of([15]),
        authority_holder=ALICE,
        player_a=ALICE,
        player_b=BOB,
    )
    merged = reconcile_in(public, make_private(ALICE, hidden=[15]), ALICE)
    assert merged.occupant(15) is Occupant.PLAYER_A


def test_reconcile_in_player_b():
    public = make_public(a_cells=[1], holder=BOB)
    merged = reconcile_in(public, make_private(BOB, hidden=[15]), BOB)
    assert merged.occupant(15) is Occupant.PLAYER_B
    assert merged.occupant(1) is Occupant.PLAYER_A


def test_relocate_follows_hidden_piece():
    positions = mask_of([15])
    assert relocate(positions, 15, 18) == mask_of([18])


def test_relocate_visible_piece_is_noop():
    positions = mask_of([15])
    assert relocate(positions, 3, 5) == positions


def test_conceal_on_second_life():
    board = Occupancy(mask_of([15, 20]), mask_of([20]))
    board, positions = conceal(board, 0, 15)
    assert positions == mask_of([15])
    assert board.occupant(15) is Occupant.EMPTY
    assert board.occupant(20) is Occupant.PLAYER_B


def test_conceal_elsewhere_is_noop():
    board = Occupancy(mask_of([16]), 0)
    assert conceal(board, 0, 16) == (board, 0)


def test_reconcile_out_strips_hidden_cells():
    board = Occupancy(mask_of([1, 15, 18]), mask_of([1, 15, 18]))
    positions = mask_of([15, 18])
    out = reconcile_out(board, positions)
    assert out.occupied_mask & positions == 0
    assert out.owner_mask & positions == 0
    assert out.occupant(1) is Occupant.PLAYER_B
