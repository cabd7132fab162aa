"""
Tests for the wire models of state tokens.
"""

import pydantic
import pytest

from senet import initialize
from senet.schemas import PrivateStateModel, PublicStateModel


def test_public_model_from_state():
    public, _, _ = initialize("alice", "bob")
    model = PublicStateModel.from_state(public)
    assert model.model_dump() == {
        "occupied_mask": 1023,
        "owner_mask": 682,
        "authority_holder": "alice",
        "player_a": "alice",
        "player_b": "bob",
        "counter": 0,
    }
    assert model.to_state() == public


def test_public_model_from_json():
    data = '{"occupied_mask": 1, "owner_mask": 0, "authority_holder": "bob", "player_a": "alice", "player_b": "bob"}'
    state = PublicStateModel.model_validate_json(data).to_state()
    assert state.authority_holder == "bob"
    assert state.occupied_mask == 1


@pytest.mark.parametrize("mask", [1 << 30, 1 << 31, -1])
def test_public_model_rejects_reserved_bits(mask):
    with pytest.raises(pydantic.ValidationError):
        PublicStateModel(
            occupied_mask=mask,
            owner_mask=0,
            authority_holder="alice",
            player_a="alice",
            player_b="bob",
        )


def test_public_model_rejects_unknown_holder():
    with pytest.raises(pydantic.ValidationError):
        PublicStateModel(
            occupied_mask=0,
            owner_mask=0,
            authority_holder="carol",
            player_a="alice",
            player_b="bob",
        )


def test_private_model():
    _, private_a, _ = initialize("alice", "bob")
    model = PrivateStateModel.from_state(private_a)
    assert model.to_state() == private_a
    with pytest.raises(pydantic.ValidationError):
        PrivateStateModel(owner="alice", positions=1 << 31)
