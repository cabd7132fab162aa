"""
Tests for the authority token ledger.
"""

import threading

import pytest

from senet.authority import AuthorityLedger, AuthorityToken
from senet.exceptions import NotAuthorityHolderError, StaleAuthorityError


def test_initial_token():
    ledger = AuthorityLedger("alice")
    assert ledger.current() == AuthorityToken("alice", 0)


def test_transfer_issues_new_version():
    ledger = AuthorityLedger("alice")
    token = ledger.current()
    issued = ledger.transfer(token, "alice", "bob")
    assert issued == AuthorityToken("bob", 1)
    assert ledger.current() == issued


def test_replayed_token_rejected():
    """A consumed token cannot be used again."""
    ledger = AuthorityLedger("alice")
    token = ledger.current()
    ledger.transfer(token, "alice", "alice")
    with pytest.raises(StaleAuthorityError):
        ledger.transfer(token, "alice", "bob")


def test_non_holder_rejected():
    ledger = AuthorityLedger("alice")
    with pytest.raises(NotAuthorityHolderError):
        ledger.transfer(ledger.current(), "bob", "bob")
    with pytest.raises(NotAuthorityHolderError):
        ledger.check(ledger.current(), "bob")
    assert ledger.current().version == 0


def test_concurrent_transfers_only_one_wins():
    ledger = AuthorityLedger("alice")
    token = ledger.current()
    results = []

    def attempt():
        try:
            ledger.transfer(token, "alice", "bob")
            results.append("ok")
        except StaleAuthorityError:
            results.append("stale")

    threads = [threading.Thread(target=attempt) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert results.count("ok") == 1
    assert results.count("stale") == 7
    assert ledger.current() == AuthorityToken("bob", 1)
