"""
In-memory model of the single-use authority token.

In production a ledger runtime guarantees that the public state token is
consumed exactly once and reissued to the next holder atomically. This
ledger gives local sessions and tests the same contract: a compare-and-swap
on ``(holder, version)``.
"""

import logging
import threading
from dataclasses import dataclass

from senet.exceptions import NotAuthorityHolderError, StaleAuthorityError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthorityToken:
    holder: str
    version: int = 0


class AuthorityLedger:
    """Issues authority tokens and serializes their transfer."""

    def __init__(self, holder: str):
        self._lock = threading.Lock()
        self._token = AuthorityToken(holder)

    def current(self) -> AuthorityToken:
        with self._lock:
            return self._token

    def check(self, token: AuthorityToken, caller: str) -> None:
        """
        Verify ``token`` is live and held by ``caller`` without consuming it.

        Raises:
            StaleAuthorityError: token was already consumed.
            NotAuthorityHolderError: caller is not the holder.
        """
        with self._lock:
            self._check_locked(token, caller)

    def transfer(self, token: AuthorityToken, caller: str, next_holder: str) -> AuthorityToken:
        """
        Consume ``token`` and issue a new one to ``next_holder``.

        Raises:
            StaleAuthorityError: token was already consumed.
            NotAuthorityHolderError: caller is not the holder.
        """
        with self._lock:
            self._check_locked(token, caller)
            self._token = AuthorityToken(next_holder, token.version + 1)
            issued = self._token
        logger.debug(f"Authority v{issued.version} issued to {next_holder}")
        return issued

    def _check_locked(self, token: AuthorityToken, caller: str) -> None:
        if token.version != self._token.version:
            raise StaleAuthorityError(
                f"Token v{token.version} is stale, current is v{self._token.version}"
            )
        if caller != self._token.holder:
            raise NotAuthorityHolderError(f"{caller!r} does not hold the board")
