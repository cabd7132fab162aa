"""
GameSession referees a local game: it keeps the shared public state, each
player's private state and the authority ledger, and hands every player
only their own view.
"""

import logging
import random
from typing import Dict, List, Optional, Tuple

from senet.authority import AuthorityLedger
from senet.board import SECOND_LIFE
from senet.cells import Occupant
from senet.config import GameConfig
from senet.events import EventLog, EventType
from senet.exceptions import (
    InconsistentHiddenStateError,
    InvalidDiceError,
    MoveAvailableError,
    MoveError,
)
from senet.game import move, pass_turn
from senet.rules import Move, get_legal_moves
from senet.state import PrivateState, PublicState
from senet.turns import initialize

logger = logging.getLogger(__name__)


class GameSession:
    """Use-case service for playing a game between two local players."""

    def __init__(self, player_a: str, player_b: str, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()
        self.rng = random.Random(self.config.seed)

        public, private_a, private_b = initialize(player_a, player_b)
        self.public = public
        self._private: Dict[str, PrivateState] = {player_a: private_a, player_b: private_b}
        self.ledger = AuthorityLedger(public.authority_holder)
        self.event_logs: Dict[str, EventLog] = {player_a: EventLog(), player_b: EventLog()}
        self.move_count = 0
        self._pending_throw: Optional[int] = None

        for player in self.players:
            self._record(player, EventType.GAME_START, player_a=player_a, player_b=player_b)
        logger.info(f"Started game {player_a} vs {player_b} (seed={self.config.seed})")

    @property
    def players(self) -> Tuple[str, str]:
        return self.public.player_a, self.public.player_b

    @property
    def holder(self) -> str:
        return self.ledger.current().holder

    @property
    def is_over(self) -> bool:
        return self.config.max_moves is not None and self.move_count >= self.config.max_moves

    def view(self, player: str) -> Tuple[PublicState, PrivateState]:
        """The public state plus ``player``'s own private state."""
        return self.public, self._private[player]

    def throw(self) -> int:
        """
        Throw the sticks for the current holder.

        Each stick lands flat side up with even odds; the throw is the number
        of flat sides, and a throw with none counts as 5. The throw stays
        pending until the holder plays or passes with it.
        """
        flats = sum(self.rng.randint(0, 1) for _ in range(self.config.stick_count))
        dice = flats or 5
        self._pending_throw = dice
        self._record(self.holder, EventType.DICE_ROLL, dice=dice)
        return dice

    def legal_moves(self, player: str, dice: int) -> List[Move]:
        """
        Legal moves for ``player``; empty when their hidden pieces contradict
        the board, which is logged and recorded as a rejection.
        """
        try:
            return get_legal_moves(self.public, self._private[player], player, dice)
        except InconsistentHiddenStateError as exc:
            logger.warning(f"{player} cannot move: {exc}")
            self._record(player, EventType.MOVE_REJECTED, dice=dice, reason=type(exc).__name__)
            return []

    def play(self, caller: str, origin: int, dice: int) -> PublicState:
        """
        Apply ``caller``'s move and hand the board to the next holder.

        Raises:
            AuthorityError: caller does not hold the board.
            MoveError: the move is illegal or ``dice`` is not the pending
                throw; the session is unchanged.
        """
        token = self.ledger.current()
        self.ledger.check(token, caller)

        try:
            self._check_throw(dice)
            public, private = move(caller, origin, dice, self.public, self._private[caller])
        except MoveError as exc:
            logger.info(f"Rejected move by {caller} from {origin} with {dice}: {exc}")
            self._record(
                caller,
                EventType.MOVE_REJECTED,
                origin=origin,
                dice=dice,
                reason=type(exc).__name__,
            )
            raise

        self.ledger.transfer(token, caller, public.authority_holder)
        self._pending_throw = None
        destination = origin + dice
        # The mover's own pieces never sit on a legal destination.
        exchanged = self.public.occupancy.occupant(destination) is not Occupant.EMPTY
        self._record(
            caller,
            EventType.EXCHANGE if exchanged else EventType.MOVE,
            origin=origin,
            destination=destination,
            dice=dice,
        )
        if destination == SECOND_LIFE:
            self._record(caller, EventType.CONCEAL, cell=SECOND_LIFE)

        self.public = public
        self._private[caller] = private
        self.move_count += 1
        self._after_turn(caller)
        return public

    def pass_turn(self, caller: str, dice: int) -> PublicState:
        """
        Skip a throw with no legal move.

        Raises:
            AuthorityError: caller does not hold the board.
            InvalidDiceError: ``dice`` is not the pending throw.
            MoveAvailableError: the throw has a legal move.
        """
        token = self.ledger.current()
        self.ledger.check(token, caller)

        try:
            self._check_throw(dice)
            try:
                available = get_legal_moves(self.public, self._private[caller], caller, dice)
            except InconsistentHiddenStateError:
                # Already surfaced by legal_moves; no move can be played.
                available = []
            if available:
                raise MoveAvailableError(
                    f"{caller} has {len(available)} legal move(s) with {dice}", dice=dice
                )
        except MoveError as exc:
            logger.info(f"Rejected pass by {caller} with {dice}: {exc}")
            self._record(caller, EventType.MOVE_REJECTED, dice=dice, reason=type(exc).__name__)
            raise

        public = pass_turn(caller, dice, self.public)
        self.ledger.transfer(token, caller, public.authority_holder)
        self._pending_throw = None
        self._record(caller, EventType.PASS, dice=dice)

        self.public = public
        self.move_count += 1
        self._after_turn(caller)
        return public

    def _check_throw(self, dice: int) -> None:
        if self._pending_throw is None:
            raise InvalidDiceError("No throw is pending", dice=dice)
        if dice != self._pending_throw:
            raise InvalidDiceError(f"Thrown {self._pending_throw}, got {dice}", dice=dice)

    def _after_turn(self, caller: str) -> None:
        holder = self.public.authority_holder
        if holder != caller:
            self._record(holder, EventType.TURN_PASS, previous=caller)
            logger.debug(f"Board passes from {caller} to {holder}")
        if self.is_over:
            for player in self.players:
                self._record(player, EventType.GAME_END, moves=self.move_count)
            logger.info(f"Game stopped after {self.move_count} moves")

    def _record(self, player: str, event_type: EventType, **details) -> None:
        if self.config.record_events:
            self.event_logs[player].log(event_type, player, **details)
