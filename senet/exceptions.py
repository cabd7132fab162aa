"""
Exception hierarchy for the Senet rules engine.

Every rejected move raises a MoveError subclass so callers can tell the
failure kinds apart, even though the rules treat them all as an abort.
"""

from typing import Optional


class SenetError(Exception):
    """Base exception for all engine errors."""


class InvalidCellError(SenetError, ValueError):
    """Cell or bit index is outside the addressable range."""


class InvalidMaskError(SenetError, ValueError):
    """Mask uses reserved bits or does not fit in 32 bits."""


class ValidationError(SenetError):
    """Input validation failed."""


class MoveError(SenetError):
    """A move was rejected. No state was produced."""

    def __init__(self, message: str, origin: Optional[int] = None, dice: Optional[int] = None):
        super().__init__(message)
        self.origin = origin
        self.dice = dice


class InvalidMoverError(MoveError):
    """Origin cell is not occupied by the caller's piece."""


class InvalidDiceError(MoveError):
    """Dice value outside 1..5."""


class IllegalDestinationError(MoveError):
    """Destination is off the board, self-occupied or protected."""


class InconsistentHiddenStateError(MoveError):
    """Public state contradicts the caller's private invisible pieces."""


class MoveAvailableError(MoveError):
    """A pass was requested while the throw still has a legal move."""


class AuthorityError(SenetError):
    """Authority token could not be consumed."""


class NotAuthorityHolderError(AuthorityError):
    """Caller does not hold the public state."""


class StaleAuthorityError(AuthorityError):
    """Token version was already consumed."""
