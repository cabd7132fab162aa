"""
Game configuration settings.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class GameConfig:
    """Configuration for a locally refereed game."""

    # Four two-sided sticks; a throw of no white faces counts as 5.
    stick_count: int = 4
    max_moves: Optional[int] = 500
    seed: Optional[int] = None
    record_events: bool = True
