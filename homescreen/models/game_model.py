# homescreen/models/game_model.py
from __future__ import annotations
import dataclasses
from dataclasses import dataclass, field
from datetime import datetime

from homescreen.core.constants import EPOCH


@dataclass(frozen=True)
class Game:
    """Represents a single game tile. Immutable except through played_at()."""

    id: int
    title: str
    icon: str
    last_played: datetime = field(default=EPOCH)

    def __post_init__(self):
        """Post-initialization validation."""
        if self.last_played.tzinfo is None:
            raise ValueError(f"last_played must be timezone-aware: {self.last_played!r}")

    def played_at(self, instant: datetime) -> Game:
        """Returns a copy of this game stamped as last played at `instant`."""
        return dataclasses.replace(self, last_played=instant)
