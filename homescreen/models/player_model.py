# homescreen/models/player_model.py
from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Player:
    """A user profile shown in the avatar row. Immutable."""

    id: int
    name: str
    icon: str
