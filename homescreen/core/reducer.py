# homescreen/core/reducer.py
# The home screen state machine: one pure transition per action.

import dataclasses
from datetime import datetime
from typing import Iterable, Optional, Sequence

from homescreen.models.actions import (
    SelectGame,
    SelectPlayer,
    SetTimeZone,
    Tick,
    ToggleTheme,
)
from homescreen.models.game_model import Game
from homescreen.models.home_state import DisplayMode, HomeState
from homescreen.models.player_model import Player
from homescreen.utils.logger_utils import logger


def sort_games(games: Iterable[Game]) -> tuple[Game, ...]:
    """
    Orders games most recently played first. Ties on the timestamp
    (e.g. never-played games sitting at the epoch) fall back to the higher id.
    """
    return tuple(sorted(games, key=lambda g: (g.last_played, g.id), reverse=True))


def initial_state(
    players: Sequence[Player],
    games: Sequence[Game],
    mode: DisplayMode = DisplayMode.DAY,
    now: Optional[datetime] = None,
    selected_player_id: Optional[int] = None,
) -> HomeState:
    """
    Builds the startup snapshot. The selected player is the one matching
    `selected_player_id` when it exists, otherwise the first player.
    """
    players = tuple(players)
    selected_player = next(
        (p for p in players if p.id == selected_player_id),
        players[0] if players else None,
    )
    state = HomeState(
        players=players,
        games=sort_games(games),
        mode=mode,
        selected_player=selected_player,
    )
    if now is not None:
        state = dataclasses.replace(state, now=now)
    return state


def reduce(state: HomeState, action: object) -> HomeState:
    """Applies a single action and returns the resulting snapshot."""
    if isinstance(action, ToggleTheme):
        return dataclasses.replace(state, mode=state.mode.toggled())

    if isinstance(action, SelectGame):
        return _select_game(state, action.game)

    if isinstance(action, SelectPlayer):
        return _select_player(state, action.player)

    if isinstance(action, Tick):
        return dataclasses.replace(state, now=action.instant)

    if isinstance(action, SetTimeZone):
        return dataclasses.replace(state, time_zone=action.time_zone)

    logger.debug(f"Ignoring unrecognized action: {action!r}")
    return state


def _select_game(state: HomeState, game: Game) -> HomeState:
    if state.selected_game is not None and state.selected_game.id == game.id:
        return dataclasses.replace(state, selected_game=None)

    current = state.find_game(game.id)
    if current is None:
        logger.debug(f"Game {game.id} is not in the catalog. Selection unchanged.")
        return state

    played = current.played_at(state.now)
    games = sort_games(played if g.id == played.id else g for g in state.games)
    return dataclasses.replace(state, games=games, selected_game=played)


def _select_player(state: HomeState, player: Player) -> HomeState:
    if state.selected_player is not None and state.selected_player.id == player.id:
        return state

    current = state.find_player(player.id)
    if current is None:
        logger.debug(f"Player {player.id} is not in the player list. Selection unchanged.")
        return state

    return dataclasses.replace(state, selected_player=current, selected_game=None)
