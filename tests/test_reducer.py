# tests/test_reducer.py
from datetime import timedelta, timezone

from homescreen.core.constants import EPOCH
from homescreen.core.reducer import initial_state, reduce, sort_games
from homescreen.models import (
    DisplayMode,
    Game,
    Player,
    SelectGame,
    SelectPlayer,
    SetTimeZone,
    Tick,
    ToggleTheme,
)

from .conftest import at_ms


def ids(games):
    return [g.id for g in games]


# --- Ordering policy ---


def test_never_played_games_sort_by_descending_id(games):
    assert ids(sort_games(games)) == [44, 2]


def test_sort_puts_most_recent_first():
    catalog = [
        Game(id=1, title="a", icon="", last_played=at_ms(5000)),
        Game(id=2, title="b", icon=""),
        Game(id=3, title="c", icon="", last_played=at_ms(9000)),
    ]
    assert ids(sort_games(catalog)) == [3, 1, 2]


def test_equal_timestamps_break_ties_by_descending_id():
    catalog = [
        Game(id=5, title="a", icon="", last_played=at_ms(100)),
        Game(id=9, title="b", icon="", last_played=at_ms(100)),
    ]
    assert ids(sort_games(catalog)) == [9, 5]


def test_sort_is_idempotent():
    catalog = [
        Game(id=1, title="a", icon="", last_played=at_ms(5000)),
        Game(id=2, title="b", icon=""),
        Game(id=3, title="c", icon=""),
    ]
    once = sort_games(catalog)
    assert sort_games(once) == once


# --- Initial state ---


def test_initial_state_selects_first_player_and_no_game(players, games):
    state = initial_state(players, games)
    assert state.selected_player == players[0]
    assert state.selected_game is None
    assert state.mode is DisplayMode.DAY
    assert ids(state.games) == [44, 2]


def test_initial_state_restores_a_known_player(players, games):
    state = initial_state(players, games, selected_player_id=2)
    assert state.selected_player == players[1]


def test_initial_state_ignores_an_unknown_player(players, games):
    state = initial_state(players, games, selected_player_id=99)
    assert state.selected_player == players[0]


def test_initial_state_with_no_players(games):
    assert initial_state([], games).selected_player is None


# --- Theme ---


def test_toggle_theme_twice_returns_to_original(players, games):
    state = initial_state(players, games)
    toggled = reduce(state, ToggleTheme())
    assert toggled.mode is DisplayMode.NIGHT
    assert reduce(toggled, ToggleTheme()).mode is DisplayMode.DAY


# --- Game selection ---


def test_select_game_stamps_and_moves_it_first(players, games):
    state = initial_state(players, games, now=at_ms(1000))
    state = reduce(state, SelectGame(state.find_game(2)))

    assert ids(state.games) == [2, 44]
    assert state.games[0].last_played == at_ms(1000)
    assert state.games[1].last_played == EPOCH
    assert state.selected_game == state.games[0]


def test_select_game_uses_the_latest_tick(players, games):
    state = initial_state(players, games)
    state = reduce(state, Tick(at_ms(42_000)))
    state = reduce(state, SelectGame(state.find_game(44)))
    assert state.selected_game.last_played == at_ms(42_000)


def test_selecting_the_selected_game_clears_it(players, games):
    state = initial_state(players, games, now=at_ms(1000))
    state = reduce(state, SelectGame(state.find_game(2)))
    cleared = reduce(state, SelectGame(state.selected_game))

    assert cleared.selected_game is None
    # Deselecting is not a play: timestamps and order stay put
    assert cleared.games == state.games


def test_reselecting_updates_the_timestamp(players, games):
    state = initial_state(players, games, now=at_ms(1000))
    state = reduce(state, SelectGame(state.find_game(2)))
    state = reduce(state, SelectGame(state.find_game(2)))
    state = reduce(state, Tick(at_ms(5000)))
    state = reduce(state, SelectGame(state.find_game(2)))

    assert state.selected_game.id == 2
    assert state.selected_game.last_played == at_ms(5000)


def test_selecting_another_game_moves_selection(players, games):
    state = initial_state(players, games, now=at_ms(1000))
    state = reduce(state, SelectGame(state.find_game(2)))
    state = reduce(state, Tick(at_ms(2000)))
    state = reduce(state, SelectGame(state.find_game(44)))

    assert state.selected_game.id == 44
    assert ids(state.games) == [44, 2]
    assert [g.last_played for g in state.games] == [at_ms(2000), at_ms(1000)]


def test_selected_game_is_always_a_catalog_member(players, games):
    state = initial_state(players, games, now=at_ms(1000))
    for game_id in (2, 44, 44, 2):
        state = reduce(state, Tick(state.now + timedelta(seconds=1)))
        state = reduce(state, SelectGame(state.find_game(game_id)))
        assert state.selected_game is None or state.selected_game in state.games
        assert sort_games(state.games) == state.games


def test_unknown_game_is_a_no_op(players, games):
    state = initial_state(players, games)
    stranger = Game(id=999, title="Missing", icon="")
    assert reduce(state, SelectGame(stranger)) is state


# --- Player selection ---


def test_selecting_another_player_clears_the_game(players, games):
    state = initial_state(players, games, now=at_ms(1000))
    state = reduce(state, SelectGame(state.find_game(2)))
    state = reduce(state, SelectPlayer(players[1]))

    assert state.selected_player == players[1]
    assert state.selected_game is None
    # The play history survives the player switch
    assert ids(state.games) == [2, 44]


def test_selecting_the_current_player_is_a_no_op(players, games):
    state = initial_state(players, games, now=at_ms(1000))
    state = reduce(state, SelectGame(state.find_game(2)))
    assert reduce(state, SelectPlayer(players[0])) is state


def test_unknown_player_is_a_no_op(players, games):
    state = initial_state(players, games)
    assert reduce(state, SelectPlayer(Player(id=99, name="Ghost", icon=""))) is state


# --- Clock ---


def test_tick_replaces_the_instant(players, games):
    state = reduce(initial_state(players, games), Tick(at_ms(123_456)))
    assert state.now == at_ms(123_456)


def test_set_time_zone_changes_local_time(players, games):
    plus_two = timezone(timedelta(hours=2))
    state = reduce(initial_state(players, games, now=at_ms(0)), SetTimeZone(plus_two))
    assert state.time_zone == plus_two
    assert state.local_now.hour == 2


def test_unrecognized_actions_are_ignored(players, games):
    state = initial_state(players, games)
    assert reduce(state, "reboot") is state
    assert reduce(state, None) is state
