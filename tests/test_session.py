"""Tests for the session layer."""

from doubles import RecordingSink, ScriptedActions

from wumpus.config import Config
from wumpus.engine.game import Quit
from wumpus.engine.state import RunResult
from wumpus.session import HuntSession


def test_same_setup_replays_previous_game(test_config: Config):
    session = HuntSession(test_config)
    first = session.new_game(ScriptedActions([]), RecordingSink())
    again = session.new_game(ScriptedActions([]), RecordingSink(), same_setup=True)
    assert again.state() == first.state()
    assert again is not first


def test_new_setup_is_drawn_otherwise(test_config: Config):
    session = HuntSession(test_config)
    session.new_game(ScriptedActions([]), RecordingSink())
    first_setup = session.setup
    session.new_game(ScriptedActions([]), RecordingSink())
    assert session.setup is not first_setup


def test_same_setup_without_previous_game_draws_one(test_config: Config):
    session = HuntSession(test_config)
    game = session.new_game(ScriptedActions([]), RecordingSink(), same_setup=True)
    assert session.setup is not None
    assert game.state().player == session.setup.player


def test_config_flows_into_game():
    session = HuntSession(Config(seed=1, cheat=True, arrows=2, move_chance=0.0))
    game = session.new_game(ScriptedActions([]), RecordingSink())
    assert game.is_cheating
    assert game.player.arrow_count == 2
    assert game.monster.arrow_capacity == 2
    assert game.monster.director.move_chance == 0.0


def test_play_records_results(test_config: Config):
    session = HuntSession(test_config)
    assert session.play(ScriptedActions([Quit()]), RecordingSink()) is RunResult.QUIT
    session.play(ScriptedActions([Quit()]), RecordingSink(), same_setup=True)
    assert session.tally() == {RunResult.QUIT: 2}


def test_seeded_sessions_deal_the_same_cave():
    a = HuntSession(Config(seed=11))
    b = HuntSession(Config(seed=11))
    a.new_game(ScriptedActions([]), RecordingSink())
    b.new_game(ScriptedActions([]), RecordingSink())
    assert a.setup == b.setup
