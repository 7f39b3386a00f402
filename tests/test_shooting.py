"""Tests for crooked arrows."""

import pytest
from doubles import FixedPathDice

from wumpus.engine.cave import InvalidRoomError, adjacent_rooms
from wumpus.engine.dice import Dice
from wumpus.engine.shooting import ShotOutcome, shoot
from wumpus.engine.state import IllegalActionError, MAX_TRAVERSABLE


@pytest.mark.parametrize("length", range(1, MAX_TRAVERSABLE + 1))
def test_hit_at_end_of_straight_path(dice: Dice, length: int):
    """Rooms n, n+1, ... are joined, so shooting along them reaches the Wumpus."""
    path = list(range(10, 10 + length))
    shot = shoot(path, player_room=9, monster_room=path[-1], dice=dice)
    assert shot.outcome is ShotOutcome.HIT
    assert shot.flight == tuple(path)
    assert not shot.redirected


@pytest.mark.parametrize("length", range(1, MAX_TRAVERSABLE + 1))
def test_miss_by_one(dice: Dice, length: int):
    path = list(range(10, 10 + length))
    shot = shoot(path, player_room=9, monster_room=path[-1] + 1, dice=dice)
    assert shot.outcome is ShotOutcome.MISS
    assert shot.flight == tuple(path)


def test_arrow_stops_at_monster(dice: Dice):
    shot = shoot([2, 3, 4], player_room=1, monster_room=3, dice=dice)
    assert shot.outcome is ShotOutcome.HIT
    assert shot.flight == (2, 3)


def test_arrow_comes_back_around(dice: Dice):
    """1-2-3-4-5 is a ring; the fifth room is the shooter's own."""
    shot = shoot([2, 3, 4, 5, 1], player_room=1, monster_room=20, dice=dice)
    assert shot.outcome is ShotOutcome.SUICIDE
    assert shot.flight == (2, 3, 4, 5, 1)


def test_first_room_off_tunnels_flies_wild():
    dice = FixedPathDice([5])
    shot = shoot([20], player_room=1, monster_room=17, dice=dice)
    assert shot.redirected
    assert shot.outcome is ShotOutcome.MISS
    assert shot.flight == (5,)
    assert dice.requests == [(1, 1, None)]


def test_wild_arrow_keeps_remaining_length():
    """2 is through a tunnel from 1, 7 isn't from 2: three rooms are left to fly."""
    dice = FixedPathDice([3, 4, 14])
    shot = shoot([2, 7, 8, 9], player_room=1, monster_room=20, dice=dice)
    assert dice.requests == [(3, 2, 1)]
    assert shot.flight == (2, 3, 4, 14)
    assert shot.outcome is ShotOutcome.MISS


def test_wild_arrow_can_hit():
    dice = FixedPathDice([10])
    shot = shoot([20], player_room=2, monster_room=10, dice=dice)
    assert shot.outcome is ShotOutcome.HIT
    assert shot.redirected


def test_wild_arrow_with_real_dice_follows_tunnels(dice: Dice):
    for _ in range(30):
        shot = shoot([2, 7], player_room=1, monster_room=20, dice=dice)
        assert shot.redirected
        assert shot.flight[0] == 2
        assert shot.flight[1] in adjacent_rooms(2)
        assert shot.flight[1] != 1


@pytest.mark.parametrize("path", [[], [2, 3, 4, 5, 6, 7]])
def test_path_length_is_checked(dice: Dice, path: list[int]):
    with pytest.raises(IllegalActionError):
        shoot(path, player_room=1, monster_room=20, dice=dice)


def test_rooms_outside_cave_rejected(dice: Dice):
    with pytest.raises(InvalidRoomError):
        shoot([2, 21], player_room=1, monster_room=20, dice=dice)
