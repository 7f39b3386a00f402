"""Pits and bats, and the results any hazard can produce.

A hazard is checked two ways each turn:

* try_warn(player_room) -> the warning to give if the hazard is next door
* try_update(state) -> what happens if the player is in its room

Only the first hazard that produces an update gets its way in one pass; the
game engine decides what the update means for the player.
"""

from dataclasses import dataclass
from typing import ClassVar, Protocol

from .cave import is_adjacent
from .dice import Dice
from .messages import HazardWarning
from .state import GameState, RunResult


@dataclass(frozen=True)
class Death:
    cause: RunResult


@dataclass(frozen=True)
class SnatchTo:
    room: int


@dataclass(frozen=True)
class BumpAndLive:
    """The player woke the monster and it fled."""


@dataclass(frozen=True)
class BumpAndDie:
    """The player woke the monster and it stood its ground."""


UpdateResult = Death | SnatchTo | BumpAndLive | BumpAndDie


class Hazard:
    """Something sharing the cave with the player."""

    warning: ClassVar[HazardWarning]

    def __init__(self, room: int):
        self.room = room

    def try_warn(self, player_room: int) -> HazardWarning | None:
        if is_adjacent(player_room, self.room):
            return self.warning
        return None

    def try_update(self, state: GameState) -> UpdateResult | None:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(room={self.room})"


class Pit(Hazard):
    """A bottomless pit. Never moves."""

    warning = HazardWarning.PIT

    def try_update(self, state: GameState) -> UpdateResult | None:
        if state.player == self.room:
            return Death(RunResult.KILLED_BY_PIT)
        return None


class RoomProvider(Protocol):
    """Where a bat drops the player."""

    def next_room(self) -> int: ...


class RandomRoomProvider:
    """Drops the player in any room at all, this one included."""

    def __init__(self, dice: Dice):
        self.dice = dice

    def next_room(self) -> int:
        return self.dice.random_room()


class Bat(Hazard):
    """A super bat. Carries the player off; the bat itself stays put."""

    warning = HazardWarning.BAT

    def __init__(self, room: int, provider: RoomProvider):
        super().__init__(room)
        self.provider = provider

    def try_update(self, state: GameState) -> UpdateResult | None:
        if state.player == self.room:
            return SnatchTo(self.provider.next_room())
        return None
