"""The Wumpus: asleep until disturbed, then restless.

Two things wake it: the player walking into its room (a bump), or the player
firing an arrow, detected as the arrow count dropping below the starting
capacity. Once awake, each time it is checked it moves to a neighbouring room
with probability move_chance, never into a pit. If it ends up where the
player is, the player dies.

On a bump the same movement draw decides fight or flight: if the Wumpus
moves it has fled (BumpAndLive); if it stays it fights (BumpAndDie).
"""

from typing import Protocol

from ..logging import get_logger
from .cave import adjacent_rooms
from .dice import Dice
from .hazards import BumpAndDie, BumpAndLive, Death, Hazard, UpdateResult
from .messages import HazardWarning
from .state import ARROW_CAPACITY, GameState, RunResult

logger = get_logger(__name__)

# Chance an awake Wumpus moves on a given turn
MOVE_CHANCE = 0.75


class MonsterDirector(Protocol):
    """Decides where and whether an awake Wumpus goes."""

    def feels_like_moving(self) -> bool: ...

    def next_room(self, room: int, state: GameState) -> int: ...


class RandomMonsterDirector:
    def __init__(self, dice: Dice, move_chance: float = MOVE_CHANCE):
        if not 0.0 <= move_chance <= 1.0:
            raise ValueError(f"move_chance must be within [0, 1]: {move_chance}")
        self.dice = dice
        self.move_chance = move_chance

    def feels_like_moving(self) -> bool:
        return self.dice.chance(self.move_chance)

    def next_room(self, room: int, state: GameState) -> int:
        """Any neighbouring room that isn't a pit."""
        options = [r for r in adjacent_rooms(room) if r not in state.pit_rooms]
        return self.dice.choice(options)


class Monster(Hazard):
    warning = HazardWarning.MONSTER

    def __init__(
        self,
        room: int,
        director: MonsterDirector,
        arrow_capacity: int = ARROW_CAPACITY,
        is_awake: bool = False,
    ):
        super().__init__(room)
        self.director = director
        self.arrow_capacity = arrow_capacity
        self._is_awake = is_awake

    @property
    def is_awake(self) -> bool:
        return self._is_awake

    def try_update(self, state: GameState) -> UpdateResult | None:
        is_bumped = not self._is_awake and state.player == self.room
        heard_arrow = not self._is_awake and state.arrow_count < self.arrow_capacity

        if is_bumped or heard_arrow:
            self._is_awake = True
            logger.debug(
                "monster_woke",
                cause="bump" if is_bumped else "arrow",
                monster_room=self.room,
            )

        if self._is_awake and self.director.feels_like_moving():
            destination = self.director.next_room(self.room, state)
            log = logger.info if state.is_cheating else logger.debug
            log("monster_moved", monster_room=self.room, destination=destination)
            self.room = destination

        if self._is_awake and state.player == self.room:
            if is_bumped:
                return BumpAndDie()
            return Death(RunResult.KILLED_BY_MONSTER)
        if is_bumped:
            return BumpAndLive()
        return None

    def __repr__(self) -> str:
        return f"Monster(room={self.room}, is_awake={self._is_awake})"
