"""Game state: the per-turn snapshot, the player, and how a game ends.

GameState is frozen. The engine derives a fresh one whenever anything moves,
so hazards and action sources only ever see a consistent picture.
"""

from dataclasses import dataclass
from enum import Enum

from .cave import check_room
from .dice import Dice

# Arrows the player starts with
ARROW_CAPACITY = 5

# An arrow flies through at most this many rooms, not counting the shooter's
MAX_TRAVERSABLE = 5


class IllegalActionError(ValueError):
    """An action source offered something the rules don't allow."""


class RunResult(Enum):
    """How a game ended."""

    QUIT = "quit"
    WIN = "win"
    KILLED_BY_PIT = "killed_by_pit"
    KILLED_BY_MONSTER = "killed_by_monster"
    SUICIDE = "suicide"
    RAN_OUT_OF_ARROWS = "ran_out_of_arrows"

    @property
    def is_win(self) -> bool:
        return self is RunResult.WIN


@dataclass(frozen=True)
class GameState:
    """Where everything is at one instant."""

    player: int
    monster: int
    pit1: int
    pit2: int
    bat1: int
    bat2: int
    arrow_count: int = ARROW_CAPACITY
    is_cheating: bool = False

    @property
    def pit_rooms(self) -> tuple[int, int]:
        return (self.pit1, self.pit2)

    @property
    def bat_rooms(self) -> tuple[int, int]:
        return (self.bat1, self.bat2)

    def validate(self) -> "GameState":
        """Check every room is in the cave and the setup rooms are distinct."""
        rooms = (self.player, self.monster, *self.pit_rooms, *self.bat_rooms)
        for room in rooms:
            check_room(room)
        if len(set(rooms)) != len(rooms):
            raise ValueError(f"setup rooms must be distinct: {rooms}")
        if self.arrow_count < 0:
            raise ValueError(f"negative arrow count: {self.arrow_count}")
        return self

    def describe(self) -> str:
        return (
            f"rooms: player {self.player}, wumpus {self.monster}, "
            f"pits {self.pit1} {self.pit2}, bats {self.bat1} {self.bat2}; "
            f"arrows {self.arrow_count}"
        )


@dataclass
class Player:
    """The hunter. Owned by the game engine."""

    room: int
    arrow_count: int = ARROW_CAPACITY

    @property
    def is_out_of_arrows(self) -> bool:
        return self.arrow_count <= 0


def new_game_state(dice: Dice, arrow_capacity: int = ARROW_CAPACITY) -> GameState:
    """Draw a fresh setup with the player and five hazards in distinct rooms."""
    player, monster, pit1, pit2, bat1, bat2 = dice.unique_rooms(6)
    return GameState(
        player=player,
        monster=monster,
        pit1=pit1,
        pit2=pit2,
        bat1=bat1,
        bat2=bat2,
        arrow_count=arrow_capacity,
    )
