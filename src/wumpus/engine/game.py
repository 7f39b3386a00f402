"""The turn engine.

Game.run() drives one game to its end:

1. In cheat mode, reveal where everything is.
2. Resolve hazards against the player's room. A bat snatch moves the player
   and the hazards are checked again, so one turn can chain snatch into
   snatch into pit.
3. Warn about anything one tunnel away.
4. Ask the action source what to do, and do it.

The game owns the player and the hazards. Hazards live in one list, ordered
pits, bats, Wumpus; that order decides which hazard gets its way when more
than one could. The named accessors are lookups into that list.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from ..logging import get_logger
from .cave import adjacent_rooms, check_room, is_adjacent
from .dice import Dice
from .hazards import (
    Bat,
    BumpAndDie,
    BumpAndLive,
    Death,
    Hazard,
    Pit,
    RandomRoomProvider,
    RoomProvider,
    SnatchTo,
    UpdateResult,
)
from .messages import HazardWarning, Message
from .monster import MOVE_CHANCE, Monster, MonsterDirector, RandomMonsterDirector
from .shooting import ShotOutcome, shoot
from .state import ARROW_CAPACITY, GameState, IllegalActionError, Player, RunResult

logger = get_logger(__name__)


@dataclass(frozen=True)
class Move:
    room: int


@dataclass(frozen=True)
class Shoot:
    rooms: Sequence[int]

    def __post_init__(self):
        object.__setattr__(self, "rooms", tuple(self.rooms))


@dataclass(frozen=True)
class Quit:
    pass


Action = Move | Shoot | Quit


class ActionSource(Protocol):
    """Decides the player's next action. Must only offer legal moves."""

    def next_action(self, state: GameState) -> Action: ...


class Sink(Protocol):
    """Receives what the player should be told."""

    def warn(self, warning: HazardWarning) -> None: ...

    def tell(self, message: Message) -> None: ...

    def arrow_flew(self, room: int) -> None: ...

    def reveal(self, state: GameState) -> None: ...


class NullSink:
    """Discards everything."""

    def warn(self, warning: HazardWarning) -> None:
        pass

    def tell(self, message: Message) -> None:
        pass

    def arrow_flew(self, room: int) -> None:
        pass

    def reveal(self, state: GameState) -> None:
        pass


# Slots in the hazard list
PIT_SLOTS = (0, 1)
BAT_SLOTS = (2, 3)
MONSTER_SLOT = 4


class Game:
    def __init__(
        self,
        player: Player,
        pits: tuple[Pit, Pit],
        bats: tuple[Bat, Bat],
        monster: Monster,
        actions: ActionSource,
        sink: Sink | None = None,
        dice: Dice | None = None,
        is_cheating: bool = False,
    ):
        self.player = player
        self.hazards: list[Hazard] = [*pits, *bats, monster]
        self.actions = actions
        self.sink = sink or NullSink()
        self.dice = dice or Dice()
        self.is_cheating = is_cheating
        self.history: list[GameState] = []
        self.turn = 0
        self.result: RunResult | None = None

    @classmethod
    def from_state(
        cls,
        state: GameState,
        actions: ActionSource,
        sink: Sink | None = None,
        dice: Dice | None = None,
        *,
        arrow_capacity: int = ARROW_CAPACITY,
        move_chance: float = MOVE_CHANCE,
        bat_provider: RoomProvider | None = None,
        monster_director: MonsterDirector | None = None,
    ) -> "Game":
        """Set up a game with everything where state says it is."""
        state.validate()
        dice = dice or Dice()
        bat_provider = bat_provider or RandomRoomProvider(dice)
        monster_director = monster_director or RandomMonsterDirector(dice, move_chance)
        return cls(
            player=Player(room=state.player, arrow_count=state.arrow_count),
            pits=(Pit(state.pit1), Pit(state.pit2)),
            bats=(Bat(state.bat1, bat_provider), Bat(state.bat2, bat_provider)),
            monster=Monster(state.monster, monster_director, arrow_capacity),
            actions=actions,
            sink=sink,
            dice=dice,
            is_cheating=state.is_cheating,
        )

    @property
    def pits(self) -> tuple[Pit, ...]:
        return tuple(self.hazards[i] for i in PIT_SLOTS)

    @property
    def bats(self) -> tuple[Bat, ...]:
        return tuple(self.hazards[i] for i in BAT_SLOTS)

    @property
    def monster(self) -> Monster:
        return self.hazards[MONSTER_SLOT]

    def state(self) -> GameState:
        pit1, pit2 = self.pits
        bat1, bat2 = self.bats
        return GameState(
            player=self.player.room,
            monster=self.monster.room,
            pit1=pit1.room,
            pit2=pit2.room,
            bat1=bat1.room,
            bat2=bat2.room,
            arrow_count=self.player.arrow_count,
            is_cheating=self.is_cheating,
        )

    def run(self) -> RunResult:
        """Play until the game ends, and say how it ended."""
        if self.result is not None:
            raise RuntimeError(f"game already finished: {self.result.value}")

        state = self.state()
        logger.info(
            "game_started",
            player_room=state.player,
            monster_room=state.monster,
            pit_rooms=list(state.pit_rooms),
            bat_rooms=list(state.bat_rooms),
            arrows=state.arrow_count,
        )

        while True:
            if self.is_cheating:
                self.sink.reveal(self.state())

            result = self.resolve_hazards()
            if result is not None:
                return self._finish(result)

            self.warn()

            state = self.state()
            self.history.append(state)
            self.turn += 1
            action = self.actions.next_action(state)

            result = self.process(action)
            if result is not None:
                return self._finish(result)

    def resolve_hazards(self) -> RunResult | None:
        """Apply hazards to the player until nothing more happens."""
        while True:
            match self._first_update():
                case None:
                    return None
                case Death(cause=cause):
                    return cause
                case SnatchTo(room=room):
                    logger.debug(
                        "player_snatched", player_room=self.player.room, destination=room
                    )
                    self.player.room = check_room(room)
                    self.sink.tell(Message.BAT_SNATCH)
                case BumpAndDie():
                    logger.debug("monster_bumped", fled=False)
                    self.sink.tell(Message.MONSTER_BUMP)
                    return RunResult.KILLED_BY_MONSTER
                case BumpAndLive():
                    logger.debug("monster_bumped", fled=True)
                    self.sink.tell(Message.MONSTER_BUMP)
                    return None

    def _first_update(self) -> UpdateResult | None:
        # Stop at the first hit: the Wumpus moves as a side effect of being asked.
        state = self.state()
        for hazard in self.hazards:
            update = hazard.try_update(state)
            if update is not None:
                return update
        return None

    def warnings(self) -> list[HazardWarning]:
        return [
            warning
            for hazard in self.hazards
            if (warning := hazard.try_warn(self.player.room)) is not None
        ]

    def warn(self) -> None:
        for warning in self.warnings():
            self.sink.warn(warning)

    def process(self, action: Action) -> RunResult | None:
        """Carry out one player action."""
        match action:
            case Move(room=room):
                if not is_adjacent(self.player.room, room):
                    raise IllegalActionError(
                        f"no tunnel from {self.player.room} to {room}; "
                        f"tunnels lead to {adjacent_rooms(self.player.room)}"
                    )
                logger.debug("player_moved", player_room=self.player.room, destination=room)
                self.player.room = room
                return None
            case Shoot(rooms=rooms):
                return self._shoot(rooms)
            case Quit():
                return RunResult.QUIT
            case _:
                raise IllegalActionError(f"unknown action: {action!r}")

    def _shoot(self, rooms: tuple[int, ...]) -> RunResult | None:
        shot = shoot(rooms, self.player.room, self.monster.room, self.dice)
        self.player.arrow_count -= 1
        logger.debug(
            "arrow_shot",
            outcome=shot.outcome.value,
            redirected=shot.redirected,
            arrows_left=self.player.arrow_count,
        )
        for room in shot.flight:
            self.sink.arrow_flew(room)

        match shot.outcome:
            case ShotOutcome.HIT:
                return RunResult.WIN
            case ShotOutcome.SUICIDE:
                return RunResult.SUICIDE

        self.sink.tell(Message.MISSED)
        if self.player.is_out_of_arrows:
            self.sink.tell(Message.OUT_OF_ARROWS)
            return RunResult.RAN_OUT_OF_ARROWS
        return None

    def _finish(self, result: RunResult) -> RunResult:
        self.result = result
        logger.info("game_finished", result=result.value, turns=self.turn)
        return result

    def __str__(self) -> str:
        return self.state().describe()
