"""Session layer: a run of games sharing one configuration and one set of dice."""

from collections import Counter
from dataclasses import replace

from .config import Config
from .engine.dice import Dice
from .engine.game import ActionSource, Game, Sink
from .engine.state import GameState, RunResult, new_game_state
from .logging import get_logger

logger = get_logger(__name__)


class HuntSession:
    """Deals out games and remembers the last setup so it can be replayed."""

    def __init__(self, config: Config, dice: Dice | None = None):
        self.config = config
        self.dice = dice or Dice(config.seed)
        self.setup: GameState | None = None
        self.results: list[RunResult] = []

    def new_game(
        self, actions: ActionSource, sink: Sink, same_setup: bool = False
    ) -> Game:
        """Set up a game, reusing the previous setup if asked and there is one."""
        if same_setup and self.setup is not None:
            logger.info("game_replayed", games_played=len(self.results))
        else:
            self.setup = new_game_state(self.dice, self.config.arrows)
            logger.info("new_game_started", games_played=len(self.results))

        state = replace(self.setup, is_cheating=self.config.cheat)
        return Game.from_state(
            state,
            actions,
            sink,
            self.dice,
            arrow_capacity=self.config.arrows,
            move_chance=self.config.move_chance,
        )

    def play(
        self, actions: ActionSource, sink: Sink, same_setup: bool = False
    ) -> RunResult:
        result = self.new_game(actions, sink, same_setup).run()
        self.results.append(result)
        return result

    def tally(self) -> Counter[RunResult]:
        return Counter(self.results)
