"""Terminal front end: reads actions from the keyboard, prints what happens.

Nothing here knows the rules beyond what a prompt needs to refuse nonsense;
everything else is the engine's business.
"""

from collections.abc import Callable

from .engine.cave import ROOMS, adjacent_rooms, is_too_crooked
from .engine.game import Action, Move, Quit, Shoot
from .engine.messages import HazardWarning, Message, result_messages
from .engine.state import MAX_TRAVERSABLE, GameState, RunResult
from .session import HuntSession

ACTION_PROMPT = "Shoot, Move or Quit(S - M - Q)? "
MOVE_PROMPT = "Where to? "
NOT_POSSIBLE = "Not Possible - Where to? "
PATH_LENGTH_PROMPT = f"No. of rooms (1-{MAX_TRAVERSABLE})? "
PLAY_PROMPT = "Play again? (Y-N) "
SETUP_PROMPT = "Same Setup? (Y-N) "

Reader = Callable[[str], str]
Writer = Callable[[str], None]


class ConsoleActions:
    """Asks the player what to do until it gets an answer the rules allow."""

    def __init__(self, read: Reader = input, write: Writer = print):
        self.read = read
        self.write = write

    def _ask(self, prompt: str) -> str:
        return self.read(prompt).strip().upper()

    def _ask_int(self, prompt: str) -> int | None:
        try:
            return int(self._ask(prompt))
        except ValueError:
            return None

    def next_action(self, state: GameState) -> Action:
        try:
            return self._next_action(state)
        except (EOFError, KeyboardInterrupt):
            return Quit()

    def _next_action(self, state: GameState) -> Action:
        self.write(f"You are in room {state.player}")
        self.write("Tunnels lead to {} {} {}".format(*adjacent_rooms(state.player)))
        while True:
            match self._ask(ACTION_PROMPT):
                case "M":
                    return Move(self._ask_room_to_move(state.player))
                case "S":
                    return Shoot(self._ask_path(state.player))
                case "Q":
                    return Quit()

    def _ask_room_to_move(self, here: int) -> int:
        tunnels = adjacent_rooms(here)
        room = self._ask_int(MOVE_PROMPT)
        while room not in tunnels:
            room = self._ask_int(NOT_POSSIBLE)
        return room

    def _ask_path(self, here: int) -> list[int]:
        count = self._ask_int(PATH_LENGTH_PROMPT)
        while count is None or not 1 <= count <= MAX_TRAVERSABLE:
            count = self._ask_int(PATH_LENGTH_PROMPT)

        while True:
            path = [self._ask_room(i + 1) for i in range(count)]
            if not is_too_crooked([here, *path]):
                return path
            self.write(Message.TOO_CROOKED.value)

    def _ask_room(self, number: int) -> int:
        room = self._ask_int(f"Room #{number}? ")
        while room not in ROOMS:
            room = self._ask_int(f"Room #{number}? ")
        return room


class ConsoleSink:
    def __init__(self, write: Writer = print):
        self.write = write

    def warn(self, warning: HazardWarning) -> None:
        self.write(warning.value)

    def tell(self, message: Message) -> None:
        self.write(message.value)

    def arrow_flew(self, room: int) -> None:
        self.write(str(room))

    def reveal(self, state: GameState) -> None:
        self.write(state.describe())

    def finish(self, result: RunResult) -> None:
        for message in result_messages(result):
            self.write(message.value)


def _yes(read: Reader, prompt: str) -> bool:
    try:
        return read(prompt).strip().upper().startswith("Y")
    except (EOFError, KeyboardInterrupt):
        return False


def play(session: HuntSession, read: Reader = input, write: Writer = print) -> None:
    """Play games until the player has had enough."""
    actions = ConsoleActions(read, write)
    sink = ConsoleSink(write)
    same_setup = False
    while True:
        result = session.play(actions, sink, same_setup)
        sink.finish(result)
        if result is RunResult.QUIT or not _yes(read, PLAY_PROMPT):
            return
        same_setup = _yes(read, SETUP_PROMPT)
