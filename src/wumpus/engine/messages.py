"""Text the engine hands to whoever is presenting the game."""

from enum import Enum

from .state import RunResult


class HazardWarning(str, Enum):
    """Sensed when a hazard is one tunnel away."""

    PIT = "I feel a draft!"
    BAT = "Bats nearby!"
    MONSTER = "I smell a Wumpus."


class Message(str, Enum):
    BAT_SNATCH = "Zap--Super Bat snatch! Elsewhereville for you!"
    MONSTER_BUMP = "...Oops! Bumped a wumpus!"

    OUT_OF_ARROWS = "You've run out of arrows!"
    ARROW_GOT_YOU = "Ouch! Arrow got you!"
    MISSED = "Missed!"
    TOO_CROOKED = "Arrows aren't that crooked - try another room sequence!"

    FELL_IN_PIT = "YYYIIIIEEEE... fell in a pit!"
    MONSTER_GOT_YOU = "Tsk tsk tsk - wumpus got you!"
    LOSE = "Ha ha ha - you lose!"
    WIN = "Aha! You got the Wumpus!\nHee hee hee - the Wumpus'll getcha next time!!"


_RESULT_MESSAGES: dict[RunResult, tuple[Message, ...]] = {
    RunResult.QUIT: (),
    RunResult.WIN: (Message.WIN,),
    RunResult.KILLED_BY_PIT: (Message.FELL_IN_PIT, Message.LOSE),
    RunResult.KILLED_BY_MONSTER: (Message.MONSTER_GOT_YOU, Message.LOSE),
    RunResult.SUICIDE: (Message.ARROW_GOT_YOU, Message.LOSE),
    RunResult.RAN_OUT_OF_ARROWS: (Message.LOSE,),
}


def result_messages(result: RunResult) -> tuple[Message, ...]:
    """Lines to show once a game has ended."""
    return _RESULT_MESSAGES[result]
