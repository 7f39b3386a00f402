"""Crooked arrows.

The player names up to five rooms and the arrow flies through them in order,
starting from the player's room. Whenever the next named room isn't through
a tunnel, the arrow goes wild: the rooms it still had left to fly are
replaced by a random path out of the last room it legally reached. That
random path follows the tunnels by construction, so an arrow goes wild at
most once.

The arrow stops at the first room holding the Wumpus (a hit) or the player
(the arrow has come back around).
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from ..logging import get_logger
from .cave import check_room, is_adjacent
from .dice import Dice
from .state import MAX_TRAVERSABLE, IllegalActionError

logger = get_logger(__name__)


class ShotOutcome(Enum):
    HIT = "hit"
    MISS = "miss"
    SUICIDE = "suicide"


@dataclass(frozen=True)
class Shot:
    outcome: ShotOutcome
    flight: tuple[int, ...]
    redirected: bool = False


@dataclass(frozen=True)
class _Flight:
    """How far an arrow got along a path before landing or going wild."""

    flown: list[int]
    outcome: ShotOutcome | None
    remaining: int = 0


def _traverse(
    path: Sequence[int], start: int, player_room: int, monster_room: int
) -> _Flight:
    flown: list[int] = []
    here = start
    for hops, room in enumerate(path):
        if not is_adjacent(here, room):
            return _Flight(flown, None, remaining=len(path) - hops)
        flown.append(room)
        if room == monster_room:
            return _Flight(flown, ShotOutcome.HIT)
        if room == player_room:
            return _Flight(flown, ShotOutcome.SUICIDE)
        here = room
    return _Flight(flown, ShotOutcome.MISS)


def check_path(path: Sequence[int]) -> None:
    """Raise IllegalActionError unless path is 1-5 rooms of the cave."""
    if not 1 <= len(path) <= MAX_TRAVERSABLE:
        raise IllegalActionError(
            f"an arrow flies through 1 to {MAX_TRAVERSABLE} rooms, got {len(path)}"
        )
    for room in path:
        check_room(room)


def shoot(
    path: Sequence[int], player_room: int, monster_room: int, dice: Dice
) -> Shot:
    """Fly an arrow from player_room along path."""
    check_path(path)

    flight = _traverse(path, player_room, player_room, monster_room)
    if flight.outcome is not None:
        return Shot(flight.outcome, tuple(flight.flown))

    # Gone wild: pick up from the last room actually reached.
    reached = [player_room, *flight.flown]
    last = reached[-1]
    previous = reached[-2] if len(reached) > 1 else None
    wild_path = dice.random_valid_path(flight.remaining, last, previous)
    logger.debug(
        "arrow_redirected",
        intended=list(path),
        flown=flight.flown,
        remaining=flight.remaining,
    )

    wild = _traverse(wild_path, last, player_room, monster_room)
    if wild.outcome is None:
        raise RuntimeError(f"random arrow path left the tunnels: {wild_path}")
    return Shot(wild.outcome, tuple(flight.flown + wild.flown), redirected=True)
