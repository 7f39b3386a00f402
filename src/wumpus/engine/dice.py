"""Every random draw the game makes goes through a Dice instance.

Pass a seeded Dice (or your own random.Random) to get a reproducible game.
"""

import random
from collections.abc import Sequence
from typing import TypeVar

from .cave import ROOM_COUNT, adjacent_rooms, check_room

T = TypeVar("T")


class Dice:
    """Randomness provider for room, tunnel and arrow-path draws."""

    def __init__(self, seed: int | None = None, rng: random.Random | None = None):
        self.rng = rng if rng is not None else random.Random(seed)

    def chance(self, probability: float) -> bool:
        """Return True with the given probability."""
        return self.rng.random() < probability

    def choice(self, options: Sequence[T]) -> T:
        return self.rng.choice(options)

    def random_room(self) -> int:
        return self.rng.randint(1, ROOM_COUNT)

    def random_adjacent_room(self, room: int) -> int:
        return self.rng.choice(adjacent_rooms(room))

    def random_valid_adjacent_room(self, room: int, previous: int | None) -> int:
        """A neighbour of room other than the one we just came from."""
        options = [r for r in adjacent_rooms(room) if r != previous]
        return self.rng.choice(options)

    def random_valid_path(
        self, length: int, start: int, previous: int | None = None
    ) -> list[int]:
        """Draw a path of length rooms leading out of start.

        Each room is joined to the one before it and the path never doubles
        back, so an arrow flying it never needs redirecting.
        """
        check_room(start)
        path: list[int] = []
        here, came_from = start, previous
        for _ in range(length):
            step = self.random_valid_adjacent_room(here, came_from)
            path.append(step)
            here, came_from = step, here
        return path

    def unique_rooms(self, count: int) -> list[int]:
        """Draw count distinct rooms."""
        return self.rng.sample(range(1, ROOM_COUNT + 1), k=count)
