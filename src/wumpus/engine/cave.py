"""The cave: a fixed dodecahedron of rooms.

Each of the 20 vertices is a room and each edge a tunnel, so every room has
exactly three neighbours. The table is shared by every game and never changes.
"""

from collections.abc import Sequence

ROOM_COUNT = 20

# CAVE[room - 1] -> the three rooms a tunnel leads to
CAVE: tuple[tuple[int, int, int], ...] = (
    (2, 5, 8),
    (1, 3, 10),
    (2, 4, 12),
    (3, 5, 14),
    (1, 4, 6),
    (5, 7, 15),
    (6, 8, 17),
    (1, 7, 9),
    (8, 10, 18),
    (2, 9, 11),
    (10, 12, 19),
    (3, 11, 13),
    (12, 14, 20),
    (4, 13, 15),
    (6, 14, 16),
    (15, 17, 20),
    (7, 16, 18),
    (9, 17, 19),
    (11, 18, 20),
    (13, 16, 19),
)

ROOMS = range(1, ROOM_COUNT + 1)


class InvalidRoomError(ValueError):
    """A room number outside the cave was passed in."""


def check_room(room: int) -> int:
    """Return room unchanged, or raise if it is not a room of the cave."""
    if room not in ROOMS:
        raise InvalidRoomError(f"no such room: {room!r}")
    return room


def adjacent_rooms(room: int) -> tuple[int, int, int]:
    return CAVE[check_room(room) - 1]


def is_adjacent(a: int, b: int) -> bool:
    """True when a tunnel joins a and b. Rooms outside the cave join nothing."""
    if a not in ROOMS or b not in ROOMS:
        return False
    return b in CAVE[a - 1]


def is_too_crooked(path: Sequence[int]) -> bool:
    """True if the path doubles straight back through a tunnel (A-B-A).

    An arrow can bend, but it can't turn around. A window of three rooms
    where the first and last are the same and joined to the middle one is
    rejected. If A and B aren't joined the path is merely off the tunnels,
    which the arrow handles by flying at random instead.
    """
    return any(
        a == c and is_adjacent(a, b)
        for a, b, c in zip(path, path[1:], path[2:])
    )
