"""Cell side labels, border walking directions and label schemes.

A unit cell has its corners at (0,0) bottom-left, (1,0) bottom-right,
(1,1) top-right and (0,1) top-left. Isobands can cross each side twice, so
band cells use eight side labels; isocontours cross each side at most once
and collapse those labels onto the four cardinal sides.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

Point = tuple[float, float]


class Side(enum.IntEnum):
    """Band side labels, in canonical scan order."""

    BL = 0  # bottom side, left crossing
    LB = 1  # left side, bottom crossing
    LT = 2  # left side, top crossing
    TL = 3  # top side, left crossing
    TR = 4  # top side, right crossing
    RT = 5  # right side, top crossing
    RB = 6  # right side, bottom crossing
    BR = 7  # bottom side, right crossing


class Cardinal(enum.IntEnum):
    """Contour side labels, in canonical scan order."""

    RIGHT = 0
    BOTTOM = 1
    LEFT = 2
    TOP = 3


class Direction(enum.IntEnum):
    """Walking direction along the outer border (clockwise = +1)."""

    DOWN = 0
    LEFT = 1
    UP = 2
    RIGHT = 3

    @property
    def step(self) -> tuple[int, int]:
        return _STEPS[self]

    def rotated(self) -> Direction:
        return Direction((self + 1) % 4)


_STEPS = {
    Direction.DOWN: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.UP: (0, 1),
    Direction.RIGHT: (1, 0),
}


class Corner(enum.Enum):
    """Unit-square corners usable as polygon vertices."""

    BOTTOM_LEFT = (0.0, 0.0)
    TOP_LEFT = (0.0, 1.0)
    TOP_RIGHT = (1.0, 1.0)
    BOTTOM_RIGHT = (1.0, 0.0)


CARDINAL_OF: dict[Side, Cardinal] = {
    Side.BL: Cardinal.BOTTOM,
    Side.BR: Cardinal.BOTTOM,
    Side.LB: Cardinal.LEFT,
    Side.LT: Cardinal.LEFT,
    Side.TL: Cardinal.TOP,
    Side.TR: Cardinal.TOP,
    Side.RB: Cardinal.RIGHT,
    Side.RT: Cardinal.RIGHT,
}

# Leaving through a side: (dx, dy, side entered in the neighbor)
EXIT_MOVES: dict[Side, tuple[int, int, Side]] = {
    Side.BL: (0, -1, Side.TL),
    Side.BR: (0, -1, Side.TR),
    Side.TL: (0, 1, Side.BL),
    Side.TR: (0, 1, Side.BR),
    Side.LB: (-1, 0, Side.RB),
    Side.LT: (-1, 0, Side.RT),
    Side.RB: (1, 0, Side.LB),
    Side.RT: (1, 0, Side.LT),
}

# Corner indices (x0..x3) at the start and end of each side; crossing
# fractions are measured from the first corner.
SIDE_CORNERS: dict[Cardinal, tuple[int, int]] = {
    Cardinal.BOTTOM: (0, 1),
    Cardinal.LEFT: (0, 3),
    Cardinal.TOP: (3, 2),
    Cardinal.RIGHT: (1, 2),
}

# Labels nearer the first corner of a side take the first of two crossings.
FIRST_CROSSING = frozenset({Side.BL, Side.LB, Side.TL, Side.RB})


def side_point(side: Cardinal, t: float) -> Point:
    """Position of fraction ``t`` along a side, in unit-cell coordinates."""
    if side == Cardinal.BOTTOM:
        return (t, 0.0)
    if side == Cardinal.LEFT:
        return (0.0, t)
    if side == Cardinal.TOP:
        return (t, 1.0)
    return (1.0, t)


def skip_corner(x: int, y: int, direction: Direction) -> Point:
    """Grid corner reached after walking past border cell (x, y)."""
    if direction == Direction.DOWN:
        return (float(x + 1), float(y))
    if direction == Direction.LEFT:
        return (float(x), float(y))
    if direction == Direction.UP:
        return (float(x), float(y + 1))
    return (float(x + 1), float(y + 1))


@dataclass(frozen=True)
class LabelScheme:
    """How side labels map onto a cell's fixed edge slots."""

    name: str
    size: int
    collapse: bool
    # Slots that can be entered while walking the border in each Direction
    valid_entries: tuple[tuple[int, ...], ...]

    def slot(self, side: Side) -> int:
        return int(CARDINAL_OF[side]) if self.collapse else int(side)

    def cardinal(self, slot: int) -> Cardinal:
        return Cardinal(slot) if self.collapse else CARDINAL_OF[Side(slot)]

    def exit_move(self, side: Side) -> tuple[int, int, int]:
        dx, dy, enter = EXIT_MOVES[side]
        return dx, dy, self.slot(enter)


BAND_SCHEME = LabelScheme(
    name="band",
    size=8,
    collapse=False,
    valid_entries=(
        (Side.RT, Side.RB),
        (Side.BR, Side.BL),
        (Side.LB, Side.LT),
        (Side.TL, Side.TR),
    ),
)

CONTOUR_SCHEME = LabelScheme(
    name="contour",
    size=4,
    collapse=True,
    valid_entries=(
        (Cardinal.RIGHT,),
        (Cardinal.BOTTOM,),
        (Cardinal.LEFT,),
        (Cardinal.TOP,),
    ),
)


def border_exit(x: int, y: int, rows: int, cols: int) -> tuple[int, int, Direction] | None:
    """Clamp a position just outside the grid back onto the border.

    Returns the clamped cell and the direction to walk so that the filled
    region stays on the right, or None if (x, y) is inside the grid.
    """
    if x == cols:
        return x - 1, y, Direction.DOWN
    if x < 0:
        return x + 1, y, Direction.UP
    if y == rows:
        return x, y - 1, Direction.RIGHT
    if y < 0:
        return x, y + 1, Direction.LEFT
    return None


def on_outer_border(x: int, y: int, side: Cardinal, rows: int, cols: int) -> bool:
    """True if ``side`` of cell (x, y) lies on the grid's outer edge."""
    if side == Cardinal.LEFT:
        return x == 0
    if side == Cardinal.RIGHT:
        return x == cols - 1
    if side == Cardinal.BOTTOM:
        return y == 0
    return y == rows - 1
