"""
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Flat, the cube "opened up" into a 2D net, and the projection math
between cubi coordinates and net cells.

A cube of size n is flattened into a (3n) x (4n) grid. For n = 3:

    . . . u u u . . . . . .
    . . . u u u . . . . . .
    . . . u u u . . . . . .
    l l l c c c r r r b b b
    l l l c c c r r r b b b
    l l l c c c r r r b b b
    . . . d d d . . . . . .
    . . . d d d . . . . . .
    . . . d d d . . . . . .

u = up (+z), l = left (-x), c = center (+y), r = right (+x), b = back (-y),
d = down (-z); cells marked . do not belong to the cube.

"""
from __future__ import annotations

import math
from typing import Callable, Dict, List, NamedTuple, Optional, Sequence, Tuple

from ncube.colors import BLANK, PLAIN_LABELS, Axis, parse_label, sign
from ncube.cube import Cube
from ncube.cubies import Cubi, Vec
from ncube.errors import MalformedNet


# ---------- projection ----------
# Even cubes have no layer at coordinate 0, so coordinates are shifted half a
# cell toward 0 before rounding; odd cubes project exactly.
def _offset(n: int) -> float:
    return 0.5 if n % 2 == 0 else 0.0


def _descend(v: int, n: int) -> int:
    """Coordinate -> panel index, high coordinates first."""
    return n // 2 - math.ceil(v - sign(v) * _offset(n))


def _ascend(v: int, n: int) -> int:
    """Coordinate -> panel index, low coordinates first."""
    return n // 2 + math.floor(v - sign(v) * _offset(n))


def _undescend(idx: int, n: int) -> int:
    h = n // 2
    if n % 2 == 1 or idx < h:
        return h - idx
    return h - idx - 1


def _unascend(idx: int, n: int) -> int:
    h = n // 2
    if n % 2 == 1 or idx < h:
        return idx - h
    return idx - h + 1


class Projection(NamedTuple):
    forward: Callable[[int, int], int]
    inverse: Callable[[int, int], int]


DESCENDING = Projection(_descend, _undescend)
ASCENDING = Projection(_ascend, _unascend)


class Panel(NamedTuple):
    """One face of the net: where it sits and how coordinates map onto it."""
    name: str
    axis: Axis            # face normal
    polarity: int         # +1 / -1 along the normal
    band_row: int         # position in units of n
    band_col: int
    row_axis: Axis
    row_projection: Projection
    col_axis: Axis
    col_projection: Projection


PANELS: Tuple[Panel, ...] = (
    Panel("up", Axis.Z, 1, 0, 1, Axis.Y, ASCENDING, Axis.X, ASCENDING),
    Panel("left", Axis.X, -1, 1, 0, Axis.Z, DESCENDING, Axis.Y, ASCENDING),
    Panel("center", Axis.Y, 1, 1, 1, Axis.Z, DESCENDING, Axis.X, ASCENDING),
    Panel("right", Axis.X, 1, 1, 2, Axis.Z, DESCENDING, Axis.Y, DESCENDING),
    Panel("back", Axis.Y, -1, 1, 3, Axis.Z, DESCENDING, Axis.X, DESCENDING),
    Panel("down", Axis.Z, -1, 2, 1, Axis.Y, DESCENDING, Axis.X, ASCENDING),
)
PANEL_BY_FACE: Dict[Tuple[Axis, int], Panel] = {(p.axis, p.polarity): p for p in PANELS}
PANEL_BY_BAND: Dict[Tuple[int, int], Panel] = {(p.band_row, p.band_col): p for p in PANELS}


def format_grid(grid: Sequence[Sequence[str]], n: int, separators: bool = True,
                relabel: Optional[Callable[[str], str]] = None) -> str:
    """
    Lay a net grid out as text: every cell followed by a space, with "| "
    between the panels of the middle band and "  " at the same columns above
    and below it. Empty cells print as a blank.
    """
    lines = []
    for r, row in enumerate(grid):
        middle = n <= r < 2 * n
        parts = []
        for c, cell in enumerate(row):
            if separators and c != 0 and c % n == 0:
                parts.append("| " if middle else "  ")
            text = cell or BLANK
            if relabel is not None:
                text = relabel(text)
            parts.append(f"{text} ")
        lines.append("".join(parts))
    return "\n".join(lines)


class Flat:
    """
    A (3n) x (4n) grid of color labels.

    Built from a cube with `from_cube` (painting) or from text with
    ``ncube.net_io.parse_net``; turned back into a cube with `to_cube`.
    ``str(flat)`` is the canonical key of the painted cube.

    Attributes
    ----------
    n : int
        Cube size.
    grid : list[list[str]]
        Row-major labels, `BLANK` where nothing is painted.
    """

    def __init__(self, grid: Sequence[Sequence[str]]):
        rows = [list(row) for row in grid]
        if not rows or len(rows) % 3 != 0:
            raise MalformedNet(f"A net needs 3n rows, got {len(rows)}")
        n = len(rows) // 3
        for i, row in enumerate(rows):
            if len(row) != 4 * n:
                raise MalformedNet(f"Row {i} has {len(row)} cells, expected {4 * n}")
        self.n: int = n
        self.grid: List[List[str]] = rows

    @classmethod
    def empty(cls, n: int) -> "Flat":
        return cls([[BLANK] * (4 * n) for _ in range(3 * n)])

    @classmethod
    def from_cube(cls, cube: Cube) -> "Flat":
        flat = cls.empty(cube.n)
        for cubi in cube.cubis:
            flat.paint_cubi(cubi)
        return flat

    # ---------- encoding ----------
    def cell_of(self, pv: Vec, axis: Axis, polarity: int) -> Tuple[int, int]:
        """Grid (row, col) showing the sticker of position `pv` that faces `polarity` along `axis`."""
        panel = PANEL_BY_FACE[(Axis(axis), polarity)]
        r = panel.row_projection.forward(pv[panel.row_axis], self.n)
        c = panel.col_projection.forward(pv[panel.col_axis], self.n)
        return panel.band_row * self.n + r, panel.band_col * self.n + c

    def paint_cubi(self, cubi: Cubi) -> None:
        """
        Write every sticker of `cubi` into its panel cell.

        The sign of a color slot selects the panel (e.g. -X goes to the left
        panel), the other two coordinates select the cell, and the label is that
        of the absolute hue.
        """
        for axis, color in cubi.stickers():
            row, col = self.cell_of(cubi.pv, axis, sign(color))
            self.grid[row][col] = PLAIN_LABELS[abs(color)]

    # ---------- decoding ----------
    def position_of(self, row: int, col: int) -> Tuple[Vec, Axis, int]:
        """
        Inverse of `cell_of`: the position, face axis and polarity behind a cell.

        Raises:
            MalformedNet: when the cell lies outside the six panels.
        """
        n = self.n
        panel = PANEL_BY_BAND.get((row // n, col // n))
        if panel is None:
            raise MalformedNet(f"Cell ({row}, {col}) lies outside every panel")
        pv = [0, 0, 0]
        pv[panel.axis] = panel.polarity * (n // 2)
        pv[panel.row_axis] = panel.row_projection.inverse(row % n, n)
        pv[panel.col_axis] = panel.col_projection.inverse(col % n, n)
        return tuple(pv), panel.axis, panel.polarity

    def to_cube(self) -> Cube:
        """
        Rebuild the cube shown by the net.

        Each painted cell contributes one axis slot of one position; slots of
        the same position coming from different panels are merged
        (first nonzero wins).

        Raises:
            UnknownColorLabel: a cell holds a label that is not a color.
            MalformedNet: a painted cell lies outside every panel.
            ConflictingSticker: two cells painted the same slot of a position.
        """
        pieces: Dict[Vec, Cubi] = {}
        for r, row in enumerate(self.grid):
            for c, label in enumerate(row):
                if not label or label == BLANK:
                    continue
                pv, axis, polarity = self.position_of(r, c)
                cv = [0, 0, 0]
                cv[axis] = polarity * int(parse_label(label))
                part = Cubi(pv=pv, cv=tuple(cv))
                pieces[pv] = pieces[pv].merge(part) if pv in pieces else part
        return Cube(self.n, cubis=pieces.values())

    def __str__(self) -> str:
        return format_grid(self.grid, self.n)

    def __repr__(self) -> str:
        return f"Flat(n={self.n})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Flat):
            return NotImplemented
        return str(self) == str(other)

    __hash__ = None


def paint(cube: Cube) -> Flat:
    """Encode a cube into its net."""
    return Flat.from_cube(cube)


def decode(flat: Flat) -> Cube:
    """Decode a net back into a cube."""
    return flat.to_cube()
