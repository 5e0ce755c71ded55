"""
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: The n x n x n cube: solved-state construction, layer turns, whole-cube
rotations, shuffling and the move-graph enumerations used by the solver.

"""
from __future__ import annotations

import inspect
import random
from collections import deque
from contextlib import contextmanager
from dataclasses import dataclass, replace
from functools import wraps
from itertools import product
from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple

import pandas as pd

from ncube.colors import AXES, DIRECTIONS, FACE_COLORS, Axis, Color, Direction, sign
from ncube.config import PaintRule
from ncube.cubies import Cubi
from ncube.errors import InvalidCubeSize
from ncube.rotations import ROTATION_MATRICES, Move

HISTORY_COLUMNS = ["step", "kind", "axis", "layer", "direction", "phase"]


@dataclass
class HistorySettings:
    """
    Recording switches shared by a cube and every cube derived from it.

    `history_phase` / `no_history` flip these for the length of a block and put
    them back on exit, so cubes created inside the block go back to the
    defaults once it is left.
    """
    phase: str = "solve"
    enabled: bool = True


def track_history(method: Callable[..., "Cube"]) -> Callable[..., "Cube"]:
    """
    Decorator for Cube.turn / Cube.rotate / Cube.move: the returned cube gets the
    receiver's history plus one row for this operation, unless history is
    disabled. Phase is taken from the receiver's `HistorySettings`.
    """
    signature = inspect.signature(method)

    @wraps(method)
    def wrapper(self, *args, **kwargs) -> "Cube":
        # compute the new cube first (state change is primary)
        result = method(self, *args, **kwargs)

        settings = self._settings
        if settings.enabled:
            bound = signature.bind(self, *args, **kwargs)
            bound.apply_defaults()
            params = bound.arguments
            record = (
                len(self._history),
                method.__name__,
                str(Axis(params["axis"])),
                params.get("layer"),
                str(params["direction"]),
                settings.phase,
            )
            result._history = self._history + (record,)
        return result
    return wrapper


class Cube:
    """
    An n x n x n cube made of its surface cubis.

    Only the n³ - (n-2)³ surface pieces are stored; the hidden interior is
    never materialized. Each cubi carries a position on the centered lattice
    ``[-n//2, n//2]³`` (coordinate 0 is skipped for even n) and a signed color
    per axis.

    Design principles
    -----------------
    • Cubis are immutable values. `turn`, `rotate`, `move` and `apply` return
      new cubes and never touch the receiver; only `shuffle` (and the history
      helpers) update the receiver in place.

    • Equality and hashing go through the canonical key, the plain-text net
      produced by ``ncube.flat.Flat``.

    • Turning the middle layer of an odd cube with the raw `turn` moves the
      face centers. `move` compensates with a whole-cube `rotate` so the frame
      stays canonical; `shuffle` and `get_all_turns` are built on `move`.

    Coordinates: +x = right (orange), +y = center/front (green),
    +z = up (yellow); the negative faces are red, blue and white.

    Example
    -------
        c = Cube(3)
        c = c.turn(Axis.X, 1, Direction.CLOCK)
        print(c)
    """

    def __init__(self, n: int = 3, cubis: Optional[Iterable[Cubi]] = None,
                 rule: PaintRule = PaintRule.EXTREMITY):
        if isinstance(n, bool) or not isinstance(n, int) or n < 2:
            raise InvalidCubeSize(n)
        self.n: int = n
        if cubis is None:
            cubis = self._solved_cubis(rule)
        self.cubis: Tuple[Cubi, ...] = tuple(cubis)
        self._key_cache: Optional[Tuple[Tuple[Cubi, ...], str]] = None
        self._init_history_fields()

    # ---------- construction ----------
    @property
    def extremity(self) -> int:
        return self.n // 2

    def layers(self) -> List[int]:
        """Every coordinate value a layer can be selected by, ascending."""
        h = self.extremity
        return [v for v in range(-h, h + 1) if v != 0 or self.n % 2 == 1]

    def _solved_cubis(self, rule: PaintRule) -> Iterator[Cubi]:
        if rule is PaintRule.SIGN and self.n % 2 == 1:
            raise InvalidCubeSize(self.n, "sign painting is only defined for even sizes")
        h = self.extremity
        for pv in product(self.layers(), repeat=3):
            if all(abs(v) < h for v in pv):
                continue  # interior
            cv = tuple(self._solved_color(axis, pv[axis], rule) for axis in AXES)
            yield Cubi(pv=pv, cv=cv)

    def _solved_color(self, axis: Axis, v: int, rule: PaintRule) -> int:
        if rule is PaintRule.SIGN or abs(v) == self.extremity:
            return int(FACE_COLORS[(axis, sign(v))])
        return int(Color.ZERO)

    def _derive(self, cubis: Iterable[Cubi]) -> "Cube":
        """New cube of the same size sharing history settings with the receiver."""
        cube = type(self).__new__(type(self))
        cube.n = self.n
        cube.cubis = tuple(cubis)
        cube._key_cache = None
        cube._history = self._history
        cube._settings = self._settings
        cube._shuffle_len = self._shuffle_len
        return cube

    def copy(self) -> "Cube":
        """Independent clone: same cubis and history, its own recording settings."""
        cube = self._derive(self.cubis)
        cube._settings = replace(self._settings)
        return cube

    # ---------- history ----------
    def _init_history_fields(self) -> None:
        """
        Ensure history fields exist (idempotent).

        Creates:
            - self._history: tuple of records, one per recorded operation,
              laid out as HISTORY_COLUMNS.
            - self._shuffle_len: number of records that belong to the shuffle.
        """
        if not hasattr(self, "_history"):
            self._history: Tuple[tuple, ...] = ()
        if not hasattr(self, "_shuffle_len"):
            self._shuffle_len = 0
        if not hasattr(self, "_settings"):
            self._settings = HistorySettings()

    @contextmanager
    def history_phase(self, phase: str):
        """
        Temporarily set the history 'phase' for recorded moves ('shuffle' or 'solve').
        Cubes derived from this one record the phase inside the block and fall
        back to the previous one after it, even when they outlive the block.
        Usage:
            with cube.history_phase('shuffle'):
                cube = cube.turn(Axis.X, 1)
        """
        prev = self._settings.phase
        self._settings.phase = phase
        try:
            yield
        finally:
            self._settings.phase = prev

    @contextmanager
    def no_history(self):
        """
        Temporarily disable history recording for this cube and the cubes
        derived from it, which is what a state-space search wants. Recording
        resumes on every one of them once the block is left.
        """
        prev = self._settings.enabled
        self._settings.enabled = False
        try:
            yield
        finally:
            self._settings.enabled = prev

    def clear_history(self) -> None:
        """Clear the history and reset the shuffle checkpoint."""
        self._history = ()
        self._shuffle_len = 0

    def moves_since_shuffle(self) -> int:
        """Number of operations logged after the shuffle checkpoint."""
        return max(0, len(self._history) - self._shuffle_len)

    def get_history(self) -> pd.DataFrame:
        """
        Return the operation history as a DataFrame.

        Columns:
            step (int)        : 0-based operation index
            kind (str)        : 'turn', 'rotate' or 'move'
            axis (str)        : 'Xax', 'Yax', 'Zax'
            layer (int|None)  : selected layer, None for whole-cube rotations
            direction (str)   : 'clock' or 'counterclock'
            phase (str)       : 'shuffle' or 'solve'
        """
        return pd.DataFrame(list(self._history), columns=HISTORY_COLUMNS)

    # ---------- rotation algebra ----------
    def _turned(self, axis: Axis, layer: int, direction: Direction) -> "Cube":
        m = ROTATION_MATRICES[(Axis(axis), direction)]
        return self._derive(c.apply(m) if c.pv[axis] == layer else c for c in self.cubis)

    def _rotated(self, axis: Axis, direction: Direction) -> "Cube":
        m = ROTATION_MATRICES[(Axis(axis), direction)]
        return self._derive(c.apply(m) for c in self.cubis)

    @track_history
    def turn(self, axis: Axis, layer: int, direction: Direction = Direction.CLOCK) -> "Cube":
        """
        Rotate every cubi whose coordinate on `axis` equals `layer` by 90°.

        This is the raw primitive: turning the middle layer of an odd cube moves
        the face centers. A layer index that no cubi uses selects nothing and
        returns an identical cube.

        Args:
            axis: Axis the layer is perpendicular to.
            layer: Coordinate value selecting the layer.
            direction: Direction.CLOCK or Direction.COUNTERCLOCK.
        """
        return self._turned(axis, layer, direction)

    @track_history
    def rotate(self, axis: Axis, direction: Direction = Direction.CLOCK) -> "Cube":
        """Reorient the whole cube by 90° about `axis` (not a puzzle move)."""
        return self._rotated(axis, direction)

    @track_history
    def move(self, axis: Axis, layer: int, direction: Direction = Direction.CLOCK) -> "Cube":
        """
        Frame-preserving layer turn.

        Same as `turn`, except that for odd cubes the middle layer (0) is turned
        and the whole cube is then rotated back, so face centers never move and
        `is_canonical` keeps holding.
        """
        cube = self._turned(axis, layer, direction)
        if self.n % 2 == 1 and layer == 0:
            cube = cube._rotated(axis, direction.inverse)
        return cube

    def apply(self, moves: Iterable[Move]) -> "Cube":
        """Apply a sequence of `Move`s (or ``(axis, layer, direction)`` tuples) with `move`."""
        cube = self
        for axis, layer, direction in moves:
            cube = cube.move(axis, layer, direction)
        return cube

    def shuffle(self, count: int = 25, rng: Optional[random.Random] = None) -> None:
        """
        Apply `count` random moves in place and mark them as the shuffle checkpoint.

        Every move is drawn uniformly from axis × layers() × direction. Middle
        layers of odd cubes are compensated as in `move`, so the frame stays
        canonical. Consecutive moves may repeat or cancel each other.

        Args:
            count: Number of quarter turns.
            rng: Random source; a fresh `random.Random()` when omitted.

        Side effects:
            - Replaces the receiver's cubis.
            - Records each move with phase='shuffle'.
            - Sets the shuffle checkpoint to the new history length.
        """
        rng = rng if rng is not None else random.Random()
        layers = self.layers()
        cube = self
        with self.history_phase("shuffle"):
            for _ in range(count):
                axis = rng.choice(AXES)
                layer = rng.choice(layers)
                direction = rng.choice(DIRECTIONS)
                cube = cube.move(axis, layer, direction)
        self.cubis = cube.cubis
        self._history = cube._history
        self._shuffle_len = len(self._history)

    def get_all_turns(self) -> List["Cube"]:
        """
        Every cube one `move` away, ordered by axis, then layer, then
        counterclockwise before clockwise.
        """
        return [
            self.move(axis, layer, direction)
            for axis in AXES
            for layer in self.layers()
            for direction in DIRECTIONS
        ]

    def get_all_rotations(self) -> List["Cube"]:
        """
        Orbit of the cube under whole-cube rotation.

        Breadth-first closure over the six `rotate` generators, deduplicated by
        canonical key. The rotation group has order 24, so at most 24 cubes come
        back (fewer when the coloring is symmetric); the first one is `self`.
        """
        seen = {self.key()}
        orbit = [self]
        queue = deque([self])
        while queue:
            cube = queue.popleft()
            for axis, direction in product(AXES, DIRECTIONS):
                other = cube.rotate(axis, direction)
                key = other.key()
                if key not in seen:
                    seen.add(key)
                    orbit.append(other)
                    queue.append(other)
        return orbit

    # ---------- predicates ----------
    def is_solved(self) -> bool:
        """
        Every face shows a single nonzero color.

        A face is the set of cubis whose coordinate on an axis is ±n//2; the
        color checked is the one in that axis' slot.
        """
        h = self.extremity
        face_colors = {}
        for cubi in self.cubis:
            for axis in AXES:
                v = cubi.pv[axis]
                if abs(v) != h:
                    continue
                color = cubi.cv[axis]
                if color == Color.ZERO:
                    return False
                if face_colors.setdefault((axis, sign(v)), color) != color:
                    return False
        return True

    def is_canonical(self) -> bool:
        """
        The six face centers carry their reference colors (odd cubes only).

        Even cubes have no center piece and are never canonical.
        """
        if self.n % 2 == 0:
            return False
        h = self.extremity
        by_position = {c.pv: c.cv for c in self.cubis}
        for (axis, polarity), color in FACE_COLORS.items():
            pv = [0, 0, 0]
            cv = [0, 0, 0]
            pv[axis] = polarity * h
            cv[axis] = int(color)
            if by_position.get(tuple(pv)) != tuple(cv):
                return False
        return True

    # ---------- views ----------
    def key(self) -> str:
        """Canonical key: the plain-label net text. Equal cubes have equal keys."""
        if self._key_cache is None or self._key_cache[0] is not self.cubis:
            from ncube.flat import Flat
            self._key_cache = (self.cubis, str(Flat.from_cube(self)))
        return self._key_cache[1]

    to_string_key = key

    def print_net(self, use_color: bool = True) -> None:
        """Print the net to the terminal, optionally with ANSI colors."""
        from ncube.config import RenderConfig
        from ncube.visualisation.render import print_net
        print_net(self, RenderConfig(colorize=use_color))

    def plot_3d(self, ax: Any = None, figsize: tuple[int, int] = (6, 6), edgecolor: str = "k") -> Any:
        """Render the stickers in a 3D matplotlib view (see ncube.visualisation.render)."""
        from ncube.visualisation.render import plot_3d
        return plot_3d(self, ax=ax, figsize=figsize, edgecolor=edgecolor)

    def __str__(self) -> str:
        return self.key()

    def __repr__(self) -> str:
        return f"Cube(n={self.n}, cubis={len(self.cubis)}, solved={self.is_solved()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cube):
            return NotImplemented
        return self.n == other.n and self.key() == other.key()

    def __hash__(self) -> int:
        return hash(self.key())
