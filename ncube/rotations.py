'''
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Quarter-turn rotation matrices and move sequences.

'''
from __future__ import annotations

from typing import Dict, Iterable, List, NamedTuple, Tuple

import numpy as np

from ncube.colors import AXES, DIRECTIONS, Axis, Direction


def _quarter_turn(axis: Axis, direction: Direction) -> np.ndarray:
    """
    Rotation by ``direction.value * 90°`` about a principal axis.

    With ``e`` the unit axis and ``[e]x`` its cross-product matrix,
    ``R(θ) = cosθ (I - e eᵀ) + e eᵀ + sinθ [e]x``; at θ = ±90° that is
    ``e eᵀ ± [e]x``, always a signed permutation.
    """
    e = np.zeros(3, dtype=int)
    e[axis] = 1
    cross = np.cross(e, np.eye(3, dtype=int)).T
    return np.outer(e, e) + direction.value * cross


# (axis, direction) -> 3x3 signed permutation; computed once
ROTATION_MATRICES: Dict[Tuple[Axis, Direction], np.ndarray] = {
    (axis, direction): _quarter_turn(axis, direction)
    for axis in AXES
    for direction in DIRECTIONS
}
for _m in ROTATION_MATRICES.values():
    _m.setflags(write=False)


def rotation_matrix(axis: Axis, direction: Direction) -> np.ndarray:
    """
    Return the 90° rotation matrix about ``axis``.

    Counterclockwise about X is ``[[1,0,0],[0,0,1],[0,-1,0]]``; the clockwise
    matrix is its transpose. The returned array is a fresh, writable copy.
    """
    return ROTATION_MATRICES[(Axis(axis), direction)].copy()


class Move(NamedTuple):
    """A single layer turn: ``layer`` is the coordinate value selected on ``axis``."""
    axis: Axis
    layer: int
    direction: Direction

    def inverse(self) -> "Move":
        return Move(self.axis, self.layer, self.direction.inverse)

    def __str__(self) -> str:
        return f"{self.axis}:{self.layer:+d}:{self.direction}"

    @classmethod
    def parse(cls, text: str) -> "Move":
        """Inverse of ``str(move)``, e.g. ``"Xax:+1:clock"``."""
        try:
            axis, layer, direction = text.strip().split(":")
            return cls(Axis.parse(axis), int(layer), Direction.parse(direction))
        except ValueError as exc:
            raise ValueError(f"Cannot parse move {text!r}: {exc}") from None


def invert_sequence(moves: Iterable[Move]) -> List[Move]:
    """Reverse the sequence and invert every move, so ``seq + inverse`` is the identity."""
    return [m.inverse() for m in reversed(list(moves))]


def commutator(g: Iterable[Move], h: Iterable[Move]) -> List[Move]:
    """
    ``[g, h] = g⁻¹ · h⁻¹ · g · h``.

    Layer turns do not commute, so this is not the identity, but it usually
    disturbs far fewer pieces than ``g · h``.
    """
    g, h = list(g), list(h)
    return invert_sequence(g) + invert_sequence(h) + g + h
