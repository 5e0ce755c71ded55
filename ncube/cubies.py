"""
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: The cubi, a single surface piece of an n x n x n cube.

"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

import numpy as np

from ncube.colors import AXES, Axis, color_label
from ncube.errors import ConflictingSticker

Vec = Tuple[int, int, int]
CVec = Tuple[int, int, int]


@dataclass(frozen=True)
class Cubi:
    """
    One piece of the cube: where it is and how it is painted.

    The cubi is a value object. Rotating it returns a new cubi, so cubes can
    share cubis freely without one turn leaking into another cube.

    Attributes
    ----------
    pv : tuple[int, int, int]
        Position vector on the centered lattice, each component in
        ``[-n//2, n//2]`` (0 is skipped for even n).
    cv : tuple[int, int, int]
        Color vector, one signed hue per axis. Slot ``i`` is nonzero only if
        the piece has a sticker whose normal is parallel to axis ``i``; the
        sign is the direction of that normal.
    """
    pv: Vec
    cv: CVec

    def apply(self, matrix: np.ndarray) -> "Cubi":
        """
        Multiply the position and the color vector by ``matrix``.

        Colors transform exactly like positions: a sticker follows its face
        normal, and the sign of the slot keeps encoding where the normal points.
        """
        pv = matrix @ np.asarray(self.pv)
        cv = matrix @ np.asarray(self.cv)
        return Cubi(pv=tuple(int(v) for v in pv), cv=tuple(int(c) for c in cv))

    def merge(self, other: "Cubi") -> "Cubi":
        """
        Combine two partial views of the same position, first nonzero wins per slot.

        Raises:
            ConflictingSticker: if both operands painted the same slot.
        """
        if self.pv != other.pv:
            raise ValueError(f"Cannot merge cubis at {self.pv} and {other.pv}")
        merged = []
        for axis, (mine, theirs) in enumerate(zip(self.cv, other.cv)):
            if mine and theirs:
                raise ConflictingSticker(self.pv, Axis(axis), mine, theirs)
            merged.append(mine or theirs)
        return Cubi(pv=self.pv, cv=tuple(merged))

    def stickers(self) -> Iterator[Tuple[Axis, int]]:
        """Yield ``(axis, signed color)`` for every painted slot."""
        for axis in AXES:
            if self.cv[axis]:
                yield axis, self.cv[axis]

    def __repr__(self) -> str:
        labels = ",".join(color_label(c).strip() or "0" for c in self.cv)
        return f"Cubi: pv={self.pv} cv=({labels})"


def apply(matrix: np.ndarray, cubi: Cubi) -> Cubi:
    """Functional spelling of `Cubi.apply`."""
    return cubi.apply(matrix)
