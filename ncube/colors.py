"""
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Color, axis and direction primitives shared by the cube model and the net codec.

"""
from __future__ import annotations

from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Dict, Mapping

from ncube.errors import UnknownColorLabel


class Color(IntEnum):
    """
    Hue identifiers. A color-vector slot stores a *signed* hue: ``+k`` when the
    sticker normal points along the positive axis, ``-k`` along the negative
    one, and ``ZERO`` when the piece has no sticker on that axis.
    """
    ZERO = 0
    GREEN = 1
    WHITE = 2
    ORANGE = 3
    RED = 4
    YELLOW = 5
    BLUE = 6


class Axis(IntEnum):
    X = 0
    Y = 1
    Z = 2

    def __str__(self) -> str:
        return f"{self.name}ax"

    @classmethod
    def parse(cls, text: str) -> "Axis":
        """Accept ``"Xax"``, ``"x"``, ``"X"`` (and the same for Y/Z)."""
        key = text.strip().upper()
        if key.endswith("AX"):
            key = key[:-2]
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown axis {text!r}, expected one of Xax, Yax, Zax") from None


class Direction(Enum):
    """Quarter-turn direction; the value is the sign used to build the rotation matrix."""
    COUNTERCLOCK = -1
    CLOCK = 1

    @property
    def inverse(self) -> "Direction":
        return Direction(-self.value)

    def __invert__(self) -> "Direction":
        return self.inverse

    def __str__(self) -> str:
        return self.name.lower()

    @classmethod
    def parse(cls, text: str) -> "Direction":
        key = text.strip().lower()
        aliases = {"ccw": "counterclock", "cw": "clock", "'": "counterclock"}
        key = aliases.get(key, key)
        try:
            return cls[key.upper()]
        except KeyError:
            raise ValueError(f"Unknown direction {text!r}, expected 'counterclock' or 'clock'") from None


AXES = (Axis.X, Axis.Y, Axis.Z)
DIRECTIONS = (Direction.COUNTERCLOCK, Direction.CLOCK)

# Reference hue of each face, keyed by (axis, polarity). The sign of the stored
# value follows the polarity, so -X holds -RED.
FACE_COLORS: Mapping[tuple, int] = MappingProxyType({
    (Axis.X, 1): Color.ORANGE,
    (Axis.X, -1): -Color.RED,
    (Axis.Y, 1): Color.GREEN,
    (Axis.Y, -1): -Color.BLUE,
    (Axis.Z, 1): Color.YELLOW,
    (Axis.Z, -1): -Color.WHITE,
})

BLANK = " "

PLAIN_LABELS: Mapping[int, str] = MappingProxyType({
    Color.ZERO: BLANK,
    Color.GREEN: "g",
    Color.WHITE: "w",
    Color.ORANGE: "o",
    Color.RED: "r",
    Color.YELLOW: "y",
    Color.BLUE: "b",
})

# ANSI escapes; no orange in the basic palette, magenta stands in for it
ANSI_CODES: Mapping[int, str] = MappingProxyType({
    Color.GREEN: "\033[32m",
    Color.WHITE: "\033[37m",
    Color.ORANGE: "\033[35m",
    Color.RED: "\033[31m",
    Color.YELLOW: "\033[33m",
    Color.BLUE: "\033[34m",
})
RESET = "\033[0m"

ANSI_LABELS: Mapping[int, str] = MappingProxyType({
    hue: (f"{ANSI_CODES[hue]}{label}{RESET}" if hue != Color.ZERO else label)
    for hue, label in PLAIN_LABELS.items()
})


def _build_label_lookup() -> Mapping[str, Color]:
    table: Dict[str, Color] = {}
    for labels in (PLAIN_LABELS, ANSI_LABELS):
        for hue, label in labels.items():
            table[label] = Color(hue)
    return MappingProxyType(table)


LABEL_TO_COLOR: Mapping[str, Color] = _build_label_lookup()


def color_label(color: int, colorize: bool = False) -> str:
    """
    Human-readable label of a signed color, e.g. ``"o"`` or ``"-r"``.

    Args:
        color: Signed hue value (``0`` for unpainted).
        colorize: Use the ANSI-escaped variant of the letter.
    """
    labels = ANSI_LABELS if colorize else PLAIN_LABELS
    prefix = "-" if color < 0 else ""
    return prefix + labels[abs(color)]


def parse_label(label: str) -> Color:
    """
    Map a plain or ANSI label back to its (unsigned) hue.

    Raises:
        UnknownColorLabel: when the label is not one of the known variants.
    """
    try:
        return LABEL_TO_COLOR[label]
    except KeyError:
        raise UnknownColorLabel(label) from None


def sign(x: int) -> int:
    """Sign with ``sign(0) == 1``, the convention the net projection relies on."""
    return -1 if x < 0 else 1
