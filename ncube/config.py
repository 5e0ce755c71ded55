'''
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Configuration knobs: how solved cubes are painted and how nets are rendered.

'''
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PaintRule(Enum):
    """
    How `Cube` assigns colors when it builds the solved state.

    EXTREMITY
        A slot is painted only when the piece's coordinate on that axis is
        ``±n//2``, i.e. the piece really has a sticker facing that way.
        Works for every size and is the default.
    SIGN
        Even sizes only: every slot of every surface piece is painted with the
        face color matching the sign of its coordinate. Solved cubes render the
        same as with EXTREMITY, but inward-facing slots carry a color too, so
        after a turn those colors get projected onto the net.
    """
    EXTREMITY = "extremity"
    SIGN = "sign"


@dataclass(frozen=True)
class RenderConfig:
    """
    Options for turning a net into terminal text.

    Passed explicitly to the renderers in ``ncube.visualisation.render``;
    there is no process-wide flag.
    """

    colorize: bool = True
    # Wrap each label in ANSI escape codes.

    separators: bool = True
    # Insert "|" between the panels of the middle band and padding elsewhere.
