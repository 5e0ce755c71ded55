'''
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Reading and writing nets as line-oriented text.

'''
from __future__ import annotations

import os
from typing import List, Union

from ncube.colors import BLANK, LABEL_TO_COLOR, PLAIN_LABELS
from ncube.cube import Cube
from ncube.errors import MalformedNet
from ncube.flat import Flat

SEPARATOR = "|"

PathLike = Union[str, "os.PathLike[str]"]


def _plain(token: str) -> str:
    # ANSI variants become their plain letter; unknown tokens are left for decode to reject
    hue = LABEL_TO_COLOR.get(token)
    return token if hue is None else PLAIN_LABELS[hue]


def parse_net(text: str) -> Flat:
    """
    Parse the textual net into a `Flat`.

    One grid row per line, labels separated by whitespace. "|" tokens are
    visual separators and are dropped; blank lines are ignored. The size n is
    the number of labels on the first line. Rows of the up and down bands carry
    only their n labels and are padded with blanks to the full 4n width.
    ANSI-colored labels are stored as their plain letters, so ``str(flat)`` is
    the canonical key of the cube it shows.

    Raises:
        MalformedNet: when the row count is not 3n or a row has the wrong width.
    """
    rows: List[List[str]] = [
        [_plain(tok) for tok in line.split() if tok != SEPARATOR]
        for line in text.splitlines()
        if line.strip()
    ]
    if not rows:
        raise MalformedNet("Empty net")

    n = len(rows[0])
    if n == 0 or len(rows) != 3 * n:
        raise MalformedNet(f"Invalid cube size: {len(rows)} rows for a net {n} labels wide")

    pad = [BLANK] * n
    grid = []
    for i, cells in enumerate(rows):
        middle = n <= i < 2 * n
        expected = 4 * n if middle else n
        if len(cells) != expected:
            raise MalformedNet(f"Row {i} has {len(cells)} labels, expected {expected}")
        grid.append(cells if middle else pad + cells + pad + pad)
    return Flat(grid)


def parse_cube(text: str) -> Cube:
    """Parse a net and decode it into a cube."""
    return parse_net(text).to_cube()


def read_net(path: PathLike) -> Flat:
    with open(path, "r", encoding="utf-8") as f:
        return parse_net(f.read())


def read_cube(path: PathLike) -> Cube:
    return read_net(path).to_cube()


def write_net(path: PathLike, net: Union[Flat, Cube]) -> None:
    """Write a net (or the net of a cube) in the plain-label text format."""
    flat = net if isinstance(net, Flat) else Flat.from_cube(net)
    with open(path, "w", encoding="utf-8") as f:
        f.write(str(flat))
        f.write("\n")
