'''
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Terminal and matplotlib renderings of a cube or a net.

'''
from __future__ import annotations

from typing import Union

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Rectangle
from mpl_toolkits.mplot3d.art3d import Poly3DCollection

from ncube.colors import ANSI_LABELS, BLANK, LABEL_TO_COLOR, Color
from ncube.config import RenderConfig
from ncube.cube import Cube
from ncube.flat import Flat, format_grid

_COLORS = {
    Color.GREEN: "green",
    Color.WHITE: "white",
    Color.ORANGE: "orange",
    Color.RED: "red",
    Color.YELLOW: "yellow",
    Color.BLUE: "blue",
}


def _as_flat(net: Union[Flat, Cube]) -> Flat:
    return net if isinstance(net, Flat) else Flat.from_cube(net)


def _colorize(label: str) -> str:
    hue = LABEL_TO_COLOR.get(label)
    if hue is None or hue == Color.ZERO:
        return label
    return ANSI_LABELS[hue]


def render_net(net: Union[Flat, Cube], config: RenderConfig = RenderConfig()) -> str:
    """
    Text of the net, the same layout as ``str(flat)``.

    With ``config.colorize`` every known label is replaced by its ANSI-escaped
    variant; labels that are already escaped, or unknown, are left alone.
    """
    flat = _as_flat(net)
    relabel = _colorize if config.colorize else None
    return format_grid(flat.grid, flat.n, separators=config.separators, relabel=relabel)


def print_net(net: Union[Flat, Cube], config: RenderConfig = RenderConfig()) -> None:
    """
    Print a compact text-based net to the terminal.

              [U]
        [L] [C] [R] [B]
              [D]
    """
    print(render_net(net, config))


def plot_net(net: Union[Flat, Cube], ax: plt.Axes | None = None, figsize: tuple[int, int] = (8, 6),
             edgecolor: str = "k") -> plt.Axes:
    """
    Draw the net as colored squares, row 0 at the top.

    Args:
        net: Flat or Cube to draw.
        ax: Optional matplotlib axis to draw on. If None, creates a new figure and shows it.
        figsize: Size of the figure (if created internally).
        edgecolor: Edge color for square outlines.
    """
    flat = _as_flat(net)
    fig = None
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)

    rows, cols = 3 * flat.n, 4 * flat.n
    for r, row in enumerate(flat.grid):
        for c, label in enumerate(row):
            if not label or label == BLANK:
                continue
            hue = LABEL_TO_COLOR.get(label, Color.ZERO)
            ax.add_patch(Rectangle((c, rows - r - 1), 1, 1,
                                   facecolor=_COLORS.get(hue, "lightgrey"), edgecolor=edgecolor))

    ax.set_xlim(0, cols)
    ax.set_ylim(0, rows)
    ax.set_aspect("equal")
    ax.set_axis_off()
    if fig is not None:
        plt.show()
    return ax


def _lattice_center(v: int, n: int) -> float:
    # even lattices skip 0, pull coordinates half a cell inward to make them contiguous
    if n % 2 == 1:
        return float(v)
    return v - 0.5 if v > 0 else v + 0.5


def plot_3d(cube: Cube, ax: plt.Axes | None = None, figsize: tuple[int, int] = (6, 6),
            edgecolor: str = "k") -> plt.Axes:
    """
    Render the cube in a 3D matplotlib view.

    Every painted slot of a cubi becomes a unit square on the cubi's outer
    face, normal to the slot's axis and on the side given by the slot's sign.

    Args:
        cube: Cube to draw.
        ax: Optional matplotlib 3D axis to plot on. If None, creates a new figure.
        figsize: Size of the figure (if created internally).
        edgecolor: Edge color for square outlines.
    """
    fig = None
    if ax is None:
        fig = plt.figure(figsize=figsize)
        ax = fig.add_subplot(111, projection="3d")

    ax.set_box_aspect([1, 1, 1])
    n = cube.n
    for cubi in cube.cubis:
        center = np.array([_lattice_center(v, n) for v in cubi.pv])
        for axis, color in cubi.stickers():
            normal = np.zeros(3)
            normal[axis] = np.sign(color)
            u = np.zeros(3)
            v = np.zeros(3)
            u[(axis + 1) % 3] = 0.5
            v[(axis + 2) % 3] = 0.5
            mid = center + 0.5 * normal
            corners = [mid - u - v, mid + u - v, mid + u + v, mid - u + v]
            poly = Poly3DCollection([corners])
            poly.set_facecolor(_COLORS.get(Color(abs(color)), "lightgrey"))
            poly.set_edgecolor(edgecolor)
            ax.add_collection3d(poly)

    half = n / 2
    ax.set_axis_off()
    ax.set_xlim(-half, half)
    ax.set_ylim(-half, half)
    ax.set_zlim(-half, half)
    if fig is not None:
        plt.show()
    return ax
