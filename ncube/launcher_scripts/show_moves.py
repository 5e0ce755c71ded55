'''
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Walk through every single move of a solved cube, or show a commutator.

'''
#!/usr/bin/env python3
import argparse
from itertools import product

from ncube.colors import AXES, DIRECTIONS, Axis, Direction
from ncube.config import RenderConfig
from ncube.cube import Cube
from ncube.rotations import Move, commutator
from ncube.visualisation.render import print_net


def show_all_moves(n: int, config: RenderConfig) -> None:
    cube = Cube(n)
    print_net(cube, config)
    print()
    for axis, layer, direction in product(AXES, cube.layers(), DIRECTIONS):
        print(f"Moving about the {axis}-axis at index {layer} in the direction {direction}")
        print_net(cube.move(axis, layer, direction), config)
        print()


def show_commutator(n: int, config: RenderConfig) -> None:
    # g and h both touch the corner shared by the left and back faces
    g = [Move(Axis.X, -(n // 2), Direction.COUNTERCLOCK)]
    h = [Move(Axis.Y, -(n // 2), Direction.COUNTERCLOCK)]

    print("g . h")
    print_net(Cube(n).apply(g + h), config)
    print()
    print("[g, h] = g^(-1) . h^(-1) . g . h")
    print_net(Cube(n).apply(commutator(g, h)), config)


def main(argv=None):
    p = argparse.ArgumentParser("Print the moves of an n x n x n cube")
    p.add_argument("--size", type=int, default=3)
    p.add_argument("--commutator", action="store_true", help="show g.h next to [g,h] instead")
    p.add_argument("--no-color", action="store_true", dest="no_color")
    args = p.parse_args(argv)

    config = RenderConfig(colorize=not args.no_color)
    if args.commutator:
        show_commutator(args.size, config)
    else:
        show_all_moves(args.size, config)


if __name__ == "__main__":
    main()
