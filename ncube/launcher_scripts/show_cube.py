'''
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Print a solved or shuffled cube, or a cube read from a net file.

'''
#!/usr/bin/env python3
import argparse
import random

from ncube.config import PaintRule, RenderConfig
from ncube.cube import Cube
from ncube.net_io import read_cube, write_net
from ncube.visualisation.render import plot_3d, plot_net, print_net


def main(argv=None):
    p = argparse.ArgumentParser("Show an n x n x n cube as a net")
    p.add_argument("--size", type=int, default=3)
    p.add_argument("--shuffle", type=int, default=0, help="number of random moves")
    p.add_argument("--seed", type=int, default=42)
    p.add_argument("--file", type=str, default=None, help="read the cube from a net file instead")
    p.add_argument("--out", type=str, default=None, help="write the resulting net to this file")
    p.add_argument("--rule", choices=[r.value for r in PaintRule], default=PaintRule.EXTREMITY.value)
    p.add_argument("--no-color", action="store_true", dest="no_color")
    p.add_argument("--plot", choices=["net", "3d"], default=None)
    args = p.parse_args(argv)

    if args.file:
        cube = read_cube(args.file)
    else:
        cube = Cube(args.size, rule=PaintRule(args.rule))
    cube.shuffle(args.shuffle, rng=random.Random(args.seed))

    print(f"n={cube.n} | shuffle={args.shuffle} | solved={cube.is_solved()} | canonical={cube.is_canonical()}")
    print_net(cube, RenderConfig(colorize=not args.no_color))

    if args.out:
        write_net(args.out, cube)
        print(f"saved net → {args.out}")
    if args.plot == "net":
        plot_net(cube)
    elif args.plot == "3d":
        plot_3d(cube)


if __name__ == "__main__":
    main()
