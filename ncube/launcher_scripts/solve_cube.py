'''
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Find a path from a shuffled cube (or a net file) back to the solved cube.

'''
#!/usr/bin/env python3
import argparse
import random
import time

import pandas as pd

from ncube.config import RenderConfig
from ncube.cube import Cube
from ncube.errors import PathNotFound
from ncube.net_io import read_cube
from ncube.solvers.path_search import find_path, path_moves
from ncube.visualisation.render import print_net


def reorient(cube: Cube) -> Cube | None:
    """
    The whole-cube rotation of `cube` whose face centers sit in the reference
    frame, or None when no rotation gets there. Moves never shift the centers
    of an odd cube, so a start in another frame can't reach the solved cube.
    """
    for candidate in cube.get_all_rotations():
        if candidate.is_canonical():
            return candidate
    return None


def main(argv=None):
    p = argparse.ArgumentParser("Solve an n x n x n cube by bidirectional BFS")
    p.add_argument("--size", type=int, default=3)
    p.add_argument("--shuffle", type=int, default=4, help="number of random moves")
    p.add_argument("--seed", type=int, default=42)
    p.add_argument("--file", type=str, default=None, help="read the start cube from a net file")
    p.add_argument("--max-states", type=int, default=200_000, dest="max_states")
    p.add_argument("--log", type=str, default=None, help="CSV file for the solution moves")
    p.add_argument("--no-color", action="store_true", dest="no_color")
    args = p.parse_args(argv)
    config = RenderConfig(colorize=not args.no_color)

    if args.file:
        start = read_cube(args.file)
    else:
        start = Cube(args.size)
        start.shuffle(args.shuffle, rng=random.Random(args.seed))
    if start.n % 2 == 1 and not start.is_canonical():
        oriented = reorient(start)
        if oriented is None:
            print("  ! face centers match no orientation of the solved cube")
            return 1
        print("Start cube is in a rotated frame, reoriented before searching")
        start = oriented
    goal = Cube(start.n)

    print(f"n={start.n} | shuffle={args.shuffle} | max_states={args.max_states:,}")
    print("Starting position:")
    print_net(start, config)
    print("-" * 60)

    t0 = time.time()
    try:
        path = find_path(start, goal, max_states=args.max_states)
    except PathNotFound as exc:
        print(f"  ! {exc}")
        return 1
    elapsed = time.time() - t0

    moves = path_moves(path)
    for step, (cube, move) in enumerate(zip(path[1:], moves), start=1):
        print(f"[{step:>3}] {move}")
        print_net(cube, config)
        print()
    print(f"Solved in {len(moves)} moves, search took {elapsed:.2f}s")

    if args.log:
        df = pd.DataFrame(
            [(i, str(m.axis), m.layer, str(m.direction)) for i, m in enumerate(moves)],
            columns=["step", "axis", "layer", "direction"],
        )
        df.to_csv(args.log, index=False)
        print(f"saved moves → {args.log}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
