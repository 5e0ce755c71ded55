'''
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Cube builders shared by the test modules.

'''

import random
from typing import List

from ncube.colors import AXES, DIRECTIONS, Axis, Direction
from ncube.cube import Cube
from ncube.rotations import Move

ODD_SIZES = [3, 5, 7, 9]
EVEN_SIZES = [2, 4, 6]


def make_solved(n: int = 3) -> Cube:
    return Cube(n)  # __init__ builds solved


def make_shuffled(n: int, count: int, seed: int | None = None) -> Cube:
    cube = Cube(n)
    cube.shuffle(count, rng=random.Random(seed))
    return cube


def random_moves(n: int, count: int, rng: random.Random) -> List[Move]:
    """`count` moves drawn like Cube.shuffle draws them."""
    layers = Cube(n).layers()
    return [Move(rng.choice(AXES), rng.choice(layers), rng.choice(DIRECTIONS)) for _ in range(count)]


def make_three_face_turns(n: int = 3) -> Cube:
    """Right, front and up faces each turned once: three moves from solved."""
    h = n // 2
    return Cube(n).apply([
        Move(Axis.X, h, Direction.CLOCK),
        Move(Axis.Y, h, Direction.CLOCK),
        Move(Axis.Z, h, Direction.CLOCK),
    ])
