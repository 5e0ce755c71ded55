'''
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Bidirectional breadth-first search over the move graph generated by
Cube.get_all_turns.

'''
from __future__ import annotations

from collections import deque
from itertools import product
from typing import Deque, Dict, List, Optional

from ncube.colors import AXES, DIRECTIONS
from ncube.cube import Cube
from ncube.errors import PathNotFound
from ncube.rotations import Move


def _expand_level(
    frontier: Deque[Cube],
    links: Dict[str, Optional[str]],
    other_links: Dict[str, Optional[str]],
    states: Dict[str, Cube],
) -> Optional[str]:
    """
    Expand every cube currently in `frontier` by one move.

    `links` maps a discovered key to the key it was reached from on this side.
    Returns the first key also discovered by the other side, or None.
    """
    for _ in range(len(frontier)):
        cube = frontier.popleft()
        key = cube.key()
        for nxt in cube.get_all_turns():
            k = nxt.key()
            if k in links:
                continue
            links[k] = key
            states[k] = nxt
            if k in other_links:
                return k
            frontier.append(nxt)
    return None


def _walk(links: Dict[str, Optional[str]], key: Optional[str]) -> List[str]:
    chain = []
    while key is not None:
        chain.append(key)
        key = links[key]
    return chain


def find_path(start: Cube, goal: Cube, max_states: int = 200_000) -> List[Cube]:
    """
    Shortest sequence of cubes from `start` to `goal`, both included.

    Searches from both ends at once, always growing the smaller frontier by a
    full level. Consecutive cubes differ by one `Cube.move`, so the frame of odd
    cubes never changes: `goal` has to be reachable without a whole-cube
    rotation.

    Args:
        start: Cube to begin from.
        goal: Cube to reach.
        max_states: Give up once this many distinct states have been seen.

    Raises:
        ValueError: if the cubes have different sizes.
        PathNotFound: if the state budget runs out.
    """
    if start.n != goal.n:
        raise ValueError(f"Cannot search between sizes {start.n} and {goal.n}")

    with start.no_history(), goal.no_history():
        start_key, goal_key = start.key(), goal.key()
        if start_key == goal_key:
            return [start]

        forward: Dict[str, Optional[str]] = {start_key: None}
        backward: Dict[str, Optional[str]] = {goal_key: None}
        states: Dict[str, Cube] = {start_key: start, goal_key: goal}
        front: Deque[Cube] = deque([start])
        back: Deque[Cube] = deque([goal])

        while front and back:
            if len(states) > max_states:
                raise PathNotFound(f"Gave up after {len(states)} states (max_states={max_states})")
            if len(front) <= len(back):
                meet = _expand_level(front, forward, backward, states)
            else:
                meet = _expand_level(back, backward, forward, states)
            if meet is not None:
                keys = list(reversed(_walk(forward, meet))) + _walk(backward, backward[meet])
                return [states[k] for k in keys]

    raise PathNotFound("Move graph exhausted without reaching the goal")


def get_path(start: Cube, goal: Cube, max_states: int = 200_000) -> Dict[str, str]:
    """
    The path of `find_path` as a predecessor map keyed by canonical key.

    Following the map from ``goal.key()`` visits every state back to
    ``start.key()``, which maps to the empty string.
    """
    path = find_path(start, goal, max_states=max_states)
    edges = {path[0].key(): ""}
    for prev, cube in zip(path, path[1:]):
        edges[cube.key()] = prev.key()
    return edges


def move_between(a: Cube, b: Cube) -> Move:
    """The single `Move` turning `a` into `b`."""
    target = b.key()
    with a.no_history():
        for axis, layer, direction in product(AXES, a.layers(), DIRECTIONS):
            if a.move(axis, layer, direction).key() == target:
                return Move(axis, layer, direction)
    raise ValueError("Cubes are not one move apart")


def path_moves(path: List[Cube]) -> List[Move]:
    """Moves leading from each cube of `path` to the next."""
    return [move_between(a, b) for a, b in zip(path, path[1:])]
