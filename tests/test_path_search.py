'''
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr:

'''
import unittest

from ncube.colors import Axis, Direction
from ncube.cube import Cube
from ncube.errors import PathNotFound
from ncube.rotations import Move
from ncube.solvers.path_search import find_path, get_path, move_between, path_moves
from tests.test_functions import make_shuffled, make_three_face_turns


class TestFindPath(unittest.TestCase):

    def assertValidPath(self, path, start, goal):
        self.assertEqual(path[0], start)
        self.assertEqual(path[-1], goal)
        for a, b in zip(path, path[1:]):
            self.assertIn(b, a.get_all_turns())

    def test_shuffled_3x3(self):
        start = make_shuffled(3, 3, seed=21)
        goal = Cube(3)
        path = find_path(start, goal)
        self.assertValidPath(path, start, goal)
        self.assertLessEqual(len(path), 4)

    def test_shuffled_2x2(self):
        start = make_shuffled(2, 2, seed=5)
        goal = Cube(2)
        path = find_path(start, goal)
        self.assertValidPath(path, start, goal)
        self.assertLessEqual(len(path), 3)

    def test_three_face_turns(self):
        start = make_three_face_turns()
        path = find_path(start, Cube(3))
        self.assertValidPath(path, start, Cube(3))
        self.assertLessEqual(len(path), 4)

    def test_single_move(self):
        start = Cube(3).move(Axis.Y, 1, Direction.CLOCK)
        path = find_path(start, Cube(3))
        self.assertEqual(len(path), 2)
        self.assertEqual(path_moves(path), [Move(Axis.Y, 1, Direction.COUNTERCLOCK)])

    def test_same_cube(self):
        cube = Cube(3)
        self.assertEqual(find_path(cube, Cube(3)), [cube])

    def test_size_mismatch(self):
        with self.assertRaises(ValueError):
            find_path(Cube(2), Cube(3))

    def test_budget_exceeded(self):
        with self.assertRaises(PathNotFound):
            find_path(make_three_face_turns(), Cube(3), max_states=5)

    def test_search_leaves_history_alone(self):
        start = make_shuffled(3, 2, seed=1)
        before = len(start.get_history())
        find_path(start, Cube(3))
        self.assertEqual(len(start.get_history()), before)
        start = start.move(Axis.X, 1)
        self.assertEqual(len(start.get_history()), before + 1)

    def test_path_cubes_record_moves_afterwards(self):
        path = find_path(make_shuffled(3, 2, seed=4), Cube(3))
        last = path[-1]
        self.assertEqual(len(last.turn(Axis.X, 1).get_history()), len(last.get_history()) + 1)


class TestGetPath(unittest.TestCase):

    def test_walk_from_goal_reaches_start(self):
        start = make_three_face_turns()
        goal = Cube(3)
        edges = get_path(start, goal)
        self.assertEqual(edges[start.key()], "")

        key, steps = goal.key(), 0
        while edges[key]:
            key = edges[key]
            steps += 1
        self.assertEqual(key, start.key())
        self.assertLessEqual(steps, 3)

    def test_move_between(self):
        cube = Cube(3)
        turned = cube.move(Axis.Z, -1, Direction.COUNTERCLOCK)
        self.assertEqual(move_between(cube, turned), Move(Axis.Z, -1, Direction.COUNTERCLOCK))
        with self.assertRaises(ValueError):
            move_between(cube, make_three_face_turns())


if __name__ == "__main__":
    unittest.main()
