'''
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr:

'''
import unittest

import numpy as np

from ncube.colors import AXES, DIRECTIONS, Axis, Color, Direction
from ncube.cube import Cube
from ncube.cubies import Cubi, apply
from ncube.errors import ConflictingSticker
from ncube.rotations import Move, commutator, invert_sequence, rotation_matrix

# The six matrices written out by hand
EXPECTED = {
    (Axis.X, Direction.COUNTERCLOCK): [[1, 0, 0], [0, 0, 1], [0, -1, 0]],
    (Axis.X, Direction.CLOCK): [[1, 0, 0], [0, 0, -1], [0, 1, 0]],
    (Axis.Y, Direction.COUNTERCLOCK): [[0, 0, -1], [0, 1, 0], [1, 0, 0]],
    (Axis.Y, Direction.CLOCK): [[0, 0, 1], [0, 1, 0], [-1, 0, 0]],
    (Axis.Z, Direction.COUNTERCLOCK): [[0, 1, 0], [-1, 0, 0], [0, 0, 1]],
    (Axis.Z, Direction.CLOCK): [[0, -1, 0], [1, 0, 0], [0, 0, 1]],
}


class TestRotationMatrix(unittest.TestCase):

    def test_matches_table(self):
        for (axis, direction), expected in EXPECTED.items():
            with self.subTest(axis=axis, direction=direction):
                np.testing.assert_array_equal(rotation_matrix(axis, direction), np.array(expected))

    def test_signed_permutation_with_unit_determinant(self):
        for axis in AXES:
            for direction in DIRECTIONS:
                m = rotation_matrix(axis, direction)
                self.assertTrue(np.all(np.abs(m).sum(axis=0) == 1))
                self.assertTrue(np.all(np.abs(m).sum(axis=1) == 1))
                self.assertEqual(round(np.linalg.det(m)), 1)

    def test_inverse_is_transpose(self):
        for axis in AXES:
            m = rotation_matrix(axis, Direction.CLOCK)
            np.testing.assert_array_equal(m.T, rotation_matrix(axis, Direction.COUNTERCLOCK))
            np.testing.assert_array_equal(np.linalg.matrix_power(m, 4), np.eye(3, dtype=int))

    def test_returns_a_copy(self):
        m = rotation_matrix(Axis.X, Direction.CLOCK)
        m[0, 0] = 7
        self.assertEqual(rotation_matrix(Axis.X, Direction.CLOCK)[0, 0], 1)


class TestCubi(unittest.TestCase):

    def test_apply_moves_position_and_color(self):
        # top front edge of a 3x3: green front, yellow up
        cubi = Cubi(pv=(0, 1, 1), cv=(0, Color.GREEN, Color.YELLOW))
        turned = apply(rotation_matrix(Axis.Z, Direction.CLOCK), cubi)
        self.assertEqual(turned.pv, (-1, 0, 1))
        # green now faces -x, so it is stored negative
        self.assertEqual(turned.cv, (-Color.GREEN, 0, Color.YELLOW))
        self.assertEqual(cubi.pv, (0, 1, 1))

    def test_merge_first_nonzero_wins(self):
        a = Cubi(pv=(1, 1, 1), cv=(Color.ORANGE, 0, 0))
        b = Cubi(pv=(1, 1, 1), cv=(0, 0, Color.YELLOW))
        self.assertEqual(a.merge(b).cv, (Color.ORANGE, 0, Color.YELLOW))

    def test_merge_conflict(self):
        a = Cubi(pv=(1, 1, 1), cv=(Color.ORANGE, 0, 0))
        b = Cubi(pv=(1, 1, 1), cv=(-Color.RED, 0, 0))
        with self.assertRaises(ConflictingSticker) as ctx:
            a.merge(b)
        self.assertEqual(ctx.exception.axis, Axis.X)

    def test_merge_different_positions(self):
        with self.assertRaises(ValueError):
            Cubi(pv=(1, 1, 1), cv=(3, 0, 0)).merge(Cubi(pv=(1, 1, 0), cv=(3, 0, 0)))


class TestMoves(unittest.TestCase):

    def test_string_round_trip(self):
        move = Move(Axis.X, 1, Direction.CLOCK)
        self.assertEqual(str(move), "Xax:+1:clock")
        self.assertEqual(Move.parse(str(move)), move)
        middle = Move(Axis.Z, 0, Direction.COUNTERCLOCK)
        self.assertEqual(Move.parse(str(middle)), middle)
        with self.assertRaises(ValueError):
            Move.parse("Xax:+1")
        with self.assertRaises(ValueError):
            Move.parse("Xax:+1:")

    def test_invert_sequence(self):
        seq = [Move(Axis.X, 1, Direction.CLOCK), Move(Axis.Y, -1, Direction.COUNTERCLOCK)]
        self.assertEqual(
            invert_sequence(seq),
            [Move(Axis.Y, -1, Direction.CLOCK), Move(Axis.X, 1, Direction.COUNTERCLOCK)],
        )
        cube = Cube(3)
        self.assertEqual(cube.apply(seq).apply(invert_sequence(seq)), cube)

    def test_commutator_of_commuting_moves_is_identity(self):
        # parallel layers commute
        g = [Move(Axis.X, -1, Direction.COUNTERCLOCK)]
        h = [Move(Axis.X, 1, Direction.CLOCK)]
        self.assertEqual(len(commutator(g, h)), 4)
        self.assertEqual(Cube(3).apply(commutator(g, h)), Cube(3))

    def test_commutator_of_crossing_moves_is_not_identity(self):
        g = [Move(Axis.X, -1, Direction.COUNTERCLOCK)]
        h = [Move(Axis.Y, -1, Direction.COUNTERCLOCK)]
        result = Cube(3).apply(commutator(g, h))
        self.assertFalse(result.is_solved())
        self.assertTrue(result.is_canonical())


if __name__ == "__main__":
    unittest.main()
