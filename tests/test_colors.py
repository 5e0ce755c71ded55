'''
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr:

'''
import unittest

from ncube.colors import (
    ANSI_LABELS,
    FACE_COLORS,
    Axis,
    Color,
    Direction,
    color_label,
    parse_label,
    sign,
)
from ncube.errors import UnknownColorLabel


class TestAxis(unittest.TestCase):

    def test_string_round_trip(self):
        for axis in Axis:
            self.assertIs(Axis.parse(str(axis)), axis)
        self.assertEqual(str(Axis.Y), "Yax")

    def test_parse_short_forms(self):
        self.assertIs(Axis.parse("x"), Axis.X)
        self.assertIs(Axis.parse(" Z "), Axis.Z)
        with self.assertRaises(ValueError):
            Axis.parse("w")

    def test_axis_is_a_vector_index(self):
        self.assertEqual((10, 20, 30)[Axis.Z], 30)


class TestDirection(unittest.TestCase):

    def test_inverse(self):
        self.assertIs(Direction.CLOCK.inverse, Direction.COUNTERCLOCK)
        self.assertIs(~Direction.COUNTERCLOCK, Direction.CLOCK)

    def test_string_round_trip(self):
        for direction in Direction:
            self.assertIs(Direction.parse(str(direction)), direction)
        self.assertIs(Direction.parse("ccw"), Direction.COUNTERCLOCK)
        self.assertIs(Direction.parse("cw"), Direction.CLOCK)
        with self.assertRaises(ValueError):
            Direction.parse("sideways")
        with self.assertRaises(ValueError):
            Direction.parse("")


class TestColors(unittest.TestCase):

    def test_face_colors_carry_polarity(self):
        self.assertEqual(FACE_COLORS[(Axis.X, 1)], Color.ORANGE)
        self.assertEqual(FACE_COLORS[(Axis.X, -1)], -Color.RED)
        self.assertEqual(FACE_COLORS[(Axis.Z, -1)], -Color.WHITE)
        for (axis, polarity), color in FACE_COLORS.items():
            self.assertEqual(sign(color), polarity)

    def test_labels(self):
        self.assertEqual(color_label(Color.GREEN), "g")
        self.assertEqual(color_label(-Color.RED), "-r")
        self.assertEqual(color_label(Color.ZERO), " ")
        self.assertEqual(color_label(Color.YELLOW, colorize=True), "\033[33my\033[0m")

    def test_parse_plain_and_ansi(self):
        for hue in list(Color)[1:]:
            self.assertEqual(parse_label(color_label(hue)), hue)
            self.assertEqual(parse_label(ANSI_LABELS[hue]), hue)

    def test_unknown_label_is_a_lookup_error(self):
        with self.assertRaises(UnknownColorLabel) as ctx:
            parse_label("q")
        self.assertIsInstance(ctx.exception, LookupError)
        self.assertEqual(ctx.exception.label, "q")

    def test_sign_of_zero_is_positive(self):
        self.assertEqual(sign(0), 1)
        self.assertEqual(sign(-3), -1)


if __name__ == "__main__":
    unittest.main()
