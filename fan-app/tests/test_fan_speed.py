"""
Tests for the fan speed positions and dial style attributes.
"""

import dataclasses
import unittest

from dial_style import DialStyle, parse_color
from fan_speed import NEUTRAL_COLOR, FanSpeed, color_for


# ---------------------------------------------------------------------------
# FanSpeed
# ---------------------------------------------------------------------------

class TestFanSpeed(unittest.TestCase):

    def test_order_and_ordinals(self):
        self.assertEqual(list(FanSpeed),
                         [FanSpeed.OFF, FanSpeed.LOW, FanSpeed.MEDIUM, FanSpeed.HIGH])
        self.assertEqual([s.ordinal for s in FanSpeed], [0, 1, 2, 3])

    def test_next_steps_through_the_dial(self):
        self.assertIs(FanSpeed.OFF.next(), FanSpeed.LOW)
        self.assertIs(FanSpeed.LOW.next(), FanSpeed.MEDIUM)
        self.assertIs(FanSpeed.MEDIUM.next(), FanSpeed.HIGH)

    def test_high_wraps_to_off(self):
        self.assertIs(FanSpeed.HIGH.next(), FanSpeed.OFF)

    def test_four_steps_return_to_start(self):
        for start in FanSpeed:
            speed = start
            for _ in range(4):
                speed = speed.next()
            self.assertIs(speed, start)

    def test_labels(self):
        self.assertEqual([s.label for s in FanSpeed], ["off", "1", "2", "3"])

    def test_only_high_is_last(self):
        self.assertEqual([s.is_last for s in FanSpeed], [False, False, False, True])


# ---------------------------------------------------------------------------
# color_for
# ---------------------------------------------------------------------------

class TestColorFor(unittest.TestCase):

    def setUp(self):
        self.style = DialStyle((1, 1, 1, 255), (2, 2, 2, 255), (3, 3, 3, 255))

    def test_configured_colors(self):
        self.assertEqual(color_for(FanSpeed.LOW, self.style), (1, 1, 1, 255))
        self.assertEqual(color_for(FanSpeed.MEDIUM, self.style), (2, 2, 2, 255))
        self.assertEqual(color_for(FanSpeed.HIGH, self.style), (3, 3, 3, 255))

    def test_off_is_neutral_for_any_style(self):
        for style in (self.style, DialStyle(), DialStyle.from_attrs({"fanColor1": "#FF0000"})):
            self.assertEqual(color_for(FanSpeed.OFF, style), NEUTRAL_COLOR)


# ---------------------------------------------------------------------------
# DialStyle / parse_color
# ---------------------------------------------------------------------------

class TestDialStyle(unittest.TestCase):

    def test_rgb_hex(self):
        self.assertEqual(parse_color("#FFEB3B"), (255, 235, 59, 255))

    def test_alpha_first_hex(self):
        self.assertEqual(parse_color("#80FF0000"), (255, 0, 0, 128))

    def test_argb_int(self):
        self.assertEqual(parse_color(0xFF009688), (0, 150, 136, 255))

    def test_zero_is_transparent_black(self):
        self.assertEqual(parse_color(0), (0, 0, 0, 0))

    def test_rgb_tuple(self):
        self.assertEqual(parse_color((10, 20, 30)), (10, 20, 30, 255))

    def test_invalid_string_raises(self):
        with self.assertRaises(ValueError):
            parse_color("not-a-color")

    def test_out_of_range_int_raises(self):
        with self.assertRaises(ValueError):
            parse_color(0x1FFFFFFFF)

    def test_from_attrs(self):
        style = DialStyle.from_attrs({
            "fanColor1": "#FFEB3B",
            "fanColor2": "#CDDC39",
            "fanColor3": "#009688",
        })
        self.assertEqual(style.low_color, (255, 235, 59, 255))
        self.assertEqual(style.medium_color, (205, 220, 57, 255))
        self.assertEqual(style.high_color, (0, 150, 136, 255))

    def test_missing_attrs_default_to_transparent(self):
        style = DialStyle.from_attrs({"fanColor2": "#CDDC39"})
        self.assertEqual(style.low_color, (0, 0, 0, 0))
        self.assertEqual(style.high_color, (0, 0, 0, 0))
        self.assertEqual(DialStyle.from_attrs(None), DialStyle())

    def test_bad_attr_names_the_attribute(self):
        with self.assertRaises(ValueError) as ctx:
            DialStyle.from_attrs({"fanColor3": "bogus"})
        self.assertIn("fanColor3", str(ctx.exception))

    def test_style_is_immutable(self):
        style = DialStyle.from_attrs({"fanColor1": "#FFEB3B"})
        with self.assertRaises(dataclasses.FrozenInstanceError):
            style.low_color = (0, 0, 0, 255)


if __name__ == "__main__":
    unittest.main()
