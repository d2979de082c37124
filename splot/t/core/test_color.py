from unittest import TestCase

import numpy as np
from numpy.testing import assert_allclose

from splot.core.color import Color, Colors


class TestColor(TestCase):

    def test_validate(self):
        with self.assertRaises(ValueError, msg='Channels must be 0 to 255.'):
            Color(256, 0, 0)
        with self.assertRaises(TypeError, msg='Channels must be integers.'):
            Color(0.5, 0, 0)
        with self.assertRaises(TypeError, msg='Bools are no channels.'):
            Color(True, 0, 0)
        self.assertEqual(Color(np.uint8(3), 0, 0).r, 3)

    def test_sentinels(self):
        self.assertTrue(Color.AUTOMATIC.is_automatic)
        self.assertFalse(Color.AUTOMATIC.is_undefined)
        self.assertTrue(Color.UNDEFINED.is_undefined)
        self.assertTrue(Color.AUTOMATIC.is_invisible)
        self.assertFalse(Colors.BLACK.is_automatic)
        self.assertNotEqual(
            Color.AUTOMATIC, Colors.TRANSPARENT,
            msg='The automatic sentinel must differ from real colors.'
        )

    def test_actual(self):
        self.assertEqual(Color.AUTOMATIC.actual(Colors.RED), Colors.RED)
        self.assertEqual(Colors.BLUE.actual(Colors.RED), Colors.BLUE)
        self.assertEqual(
            Color.UNDEFINED.actual(Colors.RED), Color.UNDEFINED,
            msg='Only the automatic color defers to the default.'
        )

    def test_parse(self):
        cases = (
            ('#ff0000', Colors.RED),
            ('#0000ff80', Color(0, 0, 255, 128)),
            ('rgb(70, 130, 180)', Colors.STEEL_BLUE),
            ('rgba(255, 0, 0, 0.5)', Color(255, 0, 0, 128)),
            ('white', Colors.WHITE),
            ('Automatic', Color.AUTOMATIC),
            ((0, 128, 0), Colors.GREEN),
            ((0, 0, 0, 0), Color.UNDEFINED),
            ((1.0, 0.0, 0.0), Colors.RED),
            ([0.0, 0.0, 1.0, 0.5], Color(0, 0, 255, 128)),
            (Colors.GRAY, Colors.GRAY),
        )
        for value, expected in cases:
            self.assertEqual(
                Color.parse(value), expected,
                msg=f'{value!r} must parse to {expected!r}.'
            )

    def test_parse_errors(self):
        for value in ('rgb(1, 2)', 'rgba(1, 2, 3, 2.0)', 'nocolor', (1, 2),
                      (2.0, 0.0, 0.0)):
            with self.assertRaises(ValueError, msg=repr(value)):
                Color.parse(value)
        with self.assertRaises(TypeError):
            Color.parse(None)

    def test_conversions(self):
        c = Color(255, 0, 0, 51)
        self.assertEqual(c.to_plotly(), 'rgba(255, 0, 0, 0.2)')
        assert_allclose(c.to_mpl(), (1.0, 0.0, 0.0, 0.2))
        self.assertEqual(c.to_hex(), '#ff000033')
        self.assertEqual(Colors.WHITE.to_tuple(), (255, 255, 255, 255))

    def test_interpolate(self):
        self.assertEqual(
            Color.interpolate(Colors.BLACK, Colors.WHITE, 0.5),
            Color(128, 128, 128)
        )
        self.assertEqual(
            Color.interpolate(Colors.BLACK, Colors.WHITE, 2.0), Colors.WHITE,
            msg='The blend factor is clipped to 1.'
        )
        self.assertEqual(
            Color.interpolate(Colors.RED, Colors.BLUE, 0), Colors.RED
        )

    def test_repr(self):
        self.assertEqual(repr(Color.AUTOMATIC), 'Color.AUTOMATIC')
        self.assertEqual(repr(Color(1, 2, 3)), 'Color(r=1, g=2, b=3, a=255)')
