import logging
from unittest import TestCase

from splot.core.annotations import TextAnnotation
from splot.core.color import Color, Colors
from splot.core.culture import INVARIANT, Culture, use_culture
from splot.core.model import PlotModel
from splot.core.series import LineSeries


class TestPlotModel(TestCase):

    def test_defaults(self):
        model = PlotModel()
        self.assertEqual(model.default_font, 'Segoe UI')
        self.assertEqual(model.default_font_size, 12.0)
        self.assertEqual(model.text_color, Colors.BLACK)
        self.assertIsNone(model.culture)
        self.assertIs(model.actual_culture, INVARIANT)
        self.assertEqual(model.elements, ())

    def test_validate(self):
        with self.assertRaises(TypeError):
            PlotModel(default_font=3)
        with self.assertRaises(ValueError):
            PlotModel(default_font_size=-1)
        with self.assertRaises(ValueError):
            PlotModel(default_font_size=float('nan'))
        with self.assertRaises(
            ValueError, msg='The model color is the root of automatic colors.'
        ):
            PlotModel(text_color=Color.AUTOMATIC)
        with self.assertRaises(KeyError):
            PlotModel(culture='xx-XX')
        with self.assertRaises(TypeError):
            PlotModel(culture=1)

    def test_culture(self):
        model = PlotModel(culture='de-DE')
        self.assertEqual(model.actual_culture, Culture('de-DE', ',', '.'))
        model.culture = None
        with use_culture('fr-FR') as culture:
            self.assertIs(model.actual_culture, culture)


class TestElements(TestCase):

    def test_add_remove(self):
        model = PlotModel()
        a, b = TextAnnotation('a'), LineSeries('b')
        model.add_element(a)
        model.add_element(b)
        self.assertEqual(model.elements, (a, b))
        self.assertIs(b.plot_model, model)
        model.remove_element(a)
        self.assertEqual(model.elements, (b,))
        self.assertIsNone(a.plot_model)

    def test_ownership(self):
        first, second = PlotModel(), PlotModel()
        e = TextAnnotation('a')
        first.add_element(e)
        with self.assertRaises(ValueError, msg='Element added twice.'):
            first.add_element(e)
        with self.assertRaises(ValueError, msg='Element has another owner.'):
            second.add_element(e)
        with self.assertRaises(ValueError, msg='Element is not owned.'):
            second.remove_element(e)
        with self.assertRaises(TypeError):
            first.add_element('not an element')

    def test_update(self):
        model = PlotModel()
        a, b = TextAnnotation('a'), TextAnnotation('b')
        model.add_element(a)
        model.add_element(b)
        self.assertEqual(
            model.update(), [a, b],
            msg='The first update reports every element as changed.'
        )
        self.assertEqual(model.update(), [])
        b.font_size = 20
        self.assertEqual(model.update(), [b])
        c = LineSeries('c')
        model.add_element(c)
        self.assertEqual(model.update(), [c])
        model.remove_element(a)
        self.assertEqual(
            model.update(), [b, c],
            msg='Removing an element resets the change tracking.'
        )

    def test_default_change_is_not_an_element_change(self):
        model = PlotModel()
        a = TextAnnotation('a')
        model.add_element(a)
        model.update()
        model.default_font = 'Arial'
        self.assertEqual(model.update(), [])
        self.assertEqual(a.actual_font, 'Arial')

    def test_element_hash_codes(self):
        model = PlotModel()
        a = TextAnnotation('a')
        model.add_element(a)
        self.assertEqual(
            model.element_hash_codes(), {0: a.element_hash_code()}
        )

    def test_describe(self):
        model = PlotModel(default_font=None)
        model.add_element(TextAnnotation('a', font_size=9))
        model.add_element(LineSeries('b', font='Arial', text_color='red'))
        table = model.describe()
        self.assertIn('TextAnnotation', table)
        self.assertIn('LineSeries', table)
        self.assertIn('Arial', table)
        self.assertIn('#ff0000ff', table)
        self.assertIn(
            '| - ', table, msg='Unresolvable values are shown as "-".'
        )


class TestLogging(TestCase):

    def test_logger(self):
        model = PlotModel()
        self.assertEqual(model.logger.name, 'splot.core.model.PlotModel')
        self.assertFalse(model.logger.propagate)

    def test_debug(self):
        model = PlotModel(debug=True)
        self.addCleanup(model.logger.setLevel, logging.WARNING)
        self.assertEqual(model.logger.level, logging.DEBUG)
        self.assertTrue(any(
            isinstance(h, logging.StreamHandler)
            for h in model.logger.handlers
        ))
        with self.assertLogs(model.logger, level='DEBUG') as cm:
            model.add_element(TextAnnotation('a'))
        self.assertIn('Added TextAnnotation', cm.output[0])

    def test_debug_is_keyword_only(self):
        with self.assertRaises(TypeError, msg='debug must be passed by name.'):
            PlotModel(None, 'Arial', 12, 'black', None, True)
