
from splot.core.annotations import TextAnnotation
from splot.core.color import Color, Colors
from splot.core.culture import (
    CULTURES, INVARIANT, Culture, current_culture, set_current_culture,
    use_culture
)
from splot.core.element import PlotElement
from splot.core.errors import NoDefaultAvailableError
from splot.core.font import FontWeights
from splot.core.formatting import CultureFormatter, format_string
from splot.core.hashing import combine_hashes, value_hash
from splot.core.model import PlotModel
from splot.core.series import LineSeries
from splot.core.style import convert_text_style, text_style
from splot.core.unset import UNSET, Unset, is_set


__all__ = [
    'Color',
    'Colors',
    'combine_hashes',
    'convert_text_style',
    'Culture',
    'CultureFormatter',
    'CULTURES',
    'current_culture',
    'FontWeights',
    'format_string',
    'INVARIANT',
    'is_set',
    'LineSeries',
    'NoDefaultAvailableError',
    'PlotElement',
    'PlotModel',
    'set_current_culture',
    'text_style',
    'TextAnnotation',
    'UNSET',
    'Unset',
    'use_culture',
    'value_hash',
]
