from splot.core import (
    UNSET, Color, Colors, Culture, FontWeights, LineSeries,
    NoDefaultAvailableError, PlotElement, PlotModel, TextAnnotation,
    current_culture, format_string, set_current_culture, use_culture
)

__all__ = [
    'Color',
    'Colors',
    'Culture',
    'current_culture',
    'FontWeights',
    'format_string',
    'LineSeries',
    'NoDefaultAvailableError',
    'PlotElement',
    'PlotModel',
    'set_current_culture',
    'TextAnnotation',
    'UNSET',
    'use_culture',
]
