from typing import Any


"""Fallback styling used by :py:class:`~splot.core.model.PlotModel` when the
caller does not provide its own defaults.
- DEFAULT_FONT: font family for every element without a font override.
- DEFAULT_FONT_SIZE: font size in points.
- DEFAULT_TEXT_COLOR: RGBA tuple (0-255) of the model text color.
"""
DEFAULT_FONT = 'Segoe UI'
DEFAULT_FONT_SIZE = 12.0
DEFAULT_TEXT_COLOR = (0, 0, 0, 255)

FONT_WEIGHT_NORMAL = 400
FONT_WEIGHT_BOLD = 700
FONT_WEIGHT_MIN = 1
FONT_WEIGHT_MAX = 1000

"""Default text style dictionaries per back end. Resolved element values are
merged on top of these.
"""
DEFAULT_PLOTLY_TEXT: dict[str, Any] = dict(
    mode='text',
    showlegend=False,
    hoverinfo='skip'
)

DEFAULT_MPL_TEXT: dict[str, Any] = dict(
    alpha=1.0,
)

PLOTLY = 'plotly'
MPL = 'mpl'
VALID_MODES = (PLOTLY, MPL)
DEFAULT_MODE = PLOTLY

DEFAULT_STROKE_THICKNESS = 2.0

DEFAULT_TRACKER_FORMAT = '{Title}\n{0}: {1:.4g}\n{2}: {3:.4g}'

INVARIANT_CULTURE_NAME = ''

HASH_SEED = 17
HASH_FACTOR = 23
HASH_NAN = 0x7FF80000
HASH_UNSET = 0x7FF00001
