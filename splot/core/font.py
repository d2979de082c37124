from numbers import Real

import numpy as np

from splot.core.defaults import (
    FONT_WEIGHT_BOLD, FONT_WEIGHT_MAX, FONT_WEIGHT_MIN, FONT_WEIGHT_NORMAL
)
from splot.core.unset import UNSET


class FontWeights:
    """Common font weights on the CSS scale (1 to 1000)."""

    NORMAL = FONT_WEIGHT_NORMAL
    BOLD = FONT_WEIGHT_BOLD


def validate_font(font):
    if font is UNSET:
        return
    if not isinstance(font, str):
        raise TypeError(
            f'"font" must be str or UNSET, got {type(font).__name__}'
        )
    if not font.strip():
        raise ValueError('"font" must not be empty.')


def validate_font_size(font_size):
    if font_size is UNSET:
        return
    if isinstance(font_size, bool) or not isinstance(font_size, Real):
        raise TypeError(
            f'"font_size" must be int, float or UNSET, got '
            f'{type(font_size).__name__}'
        )
    if np.isnan(font_size):
        raise ValueError(
            '"font_size" must not be NaN, use UNSET to clear the override.'
        )
    if font_size <= 0 or np.isinf(font_size):
        raise ValueError(
            f'"font_size" must be a finite number greater than zero, got '
            f'{font_size}'
        )


def validate_font_weight(font_weight):
    if isinstance(font_weight, bool) or not isinstance(font_weight, Real):
        raise TypeError(
            f'"font_weight" must be int or float, got '
            f'{type(font_weight).__name__}'
        )
    if not FONT_WEIGHT_MIN <= font_weight <= FONT_WEIGHT_MAX:
        raise ValueError(
            f'"font_weight" must be between {FONT_WEIGHT_MIN} and '
            f'{FONT_WEIGHT_MAX}, got {font_weight}'
        )
