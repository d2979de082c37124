from typing import Any

from splot.core.color import Color
from splot.core.defaults import (
    DEFAULT_MPL_TEXT, DEFAULT_PLOTLY_TEXT, MPL, PLOTLY, VALID_MODES
)


def validate_mode(mode: str):
    if mode not in VALID_MODES:
        raise ValueError(
            f'"mode" must be one of {VALID_MODES}, got {mode!r}'
        )


def deep_style_merge(default: dict, override: dict[str, Any]) -> dict:
    """
    Recursively merge two style dictionaries without modifying the
    originals.

    Parameters
    ----------
    default : dict
        Base dictionary providing default values.
    override : dict
        Dictionary with values to override the defaults.

    Returns
    -------
    dict
        A new dictionary containing merged values.
    """
    result = dict(default)
    for k, v in override.items():
        if (
            k in result and isinstance(result[k], dict)
            and isinstance(v, dict)
        ):
            result[k] = deep_style_merge(result[k], v)
        else:
            result[k] = v
    return result


def text_style(
        font: str,
        font_size: float,
        font_weight: float,
        color: Color,
        mode: str = PLOTLY,
        user_style: dict[str, Any] | None = None
) -> dict[str, Any]:
    """Build the back end specific style of a text from resolved values.

    Parameters
    ----------
    font : :any:`str`
        Font family.
    font_size : :any:`float`
        Font size in points.
    font_weight : :any:`float`
        Font weight (CSS scale).
    color : :any:`Color`
        Text color, must not be :py:attr:`Color.AUTOMATIC`.
    mode : {'plotly', 'mpl'}, default='plotly'
        Target back end.
    user_style : dict, optional
        Extra entries merged on top of the result.

    Returns
    -------
    dict
        For plotly a scatter-trace style with a ``textfont`` entry, for
        matplotlib the keyword arguments of ``Axes.text``.

    Raises
    ------
    ValueError
        If ``mode`` is unknown or ``color`` is automatic.
    """
    validate_mode(mode)
    if color.is_automatic:
        raise ValueError('"color" must be resolved before building a style.')

    if mode == PLOTLY:
        style = deep_style_merge(DEFAULT_PLOTLY_TEXT, dict(
            textfont=dict(
                family=font,
                size=font_size,
                weight=font_weight,
                color=color.to_plotly()
            )
        ))
    else:
        style = deep_style_merge(DEFAULT_MPL_TEXT, dict(
            fontfamily=font,
            fontsize=font_size,
            fontweight=font_weight,
            color=color.to_mpl()
        ))
    return deep_style_merge(style, user_style or {})


def detect_style_type(style: dict) -> str:
    """
    Tell whether a text style has plotly or matplotlib structure.

    Returns 'plotly', 'mpl' or 'unknown'.
    """
    if 'textfont' in style or 'mode' in style:
        return PLOTLY
    if any(k in style for k in ('fontsize', 'fontfamily', 'fontweight')):
        return MPL
    return 'unknown'


def convert_text_style(style: dict, target: str) -> dict:
    """
    Convert a text style between plotly and matplotlib, depending on the
    target 'mpl' or 'plotly'.

    Raises
    ------
    ValueError
        If the style type cannot be detected or the target is unknown.
    """
    validate_mode(target)
    style_type = detect_style_type(style)

    if style_type == target:
        return style

    if style_type == PLOTLY:
        font = style.get('textfont', {})
        mpl_style = {}
        if 'family' in font:
            mpl_style['fontfamily'] = font['family']
        if 'size' in font:
            mpl_style['fontsize'] = font['size']
        if 'weight' in font:
            mpl_style['fontweight'] = font['weight']
        if 'color' in font:
            mpl_style['color'] = Color.parse(font['color']).to_mpl()
        if 'opacity' in style:
            mpl_style['alpha'] = style['opacity']
        return mpl_style

    if style_type == MPL:
        font = {}
        if 'fontfamily' in style:
            font['family'] = style['fontfamily']
        if 'fontsize' in style:
            font['size'] = style['fontsize']
        if 'fontweight' in style:
            font['weight'] = style['fontweight']
        if 'color' in style:
            font['color'] = Color.parse(style['color']).to_plotly()
        plotly_style = dict(mode='text', textfont=font)
        if 'alpha' in style:
            plotly_style['opacity'] = style['alpha']
        return plotly_style

    raise ValueError(f'Could not detect the style type of {style}')
