from __future__ import annotations

import re
from dataclasses import dataclass

import matplotlib.colors as mcolors
import numpy as np


_RGBA_PATTERN = re.compile(
    r'rgba?\((\d+),\s*(\d+),\s*(\d+)(?:,\s*([\d\.]+))?\)'
)


@dataclass(frozen=True)
class Color:
    r"""An immutable RGBA color with 8 bit channels.

    Two reserved values are used as sentinels:

    * :py:attr:`Color.AUTOMATIC` (``a=0, r=0, g=0, b=1``) means "use the
      color of the parent model".
    * :py:attr:`Color.UNDEFINED` (all channels ``0``) means "no color".

    Both are fully transparent, so they never collide with a visible color.

    Parameters
    ----------
    r : :any:`int`
        Red channel, 0 to 255.
    g : :any:`int`
        Green channel, 0 to 255.
    b : :any:`int`
        Blue channel, 0 to 255.
    a : :any:`int`, default=255
        Alpha channel, 0 (transparent) to 255 (opaque).

    Raises
    ------
    TypeError
        If a channel is not an integer.
    ValueError
        If a channel lies outside of 0 to 255.
    """

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self):
        for name in ('r', 'g', 'b', 'a'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(
                    value, (int, np.integer)
            ):
                raise TypeError(
                    f'"{name}" must be int, got {type(value).__name__}'
                )
            if not 0 <= value <= 255:
                raise ValueError(
                    f'"{name}" must be between 0 and 255, got {value}'
                )
            object.__setattr__(self, name, int(value))

    @property
    def is_automatic(self) -> bool:
        return self == Color.AUTOMATIC

    @property
    def is_undefined(self) -> bool:
        return self == Color.UNDEFINED

    @property
    def is_invisible(self) -> bool:
        return self.a == 0

    def actual(self, default: Color) -> Color:
        """Return ``default`` if this color is automatic, else ``self``.

        Parameters
        ----------
        default : :any:`Color`
            Color that replaces :py:attr:`Color.AUTOMATIC`.

        Returns
        -------
        :any:`Color`
            The resolved color.
        """
        return default if self.is_automatic else self

    @classmethod
    def parse(cls, value) -> Color:
        """Create a color from the usual plotly and matplotlib notations.

        Supported inputs:
          - :any:`Color` instances (returned unchanged)
          - ``'automatic'`` (returns :py:attr:`Color.AUTOMATIC`)
          - Hex: ``'#RRGGBB'`` or ``'#RRGGBBAA'``
          - RGB/RGBA: ``'rgb(r, g, b)'`` / ``'rgba(r, g, b, a)'`` with ``a``
            between 0 and 1
          - CSS/matplotlib color names (``'red'``, ``'steelblue'``)
          - tuples or lists of ints (0-255) or floats (0-1), with or without
            alpha

        Raises
        ------
        TypeError
            If the value has an unsupported type.
        ValueError
            If the value cannot be interpreted as a color.

        Examples
        --------
        >>> from splot.core import Color
        >>> Color.parse('rgba(255, 0, 0, 0.5)')
        Color(r=255, g=0, b=0, a=128)
        """
        if isinstance(value, Color):
            return value

        if isinstance(value, str):
            text = value.strip().lower()
            if text == 'automatic':
                return cls.AUTOMATIC
            if text.startswith(('rgb', 'rgba')):
                match = _RGBA_PATTERN.fullmatch(text)
                if match is None:
                    raise ValueError(
                        f'Invalid RGB/RGBA color: {value!r}'
                    )
                r, g, b = (int(match.group(i)) for i in range(1, 4))
                a = float(match.group(4)) if match.group(4) else 1.0
                if not 0.0 <= a <= 1.0:
                    raise ValueError(
                        f'Alpha of {value!r} must be between 0 and 1'
                    )
                return cls(r, g, b, int(round(a * 255)))
            try:
                rgba = mcolors.to_rgba(text)
            except ValueError:
                raise ValueError(f'Unknown color: {value!r}')
            return cls.from_floats(*rgba)

        if isinstance(value, (tuple, list)):
            if len(value) not in (3, 4):
                raise ValueError(f'Invalid color length: {value!r}')
            if all(isinstance(c, (int, np.integer)) for c in value):
                return cls(*value)
            return cls.from_floats(*value)

        raise TypeError(
            f'Unsupported color type: {type(value).__name__}, {value!r}'
        )

    @classmethod
    def from_floats(cls, r: float, g: float, b: float, a: float = 1.0):
        """Create a color from channels in the range 0 to 1."""
        channels = np.array([r, g, b, a], dtype=float)
        if np.any(np.isnan(channels)) or np.any(
                (channels < 0.0) | (channels > 1.0)
        ):
            raise ValueError(
                f'Float channels must be between 0 and 1, got '
                f'{tuple(channels.tolist())}'
            )
        return cls(*(int(c) for c in np.round(channels * 255)))

    @staticmethod
    def interpolate(first: Color, second: Color, t: float) -> Color:
        """Linearly blend two colors.

        Parameters
        ----------
        first, second : :any:`Color`
            Colors at ``t = 0`` and ``t = 1``.
        t : :any:`float`
            Blend factor, clipped to 0 to 1.

        Returns
        -------
        :any:`Color`
            The blended color.
        """
        t = float(np.clip(t, 0.0, 1.0))
        a = np.array(first.to_tuple(), dtype=float)
        b = np.array(second.to_tuple(), dtype=float)
        return Color(*(int(c) for c in np.round(a + (b - a) * t)))

    def to_tuple(self) -> tuple[int, int, int, int]:
        return self.r, self.g, self.b, self.a

    def to_plotly(self) -> str:
        """Return the color as plotly ``'rgba(r, g, b, a)'`` string."""
        return f'rgba({self.r}, {self.g}, {self.b}, {self.a / 255:.3g})'

    def to_mpl(self) -> tuple[float, float, float, float]:
        """Return the color as matplotlib RGBA tuple (0-1)."""
        return mcolors.to_rgba(
            tuple(c / 255 for c in self.to_tuple())
        )

    def to_hex(self) -> str:
        return mcolors.to_hex(self.to_mpl(), keep_alpha=True)

    def __repr__(self):
        if self.is_automatic:
            return 'Color.AUTOMATIC'
        if self.is_undefined:
            return 'Color.UNDEFINED'
        return f'Color(r={self.r}, g={self.g}, b={self.b}, a={self.a})'


Color.AUTOMATIC = Color(0, 0, 1, 0)
Color.UNDEFINED = Color(0, 0, 0, 0)


class Colors:
    """A handful of named colors."""

    AUTOMATIC = Color.AUTOMATIC
    UNDEFINED = Color.UNDEFINED
    TRANSPARENT = Color(255, 255, 255, 0)
    BLACK = Color(0, 0, 0)
    WHITE = Color(255, 255, 255)
    RED = Color(255, 0, 0)
    GREEN = Color(0, 128, 0)
    BLUE = Color(0, 0, 255)
    GRAY = Color(128, 128, 128)
    STEEL_BLUE = Color(70, 130, 180)
