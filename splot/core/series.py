from numbers import Real

from splot.core.color import Color
from splot.core.defaults import (
    DEFAULT_STROKE_THICKNESS, DEFAULT_TRACKER_FORMAT
)
from splot.core.element import PlotElement


class LineSeries(PlotElement):
    """Styling and tracker text of a line series.

    Parameters
    ----------
    title : :any:`str`, optional
        Legend title, available as ``{Title}`` in the tracker format.
    color : :any:`Color` | :any:`str` | :any:`tuple`, \
            default=Color.AUTOMATIC
        Line color. Automatic resolves to the model's text color.
    stroke_thickness : :any:`float`, default=2.0
        Line width in points.
    tracker_format_string : :any:`str`
        Template of the tracker text. Positional fields are the x title,
        x value, y title and y value; named fields are read from the
        series.
    **kwargs
        Styling overrides, see :py:class:`PlotElement`.

    Raises
    ------
    TypeError
        If an attribute has the wrong type.
    ValueError
        If ``stroke_thickness`` is negative.
    """

    HASH_FIELDS = PlotElement.HASH_FIELDS + (
        'title', 'color', 'stroke_thickness', 'tracker_format_string'
    )

    def __init__(
            self,
            title: str | None = None,
            color: Color | str | tuple = Color.AUTOMATIC,
            stroke_thickness: float = DEFAULT_STROKE_THICKNESS,
            tracker_format_string: str = DEFAULT_TRACKER_FORMAT,
            **kwargs
    ):
        super().__init__(**kwargs)
        self.title = title
        self.color = color
        self.stroke_thickness = stroke_thickness
        self.tracker_format_string = tracker_format_string

    @property
    def title(self) -> str | None:
        return self._title

    @title.setter
    def title(self, value: str | None):
        if value is not None and not isinstance(value, str):
            raise TypeError(
                f'"title" must be str or None, got {type(value).__name__}'
            )
        self._title = value

    @property
    def color(self) -> Color:
        return self._color

    @color.setter
    def color(self, value: Color | str | tuple):
        self._color = Color.parse(value)

    @property
    def stroke_thickness(self) -> float:
        return self._stroke_thickness

    @stroke_thickness.setter
    def stroke_thickness(self, value: float):
        if isinstance(value, bool) or not isinstance(value, Real):
            raise TypeError(
                f'"stroke_thickness" must be int or float, got '
                f'{type(value).__name__}'
            )
        if not value >= 0:
            raise ValueError(
                '"stroke_thickness" has to be greater than or equal to zero.'
            )
        self._stroke_thickness = value

    @property
    def tracker_format_string(self) -> str:
        return self._tracker_format_string

    @tracker_format_string.setter
    def tracker_format_string(self, value: str):
        if not isinstance(value, str):
            raise TypeError(
                f'"tracker_format_string" must be str, got '
                f'{type(value).__name__}'
            )
        self._tracker_format_string = value

    @property
    def Title(self):
        # tracker templates refer to the series title as {Title}
        return self.title or ''

    @property
    def actual_color(self) -> Color:
        """The line color with :py:attr:`Color.AUTOMATIC` resolved against
        the model's text color."""
        if not self.color.is_automatic:
            return self.color
        return self.color.actual(
            self._require_model('color').text_color
        )

    def format_tracker(self, x_title: str, x: float, y_title: str, y: float):
        """Return the tracker text for the point ``(x, y)``.

        Examples
        --------
        >>> from splot.core import LineSeries
        >>> series = LineSeries('Sine')
        >>> series.format_tracker('t', 0.5, 'sin(t)', 0.479425)
        'Sine\\nt: 0.5\\nsin(t): 0.4794'
        """
        return self.format(
            self.tracker_format_string, self, x_title, x, y_title, y
        )
