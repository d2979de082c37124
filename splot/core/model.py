from __future__ import annotations

from numbers import Real

from tabulate import tabulate

from splot.core.color import Color
from splot.core.culture import Culture, current_culture
from splot.core.defaults import (
    DEFAULT_FONT, DEFAULT_FONT_SIZE, DEFAULT_TEXT_COLOR
)
from splot.core.element import PlotElement
from splot.core.errors import NoDefaultAvailableError
from splot.core.logger_mixin import LoggerMixin


class PlotModel(LoggerMixin):
    """Container of plot elements and provider of their default styling.

    Parameters
    ----------
    title : :any:`str`, optional
        Title of the plot.
    default_font : :any:`str` | None, default='Segoe UI'
        Font of all elements without a font override. ``None`` means the
        model provides no default.
    default_font_size : :any:`float` | None, default=12.0
        Font size of all elements without a size override. ``None`` means
        the model provides no default.
    text_color : :any:`Color` | :any:`str` | :any:`tuple`, default=black
        Color that replaces :py:attr:`Color.AUTOMATIC` text colors.
    culture : :any:`Culture` | :any:`str` | None, default=None
        Culture used to format numbers. ``None`` uses the process-wide
        current culture at the time of formatting.
    debug : :any:`bool`, default=False
        Keyword only. Enables debug logging through
        :py:class:`LoggerMixin`.

    Raises
    ------
    TypeError
        If an attribute has the wrong type.
    ValueError
        If the default font size is not positive or the text color is
        automatic.

    Examples
    --------
    >>> from splot.core import PlotModel, TextAnnotation
    >>> model = PlotModel(default_font='Arial')
    >>> label = TextAnnotation('peak')
    >>> model.add_element(label)
    >>> label.actual_font
    'Arial'
    """

    def __init__(
            self,
            title: str | None = None,
            default_font: str | None = DEFAULT_FONT,
            default_font_size: float | None = DEFAULT_FONT_SIZE,
            text_color: Color | str | tuple = DEFAULT_TEXT_COLOR,
            culture: Culture | str | None = None,
            *,
            debug: bool = False
    ):
        self._elements: list[PlotElement] = []
        self._hash_snapshot: dict[int, int] = {}
        self.title = title
        self.default_font = default_font
        self.default_font_size = default_font_size
        self.text_color = text_color
        self.culture = culture

    @property
    def default_font(self) -> str | None:
        return self._default_font

    @default_font.setter
    def default_font(self, value: str | None):
        if value is not None and not isinstance(value, str):
            raise TypeError(
                f'"default_font" must be str or None, got '
                f'{type(value).__name__}'
            )
        self._default_font = value

    @property
    def default_font_size(self) -> float | None:
        return self._default_font_size

    @default_font_size.setter
    def default_font_size(self, value: float | None):
        if value is not None:
            if isinstance(value, bool) or not isinstance(value, Real):
                raise TypeError(
                    f'"default_font_size" must be int, float or None, got '
                    f'{type(value).__name__}'
                )
            if not value > 0:
                raise ValueError(
                    f'"default_font_size" must be greater than zero, got '
                    f'{value}'
                )
        self._default_font_size = value

    @property
    def text_color(self) -> Color:
        return self._text_color

    @text_color.setter
    def text_color(self, value: Color | str | tuple):
        color = Color.parse(value)
        if color.is_automatic:
            raise ValueError(
                '"text_color" of a plot model must not be automatic.'
            )
        self._text_color = color

    @property
    def culture(self) -> Culture | None:
        return self._culture

    @culture.setter
    def culture(self, value: Culture | str | None):
        if isinstance(value, str):
            value = Culture.get(value)
        if value is not None and not isinstance(value, Culture):
            raise TypeError(
                f'"culture" must be Culture, str or None, got '
                f'{type(value).__name__}'
            )
        self._culture = value
        self.logger.debug('Culture set to %s', value)

    @property
    def actual_culture(self) -> Culture:
        """The model culture, or the process-wide current culture if the
        model has none."""
        return self._culture if self._culture is not None \
            else current_culture()

    @property
    def elements(self) -> tuple[PlotElement, ...]:
        return tuple(self._elements)

    def add_element(self, element: PlotElement):
        """Attach ``element`` to this model.

        Raises
        ------
        TypeError
            If ``element`` is not a :py:class:`PlotElement`.
        ValueError
            If ``element`` already belongs to a model.
        """
        if not isinstance(element, PlotElement):
            raise TypeError(
                f'"element" must be PlotElement, got '
                f'{type(element).__name__}'
            )
        owner = element.plot_model
        if owner is self:
            raise ValueError(f'{element!r} is already part of this model.')
        if owner is not None:
            raise ValueError(
                f'{element!r} already belongs to another plot model.'
            )
        element._attach(self)
        self._elements.append(element)
        self.logger.debug(
            'Added %s as element %d', type(element).__name__,
            len(self._elements) - 1
        )

    def remove_element(self, element: PlotElement):
        """Detach ``element`` from this model.

        Raises
        ------
        ValueError
            If ``element`` is not part of this model.
        """
        if element.plot_model is not self:
            raise ValueError(f'{element!r} is not part of this model.')
        index = next(
            i for i, e in enumerate(self._elements) if e is element
        )
        del self._elements[index]
        element._detach()
        # indices shift, so the snapshot no longer matches
        self._hash_snapshot.clear()
        self.logger.debug(
            'Removed %s (element %d)', type(element).__name__, index
        )

    def element_hash_codes(self) -> dict[int, int]:
        """Return the structural hash of every element by index."""
        return {
            i: element.element_hash_code()
            for i, element in enumerate(self._elements)
        }

    def update(self) -> list[PlotElement]:
        """Return the elements that changed since the previous update.

        An element counts as changed if its structural hash differs from the
        one recorded by the previous call, or if it was not present then.
        The current hashes become the new reference.

        Returns
        -------
        list[PlotElement]
            Changed elements in model order.
        """
        hashes = self.element_hash_codes()
        changed = [
            self._elements[i] for i, h in hashes.items()
            if self._hash_snapshot.get(i) != h
        ]
        self._hash_snapshot = hashes
        self.logger.debug(
            'Update: %d of %d elements changed', len(changed), len(hashes)
        )
        return changed

    def describe(self) -> str:
        """Return a table of all elements with their resolved styling.

        Values that cannot be resolved are shown as ``-``.
        """
        header = ['Element nr.', 'Type', 'Font', 'Font size', 'Font weight',
                  'Text color', 'Hash']
        data = []
        for i, element in enumerate(self._elements):
            row = [i, type(element).__name__]
            for resolve in (
                    element.resolved_font, element.resolved_font_size,
                    element.resolved_font_weight
            ):
                try:
                    row.append(resolve())
                except NoDefaultAvailableError:
                    row.append('-')
            row.append(element.resolved_text_color().to_hex())
            row.append(element.element_hash_code())
            data.append(row)
        return tabulate(data, headers=header, tablefmt="grid")

    def __repr__(self):
        return (
            f'{self.__class__.__name__}('
            f'title={self.title!r}, '
            f'default_font={self._default_font!r}, '
            f'default_font_size={self._default_font_size!r}, '
            f'text_color={self._text_color!r}, '
            f'culture={self._culture!r}, '
            f'elements={len(self._elements)})'
        )
